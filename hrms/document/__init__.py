from flask import Blueprint

document_bp = Blueprint("document", __name__, url_prefix="/documents")

from . import routes  # noqa: E402,F401
