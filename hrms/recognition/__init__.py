from flask import Blueprint

recognition_bp = Blueprint("recognition", __name__, url_prefix="/recognitions")

from . import routes  # noqa: E402,F401
