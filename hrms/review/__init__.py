from flask import Blueprint

review_bp = Blueprint("review", __name__, url_prefix="/reviews")

from . import routes  # noqa: E402,F401
