from flask import Blueprint

announcement_bp = Blueprint("announcement", __name__, url_prefix="/announcements")

from . import routes  # noqa: E402,F401
