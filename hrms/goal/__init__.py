from flask import Blueprint

goal_bp = Blueprint("goal", __name__, url_prefix="/goals")

from . import routes  # noqa: E402,F401
