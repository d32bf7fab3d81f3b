from flask import Blueprint

# serves /leave-requests, /leave-policies and /holidays
leave_bp = Blueprint("leave", __name__)

from . import routes  # noqa: E402,F401
