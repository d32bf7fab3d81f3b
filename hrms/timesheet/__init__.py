from flask import Blueprint

timesheet_bp = Blueprint("timesheet", __name__, url_prefix="/timesheets")

from . import routes  # noqa: E402,F401
