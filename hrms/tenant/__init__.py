from flask import Blueprint

tenant_bp = Blueprint("tenant", __name__, url_prefix="/tenants")

from . import routes  # noqa: E402,F401
