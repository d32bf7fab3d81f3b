# hrms/models/__init__.py
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# Core models shared by every module
from .base import TimestampMixin, TenantScopedMixin, utcnow, iso
from .tenant import Tenant
from .user import User, ROLES
