from datetime import datetime, timezone
from sqlalchemy.orm import declared_attr
from . import db


def utcnow():
    # naive UTC, SQLite drops tzinfo anyway
    return datetime.now(timezone.utc).replace(tzinfo=None)


def iso(value):
    return value.isoformat() if value else None


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class TenantScopedMixin(TimestampMixin):
    """Every row belongs to one tenant; queries go through hrms.utils.scoping."""

    @declared_attr
    def tenant_id(cls):
        return db.Column(
            db.Integer,
            db.ForeignKey("tenants.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )

    def timestamps(self):
        return {
            "tenantId": self.tenant_id,
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }
