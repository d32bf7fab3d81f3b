from . import db
from .base import TimestampMixin, iso

TENANT_STATUSES = ("active", "inactive")


class Tenant(TimestampMixin, db.Model):
    __tablename__ = "tenants"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), unique=True, nullable=False)
    contact_email = db.Column(db.String(120))
    status = db.Column(db.String(20), nullable=False, default="active")

    users = db.relationship("User", back_populates="tenant", lazy=True)

    @property
    def is_active(self):
        return self.status == "active"

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "contactEmail": self.contact_email,
            "status": self.status,
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }
