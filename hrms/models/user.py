from . import db
from .base import TimestampMixin, iso

ROLES = ("admin", "hr", "employee")


class User(TimestampMixin, db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    tenant_id = db.Column(db.Integer, db.ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False, index=True)
    # optional one-to-one link to the personnel record
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="SET NULL"), unique=True, nullable=True)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default="employee")

    tenant = db.relationship("Tenant", back_populates="users")
    employee = db.relationship("Employee", back_populates="user", foreign_keys=[employee_id])

    def token_claims(self):
        return {
            "id": self.id,
            "email": self.email,
            "tenantId": self.tenant_id,
            "role": self.role,
            "employeeId": self.employee_id,
        }

    def to_dict(self, include_employee=False):
        data = {
            "id": self.id,
            "tenantId": self.tenant_id,
            "email": self.email,
            "role": self.role,
            "employeeId": self.employee_id,
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }
        if include_employee:
            data["employee"] = self.employee.to_dict() if self.employee else None
        return data
