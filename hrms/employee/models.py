from hrms.models import db
from hrms.models.base import TenantScopedMixin, iso

EMPLOYEE_STATUSES = ("Active", "Inactive")
DEFAULT_LEAVE_BALANCES = {"Vacation": 15, "Sick": 10, "Personal": 5}


class Employee(TenantScopedMixin, db.Model):
    __tablename__ = "employees"
    __table_args__ = (db.UniqueConstraint("tenant_id", "email", name="uq_employee_tenant_email"),)

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    phone = db.Column(db.String(30))
    address = db.Column(db.Text)
    role = db.Column(db.String(100), nullable=False)
    department = db.Column(db.String(100), nullable=False)
    hire_date = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(20), nullable=False, default="Active")
    leave_balances = db.Column(db.JSON, nullable=False, default=dict)

    user = db.relationship("User", back_populates="employee", uselist=False, foreign_keys="User.employee_id")

    def to_summary(self):
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "department": self.department,
        }

    def to_dict(self):
        data = {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "role": self.role,
            "department": self.department,
            "hireDate": iso(self.hire_date),
            "status": self.status,
            "leaveBalances": dict(self.leave_balances or {}),
            "userId": self.user.id if self.user else None,
        }
        data.update(self.timestamps())
        return data
