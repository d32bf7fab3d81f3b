from hrms.models import db
from hrms.models.base import TenantScopedMixin, iso

LEAVE_TYPES = ("Vacation", "Sick", "Personal")
LEAVE_STATUSES = ("Pending", "Approved", "Rejected")
ACCRUAL_UNITS = ("month", "year", "once")


class LeaveRequest(TenantScopedMixin, db.Model):
    __tablename__ = "leave_requests"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    type = db.Column(db.String(20), nullable=False)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    reason = db.Column(db.Text, nullable=False)
    requested_date = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(20), nullable=False, default="Pending")
    # working days taken from the balance on approval
    deducted_days = db.Column(db.Float)

    employee = db.relationship("Employee")

    def to_dict(self):
        data = {
            "id": self.id,
            "employeeId": self.employee_id,
            "type": self.type,
            "startDate": iso(self.start_date),
            "endDate": iso(self.end_date),
            "reason": self.reason,
            "requestedDate": iso(self.requested_date),
            "status": self.status,
            "employee": self.employee.to_summary() if self.employee else None,
        }
        data.update(self.timestamps())
        return data


class LeavePolicy(TenantScopedMixin, db.Model):
    __tablename__ = "leave_policies"
    __table_args__ = (
        db.UniqueConstraint("tenant_id", "name", name="uq_leave_policy_tenant_name"),
        db.UniqueConstraint("tenant_id", "leave_type", name="uq_leave_policy_tenant_type"),
    )

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text, nullable=False)
    leave_type = db.Column(db.String(20), nullable=False)
    accrual_rate = db.Column(db.Float, nullable=False)
    accrual_unit = db.Column(db.String(10), nullable=False, default="month")
    max_accumulation = db.Column(db.Float)
    max_per_request = db.Column(db.Float)
    is_paid = db.Column(db.Boolean, nullable=False, default=True)
    applicable_roles = db.Column(db.JSON, nullable=False, default=list)

    def to_dict(self):
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "leaveType": self.leave_type,
            "accrualRate": self.accrual_rate,
            "accrualUnit": self.accrual_unit,
            "maxAccumulation": self.max_accumulation,
            "maxPerRequest": self.max_per_request,
            "isPaid": self.is_paid,
            "applicableRoles": list(self.applicable_roles or []),
        }
        data.update(self.timestamps())
        return data


class Holiday(TenantScopedMixin, db.Model):
    __tablename__ = "holidays"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    date = db.Column(db.Date, nullable=False, index=True)
    is_public = db.Column(db.Boolean, nullable=False, default=True)

    def to_dict(self):
        data = {
            "id": self.id,
            "name": self.name,
            "date": iso(self.date),
            "isPublic": self.is_public,
        }
        data.update(self.timestamps())
        return data
