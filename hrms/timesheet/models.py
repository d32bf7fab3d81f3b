from hrms.models import db
from hrms.models.base import TenantScopedMixin, iso


class Timesheet(TenantScopedMixin, db.Model):
    __tablename__ = "timesheets"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False)
    hours = db.Column(db.Float, nullable=False)
    description = db.Column(db.Text, nullable=False)

    employee = db.relationship("Employee")

    def to_dict(self):
        data = {
            "id": self.id,
            "employeeId": self.employee_id,
            "date": iso(self.date),
            "hours": self.hours,
            "description": self.description,
            "employee": self.employee.to_summary() if self.employee else None,
        }
        data.update(self.timestamps())
        return data
