from hrms.models import db
from hrms.models.base import TenantScopedMixin, iso


class OnboardingTask(TenantScopedMixin, db.Model):
    __tablename__ = "onboarding_tasks"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    task = db.Column(db.String(255), nullable=False)
    due_date = db.Column(db.Date, nullable=False)
    completed = db.Column(db.Boolean, nullable=False, default=False)

    employee = db.relationship("Employee")

    def to_dict(self):
        data = {
            "id": self.id,
            "employeeId": self.employee_id,
            "task": self.task,
            "dueDate": iso(self.due_date),
            "completed": self.completed,
            "employee": self.employee.to_summary() if self.employee else None,
        }
        data.update(self.timestamps())
        return data
