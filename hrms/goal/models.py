from hrms.models import db
from hrms.models.base import TenantScopedMixin, iso

GOAL_CATEGORIES = ("Performance", "Development", "Project", "Team", "Innovation")
GOAL_PRIORITIES = ("High", "Medium", "Low")
GOAL_STATUSES = ("Not Started", "In Progress", "Completed", "Overdue")


class Goal(TenantScopedMixin, db.Model):
    __tablename__ = "goals"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    objective = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    due_date = db.Column(db.Date, nullable=False)
    category = db.Column(db.String(30), nullable=False)
    priority = db.Column(db.String(10), nullable=False, default="Medium")
    status = db.Column(db.String(20), nullable=False, default="Not Started")
    key_results = db.Column(db.JSON, nullable=False, default=list)
    created_date = db.Column(db.Date, nullable=False)

    employee = db.relationship("Employee")

    def to_dict(self):
        data = {
            "id": self.id,
            "employeeId": self.employee_id,
            "objective": self.objective,
            "description": self.description,
            "dueDate": iso(self.due_date),
            "category": self.category,
            "priority": self.priority,
            "status": self.status,
            "keyResults": list(self.key_results or []),
            "createdDate": iso(self.created_date),
            "employee": self.employee.to_summary() if self.employee else None,
        }
        data.update(self.timestamps())
        return data
