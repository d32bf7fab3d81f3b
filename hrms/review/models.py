from hrms.models import db
from hrms.models.base import TenantScopedMixin, iso


class Review(TenantScopedMixin, db.Model):
    __tablename__ = "reviews"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    reviewer = db.Column(db.String(150), nullable=False)
    review_date = db.Column(db.Date, nullable=False)
    review_period = db.Column(db.String(100), nullable=False)
    rating = db.Column(db.Integer, nullable=False)
    ratings = db.Column(db.JSON, nullable=False, default=dict)
    strengths = db.Column(db.Text)
    improvements = db.Column(db.Text)
    comments = db.Column(db.Text, nullable=False)
    # goal ids, checked against the tenant's goals on write
    linked_goals = db.Column(db.JSON, nullable=False, default=list)

    employee = db.relationship("Employee")

    def to_dict(self):
        data = {
            "id": self.id,
            "employeeId": self.employee_id,
            "reviewer": self.reviewer,
            "reviewDate": iso(self.review_date),
            "reviewPeriod": self.review_period,
            "rating": self.rating,
            "ratings": dict(self.ratings or {}),
            "strengths": self.strengths,
            "improvements": self.improvements,
            "comments": self.comments,
            "linkedGoals": list(self.linked_goals or []),
            "employee": self.employee.to_summary() if self.employee else None,
        }
        data.update(self.timestamps())
        return data
