from hrms.models import db
from hrms.models.base import TenantScopedMixin, iso


class Recognition(TenantScopedMixin, db.Model):
    __tablename__ = "recognitions"

    id = db.Column(db.Integer, primary_key=True)
    recipient_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    category = db.Column(db.String(50), nullable=False)
    value = db.Column(db.String(100), nullable=False)
    message = db.Column(db.Text, nullable=False)
    date = db.Column(db.Date, nullable=False)
    given_by = db.Column(db.String(150), nullable=False)
    is_public = db.Column(db.Boolean, nullable=False, default=True)

    recipient = db.relationship("Employee")

    def to_dict(self):
        data = {
            "id": self.id,
            "recipientId": self.recipient_id,
            "category": self.category,
            "value": self.value,
            "message": self.message,
            "date": iso(self.date),
            "givenBy": self.given_by,
            "isPublic": self.is_public,
            "recipient": self.recipient.to_summary() if self.recipient else None,
        }
        data.update(self.timestamps())
        return data
