from hrms.models import db
from hrms.models.base import TenantScopedMixin, iso

ANNOUNCEMENT_CATEGORIES = ("general", "policy", "event", "achievement", "holiday", "benefits", "training")
ANNOUNCEMENT_PRIORITIES = ("low", "normal", "high", "urgent")
ANNOUNCEMENT_AUDIENCES = ("all", "department", "management", "new_employees")


class Announcement(TenantScopedMixin, db.Model):
    __tablename__ = "announcements"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    content = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(20), nullable=False)
    priority = db.Column(db.String(10), nullable=False, default="normal")
    audience = db.Column(db.String(20), nullable=False, default="all")
    publish_date = db.Column(db.Date, nullable=False)
    expiry_date = db.Column(db.Date)
    author = db.Column(db.String(150), nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    def to_dict(self):
        data = {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "category": self.category,
            "priority": self.priority,
            "audience": self.audience,
            "publishDate": iso(self.publish_date),
            "expiryDate": iso(self.expiry_date),
            "author": self.author,
            "isActive": self.is_active,
        }
        data.update(self.timestamps())
        return data
