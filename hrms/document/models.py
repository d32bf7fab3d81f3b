from hrms.models import db
from hrms.models.base import TenantScopedMixin, iso

DOCUMENT_TYPES = ("Contract", "Identification", "Certification", "Policy", "Tax", "Insurance", "Other")
DOCUMENT_STATUSES = ("Active", "Expired", "Pending")


class Document(TenantScopedMixin, db.Model):
    __tablename__ = "documents"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    type = db.Column(db.String(30), nullable=False)
    upload_date = db.Column(db.Date, nullable=False)
    expiry_date = db.Column(db.Date)
    status = db.Column(db.String(20), nullable=False, default="Active")
    file_url = db.Column(db.String(500))
    signed_date = db.Column(db.Date)
    notes = db.Column(db.Text)

    employee = db.relationship("Employee")

    def to_dict(self):
        data = {
            "id": self.id,
            "employeeId": self.employee_id,
            "name": self.name,
            "type": self.type,
            "uploadDate": iso(self.upload_date),
            "expiryDate": iso(self.expiry_date),
            "status": self.status,
            "fileUrl": self.file_url,
            "signedDate": iso(self.signed_date),
            "notes": self.notes,
            "employee": self.employee.to_summary() if self.employee else None,
        }
        data.update(self.timestamps())
        return data
