import logging
import os
import uuid
from typing import Dict, Any, List, Optional

from flask import current_app
from werkzeug.utils import secure_filename

from hrms.models import db
from hrms.document.models import Document, DOCUMENT_TYPES, DOCUMENT_STATUSES
from hrms.employee.services import get_employee
from hrms.utils.errors import ValidationError
from hrms.utils.scoping import scoped_query, get_scoped_or_404, merge
from hrms.utils.validators import (
    require_fields, require_choice, parse_date, parse_optional_date, parse_int, today,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {"name": "name", "type": "type", "status": "status", "notes": "notes"}


def _check_dates(upload_date, expiry_date):
    if upload_date > today():
        raise ValidationError("Upload date cannot be in the future.")
    if expiry_date is not None and expiry_date <= upload_date:
        raise ValidationError("Expiry date must be after the upload date.")


def create(data: Dict[str, Any], tenant_id: int, file_url: Optional[str] = None) -> Document:
    require_fields(data, ["employeeId", "name", "type", "uploadDate"])
    require_choice(data["type"], DOCUMENT_TYPES, "type")
    require_choice(data.get("status"), DOCUMENT_STATUSES, "status")
    employee = get_employee(parse_int(data["employeeId"], "employeeId"), tenant_id)

    upload_date = parse_date(data["uploadDate"], "uploadDate")
    expiry_date = parse_optional_date(data.get("expiryDate"), "expiryDate")
    _check_dates(upload_date, expiry_date)

    document = Document(
        tenant_id=tenant_id,
        employee_id=employee.id,
        name=data["name"],
        type=data["type"],
        upload_date=upload_date,
        expiry_date=expiry_date,
        status=data.get("status") or "Active",
        file_url=file_url,
        signed_date=parse_optional_date(data.get("signedDate"), "signedDate"),
        notes=data.get("notes"),
    )
    db.session.add(document)
    db.session.commit()
    return document


def _tenant_upload_dir(tenant_id: int, create: bool = True) -> str:
    upload_dir = os.path.join(current_app.config["UPLOAD_FOLDER"], str(tenant_id))
    if create:
        os.makedirs(upload_dir, exist_ok=True)
    return upload_dir


def upload(file, form: Dict[str, Any], tenant_id: int) -> Document:
    """Persist a multipart upload and record its metadata."""
    if file is None or not file.filename:
        raise ValidationError("No file selected for upload.")

    original_name = secure_filename(file.filename)
    if not original_name:
        raise ValidationError("Invalid file name.")

    data = dict(form)
    data.setdefault("name", file.filename)
    data.setdefault("uploadDate", today().isoformat())

    # validate metadata before anything touches the disk
    require_fields(data, ["employeeId", "name", "type", "uploadDate"])
    require_choice(data["type"], DOCUMENT_TYPES, "type")
    get_employee(parse_int(data["employeeId"], "employeeId"), tenant_id)

    stored_name = f"{uuid.uuid4().hex}_{original_name}"
    file_path = os.path.join(_tenant_upload_dir(tenant_id), stored_name)
    file.save(file_path)
    try:
        document = create(data, tenant_id, file_url=file_path)
    except ValidationError:
        _remove_file(file_path, tenant_id)
        raise
    logger.info("Stored document %s for tenant %s at %s", document.id, tenant_id, file_path)
    return document


def find_all(
    tenant_id: int,
    employee_id: Optional[int] = None,
    doc_type: Optional[str] = None,
    status: Optional[str] = None,
) -> List[Document]:
    q = scoped_query(Document, tenant_id)
    if employee_id is not None:
        q = q.filter(Document.employee_id == employee_id)
    if doc_type:
        q = q.filter(Document.type == doc_type)
    if status:
        q = q.filter(Document.status == status)
    return q.order_by(Document.upload_date.desc(), Document.created_at.desc(), Document.id.desc()).all()


def find_one(document_id, tenant_id: int) -> Document:
    return get_scoped_or_404(Document, document_id, tenant_id, "Document")


def update(document_id, data: Dict[str, Any], tenant_id: int) -> Document:
    document = find_one(document_id, tenant_id)
    require_choice(data.get("type"), DOCUMENT_TYPES, "type")
    require_choice(data.get("status"), DOCUMENT_STATUSES, "status")

    if "employeeId" in data:
        document.employee_id = get_employee(parse_int(data["employeeId"], "employeeId"), tenant_id).id
    if "uploadDate" in data or "expiryDate" in data:
        upload_date = parse_date(data["uploadDate"], "uploadDate") if "uploadDate" in data else document.upload_date
        expiry_date = (
            parse_optional_date(data["expiryDate"], "expiryDate") if "expiryDate" in data else document.expiry_date
        )
        _check_dates(upload_date, expiry_date)
        document.upload_date = upload_date
        document.expiry_date = expiry_date
    if "signedDate" in data:
        document.signed_date = parse_optional_date(data["signedDate"], "signedDate")

    merge(document, data, UPDATABLE_FIELDS)
    db.session.commit()
    return document


def _remove_file(path: Optional[str], tenant_id: int):
    if not path:
        return
    upload_root = os.path.abspath(_tenant_upload_dir(tenant_id, create=False))
    target = os.path.abspath(path)
    # only files stored for this tenant are ever deleted
    if os.path.commonpath([upload_root, target]) != upload_root:
        return
    if os.path.isfile(target):
        os.remove(target)


def remove(document_id, tenant_id: int):
    document = find_one(document_id, tenant_id)
    file_url = document.file_url
    db.session.delete(document)
    db.session.commit()
    _remove_file(file_url, tenant_id)
    logger.info("Document %s deleted from tenant %s", document_id, tenant_id)
