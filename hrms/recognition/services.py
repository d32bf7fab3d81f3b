from typing import Dict, Any, List, Optional

from hrms.models import db
from hrms.employee.services import get_employee
from hrms.recognition.models import Recognition
from hrms.utils.errors import ValidationError
from hrms.utils.scoping import scoped_query, get_scoped_or_404, delete_scoped_or_404, merge
from hrms.utils.validators import require_fields, parse_bool, parse_int, today

MIN_MESSAGE_LENGTH = 20


def _message(value) -> str:
    if not isinstance(value, str) or len(value.strip()) < MIN_MESSAGE_LENGTH:
        raise ValidationError(f"Message must be at least {MIN_MESSAGE_LENGTH} characters long.")
    return value


def create(data: Dict[str, Any], tenant_id: int) -> Recognition:
    require_fields(data, ["recipientId", "category", "value", "message", "givenBy"])
    recipient = get_employee(parse_int(data["recipientId"], "recipientId"), tenant_id)

    recognition = Recognition(
        tenant_id=tenant_id,
        recipient_id=recipient.id,
        category=data["category"],
        value=data["value"],
        message=_message(data["message"]),
        date=today(),
        given_by=data["givenBy"],
        is_public=parse_bool(data["isPublic"], "isPublic") if "isPublic" in data else True,
    )
    db.session.add(recognition)
    db.session.commit()
    return recognition


def find_all(tenant_id: int, recipient_id: Optional[int] = None, category: Optional[str] = None) -> List[Recognition]:
    q = scoped_query(Recognition, tenant_id)
    if recipient_id is not None:
        q = q.filter(Recognition.recipient_id == recipient_id)
    if category:
        q = q.filter(Recognition.category == category)
    return q.order_by(Recognition.date.desc(), Recognition.created_at.desc(), Recognition.id.desc()).all()


def find_one(recognition_id, tenant_id: int) -> Recognition:
    return get_scoped_or_404(Recognition, recognition_id, tenant_id, "Recognition")


def update(recognition_id, data: Dict[str, Any], tenant_id: int) -> Recognition:
    recognition = find_one(recognition_id, tenant_id)
    if "recipientId" in data:
        recognition.recipient_id = get_employee(parse_int(data["recipientId"], "recipientId"), tenant_id).id
    if "message" in data:
        recognition.message = _message(data["message"])
    if "isPublic" in data:
        recognition.is_public = parse_bool(data["isPublic"], "isPublic")
    merge(recognition, data, {"category": "category", "value": "value", "givenBy": "given_by"})
    db.session.commit()
    return recognition


def remove(recognition_id, tenant_id: int):
    delete_scoped_or_404(Recognition, recognition_id, tenant_id, "Recognition")
