from typing import Dict, Any, List, Optional

from hrms.models import db
from hrms.announcement.models import (
    Announcement, ANNOUNCEMENT_CATEGORIES, ANNOUNCEMENT_PRIORITIES, ANNOUNCEMENT_AUDIENCES,
)
from hrms.utils.errors import ValidationError
from hrms.utils.scoping import scoped_query, get_scoped_or_404, delete_scoped_or_404, merge
from hrms.utils.validators import (
    require_fields, require_choice, parse_date, parse_optional_date, parse_bool, today,
)

UPDATABLE_FIELDS = {
    "title": "title",
    "content": "content",
    "category": "category",
    "priority": "priority",
    "audience": "audience",
    "author": "author",
}


def _check_enums(data: Dict[str, Any]):
    require_choice(data.get("category"), ANNOUNCEMENT_CATEGORIES, "category")
    require_choice(data.get("priority"), ANNOUNCEMENT_PRIORITIES, "priority")
    require_choice(data.get("audience"), ANNOUNCEMENT_AUDIENCES, "audience")


def _check_dates(publish_date, expiry_date):
    if publish_date < today():
        raise ValidationError("Publish date cannot be in the past.")
    if expiry_date is not None and expiry_date <= publish_date:
        raise ValidationError("Expiry date must be after the publish date.")


def create(data: Dict[str, Any], tenant_id: int) -> Announcement:
    require_fields(data, ["title", "content", "category", "author", "publishDate"])
    _check_enums(data)
    publish_date = parse_date(data["publishDate"], "publishDate")
    expiry_date = parse_optional_date(data.get("expiryDate"), "expiryDate")
    _check_dates(publish_date, expiry_date)

    announcement = Announcement(
        tenant_id=tenant_id,
        title=data["title"],
        content=data["content"],
        category=data["category"],
        priority=data.get("priority") or "normal",
        audience=data.get("audience") or "all",
        publish_date=publish_date,
        expiry_date=expiry_date,
        author=data["author"],
        is_active=parse_bool(data["isActive"], "isActive") if "isActive" in data else True,
    )
    db.session.add(announcement)
    db.session.commit()
    return announcement


def find_all(tenant_id: int, category: Optional[str] = None, priority: Optional[str] = None) -> List[Announcement]:
    q = scoped_query(Announcement, tenant_id)
    if category:
        q = q.filter(Announcement.category == category)
    if priority:
        q = q.filter(Announcement.priority == priority)
    return q.order_by(
        Announcement.publish_date.desc(), Announcement.created_at.desc(), Announcement.id.desc()
    ).all()


def find_one(announcement_id, tenant_id: int) -> Announcement:
    return get_scoped_or_404(Announcement, announcement_id, tenant_id, "Announcement")


def update(announcement_id, data: Dict[str, Any], tenant_id: int) -> Announcement:
    announcement = find_one(announcement_id, tenant_id)
    _check_enums(data)

    if "publishDate" in data or "expiryDate" in data:
        publish_date = (
            parse_date(data["publishDate"], "publishDate") if "publishDate" in data else announcement.publish_date
        )
        expiry_date = (
            parse_optional_date(data["expiryDate"], "expiryDate") if "expiryDate" in data else announcement.expiry_date
        )
        if "publishDate" in data:
            _check_dates(publish_date, expiry_date)
        elif expiry_date is not None and expiry_date <= publish_date:
            raise ValidationError("Expiry date must be after the publish date.")
        announcement.publish_date = publish_date
        announcement.expiry_date = expiry_date

    if "isActive" in data:
        announcement.is_active = parse_bool(data["isActive"], "isActive")
    merge(announcement, data, UPDATABLE_FIELDS)
    db.session.commit()
    return announcement


def remove(announcement_id, tenant_id: int):
    delete_scoped_or_404(Announcement, announcement_id, tenant_id, "Announcement")
