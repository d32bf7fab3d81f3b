import logging
import math
from typing import Dict, Any, List, Optional

from hrms.models import db
from hrms.employee.services import get_employee
from hrms.goal.models import Goal
from hrms.review.models import Review
from hrms.utils.errors import ValidationError
from hrms.utils.scoping import scoped_query, get_scoped_or_404, delete_scoped_or_404, merge
from hrms.utils.validators import require_fields, parse_int, today

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {
    "reviewer": "reviewer",
    "reviewPeriod": "review_period",
    "strengths": "strengths",
    "improvements": "improvements",
    "comments": "comments",
}


def _rating(value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("Rating must be an integer between 1 and 5.")
    if not math.isfinite(value) or int(value) != value:
        raise ValidationError("Rating must be an integer between 1 and 5.")
    if not 1 <= value <= 5:
        raise ValidationError("Rating must be an integer between 1 and 5.")
    return int(value)


def _ratings(value) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValidationError("ratings must be an object.")
    return value


def _linked_goals(value, tenant_id: int) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError("linkedGoals must be an array of goal IDs.")
    goal_ids = [parse_int(v, "linkedGoals") for v in value]
    for goal_id in goal_ids:
        if not scoped_query(Goal, tenant_id).filter(Goal.id == goal_id).first():
            raise ValidationError(f'Linked goal with ID "{goal_id}" not found for this tenant.')
    return goal_ids


def create(data: Dict[str, Any], tenant_id: int) -> Review:
    require_fields(data, ["employeeId", "reviewer", "reviewPeriod", "rating", "comments"])
    employee = get_employee(parse_int(data["employeeId"], "employeeId"), tenant_id)

    review = Review(
        tenant_id=tenant_id,
        employee_id=employee.id,
        reviewer=data["reviewer"],
        review_date=today(),
        review_period=data["reviewPeriod"],
        rating=_rating(data["rating"]),
        ratings=_ratings(data.get("ratings")),
        strengths=data.get("strengths"),
        improvements=data.get("improvements"),
        comments=data["comments"],
        linked_goals=_linked_goals(data.get("linkedGoals"), tenant_id),
    )
    db.session.add(review)
    db.session.commit()
    logger.info("Review %s created for employee %s", review.id, employee.id)
    return review


def find_all(tenant_id: int, employee_id: Optional[int] = None) -> List[Review]:
    q = scoped_query(Review, tenant_id)
    if employee_id is not None:
        q = q.filter(Review.employee_id == employee_id)
    return q.order_by(Review.review_date.desc(), Review.created_at.desc(), Review.id.desc()).all()


def find_one(review_id, tenant_id: int) -> Review:
    return get_scoped_or_404(Review, review_id, tenant_id, "Review")


def update(review_id, data: Dict[str, Any], tenant_id: int) -> Review:
    review = find_one(review_id, tenant_id)
    if "employeeId" in data:
        review.employee_id = get_employee(parse_int(data["employeeId"], "employeeId"), tenant_id).id
    if "rating" in data:
        review.rating = _rating(data["rating"])
    if "ratings" in data:
        review.ratings = _ratings(data["ratings"])
    if "linkedGoals" in data:
        review.linked_goals = _linked_goals(data["linkedGoals"], tenant_id)
    merge(review, data, UPDATABLE_FIELDS)
    db.session.commit()
    return review


def remove(review_id, tenant_id: int):
    delete_scoped_or_404(Review, review_id, tenant_id, "Review")
