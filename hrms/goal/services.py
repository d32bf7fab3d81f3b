import logging
from typing import Dict, Any, List, Optional

from hrms.models import db
from hrms.employee.services import get_employee
from hrms.goal.models import Goal, GOAL_CATEGORIES, GOAL_PRIORITIES, GOAL_STATUSES
from hrms.utils.errors import ValidationError
from hrms.utils.scoping import scoped_query, get_scoped_or_404, delete_scoped_or_404, merge
from hrms.utils.validators import (
    require_fields, require_choice, require_string_list, parse_date, parse_int, today,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["employeeId", "objective", "dueDate", "category"]
UPDATABLE_FIELDS = {
    "objective": "objective",
    "description": "description",
    "category": "category",
    "priority": "priority",
    "status": "status",
}


def _check_enums(data: Dict[str, Any]):
    require_choice(data.get("category"), GOAL_CATEGORIES, "category")
    require_choice(data.get("priority"), GOAL_PRIORITIES, "priority")
    require_choice(data.get("status"), GOAL_STATUSES, "status")


def create(data: Dict[str, Any], tenant_id: int) -> Goal:
    require_fields(data, REQUIRED_FIELDS)
    employee = get_employee(parse_int(data["employeeId"], "employeeId"), tenant_id)

    due_date = parse_date(data["dueDate"], "dueDate")
    if due_date <= today():
        raise ValidationError("Due date must be in the future.")
    _check_enums(data)

    key_results = data.get("keyResults")
    key_results = [] if key_results is None else require_string_list(key_results, "keyResults")

    goal = Goal(
        tenant_id=tenant_id,
        employee_id=employee.id,
        objective=data["objective"],
        description=data.get("description"),
        due_date=due_date,
        category=data["category"],
        priority=data.get("priority") or "Medium",
        status=data.get("status") or "Not Started",
        key_results=key_results,
        created_date=today(),
    )
    db.session.add(goal)
    db.session.commit()
    logger.info("Goal %s created for employee %s", goal.id, employee.id)
    return goal


def find_all(tenant_id: int, employee_id: Optional[int] = None, status: Optional[str] = None) -> List[Goal]:
    q = scoped_query(Goal, tenant_id)
    if employee_id is not None:
        q = q.filter(Goal.employee_id == employee_id)
    if status:
        q = q.filter(Goal.status == status)
    return q.order_by(Goal.due_date.asc(), Goal.created_at.desc(), Goal.id.desc()).all()


def find_one(goal_id, tenant_id: int) -> Goal:
    return get_scoped_or_404(Goal, goal_id, tenant_id, "Goal")


def update(goal_id, data: Dict[str, Any], tenant_id: int) -> Goal:
    goal = find_one(goal_id, tenant_id)
    _check_enums(data)

    if "dueDate" in data:
        due_date = parse_date(data["dueDate"], "dueDate")
        effective_status = data.get("status") or goal.status
        if due_date <= today() and effective_status != "Completed":
            raise ValidationError("Due date must be in the future unless the goal is completed.")
        goal.due_date = due_date

    if "keyResults" in data:
        goal.key_results = require_string_list(data["keyResults"], "keyResults")

    if "employeeId" in data:
        goal.employee_id = get_employee(parse_int(data["employeeId"], "employeeId"), tenant_id).id

    merge(goal, data, UPDATABLE_FIELDS)
    db.session.commit()
    return goal


def remove(goal_id, tenant_id: int):
    delete_scoped_or_404(Goal, goal_id, tenant_id, "Goal")
    logger.info("Goal %s deleted from tenant %s", goal_id, tenant_id)
