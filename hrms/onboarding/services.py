from typing import Dict, Any, List, Optional

from hrms.models import db
from hrms.employee.services import get_employee
from hrms.onboarding.models import OnboardingTask
from hrms.utils.errors import ValidationError
from hrms.utils.scoping import scoped_query, get_scoped_or_404, delete_scoped_or_404, merge
from hrms.utils.validators import require_fields, parse_date, parse_bool, parse_int, today


def create(data: Dict[str, Any], tenant_id: int) -> OnboardingTask:
    require_fields(data, ["employeeId", "task", "dueDate"])
    employee = get_employee(parse_int(data["employeeId"], "employeeId"), tenant_id)

    due_date = parse_date(data["dueDate"], "dueDate")
    if due_date < today():
        raise ValidationError("Due date cannot be in the past.")

    task = OnboardingTask(
        tenant_id=tenant_id,
        employee_id=employee.id,
        task=data["task"],
        due_date=due_date,
        completed=parse_bool(data["completed"], "completed") if "completed" in data else False,
    )
    db.session.add(task)
    db.session.commit()
    return task


def find_all(tenant_id: int, employee_id: Optional[int] = None, completed: Optional[bool] = None) -> List[OnboardingTask]:
    q = scoped_query(OnboardingTask, tenant_id)
    if employee_id is not None:
        q = q.filter(OnboardingTask.employee_id == employee_id)
    if completed is not None:
        q = q.filter(OnboardingTask.completed == completed)
    return q.order_by(OnboardingTask.due_date.asc(), OnboardingTask.created_at.desc(), OnboardingTask.id.desc()).all()


def find_one(task_id, tenant_id: int) -> OnboardingTask:
    return get_scoped_or_404(OnboardingTask, task_id, tenant_id, "Onboarding task")


def update(task_id, data: Dict[str, Any], tenant_id: int) -> OnboardingTask:
    task = find_one(task_id, tenant_id)
    if "employeeId" in data:
        task.employee_id = get_employee(parse_int(data["employeeId"], "employeeId"), tenant_id).id
    if "completed" in data:
        task.completed = parse_bool(data["completed"], "completed")
    if "dueDate" in data:
        due_date = parse_date(data["dueDate"], "dueDate")
        if due_date < today() and not task.completed:
            raise ValidationError("Due date cannot be in the past for an incomplete task.")
        task.due_date = due_date
    merge(task, data, {"task": "task"})
    db.session.commit()
    return task


def remove(task_id, tenant_id: int):
    delete_scoped_or_404(OnboardingTask, task_id, tenant_id, "Onboarding task")
