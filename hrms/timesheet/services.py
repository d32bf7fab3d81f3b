from typing import Dict, Any, List, Optional

from hrms.models import db
from hrms.employee.services import get_employee
from hrms.timesheet.models import Timesheet
from hrms.utils.errors import ValidationError
from hrms.utils.scoping import scoped_query, get_scoped_or_404, delete_scoped_or_404, merge
from hrms.utils.validators import require_fields, parse_date, parse_number, parse_int, today

MAX_HOURS_PER_DAY = 24


def _hours(value) -> float:
    hours = parse_number(value, "hours")
    if hours <= 0 or hours > MAX_HOURS_PER_DAY:
        raise ValidationError(f"Hours must be greater than 0 and at most {MAX_HOURS_PER_DAY}.")
    return hours


def _work_date(value):
    work_date = parse_date(value, "date")
    if work_date > today():
        raise ValidationError("Timesheet date cannot be in the future.")
    return work_date


def create(data: Dict[str, Any], tenant_id: int) -> Timesheet:
    require_fields(data, ["employeeId", "date", "hours", "description"])
    employee = get_employee(parse_int(data["employeeId"], "employeeId"), tenant_id)

    entry = Timesheet(
        tenant_id=tenant_id,
        employee_id=employee.id,
        date=_work_date(data["date"]),
        hours=_hours(data["hours"]),
        description=data["description"],
    )
    db.session.add(entry)
    db.session.commit()
    return entry


def find_all(tenant_id: int, employee_id: Optional[int] = None) -> List[Timesheet]:
    q = scoped_query(Timesheet, tenant_id)
    if employee_id is not None:
        q = q.filter(Timesheet.employee_id == employee_id)
    return q.order_by(Timesheet.date.desc(), Timesheet.created_at.desc(), Timesheet.id.desc()).all()


def find_one(timesheet_id, tenant_id: int) -> Timesheet:
    return get_scoped_or_404(Timesheet, timesheet_id, tenant_id, "Timesheet")


def find_by_employee_and_week(data: Dict[str, Any], tenant_id: int) -> List[Timesheet]:
    require_fields(data, ["employeeId", "startDate", "endDate"])
    employee_id = parse_int(data["employeeId"], "employeeId")
    start = parse_date(data["startDate"], "startDate")
    end = parse_date(data["endDate"], "endDate")
    if end < start:
        raise ValidationError("End date cannot be before start date.")
    return (
        scoped_query(Timesheet, tenant_id)
        .filter(Timesheet.employee_id == employee_id, Timesheet.date >= start, Timesheet.date <= end)
        .order_by(Timesheet.date.asc(), Timesheet.id.asc())
        .all()
    )


def update(timesheet_id, data: Dict[str, Any], tenant_id: int) -> Timesheet:
    entry = find_one(timesheet_id, tenant_id)
    if "employeeId" in data:
        entry.employee_id = get_employee(parse_int(data["employeeId"], "employeeId"), tenant_id).id
    if "date" in data:
        entry.date = _work_date(data["date"])
    if "hours" in data:
        entry.hours = _hours(data["hours"])
    merge(entry, data, {"description": "description"})
    db.session.commit()
    return entry


def remove(timesheet_id, tenant_id: int):
    delete_scoped_or_404(Timesheet, timesheet_id, tenant_id, "Timesheet")
