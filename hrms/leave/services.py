import logging
from datetime import date, timedelta
from typing import Dict, Any, List, Optional

from hrms.models import db
from hrms.employee.models import Employee
from hrms.employee.services import get_employee
from hrms.leave.models import (
    LeaveRequest, LeavePolicy, Holiday,
    LEAVE_TYPES, LEAVE_STATUSES, ACCRUAL_UNITS,
)
from hrms.utils.errors import ValidationError
from hrms.utils.scoping import scoped_query, get_scoped_or_404, delete_scoped_or_404, merge
from hrms.utils.validators import (
    require_fields, require_choice, require_string_list,
    parse_date, parse_optional_date, parse_number, parse_bool, parse_int, today,
)

logger = logging.getLogger(__name__)

ACTIVE_STATUSES = ("Pending", "Approved")
DECISION_STATUSES = ("Approved", "Rejected")


# -----------------------------
# WORKING DAYS
# -----------------------------
def daterange(d1: date, d2: date):
    cur = d1
    while cur <= d2:
        yield cur
        cur += timedelta(days=1)


def get_holidays_set(tenant_id: int, from_date: date, to_date: date) -> set:
    rows = scoped_query(Holiday, tenant_id).filter(
        Holiday.date >= from_date,
        Holiday.date <= to_date,
    ).all()
    return {r.date for r in rows}


def working_days(tenant_id: int, start: date, end: date) -> int:
    if end < start:
        return 0
    holidays = get_holidays_set(tenant_id, start, end)
    # weekday() 5 and 6 are Saturday and Sunday
    return sum(1 for d in daterange(start, end) if d.weekday() < 5 and d not in holidays)


def policy_for(tenant_id: int, leave_type: str) -> Optional[LeavePolicy]:
    return scoped_query(LeavePolicy, tenant_id).filter(LeavePolicy.leave_type == leave_type).first()


def _check_balance(employee: Employee, leave_type: str, days: int, tenant_id: int):
    available = (employee.leave_balances or {}).get(leave_type, 0) or 0
    if days > available:
        raise ValidationError(
            f"Insufficient {leave_type} leave balance. Requested {days} day(s), available {available}."
        )
    policy = policy_for(tenant_id, leave_type)
    if policy and policy.max_per_request is not None and days > policy.max_per_request:
        raise ValidationError(
            f"{leave_type} leave is limited to {policy.max_per_request:g} day(s) per request."
        )


# -----------------------------
# LEAVE REQUESTS
# -----------------------------
def create_request(data: Dict[str, Any], tenant_id: int) -> LeaveRequest:
    require_fields(data, ["employeeId", "type", "startDate", "endDate", "reason"])
    require_choice(data["type"], LEAVE_TYPES, "type")

    start = parse_date(data["startDate"], "startDate")
    end = parse_date(data["endDate"], "endDate")
    if end < start:
        raise ValidationError("End date cannot be before start date.")
    if start < today():
        raise ValidationError("Start date cannot be in the past.")

    employee = get_employee(parse_int(data["employeeId"], "employeeId"), tenant_id)

    overlapping = scoped_query(LeaveRequest, tenant_id).filter(
        LeaveRequest.employee_id == employee.id,
        LeaveRequest.status.in_(ACTIVE_STATUSES),
        LeaveRequest.start_date <= end,
        LeaveRequest.end_date >= start,
    ).first()
    if overlapping:
        raise ValidationError("Leave request overlaps with an existing pending or approved request.")

    days = working_days(tenant_id, start, end)
    if days < 1:
        raise ValidationError("Leave request must include at least one working day.")
    _check_balance(employee, data["type"], days, tenant_id)

    leave = LeaveRequest(
        tenant_id=tenant_id,
        employee_id=employee.id,
        type=data["type"],
        start_date=start,
        end_date=end,
        reason=data["reason"],
        requested_date=today(),
        status="Pending",
    )
    db.session.add(leave)
    db.session.commit()
    logger.info("Leave request %s created for employee %s (%s days)", leave.id, employee.id, days)
    return leave


def find_all_requests(tenant_id: int, employee_id: Optional[int] = None, status: Optional[str] = None) -> List[LeaveRequest]:
    require_choice(status, LEAVE_STATUSES, "status")
    q = scoped_query(LeaveRequest, tenant_id)
    if employee_id is not None:
        q = q.filter(LeaveRequest.employee_id == employee_id)
    if status:
        q = q.filter(LeaveRequest.status == status)
    return q.order_by(
        LeaveRequest.requested_date.desc(), LeaveRequest.created_at.desc(), LeaveRequest.id.desc()
    ).all()


def find_request(request_id, tenant_id: int) -> LeaveRequest:
    return get_scoped_or_404(LeaveRequest, request_id, tenant_id, "Leave request")


def update_status(request_id, status: str, tenant_id: int) -> LeaveRequest:
    if not status:
        raise ValidationError("status is required.")
    require_choice(status, DECISION_STATUSES, "status")

    leave = find_request(request_id, tenant_id)
    if leave.status != "Pending":
        raise ValidationError(f"Only pending requests can be updated; this request is {leave.status}.")

    if status == "Approved":
        employee = get_employee(leave.employee_id, tenant_id)
        days = working_days(tenant_id, leave.start_date, leave.end_date)
        _check_balance(employee, leave.type, days, tenant_id)
        balances = dict(employee.leave_balances or {})
        balances[leave.type] = (balances.get(leave.type, 0) or 0) - days
        employee.leave_balances = balances
        leave.deducted_days = days

    leave.status = status
    db.session.commit()
    logger.info("Leave request %s marked %s", leave.id, status)
    return leave


def remove_request(request_id, tenant_id: int):
    leave = find_request(request_id, tenant_id)
    if leave.status == "Approved" and leave.deducted_days:
        employee = get_employee(leave.employee_id, tenant_id)
        balances = dict(employee.leave_balances or {})
        balances[leave.type] = (balances.get(leave.type, 0) or 0) + leave.deducted_days
        employee.leave_balances = balances
        logger.info("Refunded %s %s day(s) to employee %s", leave.deducted_days, leave.type, employee.id)
    db.session.delete(leave)
    db.session.commit()


# -----------------------------
# LEAVE POLICIES
# -----------------------------
POLICY_FIELDS = {"name": "name", "description": "description", "leaveType": "leave_type"}


def _validate_policy(data: Dict[str, Any], tenant_id: int, exclude_id: Optional[int] = None):
    require_choice(data.get("leaveType"), LEAVE_TYPES, "leaveType")
    require_choice(data.get("accrualUnit"), ACCRUAL_UNITS, "accrualUnit")

    q = scoped_query(LeavePolicy, tenant_id)
    if exclude_id is not None:
        q = q.filter(LeavePolicy.id != exclude_id)
    if data.get("name") and q.filter(LeavePolicy.name == data["name"]).first():
        raise ValidationError(f'Leave policy with name "{data["name"]}" already exists.')
    if data.get("leaveType") and q.filter(LeavePolicy.leave_type == data["leaveType"]).first():
        raise ValidationError(f'A leave policy for "{data["leaveType"]}" already exists.')


def _apply_policy_numbers(policy: LeavePolicy, data: Dict[str, Any]):
    if "accrualRate" in data:
        rate = parse_number(data["accrualRate"], "accrualRate")
        if rate < 0:
            raise ValidationError("accrualRate cannot be negative.")
        policy.accrual_rate = rate
    if "accrualUnit" in data:
        policy.accrual_unit = data["accrualUnit"] or "month"
    for key, attr in (("maxAccumulation", "max_accumulation"), ("maxPerRequest", "max_per_request")):
        if key in data:
            value = None if data[key] is None else parse_number(data[key], key)
            if value is not None and value < 0:
                raise ValidationError(f"{key} cannot be negative.")
            setattr(policy, attr, value)
    if "isPaid" in data:
        policy.is_paid = parse_bool(data["isPaid"], "isPaid")
    if "applicableRoles" in data:
        policy.applicable_roles = require_string_list(data["applicableRoles"] or [], "applicableRoles")


def create_policy(data: Dict[str, Any], tenant_id: int) -> LeavePolicy:
    require_fields(data, ["name", "description", "leaveType", "accrualRate"])
    _validate_policy(data, tenant_id)

    policy = LeavePolicy(
        tenant_id=tenant_id,
        name=data["name"],
        description=data["description"],
        leave_type=data["leaveType"],
        accrual_unit="month",
        is_paid=True,
        applicable_roles=[],
    )
    _apply_policy_numbers(policy, data)
    db.session.add(policy)
    db.session.commit()
    logger.info("Leave policy %s created in tenant %s", policy.id, tenant_id)
    return policy


def find_all_policies(tenant_id: int) -> List[LeavePolicy]:
    return scoped_query(LeavePolicy, tenant_id).order_by(LeavePolicy.name.asc()).all()


def find_policy(policy_id, tenant_id: int) -> LeavePolicy:
    return get_scoped_or_404(LeavePolicy, policy_id, tenant_id, "Leave policy")


def update_policy(policy_id, data: Dict[str, Any], tenant_id: int) -> LeavePolicy:
    policy = find_policy(policy_id, tenant_id)
    _validate_policy(data, tenant_id, exclude_id=policy.id)
    _apply_policy_numbers(policy, data)
    merge(policy, data, POLICY_FIELDS)
    db.session.commit()
    return policy


def remove_policy(policy_id, tenant_id: int):
    delete_scoped_or_404(LeavePolicy, policy_id, tenant_id, "Leave policy")


# -----------------------------
# HOLIDAYS
# -----------------------------
def create_holiday(data: Dict[str, Any], tenant_id: int) -> Holiday:
    require_fields(data, ["name", "date"])
    holiday = Holiday(
        tenant_id=tenant_id,
        name=data["name"],
        date=parse_date(data["date"], "date"),
        is_public=parse_bool(data["isPublic"], "isPublic") if "isPublic" in data else True,
    )
    db.session.add(holiday)
    db.session.commit()
    return holiday


def find_all_holidays(tenant_id: int, start: Optional[date] = None, end: Optional[date] = None) -> List[Holiday]:
    q = scoped_query(Holiday, tenant_id)
    if start:
        q = q.filter(Holiday.date >= start)
    if end:
        q = q.filter(Holiday.date <= end)
    return q.order_by(Holiday.date.asc()).all()


def find_holiday(holiday_id, tenant_id: int) -> Holiday:
    return get_scoped_or_404(Holiday, holiday_id, tenant_id, "Holiday")


def update_holiday(holiday_id, data: Dict[str, Any], tenant_id: int) -> Holiday:
    holiday = find_holiday(holiday_id, tenant_id)
    if "date" in data:
        holiday.date = parse_date(data["date"], "date")
    if "isPublic" in data:
        holiday.is_public = parse_bool(data["isPublic"], "isPublic")
    merge(holiday, data, {"name": "name"})
    db.session.commit()
    return holiday


def remove_holiday(holiday_id, tenant_id: int):
    delete_scoped_or_404(Holiday, holiday_id, tenant_id, "Holiday")


def parse_range(args) -> tuple:
    return (
        parse_optional_date(args.get("startDate"), "startDate"),
        parse_optional_date(args.get("endDate"), "endDate"),
    )
