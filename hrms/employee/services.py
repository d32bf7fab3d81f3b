import logging
from typing import Dict, Any, List, Optional

from flask import current_app

from hrms.models import db, User
from hrms.employee.models import Employee, EMPLOYEE_STATUSES, DEFAULT_LEAVE_BALANCES
from hrms.utils.auth_utils import hash_password, generate_temp_password
from hrms.utils.email_utils import send_employee_welcome_email
from hrms.utils.errors import ValidationError
from hrms.utils.scoping import scoped_query, get_scoped_or_404, merge
from hrms.utils.validators import require_fields, require_choice, parse_date, parse_number

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["firstName", "lastName", "email", "role", "department", "hireDate"]
UPDATABLE_FIELDS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "phone": "phone",
    "address": "address",
    "role": "role",
    "department": "department",
    "status": "status",
}


def get_employee(employee_id, tenant_id: int) -> Employee:
    return get_scoped_or_404(Employee, employee_id, tenant_id, "Employee")


def initial_leave_balances(tenant_id: int) -> Dict[str, float]:
    # imported here, leave depends on employee and not the other way round
    from hrms.leave.models import LeavePolicy

    balances = dict(DEFAULT_LEAVE_BALANCES)
    for policy in scoped_query(LeavePolicy, tenant_id).all():
        if policy.leave_type in balances and policy.accrual_rate is not None:
            balances[policy.leave_type] = policy.accrual_rate
    return balances


def _leave_balances(value) -> Dict[str, float]:
    if not isinstance(value, dict):
        raise ValidationError("leaveBalances must be an object.")
    balances = {}
    for leave_type, days in value.items():
        if leave_type not in DEFAULT_LEAVE_BALANCES:
            raise ValidationError(
                f"Unknown leave type \"{leave_type}\" in leaveBalances. "
                f"Allowed: {', '.join(DEFAULT_LEAVE_BALANCES)}."
            )
        days = parse_number(days, f"leaveBalances.{leave_type}")
        if days < 0:
            raise ValidationError(f"leaveBalances.{leave_type} cannot be negative.")
        balances[leave_type] = days
    return balances


def _ensure_email_free(email: str, tenant_id: int, exclude_id: Optional[int] = None):
    q = scoped_query(Employee, tenant_id).filter(Employee.email == email)
    if exclude_id is not None:
        q = q.filter(Employee.id != exclude_id)
    if q.first():
        raise ValidationError(f'Employee with email "{email}" already exists in this tenant.')


def _link_or_create_user(employee: Employee, tenant_id: int):
    """Attach a login account to a new employee; returns the temp password when one was issued."""
    user = User.query.filter_by(email=employee.email).first()
    if user is None:
        temp_password = generate_temp_password()
        user = User(
            tenant_id=tenant_id,
            email=employee.email,
            password=hash_password(temp_password),
            role="employee",
            employee=employee,
        )
        db.session.add(user)
        return temp_password

    if user.tenant_id != tenant_id:
        logger.warning(
            "User %s belongs to tenant %s, not linking to employee in tenant %s",
            user.email, user.tenant_id, tenant_id,
        )
        return None

    if user.employee_id is None:
        user.employee = employee
    return None


def create(data: Dict[str, Any], tenant_id: int) -> Employee:
    require_fields(data, REQUIRED_FIELDS)
    require_choice(data.get("status"), EMPLOYEE_STATUSES, "status")

    email = str(data["email"]).strip().lower()
    _ensure_email_free(email, tenant_id)

    balances = initial_leave_balances(tenant_id)
    if data.get("leaveBalances") is not None:
        balances.update(_leave_balances(data["leaveBalances"]))

    employee = Employee(
        tenant_id=tenant_id,
        first_name=data["firstName"],
        last_name=data["lastName"],
        email=email,
        phone=data.get("phone"),
        address=data.get("address"),
        role=data["role"],
        department=data["department"],
        hire_date=parse_date(data["hireDate"], "hireDate"),
        status=data.get("status") or "Active",
        leave_balances=balances,
    )
    db.session.add(employee)
    temp_password = _link_or_create_user(employee, tenant_id)
    db.session.commit()
    logger.info("Employee %s created in tenant %s", employee.id, tenant_id)

    if temp_password:
        login_url = current_app.config.get("FRONTEND_URL")
        send_employee_welcome_email(employee.email, employee.first_name, temp_password, login_url)
    return employee


def find_all(tenant_id: int) -> List[Employee]:
    return (
        scoped_query(Employee, tenant_id)
        .order_by(Employee.last_name.asc(), Employee.first_name.asc())
        .all()
    )


def find_one(employee_id, tenant_id: int) -> Employee:
    return get_employee(employee_id, tenant_id)


def update(employee_id, data: Dict[str, Any], tenant_id: int) -> Employee:
    employee = get_employee(employee_id, tenant_id)
    require_choice(data.get("status"), EMPLOYEE_STATUSES, "status")

    if "email" in data and data["email"]:
        email = str(data["email"]).strip().lower()
        _ensure_email_free(email, tenant_id, exclude_id=employee.id)
        employee.email = email
    if "hireDate" in data:
        employee.hire_date = parse_date(data["hireDate"], "hireDate")
    if "leaveBalances" in data:
        balances = dict(employee.leave_balances or {})
        balances.update(_leave_balances(data["leaveBalances"]))
        employee.leave_balances = balances

    merge(employee, data, UPDATABLE_FIELDS)
    db.session.commit()
    return employee


def remove(employee_id, tenant_id: int):
    employee = get_employee(employee_id, tenant_id)
    if employee.user is not None:
        employee.user.employee_id = None
    db.session.delete(employee)
    db.session.commit()
    logger.info("Employee %s deleted from tenant %s", employee_id, tenant_id)
