import logging
from typing import Dict, Any, Tuple

from hrms.models import db, Tenant, User, ROLES
from hrms.employee.models import Employee
from hrms.employee.services import get_employee, initial_leave_balances
from hrms.utils.auth_utils import hash_password, verify_password, generate_token
from hrms.utils.errors import ValidationError, AuthenticationError, ConflictError, NotFoundError
from hrms.utils.validators import require_fields, require_choice, parse_int, today

logger = logging.getLogger(__name__)


def _normalize_email(value) -> str:
    return str(value or "").strip().lower()


def setup_tenant_admin(data: Dict[str, Any]) -> Tuple[Tenant, User, str]:
    """Bootstrap a new organization: tenant, its first admin account and the admin's employee record."""
    require_fields(data, ["tenantName", "adminEmail", "adminPassword"])
    tenant_name = str(data["tenantName"]).strip()
    admin_email = _normalize_email(data["adminEmail"])

    if Tenant.query.filter_by(name=tenant_name).first():
        raise ConflictError(f'Tenant with name "{tenant_name}" already exists.')
    if User.query.filter_by(email=admin_email).first():
        raise ConflictError(f'User with email "{admin_email}" already exists.')

    tenant = Tenant(name=tenant_name, contact_email=admin_email, status="active")
    db.session.add(tenant)
    db.session.flush()

    employee = Employee(
        tenant_id=tenant.id,
        first_name=data.get("adminFirstName") or "Admin",
        last_name=data.get("adminLastName") or "User",
        email=admin_email,
        role="Administrator",
        department="Management",
        hire_date=today(),
        status="Active",
        leave_balances=initial_leave_balances(tenant.id),
    )
    db.session.add(employee)

    user = User(
        tenant_id=tenant.id,
        email=admin_email,
        password=hash_password(data["adminPassword"]),
        role="admin",
        employee=employee,
    )
    db.session.add(user)
    db.session.commit()

    logger.info("Tenant %s (%s) set up with admin %s", tenant.id, tenant.name, admin_email)
    return tenant, user, generate_token(user)


def register(data: Dict[str, Any], tenant_id: int) -> User:
    require_fields(data, ["email", "password"])
    email = _normalize_email(data["email"])
    role = data.get("role") or "employee"
    require_choice(role, ROLES, "role")

    if User.query.filter_by(email=email).first():
        raise ValidationError(f'User with email "{email}" already exists.')

    employee = None
    if data.get("employeeId") is not None:
        try:
            employee = get_employee(parse_int(data["employeeId"], "employeeId"), tenant_id)
        except NotFoundError as err:
            raise ValidationError(err.message)
        if employee.user is not None:
            raise ValidationError(f'Employee with ID "{employee.id}" is already linked to a user.')

    user = User(
        tenant_id=tenant_id,
        email=email,
        password=hash_password(data["password"]),
        role=role,
        employee=employee,
    )
    db.session.add(user)
    db.session.commit()
    logger.info("User %s registered in tenant %s", user.id, tenant_id)
    return user


def login(data: Dict[str, Any]) -> Tuple[User, str]:
    require_fields(data, ["email", "password"])
    user = User.query.filter_by(email=_normalize_email(data["email"])).first()

    if not user or not verify_password(user.password, data["password"]):
        raise AuthenticationError("Invalid credentials.")

    requested_tenant = data.get("tenantId")
    if requested_tenant not in (None, "") and str(requested_tenant) != str(user.tenant_id):
        raise AuthenticationError("Invalid credentials.")

    if user.tenant is None or not user.tenant.is_active:
        raise AuthenticationError("Tenant is inactive.")

    return user, generate_token(user)


def profile(user_id: int, tenant_id: int) -> Dict[str, Any]:
    user = User.query.filter_by(id=user_id, tenant_id=tenant_id).first()
    if user is None:
        raise NotFoundError("User not found.")
    data = user.to_dict(include_employee=True)
    data["tenant"] = user.tenant.to_dict() if user.tenant else None
    return data
