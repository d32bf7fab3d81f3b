from typing import Dict, Any

from hrms.models import db, Tenant
from hrms.models.tenant import TENANT_STATUSES
from hrms.utils.errors import ForbiddenError, NotFoundError, ValidationError
from hrms.utils.validators import require_choice


def _own_tenant(tenant_id: int, caller_tenant_id: int) -> Tenant:
    # a caller only ever sees the organization its token was issued for
    if tenant_id != caller_tenant_id:
        raise ForbiddenError("You do not have access to this tenant.")
    tenant = db.session.get(Tenant, tenant_id)
    if tenant is None:
        raise NotFoundError(f'Tenant with ID "{tenant_id}" not found.')
    return tenant


def find_one(tenant_id: int, caller_tenant_id: int) -> Tenant:
    return _own_tenant(tenant_id, caller_tenant_id)


def update(tenant_id: int, data: Dict[str, Any], caller_tenant_id: int) -> Tenant:
    tenant = _own_tenant(tenant_id, caller_tenant_id)
    require_choice(data.get("status"), TENANT_STATUSES, "status")

    if data.get("name"):
        name = str(data["name"]).strip()
        clash = Tenant.query.filter(Tenant.name == name, Tenant.id != tenant.id).first()
        if clash:
            raise ValidationError(f'Tenant with name "{name}" already exists.')
        tenant.name = name
    if "contactEmail" in data:
        tenant.contact_email = data["contactEmail"]
    if data.get("status"):
        tenant.status = data["status"]

    db.session.commit()
    return tenant
