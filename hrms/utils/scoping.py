"""
Tenant row isolation.

Every read, update and delete of tenant-owned data goes through these helpers
so the tenant predicate lives in one place instead of in each module.
"""
from flask import g
from hrms.models import db
from hrms.utils.errors import NotFoundError, ValidationError


def current_tenant_id():
    tenant_id = g.get("tenant_id")
    if tenant_id is None:
        # token_required always sets it; reaching here is a wiring bug
        raise RuntimeError("No tenant bound to the current request")
    return tenant_id


def scoped_query(model, tenant_id):
    return model.query.filter(model.tenant_id == tenant_id)


def not_found(label, record_id):
    return NotFoundError(f'{label} with ID "{record_id}" not found for this tenant.')


def get_scoped_or_404(model, record_id, tenant_id, label):
    record = scoped_query(model, tenant_id).filter(model.id == record_id).first()
    if record is None:
        raise not_found(label, record_id)
    return record


def delete_scoped_or_404(model, record_id, tenant_id, label):
    affected = scoped_query(model, tenant_id).filter(model.id == record_id).delete(synchronize_session=False)
    if affected == 0:
        raise not_found(label, record_id)
    db.session.commit()


def merge(record, data: dict, fields: dict):
    """Copy supplied keys onto the record; ``fields`` maps JSON key -> attribute.

    An explicit null is refused for columns declared NOT NULL.
    """
    columns = record.__table__.columns
    for key, attr in fields.items():
        if key not in data:
            continue
        value = data[key]
        if value is None and attr in columns and not columns[attr].nullable:
            raise ValidationError(f"{key} cannot be null.")
        setattr(record, attr, value)
    return record
