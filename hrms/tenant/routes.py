from flask import jsonify
from . import tenant_bp
from . import services
from hrms.utils.decorators import token_required, role_required
from hrms.utils.scoping import current_tenant_id
from hrms.utils.validators import get_json_body


@tenant_bp.route("/<int:tenant_id>", methods=["GET"])
@token_required
def get_tenant(tenant_id):
    return jsonify(services.find_one(tenant_id, current_tenant_id()).to_dict()), 200


@tenant_bp.route("/<int:tenant_id>", methods=["PUT"])
@token_required
@role_required(["admin"])
def update_tenant(tenant_id):
    tenant = services.update(tenant_id, get_json_body(), current_tenant_id())
    return jsonify(tenant.to_dict()), 200
