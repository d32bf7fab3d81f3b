from flask import jsonify
from . import employee_bp
from . import services
from hrms.utils.decorators import token_required, role_required
from hrms.utils.responses import no_content
from hrms.utils.scoping import current_tenant_id
from hrms.utils.validators import get_json_body


# -----------------------------
# LIST / CREATE
# -----------------------------
@employee_bp.route("", methods=["GET"])
@token_required
def list_employees():
    employees = services.find_all(current_tenant_id())
    return jsonify([e.to_dict() for e in employees]), 200


@employee_bp.route("", methods=["POST"])
@token_required
@role_required(["admin", "hr"])
def create_employee():
    employee = services.create(get_json_body(), current_tenant_id())
    return jsonify(employee.to_dict()), 201


# -----------------------------
# SINGLE EMPLOYEE
# -----------------------------
@employee_bp.route("/<int:employee_id>", methods=["GET"])
@token_required
def get_employee(employee_id):
    return jsonify(services.find_one(employee_id, current_tenant_id()).to_dict()), 200


@employee_bp.route("/<int:employee_id>", methods=["PUT"])
@token_required
@role_required(["admin", "hr"])
def update_employee(employee_id):
    employee = services.update(employee_id, get_json_body(), current_tenant_id())
    return jsonify(employee.to_dict()), 200


@employee_bp.route("/<int:employee_id>", methods=["DELETE"])
@token_required
@role_required(["admin", "hr"])
def delete_employee(employee_id):
    services.remove(employee_id, current_tenant_id())
    return no_content()
