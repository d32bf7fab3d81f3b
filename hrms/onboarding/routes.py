from flask import jsonify, request
from . import onboarding_bp
from . import services
from hrms.utils.decorators import token_required
from hrms.utils.responses import no_content
from hrms.utils.scoping import current_tenant_id
from hrms.utils.validators import get_json_body, parse_bool, parse_int


@onboarding_bp.route("", methods=["GET"])
@token_required
def list_tasks():
    employee_id = request.args.get("employeeId")
    completed = request.args.get("completed")
    tasks = services.find_all(
        current_tenant_id(),
        employee_id=parse_int(employee_id, "employeeId") if employee_id else None,
        completed=parse_bool(completed, "completed") if completed else None,
    )
    return jsonify([t.to_dict() for t in tasks]), 200


@onboarding_bp.route("", methods=["POST"])
@token_required
def create_task():
    task = services.create(get_json_body(), current_tenant_id())
    return jsonify(task.to_dict()), 201


@onboarding_bp.route("/<int:task_id>", methods=["GET"])
@token_required
def get_task(task_id):
    return jsonify(services.find_one(task_id, current_tenant_id()).to_dict()), 200


@onboarding_bp.route("/<int:task_id>", methods=["PUT"])
@token_required
def update_task(task_id):
    task = services.update(task_id, get_json_body(), current_tenant_id())
    return jsonify(task.to_dict()), 200


@onboarding_bp.route("/<int:task_id>", methods=["DELETE"])
@token_required
def delete_task(task_id):
    services.remove(task_id, current_tenant_id())
    return no_content()
