from flask import jsonify, request
from . import goal_bp
from . import services
from hrms.utils.decorators import token_required
from hrms.utils.responses import no_content
from hrms.utils.scoping import current_tenant_id
from hrms.utils.validators import get_json_body, parse_int


@goal_bp.route("", methods=["GET"])
@token_required
def list_goals():
    employee_id = request.args.get("employeeId")
    goals = services.find_all(
        current_tenant_id(),
        employee_id=parse_int(employee_id, "employeeId") if employee_id else None,
        status=request.args.get("status") or None,
    )
    return jsonify([g.to_dict() for g in goals]), 200


@goal_bp.route("", methods=["POST"])
@token_required
def create_goal():
    goal = services.create(get_json_body(), current_tenant_id())
    return jsonify(goal.to_dict()), 201


@goal_bp.route("/<int:goal_id>", methods=["GET"])
@token_required
def get_goal(goal_id):
    return jsonify(services.find_one(goal_id, current_tenant_id()).to_dict()), 200


@goal_bp.route("/<int:goal_id>", methods=["PUT"])
@token_required
def update_goal(goal_id):
    goal = services.update(goal_id, get_json_body(), current_tenant_id())
    return jsonify(goal.to_dict()), 200


@goal_bp.route("/<int:goal_id>", methods=["DELETE"])
@token_required
def delete_goal(goal_id):
    services.remove(goal_id, current_tenant_id())
    return no_content()
