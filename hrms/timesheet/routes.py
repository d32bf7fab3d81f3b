from flask import jsonify, request
from . import timesheet_bp
from . import services
from hrms.utils.decorators import token_required
from hrms.utils.responses import no_content
from hrms.utils.scoping import current_tenant_id
from hrms.utils.validators import get_json_body, parse_int


@timesheet_bp.route("", methods=["GET"])
@token_required
def list_timesheets():
    employee_id = request.args.get("employeeId")
    entries = services.find_all(
        current_tenant_id(),
        employee_id=parse_int(employee_id, "employeeId") if employee_id else None,
    )
    return jsonify([t.to_dict() for t in entries]), 200


@timesheet_bp.route("", methods=["POST"])
@token_required
def create_timesheet():
    entry = services.create(get_json_body(), current_tenant_id())
    return jsonify(entry.to_dict()), 201


@timesheet_bp.route("/by-employee-and-week", methods=["POST"])
@token_required
def timesheets_for_week():
    entries = services.find_by_employee_and_week(get_json_body(), current_tenant_id())
    return jsonify([t.to_dict() for t in entries]), 200


@timesheet_bp.route("/<int:timesheet_id>", methods=["GET"])
@token_required
def get_timesheet(timesheet_id):
    return jsonify(services.find_one(timesheet_id, current_tenant_id()).to_dict()), 200


@timesheet_bp.route("/<int:timesheet_id>", methods=["PUT"])
@token_required
def update_timesheet(timesheet_id):
    entry = services.update(timesheet_id, get_json_body(), current_tenant_id())
    return jsonify(entry.to_dict()), 200


@timesheet_bp.route("/<int:timesheet_id>", methods=["DELETE"])
@token_required
def delete_timesheet(timesheet_id):
    services.remove(timesheet_id, current_tenant_id())
    return no_content()
