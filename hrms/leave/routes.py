from flask import jsonify, request
from . import leave_bp
from . import services
from hrms.utils.decorators import token_required, role_required
from hrms.utils.errors import ValidationError
from hrms.utils.responses import no_content
from hrms.utils.scoping import current_tenant_id
from hrms.utils.validators import get_json_body, parse_date, parse_int


# -----------------------------
# LEAVE REQUESTS
# -----------------------------
@leave_bp.route("/leave-requests/calculate-days", methods=["GET"])
@token_required
def calculate_days():
    start = request.args.get("startDate")
    end = request.args.get("endDate")
    if not start or not end:
        raise ValidationError("startDate and endDate are required.")
    days = services.working_days(
        current_tenant_id(), parse_date(start, "startDate"), parse_date(end, "endDate")
    )
    return jsonify({"workingDays": days}), 200


@leave_bp.route("/leave-requests", methods=["GET"])
@token_required
def list_leave_requests():
    employee_id = request.args.get("employeeId")
    leaves = services.find_all_requests(
        current_tenant_id(),
        employee_id=parse_int(employee_id, "employeeId") if employee_id else None,
        status=request.args.get("status") or None,
    )
    return jsonify([lr.to_dict() for lr in leaves]), 200


@leave_bp.route("/leave-requests", methods=["POST"])
@token_required
def create_leave_request():
    leave = services.create_request(get_json_body(), current_tenant_id())
    return jsonify(leave.to_dict()), 201


@leave_bp.route("/leave-requests/<int:request_id>", methods=["GET"])
@token_required
def get_leave_request(request_id):
    return jsonify(services.find_request(request_id, current_tenant_id()).to_dict()), 200


@leave_bp.route("/leave-requests/<int:request_id>/status", methods=["PUT"])
@token_required
@role_required(["admin", "hr"])
def update_leave_status(request_id):
    data = get_json_body()
    leave = services.update_status(request_id, data.get("status"), current_tenant_id())
    return jsonify(leave.to_dict()), 200


@leave_bp.route("/leave-requests/<int:request_id>", methods=["DELETE"])
@token_required
def delete_leave_request(request_id):
    services.remove_request(request_id, current_tenant_id())
    return no_content()


# -----------------------------
# LEAVE POLICIES
# -----------------------------
@leave_bp.route("/leave-policies", methods=["GET"])
@token_required
def list_leave_policies():
    return jsonify([p.to_dict() for p in services.find_all_policies(current_tenant_id())]), 200


@leave_bp.route("/leave-policies", methods=["POST"])
@token_required
@role_required(["admin", "hr"])
def create_leave_policy():
    policy = services.create_policy(get_json_body(), current_tenant_id())
    return jsonify(policy.to_dict()), 201


@leave_bp.route("/leave-policies/<int:policy_id>", methods=["GET"])
@token_required
def get_leave_policy(policy_id):
    return jsonify(services.find_policy(policy_id, current_tenant_id()).to_dict()), 200


@leave_bp.route("/leave-policies/<int:policy_id>", methods=["PUT"])
@token_required
@role_required(["admin", "hr"])
def update_leave_policy(policy_id):
    policy = services.update_policy(policy_id, get_json_body(), current_tenant_id())
    return jsonify(policy.to_dict()), 200


@leave_bp.route("/leave-policies/<int:policy_id>", methods=["DELETE"])
@token_required
@role_required(["admin", "hr"])
def delete_leave_policy(policy_id):
    services.remove_policy(policy_id, current_tenant_id())
    return no_content()


# -----------------------------
# HOLIDAYS
# -----------------------------
@leave_bp.route("/holidays", methods=["GET"])
@token_required
def list_holidays():
    start, end = services.parse_range(request.args)
    holidays = services.find_all_holidays(current_tenant_id(), start, end)
    return jsonify([h.to_dict() for h in holidays]), 200


@leave_bp.route("/holidays", methods=["POST"])
@token_required
@role_required(["admin", "hr"])
def create_holiday():
    holiday = services.create_holiday(get_json_body(), current_tenant_id())
    return jsonify(holiday.to_dict()), 201


@leave_bp.route("/holidays/<int:holiday_id>", methods=["GET"])
@token_required
def get_holiday(holiday_id):
    return jsonify(services.find_holiday(holiday_id, current_tenant_id()).to_dict()), 200


@leave_bp.route("/holidays/<int:holiday_id>", methods=["PUT"])
@token_required
@role_required(["admin", "hr"])
def update_holiday(holiday_id):
    holiday = services.update_holiday(holiday_id, get_json_body(), current_tenant_id())
    return jsonify(holiday.to_dict()), 200


@leave_bp.route("/holidays/<int:holiday_id>", methods=["DELETE"])
@token_required
@role_required(["admin", "hr"])
def delete_holiday(holiday_id):
    services.remove_holiday(holiday_id, current_tenant_id())
    return no_content()
