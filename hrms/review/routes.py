from flask import jsonify, request
from . import review_bp
from . import services
from hrms.utils.decorators import token_required, role_required
from hrms.utils.responses import no_content
from hrms.utils.scoping import current_tenant_id
from hrms.utils.validators import get_json_body, parse_int


@review_bp.route("", methods=["GET"])
@token_required
def list_reviews():
    employee_id = request.args.get("employeeId")
    reviews = services.find_all(
        current_tenant_id(),
        employee_id=parse_int(employee_id, "employeeId") if employee_id else None,
    )
    return jsonify([r.to_dict() for r in reviews]), 200


@review_bp.route("", methods=["POST"])
@token_required
@role_required(["admin", "hr"])
def create_review():
    review = services.create(get_json_body(), current_tenant_id())
    return jsonify(review.to_dict()), 201


@review_bp.route("/<int:review_id>", methods=["GET"])
@token_required
def get_review(review_id):
    return jsonify(services.find_one(review_id, current_tenant_id()).to_dict()), 200


@review_bp.route("/<int:review_id>", methods=["PUT"])
@token_required
@role_required(["admin", "hr"])
def update_review(review_id):
    review = services.update(review_id, get_json_body(), current_tenant_id())
    return jsonify(review.to_dict()), 200


@review_bp.route("/<int:review_id>", methods=["DELETE"])
@token_required
@role_required(["admin", "hr"])
def delete_review(review_id):
    services.remove(review_id, current_tenant_id())
    return no_content()
