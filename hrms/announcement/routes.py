from flask import jsonify, request
from . import announcement_bp
from . import services
from hrms.utils.decorators import token_required, role_required
from hrms.utils.responses import no_content
from hrms.utils.scoping import current_tenant_id
from hrms.utils.validators import get_json_body


@announcement_bp.route("", methods=["GET"])
@token_required
def list_announcements():
    announcements = services.find_all(
        current_tenant_id(),
        category=request.args.get("category"),
        priority=request.args.get("priority"),
    )
    return jsonify([a.to_dict() for a in announcements]), 200


@announcement_bp.route("", methods=["POST"])
@token_required
@role_required(["admin", "hr"])
def create_announcement():
    announcement = services.create(get_json_body(), current_tenant_id())
    return jsonify(announcement.to_dict()), 201


@announcement_bp.route("/<int:announcement_id>", methods=["GET"])
@token_required
def get_announcement(announcement_id):
    return jsonify(services.find_one(announcement_id, current_tenant_id()).to_dict()), 200


@announcement_bp.route("/<int:announcement_id>", methods=["PUT"])
@token_required
@role_required(["admin", "hr"])
def update_announcement(announcement_id):
    announcement = services.update(announcement_id, get_json_body(), current_tenant_id())
    return jsonify(announcement.to_dict()), 200


@announcement_bp.route("/<int:announcement_id>", methods=["DELETE"])
@token_required
@role_required(["admin", "hr"])
def delete_announcement(announcement_id):
    services.remove(announcement_id, current_tenant_id())
    return no_content()
