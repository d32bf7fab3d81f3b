from flask import jsonify, request
from . import recognition_bp
from . import services
from hrms.utils.decorators import token_required
from hrms.utils.responses import no_content
from hrms.utils.scoping import current_tenant_id
from hrms.utils.validators import get_json_body, parse_int


@recognition_bp.route("", methods=["GET"])
@token_required
def list_recognitions():
    recipient_id = request.args.get("recipientId")
    items = services.find_all(
        current_tenant_id(),
        recipient_id=parse_int(recipient_id, "recipientId") if recipient_id else None,
        category=request.args.get("category"),
    )
    return jsonify([r.to_dict() for r in items]), 200


@recognition_bp.route("", methods=["POST"])
@token_required
def create_recognition():
    recognition = services.create(get_json_body(), current_tenant_id())
    return jsonify(recognition.to_dict()), 201


@recognition_bp.route("/<int:recognition_id>", methods=["GET"])
@token_required
def get_recognition(recognition_id):
    return jsonify(services.find_one(recognition_id, current_tenant_id()).to_dict()), 200


@recognition_bp.route("/<int:recognition_id>", methods=["PUT"])
@token_required
def update_recognition(recognition_id):
    recognition = services.update(recognition_id, get_json_body(), current_tenant_id())
    return jsonify(recognition.to_dict()), 200


@recognition_bp.route("/<int:recognition_id>", methods=["DELETE"])
@token_required
def delete_recognition(recognition_id):
    services.remove(recognition_id, current_tenant_id())
    return no_content()
