from flask import jsonify, request
from . import document_bp
from . import services
from hrms.utils.decorators import token_required
from hrms.utils.errors import ValidationError
from hrms.utils.responses import no_content
from hrms.utils.scoping import current_tenant_id
from hrms.utils.validators import get_json_body, parse_int


@document_bp.route("", methods=["GET"])
@token_required
def list_documents():
    employee_id = request.args.get("employeeId")
    documents = services.find_all(
        current_tenant_id(),
        employee_id=parse_int(employee_id, "employeeId") if employee_id else None,
        doc_type=request.args.get("type"),
        status=request.args.get("status"),
    )
    return jsonify([d.to_dict() for d in documents]), 200


@document_bp.route("", methods=["POST"])
@token_required
def create_document():
    document = services.create(get_json_body(), current_tenant_id())
    return jsonify(document.to_dict()), 201


# -----------------------------
# FILE UPLOAD (multipart)
# -----------------------------
@document_bp.route("/upload", methods=["POST"])
@token_required
def upload_document():
    if "file" not in request.files:
        raise ValidationError("No file part in the request.")
    form = {k: v for k, v in request.form.items() if v != ""}
    document = services.upload(request.files["file"], form, current_tenant_id())
    return jsonify(document.to_dict()), 201


@document_bp.route("/<int:document_id>", methods=["GET"])
@token_required
def get_document(document_id):
    return jsonify(services.find_one(document_id, current_tenant_id()).to_dict()), 200


@document_bp.route("/<int:document_id>", methods=["PUT"])
@token_required
def update_document(document_id):
    document = services.update(document_id, get_json_body(), current_tenant_id())
    return jsonify(document.to_dict()), 200


@document_bp.route("/<int:document_id>", methods=["DELETE"])
@token_required
def delete_document(document_id):
    services.remove(document_id, current_tenant_id())
    return no_content()
