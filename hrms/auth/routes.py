from flask import jsonify, g
from . import auth_bp
from . import services
from hrms.utils.decorators import token_required, role_required
from hrms.utils.scoping import current_tenant_id
from hrms.utils.validators import get_json_body


# -----------------------------
# TENANT BOOTSTRAP
# -----------------------------
@auth_bp.route("/setup-tenant-admin", methods=["POST"])
def setup_tenant_admin():
    tenant, user, token = services.setup_tenant_admin(get_json_body())
    return jsonify({
        "message": "Tenant and admin user created successfully.",
        "tenant": tenant.to_dict(),
        "user": user.to_dict(include_employee=True),
        "accessToken": token,
    }), 201


# -----------------------------
# REGISTER (admin / hr)
# -----------------------------
@auth_bp.route("/register", methods=["POST"])
@token_required
@role_required(["admin", "hr"])
def register():
    user = services.register(get_json_body(), current_tenant_id())
    return jsonify({
        "message": "User registered successfully.",
        "user": user.to_dict(include_employee=True),
    }), 201


# -----------------------------
# LOGIN
# -----------------------------
@auth_bp.route("/login", methods=["POST"])
def login():
    user, token = services.login(get_json_body())
    return jsonify({
        "message": "Login successful.",
        "accessToken": token,
        "user": user.to_dict(include_employee=True),
    }), 200


# -----------------------------
# PROFILE
# -----------------------------
@auth_bp.route("/profile", methods=["GET"])
@token_required
def profile():
    return jsonify(services.profile(g.user_id, current_tenant_id())), 200
