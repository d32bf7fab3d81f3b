from functools import wraps
from flask import request, g
from hrms.utils.auth_utils import decode_token
from hrms.utils.errors import AuthenticationError, ForbiddenError


def _bearer_token():
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        return None
    token = auth_header.split(" ", 1)[1].strip()
    if not token or token.lower() in ("null", "undefined"):
        return None
    return token


def token_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        token = _bearer_token()
        if not token:
            raise AuthenticationError("Token is missing")

        claims = decode_token(token)
        if claims.get("id") is None or claims.get("tenantId") is None:
            raise AuthenticationError("Token is invalid")

        # identity comes from the signed token only, no lookup per request
        g.user = claims
        g.user_id = claims["id"]
        g.tenant_id = claims["tenantId"]
        g.role = claims.get("role")
        return f(*args, **kwargs)
    return decorated


def role_required(allowed_roles):
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if g.get("role") not in allowed_roles:
                raise ForbiddenError("Permission denied")
            return f(*args, **kwargs)
        return decorated_function
    return decorator
