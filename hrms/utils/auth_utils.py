import datetime
import secrets
import string
import jwt
from flask import current_app
from werkzeug.security import generate_password_hash, check_password_hash
from hrms.utils.errors import AuthenticationError


def hash_password(password):
    return generate_password_hash(password)


def verify_password(hash, password):
    return check_password_hash(hash, password)


def generate_temp_password(length=10):
    alphabet = string.ascii_letters + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_token(user):
    now = datetime.datetime.now(datetime.timezone.utc)
    payload = dict(user.token_claims())
    payload["iat"] = now
    payload["exp"] = now + datetime.timedelta(hours=current_app.config["JWT_EXPIRES_HOURS"])
    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm=current_app.config["JWT_ALGORITHM"])


def decode_token(token):
    try:
        return jwt.decode(
            token,
            current_app.config["SECRET_KEY"],
            algorithms=[current_app.config["JWT_ALGORITHM"]],
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Token is invalid")
