import math
from datetime import date, datetime
from flask import request
from hrms.utils.errors import ValidationError

_TRUE = {"true", "1", "yes"}
_FALSE = {"false", "0", "no"}


def get_json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid JSON or Content-Type not set to application/json")
    return data


def require_fields(data: dict, fields: list, message=None):
    missing = [f for f in fields if f not in data or data.get(f) in (None, "", [])]
    if missing:
        raise ValidationError(
            message or f"Missing required fields: {', '.join(missing)}.",
            errors={"missing_fields": missing},
        )


def require_choice(value, choices, field):
    if value is not None and value not in choices:
        raise ValidationError(f"{field} must be one of: {', '.join(choices)}.")


def today() -> date:
    return date.today()


def parse_date(value, field="date") -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Invalid date format provided for {field}.")
    try:
        # accepts YYYY-MM-DD and full ISO timestamps sent by the frontend
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        raise ValidationError(f"Invalid date format provided for {field}.")


def parse_optional_date(value, field="date"):
    if value in (None, ""):
        return None
    return parse_date(value, field)


def parse_number(value, field) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number.")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number.")
    if not math.isfinite(number):
        raise ValidationError(f"{field} must be a finite number.")
    return number


def parse_bool(value, field):
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in _TRUE:
        return True
    if isinstance(value, str) and value.strip().lower() in _FALSE:
        return False
    raise ValidationError(f"{field} must be a boolean.")


def parse_int(value, field):
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer ID.")
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field} must be an integer ID.")


def require_string_list(value, field):
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationError(f"{field} must be an array of strings.")
    return value
