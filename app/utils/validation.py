from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from app.exceptions import InvalidFieldError, MissingFieldsError


def require_fields(data: dict, required_fields):
    if not isinstance(data, dict):
        raise InvalidFieldError("body", "Request body must be a JSON object")
    missing = [
        f for f in required_fields
        if data.get(f) is None or (isinstance(data.get(f), str) and not data[f].strip())
    ]
    if missing:
        raise MissingFieldsError(missing)


# Integer columns are signed 64-bit at most.
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def parse_int(data: dict, field: str, minimum=None):
    value = data.get(field)
    if value is None or value == "":
        return None
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InvalidFieldError(field, f"Invalid format for {field}, must be an integer")
    try:
        parsed = int(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidFieldError(field, f"Invalid format for {field}, must be an integer")
    if not INT_MIN <= parsed <= INT_MAX:
        raise InvalidFieldError(field, f"{field} is out of range")
    if minimum is not None and parsed < minimum:
        raise InvalidFieldError(field, f"{field} must be at least {minimum}")
    return parsed


def parse_bool(data: dict, field: str):
    value = data.get(field)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "1", "yes"):
        return True
    if isinstance(value, str) and value.lower() in ("false", "0", "no"):
        return False
    raise InvalidFieldError(field, f"Invalid format for {field}, must be a boolean")


def parse_text(data: dict, field: str):
    value = data.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidFieldError(field, f"Invalid format for {field}, must be a string")
    return value


def parse_date(data: dict, field: str) -> date:
    """Accept ``YYYY-MM-DD`` or an ISO datetime and keep only the calendar date."""
    value = data.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidFieldError(field, f"Invalid date format for {field}")
    try:
        if "T" in value:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        return date.fromisoformat(value)
    except ValueError:
        raise InvalidFieldError(field, f"Invalid date format for {field}")


def parse_price(data: dict, field: str):
    value = data.get(field)
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise InvalidFieldError(field, f"Invalid format for {field}")
    try:
        price = Decimal(str(value))
    except InvalidOperation:
        raise InvalidFieldError(field, f"Invalid format for {field}")
    if not price.is_finite() or price < 0:
        raise InvalidFieldError(field, f"{field} must be a non-negative number")
    return price
