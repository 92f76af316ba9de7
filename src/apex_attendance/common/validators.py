from __future__ import annotations

import math

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_float(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{field_name} must be a number") from e
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be finite")
    return number


def require_latitude(value) -> float:
    lat = require_float(value, "latitude")
    if not -90.0 <= lat <= 90.0:
        raise ValidationError("latitude must be between -90 and 90")
    return lat


def require_longitude(value) -> float:
    lng = require_float(value, "longitude")
    if not -180.0 <= lng <= 180.0:
        raise ValidationError("longitude must be between -180 and 180")
    return lng


def require_positive(value, field_name: str) -> float:
    number = require_float(value, field_name)
    if number <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return number


def require_bool(value, field_name: str) -> bool:
    # "false" and 0 are not accepted; JSON clients send real booleans.
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be true or false")
    return value
