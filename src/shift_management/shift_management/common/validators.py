from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_int(value: Optional[str], field_name: str) -> int:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a number") from None


def require_positive_int(value: Optional[str], field_name: str) -> int:
    number = require_int(value, field_name)
    if number <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return number


def require_year(value: Optional[str]) -> int:
    year = require_int(value, "year")
    if not 1 <= year <= 9999:
        raise ValidationError("year is out of range")
    return year


def require_month(value: Optional[str]) -> int:
    month = require_int(value, "month")
    if not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12")
    return month
