from __future__ import annotations

import math
from datetime import date

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_employee_id(value, *, max_length: int, field_name: str = "employee_id") -> str:
    """Ids are stored and looked up verbatim, so padded ids are refused rather than trimmed."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    if value != value.strip():
        raise ValidationError(f"{field_name} must not start or end with whitespace")
    return require_max_length(value, field_name, max_length=max_length)


def require_max_length(value: str, field_name: str, *, max_length: int) -> str:
    if len(value) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")
    return value


def require_int(value, field_name: str) -> int:
    # bool is an int subclass; "True points" is never meant.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer")
    return value


def require_period(month, year) -> tuple[int, int]:
    month = require_int(month, "month")
    year = require_int(year, "year")
    if not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12")
    if year < 1:
        raise ValidationError("year must be positive")
    return month, year


def require_non_negative_number(value, field_name: str) -> float | int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(value):
        raise ValidationError(f"{field_name} must be finite")
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def parse_period(month_raw, year_raw, *, today: date) -> tuple[int, int]:
    """Read a (month, year) pair from query-string values; missing parts default to today."""
    try:
        month = int(month_raw) if month_raw not in (None, "") else today.month
        year = int(year_raw) if year_raw not in (None, "") else today.year
    except (TypeError, ValueError):
        raise ValidationError("month and year must be integers") from None
    return require_period(month, year)
