"""Built-in validators for the application form fields."""

from __future__ import annotations

import re
from datetime import date
from typing import Any

# Registry of validator functions: name -> callable(value, **params) -> str | None
# Returns an error message string on failure, None on success.
VALIDATORS: dict[str, Any] = {}

_DATE_PATTERN = r"[0-9]{4}-[0-9]{2}-[0-9]{2}"


def register(name: str):
    """Decorator to register a validator function."""
    def decorator(fn):
        VALIDATORS[name] = fn
        return fn
    return decorator


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_date(value: str) -> date | None:
    if not re.fullmatch(_DATE_PATTERN, value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


@register("required")
def validate_required(value: Any, label: str = "This field", **_kwargs: Any) -> str | None:
    if _is_blank(value):
        return f"{label} is required"
    return None


@register("max_length")
def validate_max_length(
    value: Any, limit: int | str = 0, label: str = "Value", **_kwargs: Any
) -> str | None:
    if not isinstance(value, str):
        return None
    if len(value) > int(limit):
        return f"{label} cannot exceed {limit} characters"
    return None


@register("date")
def validate_date(value: Any, **_kwargs: Any) -> str | None:
    if _is_blank(value) or not isinstance(value, str):
        return None
    if _parse_date(value) is None:
        return "Invalid date format (YYYY-MM-DD)"
    return None


@register("min_age")
def validate_min_age(
    value: Any, years: int | str = 18, today: date | None = None, **_kwargs: Any
) -> str | None:
    """Age is the difference of calendar years, not adjusted for month or day."""
    if _is_blank(value) or not isinstance(value, str):
        return None
    born = _parse_date(value)
    if born is None:
        return None
    today = today or date.today()
    if born > today or today.year - born.year < int(years):
        return f"You must be at least {years} years old"
    return None


@register("not_future")
def validate_not_future(
    value: Any, label: str = "Date", today: date | None = None, **_kwargs: Any
) -> str | None:
    if _is_blank(value) or not isinstance(value, str):
        return None
    parsed = _parse_date(value)
    if parsed is None:
        return None
    if parsed > (today or date.today()):
        return f"{label} cannot be in the future"
    return None


@register("email")
def validate_email(value: Any, **_kwargs: Any) -> str | None:
    if _is_blank(value) or not isinstance(value, str):
        return None
    pattern = r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}"
    if not re.fullmatch(pattern, value):
        return "Invalid email address"
    return None


@register("zip_code")
def validate_zip_code(value: Any, **_kwargs: Any) -> str | None:
    if _is_blank(value) or not isinstance(value, str):
        return None
    if not re.fullmatch(r"[0-9]{5}(-[0-9]{4})?", value):
        return "Zip code must be 5 digits or 5+4 digits"
    return None


@register("amount")
def validate_amount(value: Any, label: str = "Amount", **_kwargs: Any) -> str | None:
    """Non-negative decimal with at most two fraction digits."""
    if _is_blank(value) or not isinstance(value, str):
        return None
    if not re.fullmatch(r"[0-9]+(\.[0-9]{1,2})?", value):
        return f"{label} must be a valid number"
    return None


@register("positive")
def validate_positive(value: Any, label: str = "Value", **_kwargs: Any) -> str | None:
    if _is_blank(value):
        return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    if not num > 0:
        return f"{label} must be greater than 0"
    return None


@register("year")
def validate_year(value: Any, **_kwargs: Any) -> str | None:
    if _is_blank(value) or not isinstance(value, str):
        return None
    if not re.fullmatch(r"[0-9]{4}", value):
        return "Year must be a valid 4-digit number"
    return None


@register("accepted")
def validate_accepted(value: Any, subject: str = "the terms", **_kwargs: Any) -> str | None:
    if value is not True:
        return f"You must accept {subject}"
    return None
