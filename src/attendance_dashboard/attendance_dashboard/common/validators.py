from __future__ import annotations

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_iso_date(value: str, field_name: str) -> str:
    try:
        parse_iso_date(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date") from exc
    return value
