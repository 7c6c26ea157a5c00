from __future__ import annotations

from datetime import date, datetime

from ..core.enums import Granularity
from ..core.exceptions import ValidationError


def require_date(value, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise ValidationError(f"{field_name} must be a date")
    return value


def require_granularity(value) -> Granularity:
    if isinstance(value, Granularity):
        return value
    try:
        return Granularity(str(value).lower())
    except ValueError:
        raise ValidationError(f"Unknown granularity: {value!r}") from None
