"""Build calendar entities from raw documents supplied by the host store."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import normalize_date
from ..core.enums import ExcludedDayType
from ..core.exceptions import ValidationError
from .model import AcademicYear, ExcludedDay, Term

logger = logging.getLogger(__name__)


def _get(raw: Mapping, *keys, default=None):
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return default


def term_from_raw(raw: Mapping) -> Term:
    start = normalize_date(_get(raw, "startDate", "start_date"))
    end = normalize_date(_get(raw, "endDate", "end_date"))
    if start is None or end is None:
        raise ValidationError(f"Term {_get(raw, 'id', 'term_id')!r} has invalid dates")
    return Term(
        term_id=str(_get(raw, "id", "term_id")),
        name=str(_get(raw, "name", default="")),
        start_date=start,
        end_date=end,
        is_current=bool(_get(raw, "isCurrent", "is_current", default=False)),
    )


def academic_year_from_raw(raw: Mapping) -> AcademicYear:
    start = normalize_date(_get(raw, "startDate", "start_date"))
    end = normalize_date(_get(raw, "endDate", "end_date"))
    if start is None or end is None:
        raise ValidationError(f"Academic year {_get(raw, 'id', 'year_id')!r} has invalid dates")

    terms = [term_from_raw(t) for t in _get(raw, "terms", default=[])]
    terms.sort(key=lambda t: t.start_date)
    return AcademicYear(
        year_id=str(_get(raw, "id", "year_id")),
        name=str(_get(raw, "name", default="")),
        start_date=start,
        end_date=end,
        terms=tuple(terms),
        is_active=bool(_get(raw, "isActive", "is_active", default=False)),
        is_locked=bool(_get(raw, "isLocked", "is_locked", default=False)),
    )


def excluded_day_from_raw(raw: Mapping) -> Optional[ExcludedDay]:
    """Returns None for documents that can't describe a non-school day."""
    try:
        kind = ExcludedDayType(_get(raw, "type", "kind", default=ExcludedDayType.SPECIFIC_DATE.value))
    except ValueError:
        logger.warning("Skipping excluded day %r: unknown type", _get(raw, "id"))
        return None

    if kind == ExcludedDayType.SPECIFIC_DATE:
        day = normalize_date(_get(raw, "date", "day"))
        if day is None:
            logger.warning("Skipping excluded day %r: unreadable date", _get(raw, "id"))
            return None
        return ExcludedDay(
            excluded_id=str(_get(raw, "id", default=day.isoformat())),
            day=day,
            description=_get(raw, "description"),
        )

    day_of_week = _get(raw, "dayOfWeek", "day_of_week")
    if not isinstance(day_of_week, int) or not 0 <= day_of_week <= 6:
        logger.warning("Skipping excluded day %r: bad dayOfWeek %r", _get(raw, "id"), day_of_week)
        return None
    return ExcludedDay(
        excluded_id=str(_get(raw, "id", default=f"dow-{day_of_week}")),
        kind=kind,
        day_of_week=day_of_week,
        description=_get(raw, "description"),
    )


def excluded_days_from_raw(rows: Iterable[Mapping]) -> list[ExcludedDay]:
    out = []
    for raw in rows:
        excluded = excluded_day_from_raw(raw)
        if excluded is not None:
            out.append(excluded)
    return out
