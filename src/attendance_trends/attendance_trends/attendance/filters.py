from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional

from ..core.constants import ALL_SCOPE
from ..periods.model import Period
from .model import AttendanceRecord


def record_day(record: AttendanceRecord) -> Optional[date]:
    """The record's calendar date, or None when it isn't a usable date."""
    value = record.date
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def filter_by_date(records: Iterable[AttendanceRecord], day: date) -> list[AttendanceRecord]:
    return [r for r in records if record_day(r) == day]


def filter_by_range(records: Iterable[AttendanceRecord], start: date, end: date) -> list[AttendanceRecord]:
    out = []
    for r in records:
        day = record_day(r)
        if day is not None and start <= day <= end:
            out.append(r)
    return out


def filter_by_period(records: Iterable[AttendanceRecord], period: Period) -> list[AttendanceRecord]:
    return filter_by_range(records, period.start, period.end)


def filter_by_scope(
    records: Iterable[AttendanceRecord],
    *,
    class_id: Optional[str] = None,
    pupil_id: Optional[str] = None,
) -> list[AttendanceRecord]:
    """Keep records of one class (unless ``ALL_SCOPE``) and/or one pupil."""
    out = list(records)
    if class_id and class_id != ALL_SCOPE:
        out = [r for r in out if r.class_id == class_id]
    if pupil_id:
        out = [r for r in out if r.pupil_id == pupil_id]
    return out
