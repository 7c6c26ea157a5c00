from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime, timedelta
from typing import Iterator, Optional

from ..core.constants import ISO_DATE_FORMAT, WEEK_STARTS_ON


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def normalize_date(value) -> Optional[date]:
    """Single boundary conversion into a calendar date.

    Accepts a date, a datetime (date part kept) or an ISO string, optionally
    carrying a time part after ``T``. Returns None when the value can't be read.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip().split("T", 1)[0]
        try:
            return parse_iso_date(text)
        except ValueError:
            return None
    return None


def each_day(start: date, end: date) -> Iterator[date]:
    """Every date of the inclusive range; nothing when start > end."""
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def start_of_week(day: date) -> date:
    offset = (day.weekday() - WEEK_STARTS_ON) % 7
    return day - timedelta(days=offset)


def end_of_week(day: date) -> date:
    return start_of_week(day) + timedelta(days=6)


def start_of_month(day: date) -> date:
    return day.replace(day=1)


def end_of_month(day: date) -> date:
    return day.replace(day=monthrange(day.year, day.month)[1])


def next_month(day: date) -> date:
    """First day of the month after ``day``."""
    return end_of_month(day) + timedelta(days=1)


def clip(start: date, end: date, lower: date, upper: date) -> tuple[date, date]:
    """Intersection of [start, end] with [lower, upper]."""
    return max(start, lower), min(end, upper)


def js_weekday(day: date) -> int:
    """Weekday numbered 0 = Sunday ... 6 = Saturday (stored calendar convention)."""
    return (day.weekday() + 1) % 7
