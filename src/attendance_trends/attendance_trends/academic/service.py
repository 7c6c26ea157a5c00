"""Calendar rules: which dates are school days and which terms cover a range."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import each_day, end_of_month, end_of_week, js_weekday, start_of_month, start_of_week
from ..core.constants import ALL_SCOPE, DAILY_LABEL_FORMAT
from ..core.enums import ExcludedDayType, Granularity
from .model import AcademicYear, ExcludedDay, RangeValidation, Term

logger = logging.getLogger(__name__)

WEEKEND = frozenset({5, 6})


def is_weekend(day: date) -> bool:
    return day.weekday() in WEEKEND


def is_excluded(day: date, excluded_days: Iterable[ExcludedDay]) -> bool:
    for excluded in excluded_days:
        if excluded.kind == ExcludedDayType.SPECIFIC_DATE:
            if excluded.day == day:
                return True
        elif excluded.day_of_week is not None and js_weekday(day) == excluded.day_of_week:
            return True
    return False


def in_term_time(day: date, academic_year: AcademicYear) -> bool:
    """True when a term of the year covers the date.

    A year without terms is treated as one block from its start to its end.
    """
    if not academic_year.terms:
        return academic_year.start_date <= day <= academic_year.end_date
    return any(term.contains(day) for term in academic_year.terms)


def is_school_day(day: date, academic_year: Optional[AcademicYear], excluded_days: Iterable[ExcludedDay]) -> bool:
    """Weekends and excluded days are never school days.

    With an academic year supplied, dates outside its terms are not school
    days either.
    """
    if is_weekend(day):
        return False
    if is_excluded(day, excluded_days):
        return False
    if academic_year is None:
        return True
    return in_term_time(day, academic_year)


def term_for_date(academic_year: Optional[AcademicYear], day: date) -> Optional[Term]:
    if academic_year is None:
        return None
    for term in academic_year.terms:
        if term.contains(day):
            return term
    return None


def term_boundaries(academic_year: Optional[AcademicYear], term_id: Optional[str]) -> Optional[tuple[date, date]]:
    """Date range of one term, or the span of all terms for ``ALL_SCOPE``/None."""
    if academic_year is None:
        return None

    if term_id and term_id != ALL_SCOPE:
        term = academic_year.find_term(term_id)
        if term is None:
            return None
        return term.start_date, term.end_date

    if not academic_year.terms:
        return academic_year.start_date, academic_year.end_date
    start = min(t.start_date for t in academic_year.terms)
    end = max(t.end_date for t in academic_year.terms)
    return start, end


def terms_overlapping(start: date, end: date, academic_year: Optional[AcademicYear]) -> list[Term]:
    if academic_year is None or start > end:
        return []
    terms = [t for t in academic_year.terms if t.overlaps(start, end)]
    terms.sort(key=lambda t: (t.start_date, t.end_date))
    return terms


def validate_date_range(start: date, end: date, academic_year: Optional[AcademicYear]) -> RangeValidation:
    if end < start:
        return RangeValidation(is_valid=False, warning="End date cannot be before start date")

    if academic_year is None:
        return RangeValidation(
            is_valid=True,
            warning="No academic year selected. Reports may include non-school days.",
        )

    if start < academic_year.start_date or end > academic_year.end_date:
        year_start = academic_year.start_date.strftime(DAILY_LABEL_FORMAT)
        year_end = academic_year.end_date.strftime(DAILY_LABEL_FORMAT)
        return RangeValidation(
            is_valid=True,
            warning=f"Date range extends beyond the academic year ({year_start} - {year_end})",
        )

    return RangeValidation(is_valid=True)


def can_record_attendance(
    day: date,
    academic_year: Optional[AcademicYear],
    excluded_days: Iterable[ExcludedDay],
    *,
    today: date,
) -> tuple[bool, Optional[str]]:
    if day > today:
        return False, "Cannot record attendance for future dates"

    if not is_school_day(day, academic_year, excluded_days):
        if academic_year is not None and term_for_date(academic_year, day) is None:
            return False, "This date is outside of any academic term"
        return False, "This date is marked as a non-school day (holiday/weekend)"

    return True, None


def recording_status_message(
    day: date,
    academic_year: Optional[AcademicYear],
    excluded_days: Iterable[ExcludedDay],
    *,
    today: date,
) -> str:
    can_record, reason = can_record_attendance(day, academic_year, excluded_days, today=today)
    if can_record:
        term = term_for_date(academic_year, day)
        if term:
            return f"Recording attendance for {term.name}"
        return "Recording attendance"
    return reason or "Cannot record attendance"


def quick_date_range(
    kind: str,
    *,
    today: date,
    academic_year: Optional[AcademicYear] = None,
) -> Optional[tuple[date, date, Granularity]]:
    """Preset ranges offered next to the report filters.

    ``term`` picks the term containing today (or the first term); ``year``
    spans the whole academic year broken down by term.
    """
    if kind == "day":
        return today, today, Granularity.DAILY
    if kind == "week":
        return start_of_week(today), end_of_week(today), Granularity.WEEKLY
    if kind == "month":
        return start_of_month(today), end_of_month(today), Granularity.MONTHLY
    if kind == "term":
        if academic_year is None or not academic_year.terms:
            return None
        term = term_for_date(academic_year, today) or academic_year.terms[0]
        return term.start_date, term.end_date, Granularity.TERMLY
    if kind == "year":
        if academic_year is None:
            return None
        return academic_year.start_date, academic_year.end_date, Granularity.TERMLY
    logger.debug("Unknown quick range %r", kind)
    return None


@dataclass(frozen=True)
class SchoolCalendar:
    """Read-only calendar context shared by every period of one report."""

    academic_year: Optional[AcademicYear] = None
    excluded_days: Sequence[ExcludedDay] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "excluded_days", tuple(self.excluded_days))

    def is_school_day(self, day: date) -> bool:
        return is_school_day(day, self.academic_year, self.excluded_days)

    def school_days(self, start: date, end: date) -> list[date]:
        return [d for d in each_day(start, end) if self.is_school_day(d)]

    def count_school_days(self, start: date, end: date) -> int:
        return len(self.school_days(start, end))

    def terms_overlapping(self, start: date, end: date) -> list[Term]:
        return terms_overlapping(start, end, self.academic_year)

    def term_boundaries(self, term_id: Optional[str]) -> Optional[tuple[date, date]]:
        return term_boundaries(self.academic_year, term_id)

    def validate_date_range(self, start: date, end: date) -> RangeValidation:
        return validate_date_range(start, end, self.academic_year)
