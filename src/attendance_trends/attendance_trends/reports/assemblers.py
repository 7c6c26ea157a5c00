"""Report assemblers.

Every entry point is pure: they take already-fetched collections and
build fresh result objects on every call.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable, Optional, Sequence

from ..academic.model import AcademicYear, ExcludedDay
from ..academic.service import SchoolCalendar
from ..attendance.filters import filter_by_period, filter_by_scope, record_day
from ..attendance.model import AttendanceRecord, Pupil, SchoolClass
from ..common.validators import require_date, require_granularity
from ..core.constants import ALL_SCOPE, DAILY_LABEL_FORMAT, DEFAULT_EXPECTED_POPULATION, YEAR_VIEW_MIN_DAYS
from ..core.enums import AttendanceStatus, Granularity
from ..core.exceptions import ValidationError
from ..periods.model import Period
from ..periods.service import generate_periods
from .aggregator import aggregate
from .model import ClassSnapshot, PeriodStats, PupilRef, PupilTrend
from .policies.base import DenominatorPolicy
from .policies.school_day_policy import SchoolDayPolicy
from .policies.single_day_policy import SingleDayPopulationPolicy
from .trend import apply_trends

logger = logging.getLogger(__name__)

SNAPSHOT_BUCKETS = ("present", "absent", "late", "excused", "not_recorded")

_STATUS_BUCKET = {
    AttendanceStatus.PRESENT: "present",
    AttendanceStatus.ABSENT: "absent",
    AttendanceStatus.LATE: "late",
    AttendanceStatus.EXCUSED: "excused",
}


def _has_class_scope(class_id: Optional[str]) -> bool:
    return bool(class_id) and class_id != ALL_SCOPE


def class_population(class_id: str, pupils: Iterable[Pupil]) -> int:
    return sum(1 for p in pupils if p.class_id == class_id)


def _stats_for_periods(
    periods: Sequence[Period],
    records: Sequence[AttendanceRecord],
    calendar: SchoolCalendar,
    *,
    expected_population: int,
    policy: DenominatorPolicy,
) -> list[PeriodStats]:
    stats = []
    for period in periods:
        stats.append(
            aggregate(
                filter_by_period(records, period),
                period=period,
                school_days=calendar.count_school_days(period.start, period.end),
                expected_population=expected_population,
                policy=policy,
            )
        )
    return apply_trends(stats)


def aggregate_trend_report(
    start: date,
    end: date,
    granularity: Granularity | str,
    records: Sequence[AttendanceRecord],
    *,
    academic_year: Optional[AcademicYear] = None,
    excluded_days: Sequence[ExcludedDay] = (),
    class_id: Optional[str] = None,
    pupil_id: Optional[str] = None,
    pupils: Optional[Sequence[Pupil]] = None,
    expected_population: Optional[int] = None,
    policy: Optional[DenominatorPolicy] = None,
) -> list[PeriodStats]:
    """Whole school, one class or one pupil across the periods of a range.

    Without an explicit ``expected_population`` a class scope uses the class
    roster size from ``pupils``, which is then required; anything else uses
    1. A daily report for one class counts each day against the roster
    (single-day population policy); every other report uses the school-day
    policy.
    """
    if records is None:
        raise ValidationError("records is required")
    start = require_date(start, "start")
    end = require_date(end, "end")
    granularity = require_granularity(granularity)

    if start > end:
        logger.info("Trend report requested with end %s before start %s", end, start)
        return []

    calendar = SchoolCalendar(academic_year=academic_year, excluded_days=excluded_days)
    periods = generate_periods(start, end, granularity, calendar)
    if not periods:
        return []

    class_scoped = _has_class_scope(class_id)
    if expected_population is None:
        if class_scoped:
            if pupils is None:
                raise ValidationError("pupils is required for a class-scoped report")
            expected_population = class_population(class_id, pupils)
        else:
            expected_population = DEFAULT_EXPECTED_POPULATION

    if policy is None:
        if granularity == Granularity.DAILY and class_scoped:
            policy = SingleDayPopulationPolicy()
        else:
            policy = SchoolDayPolicy()

    scoped = filter_by_scope(records, class_id=class_id, pupil_id=pupil_id)
    result = _stats_for_periods(periods, scoped, calendar, expected_population=expected_population, policy=policy)
    logger.debug("Trend report: %d periods (%s, %s policy)", len(result), granularity.value, policy.name)
    return result


def pupil_matrix_report(
    class_id: str,
    start: date,
    end: date,
    granularity: Granularity | str,
    records: Sequence[AttendanceRecord],
    pupils: Sequence[Pupil],
    *,
    academic_year: Optional[AcademicYear] = None,
    excluded_days: Sequence[ExcludedDay] = (),
) -> list[PupilTrend]:
    """Every pupil of a class against the same period sequence, sorted by name."""
    if records is None or pupils is None:
        raise ValidationError("records and pupils are required")
    start = require_date(start, "start")
    end = require_date(end, "end")
    granularity = require_granularity(granularity)

    if not _has_class_scope(class_id) or start > end:
        return []

    class_pupils = [p for p in pupils if p.class_id == class_id]
    if not class_pupils:
        return []

    calendar = SchoolCalendar(academic_year=academic_year, excluded_days=excluded_days)
    periods = generate_periods(start, end, granularity, calendar)
    school_days = [calendar.count_school_days(p.start, p.end) for p in periods]

    by_pupil: dict[str, list[AttendanceRecord]] = defaultdict(list)
    for r in records:
        by_pupil[r.pupil_id].append(r)

    policy = SchoolDayPolicy()
    matrix = []
    for pupil in class_pupils:
        own = by_pupil.get(pupil.pupil_id, [])
        stats = [
            aggregate(
                filter_by_period(own, period),
                period=period,
                school_days=days,
                expected_population=1,
                policy=policy,
            )
            for period, days in zip(periods, school_days)
        ]
        matrix.append(PupilTrend(pupil=PupilRef.of(pupil), periods=apply_trends(stats)))

    matrix.sort(key=lambda row: (row.pupil.name.lower(), row.pupil.name))
    logger.debug("Pupil matrix for class %s: %d pupils x %d periods", class_id, len(matrix), len(periods))
    return matrix


def is_year_view(start: date, end: date, academic_year: Optional[AcademicYear], term_id: Optional[str]) -> bool:
    """A long range over a multi-term year with "all terms" selected."""
    return (
        academic_year is not None
        and term_id == ALL_SCOPE
        and len(academic_year.terms) > 1
        and (end - start).days > YEAR_VIEW_MIN_DAYS
    )


def pupil_trend_report(
    pupil: Pupil,
    start: date,
    end: date,
    granularity: Granularity | str,
    records: Sequence[AttendanceRecord],
    *,
    academic_year: Optional[AcademicYear] = None,
    excluded_days: Sequence[ExcludedDay] = (),
    term_id: Optional[str] = None,
) -> PupilTrend:
    """A single pupil's trend.

    A year view is always broken down by term. When no period can be
    generated the whole range becomes one period.
    """
    if pupil is None or records is None:
        raise ValidationError("pupil and records are required")
    start = require_date(start, "start")
    end = require_date(end, "end")
    granularity = require_granularity(granularity)
    ref = PupilRef.of(pupil)

    if start > end:
        return PupilTrend(pupil=ref)

    if is_year_view(start, end, academic_year, term_id):
        granularity = Granularity.TERMLY

    calendar = SchoolCalendar(academic_year=academic_year, excluded_days=excluded_days)
    periods = generate_periods(start, end, granularity, calendar)
    if not periods:
        label = f"{start.strftime('%b %d')} - {end.strftime(DAILY_LABEL_FORMAT)}"
        periods = [Period(start=start, end=end, label=label)]

    own = filter_by_scope(records, pupil_id=pupil.pupil_id)
    stats = _stats_for_periods(periods, own, calendar, expected_population=1, policy=SchoolDayPolicy())
    return PupilTrend(pupil=ref, periods=stats)


def daily_school_snapshot(
    day: date,
    records: Sequence[AttendanceRecord],
    classes: Sequence[SchoolClass],
    pupils: Sequence[Pupil],
) -> list[ClassSnapshot]:
    """Per-class headcounts for one date, sorted by class name.

    A pupil without a record that day is "not recorded", never absent.
    Classes with no pupils are left out.
    """
    if records is None or classes is None or pupils is None:
        raise ValidationError("records, classes and pupils are required")
    day = require_date(day, "day")

    todays: dict[str, AttendanceRecord] = {}
    for r in records:
        record_date = record_day(r)
        if record_date is None:
            logger.warning("Attendance record for pupil %r has an unusable date %r; skipped", r.pupil_id, r.date)
            continue
        if record_date == day:
            todays.setdefault(r.pupil_id, r)

    by_class: dict[str, list[Pupil]] = defaultdict(list)
    for p in pupils:
        if p.class_id:
            by_class[p.class_id].append(p)

    snapshots = []
    for cls in classes:
        members = by_class.get(cls.class_id, [])
        if not members:
            continue

        buckets: dict[str, list[PupilRef]] = {name: [] for name in SNAPSHOT_BUCKETS}
        for pupil in members:
            record = todays.get(pupil.pupil_id)
            bucket = _STATUS_BUCKET.get(record.status, "not_recorded") if record else "not_recorded"
            buckets[bucket].append(PupilRef.of(pupil))

        total = len(members)
        attended = len(buckets["present"]) + len(buckets["late"])
        snapshots.append(
            ClassSnapshot(
                class_id=cls.class_id,
                class_name=cls.name,
                class_code=cls.code,
                total_pupils=total,
                present=len(buckets["present"]),
                absent=len(buckets["absent"]),
                late=len(buckets["late"]),
                excused=len(buckets["excused"]),
                not_recorded=len(buckets["not_recorded"]),
                attendance_rate=attended / total * 100 if total else 0.0,
                pupils=buckets,
            )
        )

    snapshots.sort(key=lambda s: (s.class_name.lower(), s.class_name))
    return snapshots
