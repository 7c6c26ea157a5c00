from __future__ import annotations

import logging
from typing import Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import DEFAULT_EXPECTED_POPULATION
from ..periods.model import Period
from .model import PeriodStats, StatusCounts
from .policies.base import DenominatorPolicy
from .policies.school_day_policy import SchoolDayPolicy

logger = logging.getLogger(__name__)

MAX_RATE = 100.0


def aggregate(
    records: Sequence[AttendanceRecord],
    *,
    period: Period,
    school_days: int,
    expected_population: int = DEFAULT_EXPECTED_POPULATION,
    policy: DenominatorPolicy | None = None,
) -> PeriodStats:
    """Turn one period's (already filtered) records into statistics.

    The trend is left as ``stable``; it is assigned once the whole sequence
    is known.
    """
    policy = policy or SchoolDayPolicy()
    counts = StatusCounts.from_records(records)
    total_records = len(records)

    not_recorded = policy.not_recorded(
        counts,
        total_records=total_records,
        school_days=school_days,
        expected_population=expected_population,
    )
    expected = policy.denominator(school_days=school_days, expected_population=expected_population)
    if counts.total + not_recorded != expected:
        logger.warning(
            "%s: %d records against %d expected (%s policy)", period.label, counts.total, expected, policy.name
        )
    rate = policy.attendance_rate(counts, school_days=school_days, expected_population=expected_population)
    if rate > MAX_RATE:
        logger.debug("Rate %.1f for %s capped at %.0f (%s policy)", rate, period.label, MAX_RATE, policy.name)
        rate = MAX_RATE

    return PeriodStats(
        period=period,
        school_days=school_days,
        present=counts.present,
        absent=counts.absent,
        late=counts.late,
        excused=counts.excused,
        not_recorded=not_recorded,
        attendance_rate=max(rate, 0.0),
        total_records=total_records,
    )
