from __future__ import annotations

from ..model import StatusCounts
from .base import DenominatorPolicy


class SchoolDayPolicy(DenominatorPolicy):
    """Multi-day rule: expected records = school days x expected population.

    The rate is normalised by school days only, not by the full denominator.
    Historical percentages depend on this, so it stays as is.
    """

    name = "school_day"

    def denominator(self, *, school_days: int, expected_population: int) -> int:
        return max(school_days, 0) * max(expected_population, 0)

    def not_recorded(self, counts: StatusCounts, *, total_records: int, school_days: int, expected_population: int) -> int:
        expected = self.denominator(school_days=school_days, expected_population=expected_population)
        return max(0, expected - total_records)

    def attendance_rate(self, counts: StatusCounts, *, school_days: int, expected_population: int) -> float:
        if school_days <= 0:
            return 0.0
        return counts.attended / school_days * 100
