from __future__ import annotations

from ..model import StatusCounts
from .base import DenominatorPolicy


class SingleDayPopulationPolicy(DenominatorPolicy):
    """Daily class view: every enrolled pupil is expected exactly once."""

    name = "single_day_population"

    def denominator(self, *, school_days: int, expected_population: int) -> int:
        return max(expected_population, 0)

    def not_recorded(self, counts: StatusCounts, *, total_records: int, school_days: int, expected_population: int) -> int:
        expected = self.denominator(school_days=school_days, expected_population=expected_population)
        return max(0, expected - counts.total)

    def attendance_rate(self, counts: StatusCounts, *, school_days: int, expected_population: int) -> float:
        if expected_population <= 0:
            return 0.0
        return counts.attended / expected_population * 100
