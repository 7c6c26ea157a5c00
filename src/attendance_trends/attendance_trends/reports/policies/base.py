from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import StatusCounts


class DenominatorPolicy(ABC):
    """Strategy Pattern: how "not recorded" and the rate are derived from counts."""

    name: str = ""

    @abstractmethod
    def denominator(self, *, school_days: int, expected_population: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def not_recorded(self, counts: StatusCounts, *, total_records: int, school_days: int, expected_population: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def attendance_rate(self, counts: StatusCounts, *, school_days: int, expected_population: int) -> float:
        raise NotImplementedError
