from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from ...academic.service import SchoolCalendar
from ..model import Period


class PeriodStrategy(ABC):
    """Strategy Pattern: how one granularity cuts a date range into periods.

    Implementations receive a non-empty range (start <= end) and must return
    chronologically ordered, non-overlapping periods inside it.
    """

    @abstractmethod
    def periods(self, *, start: date, end: date, calendar: SchoolCalendar) -> list[Period]:
        raise NotImplementedError
