from __future__ import annotations

from datetime import date

from ...academic.service import SchoolCalendar
from ...core.constants import DAILY_LABEL_FORMAT
from ..model import Period
from .base import PeriodStrategy


class DailyStrategy(PeriodStrategy):
    """One period per school day; non-school days produce nothing."""

    def periods(self, *, start: date, end: date, calendar: SchoolCalendar) -> list[Period]:
        return [Period(start=d, end=d, label=d.strftime(DAILY_LABEL_FORMAT)) for d in calendar.school_days(start, end)]
