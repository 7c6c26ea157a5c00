from __future__ import annotations

from datetime import date

from ...academic.service import SchoolCalendar
from ...common.datetime_utils import clip, end_of_month, next_month, start_of_month
from ...core.constants import MONTHLY_LABEL_FORMAT
from ..model import Period
from .base import PeriodStrategy


class MonthlyStrategy(PeriodStrategy):
    """Calendar months touching the range, each clipped to it."""

    def periods(self, *, start: date, end: date, calendar: SchoolCalendar) -> list[Period]:
        out: list[Period] = []
        month = start_of_month(start)
        while month <= end:
            lo, hi = clip(month, end_of_month(month), start, end)
            out.append(Period(start=lo, end=hi, label=month.strftime(MONTHLY_LABEL_FORMAT)))
            month = next_month(month)
        return out
