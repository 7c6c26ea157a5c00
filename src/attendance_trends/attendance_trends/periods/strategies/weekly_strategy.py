from __future__ import annotations

from datetime import date, timedelta

from ...academic.service import SchoolCalendar
from ...common.datetime_utils import clip, end_of_week, start_of_week
from ...core.constants import WEEKLY_LABEL_FORMAT
from ..model import Period
from .base import PeriodStrategy


class WeeklyStrategy(PeriodStrategy):
    """Monday-start weeks clipped to the range, labelled by the clipped first day."""

    def periods(self, *, start: date, end: date, calendar: SchoolCalendar) -> list[Period]:
        out: list[Period] = []
        week = start_of_week(start)
        while week <= end:
            lo, hi = clip(week, end_of_week(week), start, end)
            out.append(Period(start=lo, end=hi, label=lo.strftime(WEEKLY_LABEL_FORMAT)))
            week += timedelta(days=7)
        return out
