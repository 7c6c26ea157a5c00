from __future__ import annotations

import logging
from datetime import date, timedelta

from ...academic.service import SchoolCalendar
from ...common.datetime_utils import clip
from ..model import Period
from .base import PeriodStrategy

logger = logging.getLogger(__name__)


class TermlyStrategy(PeriodStrategy):
    """Terms overlapping the range, each intersected with it.

    No academic year means no periods. Terms that overlap each other are
    trimmed so sibling periods stay disjoint.
    """

    def periods(self, *, start: date, end: date, calendar: SchoolCalendar) -> list[Period]:
        if calendar.academic_year is None:
            return []

        out: list[Period] = []
        for term in calendar.terms_overlapping(start, end):
            lo, hi = clip(term.start_date, term.end_date, start, end)
            if out and lo <= out[-1].end:
                logger.warning("Term %r overlaps the previous term; trimming its start", term.term_id)
                lo = out[-1].end + timedelta(days=1)
            if lo > hi:
                continue
            out.append(Period(start=lo, end=hi, label=term.name))
        return out
