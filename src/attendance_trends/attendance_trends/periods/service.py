from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..academic.service import SchoolCalendar
from ..common.validators import require_date, require_granularity
from ..core.enums import Granularity
from .factory import PeriodStrategyFactory
from .model import Period

logger = logging.getLogger(__name__)

_factory = PeriodStrategyFactory()


def generate_periods(
    start: date,
    end: date,
    granularity: Granularity | str,
    calendar: Optional[SchoolCalendar] = None,
    *,
    factory: Optional[PeriodStrategyFactory] = None,
) -> list[Period]:
    """Ordered, disjoint periods covering [start, end] at a granularity.

    An inverted range gives an empty list rather than an error.
    """
    start = require_date(start, "start")
    end = require_date(end, "end")
    granularity = require_granularity(granularity)
    calendar = calendar or SchoolCalendar()

    if start > end:
        logger.debug("Empty period sequence: start %s is after end %s", start, end)
        return []

    strategy = (factory or _factory).for_granularity(granularity)
    periods = strategy.periods(start=start, end=end, calendar=calendar)
    logger.debug("Generated %d %s periods for %s..%s", len(periods), granularity.value, start, end)
    return periods
