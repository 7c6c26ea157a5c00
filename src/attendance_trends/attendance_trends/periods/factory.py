from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Granularity
from ..core.exceptions import ValidationError
from .strategies.base import PeriodStrategy
from .strategies.daily_strategy import DailyStrategy
from .strategies.monthly_strategy import MonthlyStrategy
from .strategies.termly_strategy import TermlyStrategy
from .strategies.weekly_strategy import WeeklyStrategy


@dataclass
class PeriodStrategyFactory:
    """Factory Pattern: choose the period strategy for a granularity."""

    def for_granularity(self, granularity: Granularity) -> PeriodStrategy:
        if granularity == Granularity.DAILY:
            return DailyStrategy()
        if granularity == Granularity.WEEKLY:
            return WeeklyStrategy()
        if granularity == Granularity.MONTHLY:
            return MonthlyStrategy()
        if granularity == Granularity.TERMLY:
            return TermlyStrategy()
        raise ValidationError(f"Unsupported granularity: {granularity!r}")
