from __future__ import annotations

from typing import Iterable, Optional

from ..core.constants import TREND_THRESHOLD
from ..core.enums import Trend
from .model import PeriodStats


def classify_trend(rate: float, previous_rate: Optional[float]) -> Trend:
    """Direction of ``rate`` against the previous period; first period is stable."""
    if previous_rate is None:
        return Trend.STABLE
    delta = rate - previous_rate
    if delta > TREND_THRESHOLD:
        return Trend.UP
    if delta < -TREND_THRESHOLD:
        return Trend.DOWN
    return Trend.STABLE


def apply_trends(stats: Iterable[PeriodStats]) -> list[PeriodStats]:
    """Tag each entry against its predecessor; inputs are not modified."""
    out: list[PeriodStats] = []
    previous: Optional[float] = None
    for s in stats:
        out.append(s.with_trend(classify_trend(s.attendance_rate, previous)))
        previous = s.attendance_rate
    return out
