from __future__ import annotations

from datetime import date

from src.attendance_trends.attendance_trends.core.constants import TREND_THRESHOLD, WEEK_STARTS_ON
from src.attendance_trends.attendance_trends.core.enums import Trend
from src.attendance_trends.attendance_trends.periods.model import Period
from src.attendance_trends.attendance_trends.reports.model import PeriodStats
from src.attendance_trends.attendance_trends.reports.trend import apply_trends, classify_trend


def _stats(month: int, rate: float) -> PeriodStats:
    period = Period(start=date(2025, month, 1), end=date(2025, month, 28), label=f"m{month}")
    return PeriodStats(
        period=period,
        school_days=20,
        present=0,
        absent=0,
        late=0,
        excused=0,
        not_recorded=0,
        attendance_rate=rate,
    )


def test_business_constants():
    assert TREND_THRESHOLD == 2
    assert WEEK_STARTS_ON == 0  # Monday


def test_classify_trend_threshold():
    assert classify_trend(95.0, 90.0) == Trend.UP
    assert classify_trend(91.5, 90.0) == Trend.STABLE
    assert classify_trend(92.0, 90.0) == Trend.STABLE
    assert classify_trend(87.5, 90.0) == Trend.DOWN
    assert classify_trend(50.0, None) == Trend.STABLE


def test_consecutive_months():
    tagged = apply_trends([_stats(1, 90.0), _stats(2, 95.0)])
    assert [s.trend for s in tagged] == [Trend.STABLE, Trend.UP]

    tagged = apply_trends([_stats(1, 90.0), _stats(2, 91.5)])
    assert [s.trend for s in tagged] == [Trend.STABLE, Trend.STABLE]


def test_first_period_is_stable_and_inputs_untouched():
    original = [_stats(1, 10.0), _stats(2, 90.0), _stats(3, 40.0)]
    original[0] = original[0].with_trend(Trend.UP)

    tagged = apply_trends(original)

    assert [s.trend for s in tagged] == [Trend.STABLE, Trend.UP, Trend.DOWN]
    assert original[0].trend == Trend.UP
