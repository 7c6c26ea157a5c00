from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Trạng thái điểm danh của học sinh trong một ngày."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"
    EXCUSED = "Excused"


class Granularity(str, Enum):
    """Độ chi tiết của chu kỳ báo cáo."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    TERMLY = "termly"


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class ExcludedDayType(str, Enum):
    SPECIFIC_DATE = "specific_date"
    RECURRING_DAY_OF_WEEK = "recurring_day_of_week"
