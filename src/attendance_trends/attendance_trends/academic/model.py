from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import ExcludedDayType


@dataclass(frozen=True)
class Term:
    """Thực thể miền (domain): Học kỳ, khoảng ngày tính cả hai đầu."""

    term_id: str
    name: str
    start_date: date
    end_date: date
    is_current: bool = False

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def overlaps(self, start: date, end: date) -> bool:
        return self.start_date <= end and self.end_date >= start


@dataclass(frozen=True)
class AcademicYear:
    """Thực thể miền (domain): Năm học gồm các học kỳ theo thứ tự."""

    year_id: str
    name: str
    start_date: date
    end_date: date
    terms: tuple[Term, ...] = field(default_factory=tuple)
    is_active: bool = False
    is_locked: bool = False

    def find_term(self, term_id: str) -> Optional[Term]:
        for term in self.terms:
            if term.term_id == term_id:
                return term
        return None


@dataclass(frozen=True)
class ExcludedDay:
    """Ngày nghỉ: một ngày cụ thể hoặc một thứ lặp lại hàng tuần.

    ``day_of_week`` uses 0 = Sunday ... 6 = Saturday.
    """

    excluded_id: str
    kind: ExcludedDayType = ExcludedDayType.SPECIFIC_DATE
    day: Optional[date] = None
    day_of_week: Optional[int] = None
    description: Optional[str] = None

    @classmethod
    def on(cls, day: date, description: Optional[str] = None) -> "ExcludedDay":
        return cls(excluded_id=day.isoformat(), day=day, description=description)

    @classmethod
    def every(cls, day_of_week: int, description: Optional[str] = None) -> "ExcludedDay":
        return cls(
            excluded_id=f"dow-{day_of_week}",
            kind=ExcludedDayType.RECURRING_DAY_OF_WEEK,
            day_of_week=day_of_week,
            description=description,
        )


@dataclass(frozen=True)
class RangeValidation:
    is_valid: bool
    warning: Optional[str] = None
