from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..academic.model import AcademicYear, ExcludedDay
from .model import AttendanceRecord, Pupil, SchoolClass


class AttendanceRepository(Protocol):
    def get_records(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError


class RosterRepository(Protocol):
    def list_classes(self) -> Sequence[SchoolClass]:
        raise NotImplementedError

    def list_pupils(self) -> Sequence[Pupil]:
        raise NotImplementedError


class CalendarRepository(Protocol):
    def get_academic_year(self, year_id: str) -> Optional[AcademicYear]:
        raise NotImplementedError

    def get_active_academic_year(self) -> Optional[AcademicYear]:
        raise NotImplementedError

    def list_excluded_days(self) -> Sequence[ExcludedDay]:
        raise NotImplementedError
