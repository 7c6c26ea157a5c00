from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi điểm danh của một học sinh trong một ngày.

    No record for a pupil/date pair means "not recorded", which is not the
    same thing as ``AttendanceStatus.ABSENT``.
    """

    pupil_id: str
    class_id: Optional[str]
    date: date
    status: AttendanceStatus


@dataclass(frozen=True)
class SchoolClass:
    class_id: str
    name: str
    code: Optional[str] = None


@dataclass(frozen=True)
class Pupil:
    pupil_id: str
    first_name: str
    last_name: str
    class_id: Optional[str] = None
    admission_number: Optional[str] = None

    @property
    def display_name(self) -> str:
        parts = [p[:1].upper() + p[1:].lower() for p in (self.first_name or "", self.last_name or "") if p]
        return " ".join(parts)
