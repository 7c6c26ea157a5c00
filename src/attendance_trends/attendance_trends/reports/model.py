from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord, Pupil
from ..core.enums import AttendanceStatus, Trend
from ..periods.model import Period


@dataclass(frozen=True)
class StatusCounts:
    present: int = 0
    absent: int = 0
    late: int = 0
    excused: int = 0

    @property
    def total(self) -> int:
        return self.present + self.absent + self.late + self.excused

    @property
    def attended(self) -> int:
        return self.present + self.late

    @classmethod
    def from_records(cls, records: Iterable[AttendanceRecord]) -> "StatusCounts":
        tally = {s: 0 for s in AttendanceStatus}
        for r in records:
            if r.status in tally:
                tally[r.status] += 1
        return cls(
            present=tally[AttendanceStatus.PRESENT],
            absent=tally[AttendanceStatus.ABSENT],
            late=tally[AttendanceStatus.LATE],
            excused=tally[AttendanceStatus.EXCUSED],
        )


@dataclass(frozen=True)
class PeriodStats:
    """Read-model phục vụ báo cáo xu hướng: thống kê của một chu kỳ."""

    period: Period
    school_days: int
    present: int
    absent: int
    late: int
    excused: int
    not_recorded: int
    attendance_rate: float
    total_records: int = 0
    trend: Trend = Trend.STABLE

    def with_trend(self, trend: Trend) -> "PeriodStats":
        return replace(self, trend=trend)


@dataclass(frozen=True)
class PupilRef:
    pupil_id: str
    name: str
    admission_number: Optional[str] = None

    @classmethod
    def of(cls, pupil: Pupil) -> "PupilRef":
        return cls(pupil_id=pupil.pupil_id, name=pupil.display_name, admission_number=pupil.admission_number)


@dataclass(frozen=True)
class PupilTrend:
    """One pupil's statistics across a shared period sequence."""

    pupil: PupilRef
    periods: list[PeriodStats] = field(default_factory=list)


@dataclass(frozen=True)
class ClassSnapshot:
    """Read-model: số liệu điểm danh của một lớp trong một ngày."""

    class_id: str
    class_name: str
    class_code: Optional[str]
    total_pupils: int
    present: int
    absent: int
    late: int
    excused: int
    not_recorded: int
    attendance_rate: float
    pupils: dict[str, list[PupilRef]] = field(default_factory=dict)
