from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from .attendance.ingest import IngestResult, normalize_records
from .attendance.repository import AttendanceRepository, CalendarRepository, RosterRepository
from .common.validators import require_granularity
from .config import load_settings
from .reports.service import AttendanceTrendService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    roster_repo: RosterRepository
    calendar_repo: CalendarRepository

    trend_service: AttendanceTrendService
    data_quality_warnings: bool

    def ingest_records(self, rows: Iterable[Mapping]) -> IngestResult:
        return normalize_records(rows, log_skipped=self.data_quality_warnings)


def build_container(
    *,
    attendance_repo: AttendanceRepository,
    roster_repo: RosterRepository,
    calendar_repo: CalendarRepository,
    settings=None,
) -> Container:
    settings = settings or load_settings()
    granularity = require_granularity(getattr(settings, "DEFAULT_GRANULARITY", "daily"))

    trend_service = AttendanceTrendService(
        attendance_repo,
        roster_repo,
        calendar_repo,
        default_granularity=granularity,
    )

    return Container(
        attendance_repo=attendance_repo,
        roster_repo=roster_repo,
        calendar_repo=calendar_repo,
        trend_service=trend_service,
        data_quality_warnings=bool(getattr(settings, "DATA_QUALITY_WARNINGS", True)),
    )
