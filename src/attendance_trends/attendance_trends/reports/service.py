from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..academic.model import AcademicYear
from ..academic.service import validate_date_range
from ..attendance.repository import AttendanceRepository, CalendarRepository, RosterRepository
from ..core.constants import ALL_SCOPE
from ..core.enums import Granularity
from . import export
from .assemblers import aggregate_trend_report, daily_school_snapshot, pupil_matrix_report, pupil_trend_report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportData:
    columns: list[str]
    rows: list[dict]
    items: list = field(default_factory=list)
    warning: Optional[str] = None


class AttendanceTrendService:
    """Fetches collections from the host repositories and runs the assemblers."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        roster: RosterRepository,
        calendar: CalendarRepository,
        *,
        default_granularity: Granularity = Granularity.DAILY,
    ):
        self._attendance = attendance
        self._roster = roster
        self._calendar = calendar
        self._default_granularity = default_granularity

    def _academic_year(self, year_id: Optional[str]) -> Optional[AcademicYear]:
        if year_id:
            return self._calendar.get_academic_year(year_id)
        return self._calendar.get_active_academic_year()

    def build_trend_report(
        self,
        *,
        start: date,
        end: date,
        granularity: Optional[Granularity | str] = None,
        year_id: Optional[str] = None,
        class_id: Optional[str] = None,
        pupil_id: Optional[str] = None,
    ) -> ReportData:
        year = self._academic_year(year_id)
        check = validate_date_range(start, end, year)
        if not check.is_valid:
            return ReportData(columns=export.TREND_COLUMNS, rows=[], warning=check.warning)

        records = self._attendance.get_records(start_date=start, end_date=end)
        pupils = self._roster.list_pupils() if class_id and class_id != ALL_SCOPE else None
        stats = aggregate_trend_report(
            start,
            end,
            granularity or self._default_granularity,
            records,
            academic_year=year,
            excluded_days=self._calendar.list_excluded_days(),
            class_id=class_id,
            pupil_id=pupil_id,
            pupils=pupils,
        )
        return ReportData(columns=export.TREND_COLUMNS, rows=export.trend_rows(stats), items=stats, warning=check.warning)

    def build_class_matrix_report(
        self,
        *,
        class_id: str,
        start: date,
        end: date,
        granularity: Optional[Granularity | str] = None,
        year_id: Optional[str] = None,
    ) -> ReportData:
        year = self._academic_year(year_id)
        check = validate_date_range(start, end, year)
        if not check.is_valid:
            return ReportData(columns=export.PUPIL_TREND_COLUMNS, rows=[], warning=check.warning)

        matrix = pupil_matrix_report(
            class_id,
            start,
            end,
            granularity or self._default_granularity,
            self._attendance.get_records(start_date=start, end_date=end),
            self._roster.list_pupils(),
            academic_year=year,
            excluded_days=self._calendar.list_excluded_days(),
        )
        return ReportData(
            columns=export.PUPIL_TREND_COLUMNS,
            rows=export.matrix_rows(matrix),
            items=matrix,
            warning=check.warning,
        )

    def build_pupil_trend_report(
        self,
        *,
        pupil_id: str,
        start: date,
        end: date,
        granularity: Optional[Granularity | str] = None,
        year_id: Optional[str] = None,
        term_id: Optional[str] = None,
    ) -> ReportData:
        year = self._academic_year(year_id)
        check = validate_date_range(start, end, year)
        pupil = next((p for p in self._roster.list_pupils() if p.pupil_id == pupil_id), None)
        if not check.is_valid or pupil is None:
            if pupil is None:
                logger.info("Pupil %r not found for trend report", pupil_id)
            return ReportData(columns=export.PUPIL_TREND_COLUMNS, rows=[], warning=check.warning)

        trend = pupil_trend_report(
            pupil,
            start,
            end,
            granularity or self._default_granularity,
            self._attendance.get_records(start_date=start, end_date=end),
            academic_year=year,
            excluded_days=self._calendar.list_excluded_days(),
            term_id=term_id,
        )
        return ReportData(
            columns=export.PUPIL_TREND_COLUMNS,
            rows=export.pupil_trend_rows(trend),
            items=[trend],
            warning=check.warning,
        )

    def build_daily_snapshot(self, *, day: date) -> ReportData:
        snapshots = daily_school_snapshot(
            day,
            self._attendance.get_records(start_date=day, end_date=day),
            self._roster.list_classes(),
            self._roster.list_pupils(),
        )
        return ReportData(columns=export.SNAPSHOT_COLUMNS, rows=export.snapshot_rows(snapshots), items=snapshots)
