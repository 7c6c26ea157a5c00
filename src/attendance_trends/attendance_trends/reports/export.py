"""Row shaping for downstream renderers and CSV/Excel writers.

Column order and one-decimal percentages are fixed here; turning rows into
bytes is the caller's job.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import pandas as pd

from .model import ClassSnapshot, PeriodStats, PupilTrend

TREND_COLUMNS = [
    "Period",
    "Date",
    "School Days",
    "Present",
    "Absent",
    "Late",
    "Excused",
    "Not Recorded",
    "Attendance Rate %",
]
PUPIL_TREND_COLUMNS = ["Pupil Name", "Admission Number", *TREND_COLUMNS]
SNAPSHOT_COLUMNS = [
    "Class",
    "Code",
    "Total Pupils",
    "Present",
    "Absent",
    "Late",
    "Excused",
    "Not Recorded",
    "Attendance Rate %",
]


def format_rate(rate: float) -> str:
    return f"{rate:.1f}"


def _trend_row(s: PeriodStats) -> dict:
    return {
        "Period": s.period.label,
        "Date": s.period.iso_date,
        "School Days": s.school_days,
        "Present": s.present,
        "Absent": s.absent,
        "Late": s.late,
        "Excused": s.excused,
        "Not Recorded": s.not_recorded,
        "Attendance Rate %": format_rate(s.attendance_rate),
    }


def trend_rows(stats: Iterable[PeriodStats]) -> list[dict]:
    return [_trend_row(s) for s in stats]


def matrix_rows(matrix: Iterable[PupilTrend]) -> list[dict]:
    rows = []
    for entry in matrix:
        for s in entry.periods:
            rows.append(
                {
                    "Pupil Name": entry.pupil.name,
                    "Admission Number": entry.pupil.admission_number or "",
                    **_trend_row(s),
                }
            )
    return rows


def pupil_trend_rows(trend: PupilTrend) -> list[dict]:
    return matrix_rows([trend])


def snapshot_rows(snapshots: Iterable[ClassSnapshot]) -> list[dict]:
    return [
        {
            "Class": s.class_name,
            "Code": s.class_code or "",
            "Total Pupils": s.total_pupils,
            "Present": s.present,
            "Absent": s.absent,
            "Late": s.late,
            "Excused": s.excused,
            "Not Recorded": s.not_recorded,
            "Attendance Rate %": format_rate(s.attendance_rate),
        }
        for s in snapshots
    ]


def to_dataframe(rows: Sequence[dict], columns: Sequence[str] = TREND_COLUMNS) -> pd.DataFrame:
    """Rows as a DataFrame with a fixed column order (empty frame keeps headers)."""
    return pd.DataFrame(list(rows), columns=list(columns))
