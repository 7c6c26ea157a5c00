"""Boundary normalisation of raw attendance documents.

Everything downstream works on ``AttendanceRecord`` with a real ``date``; this
is the only place that reads date strings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import normalize_date
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, Pupil, SchoolClass

logger = logging.getLogger(__name__)

_STATUS_LOOKUP = {s.value.lower(): s for s in AttendanceStatus}


@dataclass(frozen=True)
class SkippedRow:
    row: Mapping
    reason: str


@dataclass(frozen=True)
class IngestResult:
    records: list[AttendanceRecord] = field(default_factory=list)
    skipped: list[SkippedRow] = field(default_factory=list)


def _first(raw: Mapping, *keys):
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def parse_status(value) -> Optional[AttendanceStatus]:
    if isinstance(value, AttendanceStatus):
        return value
    if not isinstance(value, str):
        return None
    return _STATUS_LOOKUP.get(value.strip().lower())


def record_from_raw(raw: Mapping) -> tuple[Optional[AttendanceRecord], Optional[str]]:
    pupil_id = _first(raw, "pupilId", "pupil_id")
    if not pupil_id:
        return None, "missing pupil id"

    day = normalize_date(_first(raw, "date", "attendance_date"))
    if day is None:
        return None, f"unreadable date {_first(raw, 'date', 'attendance_date')!r}"

    status = parse_status(_first(raw, "status"))
    if status is None:
        return None, f"unknown status {_first(raw, 'status')!r}"

    class_id = _first(raw, "classId", "class_id")
    record = AttendanceRecord(
        pupil_id=str(pupil_id),
        class_id=str(class_id) if class_id is not None else None,
        date=day,
        status=status,
    )
    return record, None


def normalize_records(rows: Iterable[Mapping], *, log_skipped: bool = True) -> IngestResult:
    """Convert raw rows, skipping (never raising on) malformed ones."""
    result = IngestResult()
    for raw in rows:
        record, reason = record_from_raw(raw)
        if record is None:
            result.skipped.append(SkippedRow(row=raw, reason=reason or "invalid"))
            if log_skipped:
                logger.warning("Skipping attendance row %r: %s", _first(raw, "id"), reason)
            continue
        result.records.append(record)

    if result.skipped:
        logger.info("Ingested %d attendance records, skipped %d", len(result.records), len(result.skipped))
    return result


def pupil_from_raw(raw: Mapping) -> Pupil:
    class_id = _first(raw, "classId", "class_id")
    return Pupil(
        pupil_id=str(_first(raw, "id", "pupil_id")),
        first_name=str(_first(raw, "firstName", "first_name") or ""),
        last_name=str(_first(raw, "lastName", "last_name") or ""),
        class_id=str(class_id) if class_id is not None else None,
        admission_number=_first(raw, "admissionNumber", "admission_number"),
    )


def class_from_raw(raw: Mapping) -> SchoolClass:
    return SchoolClass(
        class_id=str(_first(raw, "id", "class_id")),
        name=str(_first(raw, "name") or ""),
        code=_first(raw, "code"),
    )
