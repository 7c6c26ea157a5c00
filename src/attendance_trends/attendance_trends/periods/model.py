from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.constants import ISO_DATE_FORMAT


@dataclass(frozen=True)
class Period:
    """Khoảng thời gian tổng hợp (tính cả hai đầu), sinh ra theo từng báo cáo."""

    start: date
    end: date
    label: str

    @property
    def iso_date(self) -> str:
        return self.start.strftime(ISO_DATE_FORMAT)

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end
