from __future__ import annotations

from datetime import date

import pytest

from src.attendance_trends.attendance_trends.academic.model import AcademicYear, Term


@pytest.fixture
def academic_year() -> AcademicYear:
    """2025 school year: three terms with holidays in between."""
    return AcademicYear(
        year_id="2025",
        name="2025",
        start_date=date(2025, 1, 1),
        end_date=date(2025, 12, 31),
        terms=(
            Term(term_id="t1", name="Term 1", start_date=date(2025, 1, 6), end_date=date(2025, 4, 4)),
            Term(term_id="t2", name="Term 2", start_date=date(2025, 5, 5), end_date=date(2025, 8, 1)),
            Term(term_id="t3", name="Term 3", start_date=date(2025, 9, 1), end_date=date(2025, 11, 28)),
        ),
        is_active=True,
    )
