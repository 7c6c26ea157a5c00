from __future__ import annotations

from datetime import date, timedelta

from src.attendance_trends.attendance_trends.academic.model import AcademicYear, ExcludedDay, Term
from src.attendance_trends.attendance_trends.academic.service import (
    SchoolCalendar,
    can_record_attendance,
    is_school_day,
    quick_date_range,
    recording_status_message,
    term_boundaries,
    term_for_date,
    terms_overlapping,
    validate_date_range,
)
from src.attendance_trends.attendance_trends.core.constants import ALL_SCOPE
from src.attendance_trends.attendance_trends.core.enums import Granularity


def test_weekends_are_never_school_days(academic_year):
    saturday = date(2025, 1, 11)
    sunday = date(2025, 1, 12)
    for excluded in ([], [ExcludedDay.on(date(2025, 1, 13))]):
        for year in (None, academic_year):
            assert not is_school_day(saturday, year, excluded)
            assert not is_school_day(sunday, year, excluded)


def test_weekday_without_calendar_is_school_day():
    assert is_school_day(date(2025, 1, 6), None, [])


def test_specific_excluded_date_is_not_school_day():
    holiday = ExcludedDay.on(date(2025, 1, 7), "Founders day")

    assert not is_school_day(date(2025, 1, 7), None, [holiday])
    assert is_school_day(date(2025, 1, 8), None, [holiday])


def test_recurring_excluded_weekday():
    # 5 = Friday when Sunday is 0
    fridays_off = ExcludedDay.every(5)

    assert not is_school_day(date(2025, 1, 10), None, [fridays_off])
    assert is_school_day(date(2025, 1, 9), None, [fridays_off])


def test_dates_between_terms_are_not_school_days(academic_year):
    assert is_school_day(date(2025, 1, 6), academic_year, [])
    assert not is_school_day(date(2025, 4, 14), academic_year, [])


def test_year_without_terms_uses_its_span():
    year = AcademicYear(year_id="y", name="y", start_date=date(2025, 1, 1), end_date=date(2025, 6, 30))

    assert is_school_day(date(2025, 3, 3), year, [])
    assert not is_school_day(date(2025, 7, 1), year, [])


def test_school_day_count_never_drops_as_range_grows():
    cal = SchoolCalendar(excluded_days=[ExcludedDay.on(date(2025, 1, 8))])
    start = date(2025, 1, 1)
    previous = 0
    for offset in range(40):
        count = cal.count_school_days(start, start + timedelta(days=offset))
        assert count >= previous
        previous = count


def test_term_boundaries(academic_year):
    assert term_boundaries(academic_year, "t2") == (date(2025, 5, 5), date(2025, 8, 1))
    assert term_boundaries(academic_year, ALL_SCOPE) == (date(2025, 1, 6), date(2025, 11, 28))
    assert term_boundaries(academic_year, None) == (date(2025, 1, 6), date(2025, 11, 28))
    assert term_boundaries(academic_year, "missing") is None
    assert term_boundaries(None, "t1") is None


def test_terms_overlapping_in_order():
    t1 = Term(term_id="t1", name="Term 1", start_date=date(2025, 1, 6), end_date=date(2025, 4, 4))
    t2 = Term(term_id="t2", name="Term 2", start_date=date(2025, 5, 5), end_date=date(2025, 8, 1))
    year = AcademicYear(
        year_id="y", name="y", start_date=date(2025, 1, 1), end_date=date(2025, 12, 31), terms=(t2, t1)
    )

    assert terms_overlapping(date(2025, 3, 1), date(2025, 5, 10), year) == [t1, t2]
    assert terms_overlapping(date(2025, 4, 10), date(2025, 4, 20), year) == []
    assert terms_overlapping(date(2025, 3, 1), date(2025, 5, 10), None) == []


def test_validate_date_range(academic_year):
    bad = validate_date_range(date(2025, 2, 1), date(2025, 1, 1), academic_year)
    assert bad.is_valid is False

    no_year = validate_date_range(date(2025, 1, 1), date(2025, 2, 1), None)
    assert no_year.is_valid and "No academic year selected" in no_year.warning

    outside = validate_date_range(date(2024, 12, 1), date(2025, 2, 1), academic_year)
    assert outside.is_valid
    assert "extends beyond the academic year (Jan 01, 2025 - Dec 31, 2025)" in outside.warning

    inside = validate_date_range(date(2025, 2, 1), date(2025, 3, 1), academic_year)
    assert inside.is_valid and inside.warning is None


def test_can_record_attendance_reasons(academic_year):
    today = date(2025, 4, 30)

    assert can_record_attendance(date(2025, 2, 3), academic_year, [], today=today) == (True, None)

    ok, reason = can_record_attendance(date(2025, 5, 6), academic_year, [], today=today)
    assert not ok and "future" in reason

    ok, reason = can_record_attendance(date(2025, 4, 14), academic_year, [], today=today)
    assert not ok and reason == "This date is outside of any academic term"

    ok, reason = can_record_attendance(date(2025, 1, 11), academic_year, [], today=today)
    assert not ok and "non-school day" in reason


def test_recording_status_message(academic_year):
    assert recording_status_message(date(2025, 1, 7), academic_year, [], today=date(2025, 1, 8)) == (
        "Recording attendance for Term 1"
    )
    assert recording_status_message(date(2025, 1, 7), None, [], today=date(2025, 1, 8)) == "Recording attendance"


def test_term_for_date(academic_year):
    assert term_for_date(academic_year, date(2025, 6, 2)).term_id == "t2"
    assert term_for_date(academic_year, date(2025, 4, 20)) is None


def test_quick_date_ranges(academic_year):
    wednesday = date(2025, 1, 8)

    assert quick_date_range("day", today=wednesday) == (wednesday, wednesday, Granularity.DAILY)
    assert quick_date_range("week", today=wednesday) == (date(2025, 1, 6), date(2025, 1, 12), Granularity.WEEKLY)
    assert quick_date_range("month", today=wednesday) == (date(2025, 1, 1), date(2025, 1, 31), Granularity.MONTHLY)
    assert quick_date_range("term", today=date(2025, 6, 2), academic_year=academic_year) == (
        date(2025, 5, 5),
        date(2025, 8, 1),
        Granularity.TERMLY,
    )
    # between terms falls back to the first term
    assert quick_date_range("term", today=date(2025, 4, 20), academic_year=academic_year)[0] == date(2025, 1, 6)
    assert quick_date_range("year", today=wednesday, academic_year=academic_year) == (
        date(2025, 1, 1),
        date(2025, 12, 31),
        Granularity.TERMLY,
    )
    assert quick_date_range("year", today=wednesday) is None
