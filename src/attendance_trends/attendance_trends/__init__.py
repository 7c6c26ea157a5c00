"""Attendance Trends package.

Academic-calendar-aware attendance aggregation, organized by feature modules
(calendar, periods, attendance, reports) with a thin service layer on top.
"""
