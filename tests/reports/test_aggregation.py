from __future__ import annotations

from datetime import date, datetime

from eduscan.attendance.model import AttendanceRecord
from eduscan.core.enums import AttendanceStatus
from eduscan.reports.aggregation import (
    DailyTotals,
    daily_totals,
    per_student_summary,
    percentage,
    trailing_window,
)

P, L, A = AttendanceStatus.PRESENT, AttendanceStatus.LATE, AttendanceStatus.ABSENT


def rec(student_id: str, day: date, status: AttendanceStatus) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=f"{student_id}-{day.isoformat()}",
        student_id=student_id,
        date=day,
        timestamp=datetime.combine(day, datetime.min.time()),
        status=status,
        marked_by="admin1",
    )


def test_per_student_summary():
    records = [
        rec("S1", date(2026, 2, 2), P),
        rec("S1", date(2026, 2, 3), P),
        rec("S1", date(2026, 2, 4), L),
        rec("S1", date(2026, 2, 5), A),
        rec("S2", date(2026, 2, 2), A),
    ]

    s = per_student_summary("S1", records)

    assert (s.total, s.present, s.absent, s.late, s.percentage) == (4, 2, 1, 1, 50)


def test_summary_without_records_is_zero():
    s = per_student_summary("S1", [])
    assert s.total == 0
    assert s.percentage == 0


def test_percentage_rounds_half_up():
    assert percentage(1, 3) == 33
    assert percentage(2, 3) == 67
    assert percentage(1, 8) == 13


def test_daily_totals():
    day = date(2026, 2, 2)
    records = [rec("S1", day, P), rec("S2", day, L), rec("S3", day, A), rec("S4", date(2026, 2, 1), P)]
    assert daily_totals(records, day) == DailyTotals(present=1, late=1, absent=1)


def test_trailing_window_is_ordered_and_keeps_empty_days():
    records = [rec("S1", date(2026, 2, 2), P), rec("S2", date(2026, 2, 2), A), rec("S1", date(2026, 1, 30), P)]

    window = trailing_window(records, days=5, anchor=date(2026, 2, 2))

    assert [p.date for p in window] == [
        date(2026, 1, 29),
        date(2026, 1, 30),
        date(2026, 1, 31),
        date(2026, 2, 1),
        date(2026, 2, 2),
    ]
    assert [(p.present_count, p.absent_count) for p in window] == [(0, 0), (1, 0), (0, 0), (0, 0), (1, 1)]
