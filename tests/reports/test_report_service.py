from __future__ import annotations

from datetime import date, datetime

from eduscan.attendance.service import AttendanceService
from eduscan.attendance.store_repository import StoreAttendanceRepository
from eduscan.core.enums import AttendanceStatus
from eduscan.reports.service import ReportService
from eduscan.students.store_repository import StoreStudentRepository


def build(store):
    attendance = StoreAttendanceRepository(store)
    students = StoreStudentRepository(store)
    return AttendanceService(attendance, students), ReportService(attendance, students)


def test_dashboard_is_scoped_to_teacher_grade(store, admin, teacher):
    marking, reports = build(store)
    day = datetime(2026, 2, 2, 8, 30)
    marking.record_attendance("ST-2024-001", admin, now=day)
    marking.record_attendance("ST-2024-002", admin, now=day.replace(hour=9, minute=15))
    marking.mark_manual("ST-2024-003", AttendanceStatus.ABSENT, admin, now=day)

    admin_view = reports.dashboard(admin, today=day.date())
    teacher_view = reports.dashboard(teacher, today=day.date())

    assert admin_view.total_students == 3
    assert (admin_view.today.present, admin_view.today.late, admin_view.today.absent) == (1, 1, 1)
    assert teacher_view.total_students == 2
    assert (teacher_view.today.present, teacher_view.today.late, teacher_view.today.absent) == (1, 1, 0)
    assert len(teacher_view.window) == 5
    assert teacher_view.window[-1].date == day.date()


def test_csv_export_format(store, admin):
    marking, reports = build(store)
    marking.record_attendance("ST-2024-001", admin, now=datetime(2026, 2, 2, 8, 0))
    marking.record_attendance("ST-2024-001", admin, now=datetime(2026, 2, 3, 9, 30))

    export = reports.export_csv(admin, today=date(2026, 2, 3))

    assert export.filename == "Attendance_Report_2026-02-03.csv"
    lines = export.content.splitlines()
    assert lines[0] == "Student ID, Name, Grade, Total Days, Present, Absent, Late"
    assert lines[1] == "ST-2024-001, Alice Smith, Grade 10, 2, 1, 0, 1"
    assert lines[3] == "ST-2024-003, Eva Green, Grade 9, 0, 0, 0, 0"
    assert len(lines) == 4


def test_student_rows_for_teacher(store, teacher):
    _, reports = build(store)
    rows = reports.student_rows(teacher)
    assert [r.student.student_id for r in rows] == ["ST-2024-001", "ST-2024-002"]
    assert all(r.summary.percentage == 0 for r in rows)
