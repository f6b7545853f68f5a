from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..access.policy import visible_attendance, visible_students
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_TRAILING_DAYS
from ..students.model import Student
from ..students.repository import StudentRepository
from ..users.model import User
from .aggregation import DailyTotals, DayPoint, StudentSummary, daily_totals, per_student_summary, trailing_window
from .export import render_summary_csv, report_filename


@dataclass(frozen=True)
class DashboardData:
    total_students: int
    today: DailyTotals
    window: list[DayPoint]


@dataclass(frozen=True)
class StudentReportRow:
    student: Student
    summary: StudentSummary


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str


class ReportService:
    """Dashboard and report views, scoped to what the acting user can see."""

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def _scoped(self, acting_user: Optional[User]):
        all_students = self._students.list_all()
        students = visible_students(acting_user, all_students)
        records = visible_attendance(acting_user, all_students, self._attendance.list_all())
        return students, records

    def dashboard(
        self, acting_user: Optional[User], *, today: date | None = None, days: int = DEFAULT_TRAILING_DAYS
    ) -> DashboardData:
        today = today or now_local().date()
        students, records = self._scoped(acting_user)
        return DashboardData(
            total_students=len(students),
            today=daily_totals(records, today),
            window=trailing_window(records, days=days, anchor=today),
        )

    def student_rows(self, acting_user: Optional[User]) -> list[StudentReportRow]:
        students, records = self._scoped(acting_user)
        return [StudentReportRow(student=s, summary=per_student_summary(s.student_id, records)) for s in students]

    def export_csv(self, acting_user: Optional[User], *, today: date | None = None) -> CsvExport:
        today = today or now_local().date()
        students, records = self._scoped(acting_user)
        return CsvExport(filename=report_filename(today), content=render_summary_csv(students, records))

    def snapshot(self, acting_user: Optional[User]) -> tuple[list[Student], list]:
        return self._scoped(acting_user)
