from __future__ import annotations

from datetime import date
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..core.constants import CSV_HEADER
from ..students.model import Student
from .aggregation import per_student_summary


def report_filename(today: date) -> str:
    return f"Attendance_Report_{today.isoformat()}.csv"


def render_summary_csv(students: Iterable[Student], attendance: Iterable[AttendanceRecord]) -> str:
    """One ", "-joined row per student.

    The format is fixed (comma-space, no quoting), so it is built by hand
    rather than with the csv module.
    """
    records = list(attendance)
    lines = [CSV_HEADER]
    for s in students:
        stats = per_student_summary(s.student_id, records)
        lines.append(
            ", ".join(
                str(v)
                for v in (s.student_id, s.name, s.grade, stats.total, stats.present, stats.absent, stats.late)
            )
        )
    return "\n".join(lines) + "\n"
