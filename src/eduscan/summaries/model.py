from __future__ import annotations

from dataclasses import dataclass

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus
from ..students.model import Student


@dataclass(frozen=True)
class AttendanceSnapshot:
    """Read-only copy of the data handed to a summarizer."""

    students: tuple[Student, ...]
    records: tuple[AttendanceRecord, ...]

    def student_lines(self) -> list[str]:
        lines = []
        for s in self.students:
            mine = [r for r in self.records if r.student_id == s.student_id]
            present = sum(1 for r in mine if r.status == AttendanceStatus.PRESENT)
            absent = sum(1 for r in mine if r.status == AttendanceStatus.ABSENT)
            late = sum(1 for r in mine if r.status == AttendanceStatus.LATE)
            lines.append(f"{s.name} ({s.grade}): Present {present}, Absent {absent}, Late {late}")
        return lines
