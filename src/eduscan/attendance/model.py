from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus
from ..students.model import Student


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance on one day.

    (student_id, date) is the natural key; ``record_id`` is a surrogate.
    """

    record_id: str
    student_id: str
    date: date
    timestamp: datetime
    status: AttendanceStatus
    marked_by: str


@dataclass(frozen=True)
class AttendanceOutcome:
    """What the scanner screen shows after a successful mark."""

    student: Student
    status: AttendanceStatus
    marked_at: str
    record: AttendanceRecord


@dataclass(frozen=True)
class RosterRow:
    """List-mode row: a student and today's status, if any."""

    student: Student
    status: Optional[AttendanceStatus]
