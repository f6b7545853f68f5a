"""Who may see and mark whom.

Pure functions of the acting user; every mutation entry point goes through
these checks.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..core.enums import Role
from ..core.exceptions import AccessDenied
from ..students.model import Student
from ..users.model import User


def can_manage_grade(user: Optional[User], grade_name: str) -> bool:
    if user is None:
        return False
    if user.role == Role.ADMIN:
        return True
    return user.role == Role.TEACHER and user.grade_assigned is not None and user.grade_assigned == grade_name


def visible_students(user: Optional[User], students: Iterable[Student]) -> list[Student]:
    students = list(students)
    if user is None:
        return []
    if user.role == Role.ADMIN:
        return students
    if not user.grade_assigned:
        return []
    return [s for s in students if s.grade == user.grade_assigned]


def assert_can_mark(user: Optional[User], student: Student) -> None:
    # No session: system marking, unrestricted.
    if user is None or user.role == Role.ADMIN:
        return
    if student.grade != user.grade_assigned:
        raise AccessDenied(user.grade_assigned, student.grade)


def visible_attendance(
    user: Optional[User], students: Iterable[Student], records: Iterable[AttendanceRecord]
) -> list[AttendanceRecord]:
    ids = {s.student_id for s in visible_students(user, students)}
    return [r for r in records if r.student_id in ids]
