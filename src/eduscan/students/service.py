from __future__ import annotations

import logging
from typing import Optional

from ..access.policy import can_manage_grade, visible_students
from ..common.ids import new_id
from ..common.validators import require_non_empty
from ..core.constants import FALLBACK_GRADE_NAME
from ..core.enums import Role
from ..core.exceptions import AccessDenied, AuthorizationError
from ..grades.repository import GradeRepository
from ..grades.model import natural_key
from ..users.model import User
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: manage students, scoped to the acting user's grade."""

    def __init__(self, students: StudentRepository, grades: GradeRepository):
        self._students = students
        self._grades = grades

    def list_visible(self, acting_user: Optional[User], *, search: str = "") -> list[Student]:
        items = visible_students(acting_user, self._students.list_all())
        term = search.strip().lower()
        if not term:
            return items
        return [
            s
            for s in items
            if term in s.name.lower() or term in s.student_id.lower() or term in s.roll_no.lower()
        ]

    def get_visible(self, acting_user: Optional[User], student_id: str) -> Optional[Student]:
        return next((s for s in self.list_visible(acting_user) if s.student_id == student_id), None)

    def _default_grade(self) -> str:
        names = sorted((g.name for g in self._grades.list_all()), key=natural_key)
        return names[0] if names else FALLBACK_GRADE_NAME

    def save_student(
        self,
        *,
        acting_user: Optional[User],
        name: str,
        father_name: str = "",
        grade: str = "",
        section: str = "",
        roll_no: str = "",
        contact: str = "",
        student_id: Optional[str] = None,
    ) -> Student:
        if acting_user is None:
            raise AuthorizationError("Login required")

        name = require_non_empty(name, "Name")

        if acting_user.role == Role.TEACHER:
            if not acting_user.grade_assigned:
                raise AccessDenied(None, grade or "unassigned")
            # Teachers always file students under their own grade.
            grade = acting_user.grade_assigned
        else:
            # Free text is allowed; the grade does not have to exist.
            grade = (grade or "").strip() or self._default_grade()

        if student_id:
            existing = self._students.get_by_id(student_id)
            if existing and not can_manage_grade(acting_user, existing.grade):
                raise AccessDenied(acting_user.grade_assigned, existing.grade)

        if not can_manage_grade(acting_user, grade):
            raise AccessDenied(acting_user.grade_assigned, grade)

        student = Student(
            student_id=(student_id or "").strip() or new_id("ST"),
            name=name,
            father_name=(father_name or "").strip(),
            grade=grade,
            section=(section or "").strip(),
            roll_no=(roll_no or "").strip(),
            contact=(contact or "").strip(),
        )
        self._students.save(student)
        logger.info(f"Student {student.student_id} saved by {acting_user.user_id}")
        return student

    def delete_student(self, *, acting_user: Optional[User], student_id: str) -> None:
        student = self._students.get_by_id(student_id)
        if not student:
            return
        if not can_manage_grade(acting_user, student.grade):
            raise AccessDenied(acting_user.grade_assigned if acting_user else None, student.grade)
        self._students.delete_by_id(student_id)
