from __future__ import annotations

from typing import Iterable, Optional

from ..common.ids import new_id
from ..common.validators import require_non_empty, split_subjects
from ..core.exceptions import AuthorizationError, ValidationError
from ..students.model import Student
from ..users.model import User
from .model import DataInconsistency, Grade, GradeRef, natural_key
from .repository import GradeRepository


class GradeService:
    """Use case: manage grades (admin).

    Deleting a grade never touches the students or teachers that name it.
    """

    def __init__(self, grades: GradeRepository):
        self._grades = grades

    def list_grades(self) -> list[Grade]:
        return sorted(self._grades.list_all(), key=lambda g: natural_key(g.name))

    def grade_names(self) -> list[str]:
        return [g.name for g in self.list_grades()]

    def save_grade(
        self,
        *,
        acting_user: User,
        name: str,
        subjects: str | Iterable[str],
        grade_id: Optional[str] = None,
    ) -> Grade:
        if not acting_user.is_admin:
            raise AuthorizationError("Only administrators can manage grades")

        name = require_non_empty(name, "Grade name")
        for g in self._grades.list_all():
            if g.name == name and g.grade_id != grade_id:
                raise ValidationError(f"Grade {name} already exists")

        grade = Grade(grade_id=grade_id or new_id("G"), name=name, subjects=tuple(split_subjects(subjects)))
        self._grades.save(grade)
        return grade

    def delete_grade(self, *, acting_user: User, grade_id: str) -> None:
        if not acting_user.is_admin:
            raise AuthorizationError("Only administrators can manage grades")
        self._grades.delete_by_id(grade_id)

    def find_dangling_references(
        self, *, students: Iterable[Student], users: Iterable[User]
    ) -> list[DataInconsistency]:
        """Report (never fix) references to grade names that no longer exist."""
        by_name = {g.name: g for g in self._grades.list_all()}
        found: list[DataInconsistency] = []

        for s in students:
            if GradeRef(s.grade).resolve(by_name) is None:
                found.append(DataInconsistency(kind="student", entity_id=s.student_id, grade_name=s.grade))

        for u in users:
            if u.grade_assigned and GradeRef(u.grade_assigned).resolve(by_name) is None:
                found.append(DataInconsistency(kind="user", entity_id=u.user_id, grade_name=u.grade_assigned))

        return found
