from __future__ import annotations

from dataclasses import dataclass

from ..grades.model import GradeRef


@dataclass(frozen=True)
class Student:
    """Domain entity: Student.

    ``student_id`` is also the QR payload printed on the ID card.
    """

    student_id: str
    name: str
    father_name: str
    grade: str
    section: str = ""
    roll_no: str = ""
    contact: str = ""

    @property
    def grade_ref(self) -> GradeRef:
        return GradeRef(self.grade)
