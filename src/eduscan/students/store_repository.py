from __future__ import annotations

from typing import Optional, Sequence

from ..store.document_store import STUDENTS, DocumentStore
from .model import Student
from .repository import StudentRepository


def student_from_doc(doc: dict) -> Student:
    return Student(
        student_id=str(doc["id"]),
        name=doc.get("name", ""),
        father_name=doc.get("fatherName", ""),
        grade=doc.get("grade", ""),
        section=doc.get("section", ""),
        roll_no=doc.get("rollNo", ""),
        contact=doc.get("contact", ""),
    )


def student_to_doc(student: Student) -> dict:
    return {
        "id": student.student_id,
        "name": student.name,
        "fatherName": student.father_name,
        "grade": student.grade,
        "section": student.section,
        "rollNo": student.roll_no,
        "contact": student.contact,
    }


class StoreStudentRepository(StudentRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def list_all(self) -> Sequence[Student]:
        return [student_from_doc(d) for d in self._store.list(STUDENTS)]

    def get_by_id(self, student_id: str) -> Optional[Student]:
        # Exact match only: the id is the scan payload.
        return next((s for s in self.list_all() if s.student_id == student_id), None)

    def save(self, student: Student) -> None:
        self._store.upsert_by_id(STUDENTS, student_to_doc(student))

    def delete_by_id(self, student_id: str) -> None:
        self._store.delete_by_id(STUDENTS, student_id)
