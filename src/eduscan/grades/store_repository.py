from __future__ import annotations

from typing import Optional, Sequence

from ..store.document_store import GRADES, DocumentStore
from .model import Grade
from .repository import GradeRepository


def grade_from_doc(doc: dict) -> Grade:
    return Grade(grade_id=str(doc["id"]), name=doc["name"], subjects=tuple(doc.get("subjects") or ()))


def grade_to_doc(grade: Grade) -> dict:
    return {"id": grade.grade_id, "name": grade.name, "subjects": list(grade.subjects)}


class StoreGradeRepository(GradeRepository):
    """Reads go through the store's self-healing grades accessor."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def list_all(self) -> Sequence[Grade]:
        return [grade_from_doc(d) for d in self._store.list(GRADES)]

    def get_by_id(self, grade_id: str) -> Optional[Grade]:
        return next((g for g in self.list_all() if g.grade_id == grade_id), None)

    def save(self, grade: Grade) -> None:
        self._store.upsert_by_id(GRADES, grade_to_doc(grade))

    def delete_by_id(self, grade_id: str) -> None:
        self._store.delete_by_id(GRADES, grade_id)
