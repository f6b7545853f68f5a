from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Grade


class GradeRepository(Protocol):
    def list_all(self) -> Sequence[Grade]:
        raise NotImplementedError

    def get_by_id(self, grade_id: str) -> Optional[Grade]:
        raise NotImplementedError

    def save(self, grade: Grade) -> None:
        raise NotImplementedError

    def delete_by_id(self, grade_id: str) -> None:
        raise NotImplementedError
