from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class Grade:
    grade_id: str
    name: str
    subjects: tuple[str, ...] = ()


@dataclass(frozen=True)
class GradeRef:
    """Soft reference to a Grade by name.

    Students and teachers hold grade names, not ids. A ref is resolved at read
    time and may dangle after its grade is deleted; that is tolerated.
    """

    name: str

    def resolve(self, grades_by_name: Mapping[str, Grade]) -> Optional[Grade]:
        return grades_by_name.get(self.name)


@dataclass(frozen=True)
class DataInconsistency:
    """A student or teacher pointing at a grade name that no longer exists."""

    kind: str
    entity_id: str
    grade_name: str


def natural_key(name: str) -> list:
    """Sort key so that "Grade 2" comes before "Grade 10"."""
    return [int(part) if part.isdigit() else part.lower() for part in re.split(r"(\d+)", name)]
