from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object (no storage access). ``grade_assigned`` is only
    meaningful for teachers and holds a Grade *name*.
    """

    user_id: str
    name: str
    email: str
    role: Role
    grade_assigned: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
