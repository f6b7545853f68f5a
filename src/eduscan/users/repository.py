from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def find_by_email_and_role(self, email: str, role: Role) -> Optional[User]:
        raise NotImplementedError

    def save(self, user: User) -> None:
        raise NotImplementedError

    def delete_by_id(self, user_id: str) -> None:
        raise NotImplementedError


class SessionRepository(Protocol):
    """The single current-session slot."""

    def get(self) -> Optional[User]:
        raise NotImplementedError

    def set(self, user: User) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError
