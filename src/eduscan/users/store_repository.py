from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..store.document_store import USERS, DocumentStore
from .model import User
from .repository import SessionRepository, UserRepository


def user_from_doc(doc: dict) -> User:
    return User(
        user_id=str(doc["id"]),
        name=doc.get("name", ""),
        email=doc.get("email", ""),
        role=Role(doc["role"]),
        grade_assigned=doc.get("gradeAssigned") or None,
    )


def user_to_doc(user: User) -> dict:
    doc = {"id": user.user_id, "name": user.name, "email": user.email, "role": user.role.value}
    if user.grade_assigned:
        doc["gradeAssigned"] = user.grade_assigned
    return doc


class StoreUserRepository(UserRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def list_all(self) -> Sequence[User]:
        return [user_from_doc(d) for d in self._store.list(USERS)]

    def get_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self.list_all() if u.user_id == user_id), None)

    def find_by_email_and_role(self, email: str, role: Role) -> Optional[User]:
        return next((u for u in self.list_all() if u.email == email and u.role == role), None)

    def save(self, user: User) -> None:
        self._store.upsert_by_id(USERS, user_to_doc(user))

    def delete_by_id(self, user_id: str) -> None:
        self._store.delete_by_id(USERS, user_id)


class StoreSessionRepository(SessionRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def get(self) -> Optional[User]:
        doc = self._store.get_session()
        return user_from_doc(doc) if doc else None

    def set(self, user: User) -> None:
        self._store.set_session(user_to_doc(user))

    def clear(self) -> None:
        self._store.clear_session()
