from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.ids import new_id
from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .model import User
from .repository import SessionRepository, UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: log in / out and read the current session.

    There is no password check: any stored email+role pair logs in.
    """

    def __init__(self, users: UserRepository, sessions: SessionRepository):
        self._users = users
        self._sessions = sessions

    def login(self, email: str, role: Role) -> User:
        email = require_non_empty(email, "Email")
        user = self._users.find_by_email_and_role(email, role)
        if not user:
            raise AuthenticationError("Invalid credentials or role")

        self._sessions.set(user)
        logger.info(f"User {user.user_id} logged in as {user.role.value}")
        return user

    def logout(self) -> None:
        self._sessions.clear()

    def current_user(self) -> Optional[User]:
        return self._sessions.get()

    def list_login_choices(self) -> Sequence[User]:
        return self._users.list_all()


class UserService:
    """Use case: manage teacher accounts (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_teachers(self) -> list[User]:
        return [u for u in self._users.list_all() if u.role == Role.TEACHER]

    def save_teacher(
        self,
        *,
        acting_user: User,
        name: str,
        email: str,
        grade_assigned: Optional[str],
        user_id: Optional[str] = None,
    ) -> User:
        if not acting_user.is_admin:
            raise AuthorizationError("Only administrators can manage teachers")

        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email")

        if user_id:
            existing = self._users.get_by_id(user_id)
            if existing and existing.role == Role.ADMIN:
                raise ValidationError("Cannot turn an administrator into a teacher")

        teacher = User(
            user_id=user_id or new_id("T"),
            name=name,
            email=email,
            role=Role.TEACHER,
            grade_assigned=(grade_assigned or "").strip() or None,
        )
        self._users.save(teacher)
        return teacher

    def delete_user(self, *, acting_user: User, user_id: str) -> None:
        if not acting_user.is_admin:
            raise AuthorizationError("Only administrators can delete users")

        user = self._users.get_by_id(user_id)
        if user and user.role == Role.ADMIN:
            raise ValidationError("Cannot delete an administrator account")

        self._users.delete_by_id(user_id)
