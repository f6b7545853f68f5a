from __future__ import annotations

import pytest

from eduscan.core.enums import Role
from eduscan.core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from eduscan.users.service import AuthService, UserService
from eduscan.users.store_repository import StoreSessionRepository, StoreUserRepository


@pytest.fixture
def auth(store):
    return AuthService(StoreUserRepository(store), StoreSessionRepository(store))


@pytest.fixture
def users(store):
    return UserService(StoreUserRepository(store))


def test_login_sets_and_logout_clears_session(auth):
    user = auth.login("teacher@school.com", Role.TEACHER)

    assert user.user_id == "teacher1"
    assert auth.current_user() == user

    auth.logout()
    assert auth.current_user() is None


def test_login_requires_matching_role(auth):
    with pytest.raises(AuthenticationError):
        auth.login("teacher@school.com", Role.ADMIN)


def test_save_teacher_create_and_edit(users, admin):
    created = users.save_teacher(acting_user=admin, name="Mary", email="mary@school.com", grade_assigned="Grade 5")
    assert created.user_id.startswith("T-")
    assert created.role == Role.TEACHER

    users.save_teacher(
        acting_user=admin, name="Mary", email="mary@school.com", grade_assigned="Grade 6", user_id=created.user_id
    )
    mary = [u for u in users.list_teachers() if u.user_id == created.user_id]
    assert len(mary) == 1
    assert mary[0].grade_assigned == "Grade 6"


def test_only_admin_manages_teachers(users, teacher):
    with pytest.raises(AuthorizationError):
        users.save_teacher(acting_user=teacher, name="X", email="x@x", grade_assigned=None)


def test_admin_account_cannot_be_deleted(users, admin):
    with pytest.raises(ValidationError):
        users.delete_user(acting_user=admin, user_id="admin1")

    users.delete_user(acting_user=admin, user_id="teacher1")
    assert users.list_teachers() == []
