from __future__ import annotations

from datetime import datetime

import pytest

from eduscan.container import build_container
from eduscan.core.enums import Role
from eduscan.main import create_app
from eduscan.config import testing as testing_settings
from eduscan.store.backends import InMemoryDocumentBackend
from eduscan.store.document_store import DocumentStore
from eduscan.users.model import User


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 15, 0)


@pytest.fixture
def admin() -> User:
    return User(user_id="admin1", name="Super Admin", email="admin@school.com", role=Role.ADMIN)


@pytest.fixture
def teacher() -> User:
    return User(
        user_id="teacher1",
        name="John Doe",
        email="teacher@school.com",
        role=Role.TEACHER,
        grade_assigned="Grade 10",
    )


@pytest.fixture
def backend() -> InMemoryDocumentBackend:
    return InMemoryDocumentBackend()


@pytest.fixture
def store(backend) -> DocumentStore:
    s = DocumentStore(backend)
    s.initialize()
    return s


@pytest.fixture
def container(backend):
    return build_container(settings=testing_settings, backend=backend)


@pytest.fixture
def client(container):
    app = create_app(settings_module="eduscan.config.testing", container=container)
    return app.test_client()
