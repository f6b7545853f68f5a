"""Example: drive the service layer directly (no Flask).

Controllers are thin; the rules live in the services.
"""

import importlib
from datetime import datetime

from eduscan.config import get_settings_module
from eduscan.container import build_container
from eduscan.core.enums import Role
from eduscan.store.backends import InMemoryDocumentBackend


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings, backend=InMemoryDocumentBackend())

    teacher = container.auth_service.login("teacher@school.com", Role.TEACHER)
    outcome = container.attendance_service.record_attendance("ST-2024-001", teacher, now=datetime(2026, 2, 2, 8, 30))
    print(outcome.student.name, outcome.status.value, outcome.marked_at)

    for row in container.report_service.student_rows(teacher):
        print(row.student.student_id, row.summary.percentage)


if __name__ == "__main__":
    main()
