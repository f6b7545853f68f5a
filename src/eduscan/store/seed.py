"""Default documents written on first run."""

from __future__ import annotations

from ..core.constants import DEFAULT_GRADE_COUNT, DEFAULT_SUBJECTS


def default_grades() -> list[dict]:
    return [
        {"id": f"g{i}", "name": f"Grade {i}", "subjects": list(DEFAULT_SUBJECTS)}
        for i in range(1, DEFAULT_GRADE_COUNT + 1)
    ]


def default_users() -> list[dict]:
    return [
        {"id": "admin1", "name": "Super Admin", "email": "admin@school.com", "role": "ADMIN"},
        {
            "id": "teacher1",
            "name": "John Doe",
            "email": "teacher@school.com",
            "role": "TEACHER",
            "gradeAssigned": "Grade 10",
        },
    ]


def default_students() -> list[dict]:
    return [
        {
            "id": "ST-2024-001",
            "name": "Alice Smith",
            "fatherName": "Bob Smith",
            "grade": "Grade 10",
            "section": "A",
            "rollNo": "101",
            "contact": "555-0101",
        },
        {
            "id": "ST-2024-002",
            "name": "Charlie Brown",
            "fatherName": "David Brown",
            "grade": "Grade 10",
            "section": "A",
            "rollNo": "102",
            "contact": "555-0102",
        },
        {
            "id": "ST-2024-003",
            "name": "Eva Green",
            "fatherName": "Frank Green",
            "grade": "Grade 9",
            "section": "B",
            "rollNo": "201",
            "contact": "555-0103",
        },
    ]
