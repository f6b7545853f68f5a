from __future__ import annotations

import pytest

from eduscan.core.enums import Role
from eduscan.core.exceptions import AuthorizationError, ValidationError
from eduscan.grades.service import GradeService
from eduscan.grades.store_repository import StoreGradeRepository
from eduscan.students.store_repository import StoreStudentRepository
from eduscan.users.model import User
from eduscan.users.store_repository import StoreUserRepository


@pytest.fixture
def svc(store):
    return GradeService(StoreGradeRepository(store))


def test_grades_are_sorted_naturally(svc):
    assert svc.grade_names()[:3] == ["Grade 1", "Grade 2", "Grade 3"]
    assert svc.grade_names()[-1] == "Grade 10"


def test_save_grade_parses_subjects(svc, admin):
    grade = svc.save_grade(acting_user=admin, name="Grade 11", subjects="Physics, , Chemistry ")
    assert grade.subjects == ("Physics", "Chemistry")
    assert grade.grade_id.startswith("G-")
    assert "Grade 11" in svc.grade_names()


def test_duplicate_grade_name_rejected(svc, admin):
    with pytest.raises(ValidationError):
        svc.save_grade(acting_user=admin, name="Grade 3", subjects="Math")


def test_teacher_cannot_manage_grades(svc, teacher):
    with pytest.raises(AuthorizationError):
        svc.save_grade(acting_user=teacher, name="Grade 11", subjects="Math")
    with pytest.raises(AuthorizationError):
        svc.delete_grade(acting_user=teacher, grade_id="g1")


def test_delete_does_not_cascade_and_is_reported(svc, admin, store):
    svc.delete_grade(acting_user=admin, grade_id="g10")

    students = StoreStudentRepository(store).list_all()
    users = StoreUserRepository(store).list_all()
    assert [s.grade for s in students].count("Grade 10") == 2

    found = svc.find_dangling_references(students=students, users=users)
    assert {(d.kind, d.entity_id) for d in found} == {
        ("student", "ST-2024-001"),
        ("student", "ST-2024-002"),
        ("user", "teacher1"),
    }


def test_admin_without_grade_is_not_dangling(svc):
    admin = User(user_id="a", name="A", email="a@x", role=Role.ADMIN)
    assert svc.find_dangling_references(students=[], users=[admin]) == []
