from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..access.policy import assert_can_mark, can_manage_grade
from ..common.datetime_utils import local_time_str, now_local
from ..common.ids import new_id
from ..core.constants import SYSTEM_MARKER
from ..core.enums import AttendanceStatus
from ..core.exceptions import AccessDenied, UnknownStudent, ValidationError
from ..students.model import Student
from ..students.repository import StudentRepository
from ..users.model import User
from .factory import AttendanceStrategyFactory
from .model import AttendanceOutcome, AttendanceRecord, RosterRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
    ):
        self._attendance = attendance
        self._students = students
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def _resolve_student(self, raw_identifier: str) -> Student:
        identifier = (raw_identifier or "").strip()
        if not identifier:
            raise ValidationError("Student ID is required")

        student = self._students.get_by_id(identifier)
        if not student:
            logger.warning(f"Unknown student id scanned: {identifier!r}")
            raise UnknownStudent(identifier)
        return student

    def _authorize(self, acting_user: Optional[User], student: Student) -> None:
        try:
            assert_can_mark(acting_user, student)
        except AccessDenied:
            logger.warning(
                f"User {acting_user.user_id if acting_user else SYSTEM_MARKER} denied marking "
                f"{student.student_id} ({student.grade})"
            )
            raise

    def _save(
        self, student: Student, status: AttendanceStatus, acting_user: Optional[User], now: datetime
    ) -> AttendanceOutcome:
        record = AttendanceRecord(
            record_id=new_id("ATT"),
            student_id=student.student_id,
            date=now.date(),
            timestamp=now,
            status=status,
            marked_by=acting_user.user_id if acting_user else SYSTEM_MARKER,
        )
        self._attendance.upsert(record)
        logger.info(f"Marked {student.student_id} {status.value} on {record.date.isoformat()} by {record.marked_by}")
        return AttendanceOutcome(student=student, status=status, marked_at=local_time_str(now), record=record)

    def record_attendance(
        self, raw_identifier: str, acting_user: Optional[User], *, now: datetime | None = None
    ) -> AttendanceOutcome:
        """Scan or typed-ID path: status comes from the time of day."""
        now = now or now_local()

        student = self._resolve_student(raw_identifier)
        self._authorize(acting_user, student)

        status = self._factory.for_scan(now=now).decide(now=now)
        return self._save(student, status, acting_user, now)

    def mark_manual(
        self,
        student_id: str,
        status: AttendanceStatus,
        acting_user: Optional[User],
        *,
        now: datetime | None = None,
    ) -> AttendanceOutcome:
        """List-mode override: same path, explicit status."""
        now = now or now_local()

        student = self._resolve_student(student_id)
        self._authorize(acting_user, student)
        return self._save(student, AttendanceStatus(status), acting_user, now)

    def roster(self, acting_user: Optional[User], grade_name: str, *, today: date | None = None) -> list[RosterRow]:
        today = today or now_local().date()
        if not can_manage_grade(acting_user, grade_name):
            raise AccessDenied(acting_user.grade_assigned if acting_user else None, grade_name)

        statuses = {r.student_id: r.status for r in self._attendance.list_for_date(today)}
        return [
            RosterRow(student=s, status=statuses.get(s.student_id))
            for s in self._students.list_all()
            if s.grade == grade_name
        ]
