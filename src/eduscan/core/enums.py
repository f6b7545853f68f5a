from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization."""

    ADMIN = "ADMIN"
    TEACHER = "TEACHER"


class AttendanceStatus(str, Enum):
    """Attendance status as persisted in the store."""

    PRESENT = "PRESENT"
    LATE = "LATE"
    ABSENT = "ABSENT"
