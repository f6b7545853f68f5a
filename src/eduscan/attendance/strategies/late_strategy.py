from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy


class LateStrategy(AttendanceStrategy):
    """Arrived at or after the cutoff."""

    def decide(self, *, now: datetime) -> AttendanceStatus:
        return AttendanceStatus.LATE
