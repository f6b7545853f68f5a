from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy


class PresentStrategy(AttendanceStrategy):
    """Arrived before the cutoff."""

    def decide(self, *, now: datetime) -> AttendanceStatus:
        return AttendanceStatus.PRESENT
