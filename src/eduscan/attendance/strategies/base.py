from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ...core.enums import AttendanceStatus


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide an attendance status."""

    @abstractmethod
    def decide(self, *, now: datetime) -> AttendanceStatus:
        raise NotImplementedError
