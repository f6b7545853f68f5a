from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.constants import LATE_CUTOFF_HOUR
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose a strategy from the local hour.

    ABSENT is never derived here; only a manual override sets it.
    No holiday or weekend calendar.
    """

    late_cutoff_hour: int = LATE_CUTOFF_HOUR

    def for_scan(self, *, now: datetime) -> AttendanceStrategy:
        if now.hour < self.late_cutoff_hour:
            return PresentStrategy()
        return LateStrategy()
