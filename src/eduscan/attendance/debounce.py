from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from ..core.constants import RESCAN_WINDOW_SECONDS


class RescanDebouncer:
    """Drop a camera re-read of the code that was just accepted.

    Only the last successful scan is remembered. This is a UX guard; the daily
    upsert already makes repeats harmless for the data.
    """

    def __init__(self, window_seconds: float = RESCAN_WINDOW_SECONDS):
        self._window = timedelta(seconds=window_seconds)
        self._last_id: Optional[str] = None
        self._last_at: Optional[datetime] = None

    def is_duplicate(self, identifier: str, now: datetime) -> bool:
        if self._last_id is None or self._last_at is None:
            return False
        return identifier == self._last_id and now - self._last_at < self._window

    def remember(self, identifier: str, now: datetime) -> None:
        self._last_id = identifier
        self._last_at = now

    def reset(self) -> None:
        self._last_id = None
        self._last_at = None
