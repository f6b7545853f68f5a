from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterator, Optional

from ..attendance.debounce import RescanDebouncer
from ..attendance.model import AttendanceOutcome
from ..attendance.service import AttendanceService
from ..common.datetime_utils import now_local
from ..core.exceptions import DomainError
from ..users.model import User
from .source import ScanSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanEvent:
    """Result of one decoded payload: an outcome or a recoverable error."""

    identifier: str
    outcome: Optional[AttendanceOutcome] = None
    error: Optional[Exception] = None


class ScanSession:
    """Feeds decoded payloads into the attendance engine for one user."""

    def __init__(
        self,
        attendance: AttendanceService,
        acting_user: Optional[User],
        *,
        debouncer: Optional[RescanDebouncer] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._user = acting_user
        self._debouncer = debouncer or RescanDebouncer()
        self._clock = clock

    def handle(self, identifier: str) -> Optional[ScanEvent]:
        """Process one payload; None when it is a debounced re-read."""
        identifier = (identifier or "").strip()
        now = self._clock()
        if self._debouncer.is_duplicate(identifier, now):
            logger.debug(f"Ignoring repeated scan of {identifier}")
            return None

        try:
            outcome = self._attendance.record_attendance(identifier, self._user, now=now)
        except DomainError as e:
            return ScanEvent(identifier=identifier, error=e)

        self._debouncer.remember(outcome.student.student_id, now)
        return ScanEvent(identifier=identifier, outcome=outcome)

    def run(self, source: ScanSource) -> Iterator[ScanEvent]:
        """Consume ``source`` until it ends; the source is always stopped."""
        try:
            for result in source.start():
                if not result.ok:
                    logger.warning(f"Decode failure: {result.error}")
                    yield ScanEvent(identifier="", error=result.error)
                    continue
                event = self.handle(result.text)
                if event is not None:
                    yield event
        finally:
            source.stop()
