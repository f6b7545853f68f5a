from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..core.constants import AI_EMPTY_MESSAGE, AI_FAILURE_MESSAGE, AI_KEY_MISSING_MESSAGE
from ..core.exceptions import ProviderUnavailable
from ..students.model import Student
from .model import AttendanceSnapshot
from .summarizer import Summarizer

logger = logging.getLogger(__name__)


class SummaryService:
    """AI report with fixed fallbacks.

    The summarizer is built lazily from the API key so that a missing key never
    reaches the provider. Errors never propagate to the caller.
    """

    def __init__(self, *, api_key: Optional[str], summarizer_factory: Callable[[str], Summarizer]):
        self._api_key = (api_key or "").strip()
        self._factory = summarizer_factory
        self._summarizer: Optional[Summarizer] = None

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def generate_report(self, students: Iterable[Student], records: Iterable[AttendanceRecord]) -> str:
        if not self.is_configured:
            logger.warning("AI summary requested but no API key is configured")
            return AI_KEY_MISSING_MESSAGE

        snapshot = AttendanceSnapshot(students=tuple(students), records=tuple(records))
        try:
            if self._summarizer is None:
                self._summarizer = self._factory(self._api_key)
            text = self._summarizer.generate(snapshot)
        except ProviderUnavailable:
            return AI_FAILURE_MESSAGE
        except Exception:
            logger.exception("AI summary failed")
            return AI_FAILURE_MESSAGE

        return text or AI_EMPTY_MESSAGE
