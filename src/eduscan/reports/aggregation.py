"""Read-only views over attendance records.

Everything is recomputed from the full record list on each call; there is
no cache and no incremental state.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..core.constants import DEFAULT_TRAILING_DAYS
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class DailyTotals:
    present: int = 0
    late: int = 0
    absent: int = 0


@dataclass(frozen=True)
class DayPoint:
    date: date
    present_count: int
    absent_count: int


@dataclass(frozen=True)
class StudentSummary:
    total: int
    present: int
    absent: int
    late: int
    percentage: int


def _count(records: Iterable[AttendanceRecord], status: AttendanceStatus) -> int:
    return sum(1 for r in records if r.status == status)


def daily_totals(attendance: Iterable[AttendanceRecord], day: date) -> DailyTotals:
    records = [r for r in attendance if r.date == day]
    return DailyTotals(
        present=_count(records, AttendanceStatus.PRESENT),
        late=_count(records, AttendanceStatus.LATE),
        absent=_count(records, AttendanceStatus.ABSENT),
    )


def trailing_window(
    attendance: Iterable[AttendanceRecord],
    days: int = DEFAULT_TRAILING_DAYS,
    anchor: Optional[date] = None,
) -> list[DayPoint]:
    """Per-day counts for the ``days`` days ending at ``anchor``, oldest first."""
    anchor = anchor or date.today()
    records = list(attendance)
    points = []
    for offset in range(days - 1, -1, -1):
        day = anchor - timedelta(days=offset)
        on_day = [r for r in records if r.date == day]
        points.append(
            DayPoint(
                date=day,
                present_count=_count(on_day, AttendanceStatus.PRESENT),
                absent_count=_count(on_day, AttendanceStatus.ABSENT),
            )
        )
    return points


def percentage(part: int, total: int) -> int:
    if total <= 0:
        return 0
    # Half rounds up (50.5 -> 51), not to even.
    return int((Decimal(part) * 100 / Decimal(total)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def per_student_summary(student_id: str, attendance: Iterable[AttendanceRecord]) -> StudentSummary:
    records = [r for r in attendance if r.student_id == student_id]
    present = _count(records, AttendanceStatus.PRESENT)
    return StudentSummary(
        total=len(records),
        present=present,
        absent=_count(records, AttendanceStatus.ABSENT),
        late=_count(records, AttendanceStatus.LATE),
        percentage=percentage(present, len(records)),
    )
