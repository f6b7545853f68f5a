from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date, parse_iso_datetime
from ..core.enums import AttendanceStatus
from ..store.document_store import ATTENDANCE, DocumentStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


def record_from_doc(doc: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=str(doc["id"]),
        student_id=str(doc["studentId"]),
        date=parse_iso_date(doc["date"]),
        timestamp=parse_iso_datetime(doc["timestamp"]),
        status=AttendanceStatus(doc["status"]),
        marked_by=doc.get("markedBy", ""),
    )


def record_to_doc(record: AttendanceRecord) -> dict:
    return {
        "id": record.record_id,
        "studentId": record.student_id,
        "date": record.date.isoformat(),
        "timestamp": record.timestamp.isoformat(),
        "status": record.status.value,
        "markedBy": record.marked_by,
    }


class StoreAttendanceRepository(AttendanceRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def list_all(self) -> Sequence[AttendanceRecord]:
        return [record_from_doc(d) for d in self._store.list(ATTENDANCE)]

    def list_for_date(self, day: date) -> Sequence[AttendanceRecord]:
        return [r for r in self.list_all() if r.date == day]

    def get_for_student_and_date(self, student_id: str, day: date) -> Optional[AttendanceRecord]:
        return next((r for r in self.list_all() if r.student_id == student_id and r.date == day), None)

    def upsert(self, record: AttendanceRecord) -> None:
        self._store.upsert_attendance(record_to_doc(record))
