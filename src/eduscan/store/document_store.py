from __future__ import annotations

import json
import logging
from typing import Optional

from .backends import DocumentBackend
from .seed import default_grades, default_students, default_users

logger = logging.getLogger(__name__)

USERS = "users"
STUDENTS = "students"
GRADES = "grades"
ATTENDANCE = "attendance"
SESSION = "session"

COLLECTIONS = (USERS, STUDENTS, GRADES, ATTENDANCE)


class DocumentStore:
    """The single mutator of persisted state.

    Each collection is a JSON array of objects, read and written whole on
    every access. Collections are written independently: there is no
    multi-collection commit.
    """

    def __init__(self, backend: DocumentBackend):
        self._backend = backend

    # -- initialization -------------------------------------------------

    def initialize(self) -> None:
        """Seed defaults on first run and heal an empty grades collection."""
        if self._backend.read(USERS) is None:
            self._write(USERS, default_users())
            logger.info("Seeded default users")

        self._ensure_grades()

        if self._backend.read(STUDENTS) is None:
            self._write(STUDENTS, default_students())
            logger.info("Seeded sample students")

    def _ensure_grades(self) -> list[dict]:
        grades = self._read(GRADES)
        if not grades:
            grades = default_grades()
            self._write(GRADES, grades)
            logger.info(f"Grades collection empty, restored {len(grades)} defaults")
        return grades

    # -- raw documents --------------------------------------------------

    def _read(self, name: str) -> list[dict]:
        payload = self._backend.read(name)
        if payload is None:
            return []
        return json.loads(payload)

    def _write(self, name: str, records: list[dict]) -> None:
        self._backend.write(name, json.dumps(records, ensure_ascii=False))

    # -- collections ----------------------------------------------------

    def list(self, collection: str) -> list[dict]:
        if collection == GRADES:
            return self._ensure_grades()
        return self._read(collection)

    def replace_all(self, collection: str, records: list[dict]) -> None:
        self._write(collection, list(records))

    def upsert_by_id(self, collection: str, record: dict) -> None:
        records = self.list(collection)
        for i, existing in enumerate(records):
            if existing.get("id") == record["id"]:
                records[i] = record
                break
        else:
            records.append(record)
        self._write(collection, records)

    def delete_by_id(self, collection: str, record_id: str) -> None:
        records = self.list(collection)
        remaining = [r for r in records if r.get("id") != record_id]
        if len(remaining) != len(records):
            self._write(collection, remaining)

    def upsert_attendance(self, record: dict) -> None:
        """Replace any record of the same student on the same day."""
        records = [
            r
            for r in self._read(ATTENDANCE)
            if not (r.get("studentId") == record["studentId"] and r.get("date") == record["date"])
        ]
        records.append(record)
        self._write(ATTENDANCE, records)

    # -- session slot ---------------------------------------------------

    def get_session(self) -> Optional[dict]:
        payload = self._backend.read(SESSION)
        if payload is None:
            return None
        return json.loads(payload)

    def set_session(self, user: dict) -> None:
        self._backend.write(SESSION, json.dumps(user, ensure_ascii=False))

    def clear_session(self) -> None:
        self._backend.delete(SESSION)
