from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .backends import DocumentBackend


class MySQLDocumentBackend(DocumentBackend):
    """Stores each document as one row of the ``documents`` table."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def read(self, name: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT payload FROM documents WHERE name=%s", (name,))
            row = fetchone(cur)
            if not row:
                return None
            return row["payload"]

    def write(self, name: str, payload: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO documents (name, payload)
                VALUES (%s, %s)
                ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                """,
                (name, payload),
            )

    def delete(self, name: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM documents WHERE name=%s", (name,))
