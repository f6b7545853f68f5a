from __future__ import annotations

from eduscan.database.bootstrap import _iter_sql_statements
from eduscan.store.document_store import USERS, DocumentStore
from eduscan.store.mysql_backend import MySQLDocumentBackend


class FakeCursor:
    def __init__(self, table: dict):
        self.table = table
        self.row = None

    def execute(self, sql, params=()):
        verb = sql.strip().split()[0].upper()
        if verb == "SELECT":
            name = params[0]
            self.row = {"payload": self.table[name]} if name in self.table else None
        elif verb == "INSERT":
            name, payload = params
            self.table[name] = payload
        elif verb == "DELETE":
            self.table.pop(params[0], None)

    def fetchone(self):
        return self.row

    def close(self):
        pass


class FakeConnection:
    def __init__(self, table: dict):
        self.table = table
        self.commits = 0

    def cursor(self, dictionary=False):
        return FakeCursor(self.table)

    def commit(self):
        self.commits += 1

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self):
        self.table: dict[str, str] = {}

    def connect(self, *, with_database=True):
        return FakeConnection(self.table)


def test_store_over_mysql_backend_seeds_rows():
    factory = FakeConnFactory()
    store = DocumentStore(MySQLDocumentBackend(factory))

    store.initialize()

    assert set(factory.table) == {"users", "grades", "students"}
    assert [u["id"] for u in store.list(USERS)] == ["admin1", "teacher1"]


def test_session_row_is_deleted_on_clear():
    factory = FakeConnFactory()
    store = DocumentStore(MySQLDocumentBackend(factory))

    store.set_session({"id": "admin1"})
    assert store.get_session() == {"id": "admin1"}
    store.clear_session()

    assert "session" not in factory.table
    assert store.get_session() is None


def test_sql_splitter_ignores_quoted_semicolons():
    sql = "CREATE TABLE a (x INT);\nINSERT INTO a VALUES (';');\n"
    assert list(_iter_sql_statements(sql)) == ["CREATE TABLE a (x INT)", "INSERT INTO a VALUES (';')"]
