from __future__ import annotations

from typing import Any, Optional

import mysql.connector
import pytest

from src.hajj_dashboard.hajj_dashboard.core.exceptions import StorageError
from src.hajj_dashboard.hajj_dashboard.overlay.mysql_kv_store import MySQLKeyValueStore


class FakeCursor:
    def __init__(self, table: dict[str, str], fail: bool):
        self._table = table
        self._fail = fail
        self._row: Optional[dict[str, Any]] = None

    def execute(self, sql: str, params=()):
        if self._fail:
            raise mysql.connector.Error("connection lost")
        verb = sql.split()[0].upper()
        key = params[0]
        if verb == "SELECT":
            self._row = {"payload": self._table[key]} if key in self._table else None
        elif verb == "INSERT":
            self._table[key] = params[1]

    def fetchone(self):
        return self._row

    def close(self):
        pass


class FakeConnection:
    def __init__(self, table: dict[str, str], fail: bool):
        self._table = table
        self._fail = fail
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary: bool = False):
        return FakeCursor(self._table, self._fail)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, *, fail: bool = False):
        self.table: dict[str, str] = {}
        self.fail = fail
        self.connections: list[FakeConnection] = []

    def connect(self, *, with_database: bool = True):
        conn = FakeConnection(self.table, self.fail)
        self.connections.append(conn)
        return conn


def test_set_and_get():
    factory = FakeConnFactory()
    store = MySQLKeyValueStore(factory)

    assert store.get("organizers") is None
    store.set("organizers", "[]")
    store.set("organizers", '[{"id": "a"}]')

    assert store.get("organizers") == '[{"id": "a"}]'
    assert factory.connections[1].committed


def test_driver_errors_become_storage_errors():
    factory = FakeConnFactory(fail=True)
    store = MySQLKeyValueStore(factory)

    with pytest.raises(StorageError):
        store.get("organizers")
    with pytest.raises(StorageError):
        store.set("organizers", "[]")
    assert factory.connections[-1].rolled_back
