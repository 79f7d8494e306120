from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import KeyValueStore


class MySQLKeyValueStore(KeyValueStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT payload FROM kv_store WHERE store_key=%s", (key,))
                row = fetchone(cur)
        except mysql.connector.Error as e:
            raise StorageError(f"Cannot read {key!r}: {e}") from e
        if not row:
            return None
        return row["payload"]

    def set(self, key: str, value: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO kv_store(store_key, payload)
                    VALUES(%s, %s)
                    ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                    """,
                    (key, value),
                )
        except mysql.connector.Error as e:
            raise StorageError(f"Cannot write {key!r}: {e}") from e
