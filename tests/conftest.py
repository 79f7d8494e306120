from __future__ import annotations

from typing import Optional

import pytest

from src.hajj_dashboard.hajj_dashboard.core.exceptions import StorageError


class InMemoryKeyValueStore:
    def __init__(self, data: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(data or {})
        self.writes = 0

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes += 1
        self.data[key] = value


class BrokenKeyValueStore:
    """Every call fails, like a full disk or an unreachable database."""

    def get(self, key: str) -> Optional[str]:
        raise StorageError("storage offline")

    def set(self, key: str, value: str) -> None:
        raise StorageError("storage offline")


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def broken_kv_store() -> BrokenKeyValueStore:
    return BrokenKeyValueStore()
