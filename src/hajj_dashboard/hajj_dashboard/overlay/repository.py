from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Durable text-blob storage, one entry per key.

    Implementations raise ``StorageError`` when the backend cannot be reached;
    the overlay store decides how to degrade.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError