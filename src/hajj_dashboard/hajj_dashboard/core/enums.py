from __future__ import annotations

from enum import Enum


class LoadStatus(str, Enum):
    """Outcome of reading one partition from the durable store."""

    OK = "OK"
    EMPTY = "EMPTY"
    CORRUPT = "CORRUPT"
    UNAVAILABLE = "UNAVAILABLE"


class TimestampShape(str, Enum):
    """Historical representations a stored date field may arrive in."""

    ISO_STRING = "ISO_STRING"
    EPOCH_MILLIS = "EPOCH_MILLIS"
    LEGACY_SECONDS = "LEGACY_SECONDS"
    NATIVE_DATE = "NATIVE_DATE"
    UNRECOGNIZED = "UNRECOGNIZED"


class StoreBackend(str, Enum):
    MYSQL = "mysql"
    FILE = "file"
