"""Normalisation of stored date fields.

Records written by older builds carry ``createdAt`` in one of several shapes:
native dates, epoch milliseconds, the ``{"seconds": ..., "nanoseconds": ...}``
object of the former cloud timestamp format, or ISO strings. Everything is
turned into one canonical ISO-8601 UTC string before it is written back.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Callable, Mapping, Optional

from ..core.enums import TimestampShape
from .datetime_utils import now_utc, parse_iso_datetime, to_iso_utc

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Extended form only: YYYY-MM-DD, optionally followed by a time.
_ISO_EXTENDED = re.compile(r"^\s*\d{4}-\d{2}-\d{2}(?:[T ]|\s*$)")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def classify_timestamp(value: Any) -> TimestampShape:
    if isinstance(value, (datetime, date)):
        return TimestampShape.NATIVE_DATE
    if _is_number(value):
        return TimestampShape.EPOCH_MILLIS
    if isinstance(value, Mapping) and _is_number(value.get("seconds")):
        return TimestampShape.LEGACY_SECONDS
    if isinstance(value, str) and _ISO_EXTENDED.match(value) and parse_iso_datetime(value) is not None:
        return TimestampShape.ISO_STRING
    return TimestampShape.UNRECOGNIZED


def _from_native(value: Any) -> str:
    if not isinstance(value, datetime):
        value = datetime.combine(value, time(), tzinfo=timezone.utc)
    return to_iso_utc(value)


def _from_millis(value: Any) -> str:
    if not math.isfinite(value):
        raise ValueError(f"Non-finite epoch value: {value!r}")
    return to_iso_utc(_EPOCH + timedelta(milliseconds=value))


def _from_legacy_seconds(value: Any) -> str:
    return _from_millis(value["seconds"] * 1000)


def _from_iso(value: Any) -> str:
    return value


_NORMALIZERS: dict[TimestampShape, Callable[[Any], str]] = {
    TimestampShape.NATIVE_DATE: _from_native,
    TimestampShape.EPOCH_MILLIS: _from_millis,
    TimestampShape.LEGACY_SECONDS: _from_legacy_seconds,
    TimestampShape.ISO_STRING: _from_iso,
}


def normalize_timestamp(value: Any, *, now: Optional[datetime] = None) -> str:
    """Return ``value`` as an ISO-8601 string; never raises.

    Absent or unrecognised values (and numbers outside the representable
    range) fall back to ``now`` at normalisation time.
    """

    normalizer = _NORMALIZERS.get(classify_timestamp(value))
    if normalizer is not None:
        try:
            return normalizer(value)
        except (OverflowError, ValueError, OSError):
            pass
    return to_iso_utc(now or now_utc())
