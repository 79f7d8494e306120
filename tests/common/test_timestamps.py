from datetime import date, datetime, timezone

import pytest

from src.hajj_dashboard.hajj_dashboard.common.timestamps import classify_timestamp, normalize_timestamp
from src.hajj_dashboard.hajj_dashboard.core.enums import TimestampShape

NOW = datetime(2025, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
NOW_ISO = "2025-05-01T12:00:00.000Z"


def test_legacy_seconds_object_becomes_iso():
    value = {"seconds": 1700000000, "nanoseconds": 0}

    assert classify_timestamp(value) == TimestampShape.LEGACY_SECONDS
    assert normalize_timestamp(value, now=NOW) == "2023-11-14T22:13:20.000Z"


def test_epoch_millis_becomes_iso():
    assert normalize_timestamp(1700000000000, now=NOW) == "2023-11-14T22:13:20.000Z"


def test_native_datetime_and_date():
    assert normalize_timestamp(datetime(2024, 2, 3, 4, 5, 6, 789000, tzinfo=timezone.utc)) == "2024-02-03T04:05:06.789Z"
    # naive values are taken as UTC
    assert normalize_timestamp(datetime(2024, 2, 3, 4, 5, 6)) == "2024-02-03T04:05:06.000Z"
    assert normalize_timestamp(date(2024, 2, 3)) == "2024-02-03T00:00:00.000Z"


@pytest.mark.parametrize(
    "value",
    [
        datetime(2024, 2, 3, 4, 5, 6, 789000, tzinfo=timezone.utc),
        date(2024, 2, 3),
        1700000000000,
        {"seconds": 1700000000, "nanoseconds": 0},
        "2024-01-15T08:00:00.000Z",
    ],
)
def test_normalisation_is_idempotent(value):
    once = normalize_timestamp(value, now=NOW)

    assert normalize_timestamp(once, now=NOW) == once


def test_iso_string_is_kept():
    assert normalize_timestamp("2024-01-15T08:00:00.000Z", now=NOW) == "2024-01-15T08:00:00.000Z"


def test_seconds_zero_is_the_epoch():
    assert normalize_timestamp({"seconds": 0, "nanoseconds": 0}, now=NOW) == "1970-01-01T00:00:00.000Z"


def test_unrecognised_values_fall_back_to_now():
    for value in (None, "", "not a date", True, {"nanoseconds": 5}, {"seconds": "12"}, [1, 2], float("nan")):
        assert normalize_timestamp(value, now=NOW) == NOW_ISO, value


def test_out_of_range_numbers_fall_back_to_now():
    assert normalize_timestamp(10**20, now=NOW) == NOW_ISO
    assert normalize_timestamp(float("inf"), now=NOW) == NOW_ISO


def test_only_extended_iso_strings_pass_through():
    assert classify_timestamp("20240115") == TimestampShape.UNRECOGNIZED
    assert normalize_timestamp("20240115", now=NOW) == NOW_ISO
    assert classify_timestamp("2024-01-15") == TimestampShape.ISO_STRING
    assert classify_timestamp("2024-01-15 08:00:00") == TimestampShape.ISO_STRING
