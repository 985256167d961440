# tests/test_schemas.py
"""Tests for shared schema types."""

from datetime import UTC, datetime, timedelta, timezone

from pydantic import TypeAdapter

from messagely.schemas.common import UTCDateTime

adapter = TypeAdapter(UTCDateTime)


def test_naive_datetime_is_treated_as_utc() -> None:
    value = adapter.validate_python(datetime(2024, 1, 2, 3, 4, 5))
    assert value == datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
    assert adapter.dump_json(value).decode().endswith('Z"')


def test_aware_datetime_is_converted_to_utc() -> None:
    local = datetime(2024, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2)))
    value = adapter.validate_python(local)
    assert value.utcoffset() == timedelta(0)
    assert value.hour == 3
