"""Timestamp parsing tests."""

from __future__ import annotations

import datetime as dt

import pytest

from typedenv.parsing.timestamps import parse_rfc3339, parse_time

UTC = dt.timezone.utc


def test_default_format_is_rfc3339_utc():
    parsed = parse_time("2020-01-05T00:00:00Z")
    assert parsed == dt.datetime(2020, 1, 5, tzinfo=UTC)
    assert parsed.tzinfo is UTC


def test_rfc3339_offset_is_kept():
    parsed = parse_rfc3339("2020-01-05T10:00:00+02:00")
    assert parsed.utcoffset() == dt.timedelta(hours=2)
    assert parsed == dt.datetime(2020, 1, 5, 8, tzinfo=UTC)


def test_rfc3339_negative_offset_and_fraction():
    parsed = parse_rfc3339("2021-06-30T23:59:59.123456789-05:30")
    assert parsed.microsecond == 123456
    assert parsed.utcoffset() == -dt.timedelta(hours=5, minutes=30)


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "2020-01-05",
        "2020-01-05 00:00:00Z",
        "2020-01-05T00:00:00",
        "2020-13-05T00:00:00Z",
        "2020-02-30T00:00:00Z",
        "2020-01-05T25:00:00Z",
        "2020-01-05T00:00:00+02:60",
        "2020-01-05T00:00:00z",
    ],
)
def test_rfc3339_rejects_malformed_values(raw):
    with pytest.raises(ValueError):
        parse_rfc3339(raw)


def test_custom_format_without_zone_is_utc():
    parsed = parse_time("2020-01-05", "%Y-%m-%d")
    assert parsed == dt.datetime(2020, 1, 5, tzinfo=UTC)


def test_custom_format_with_zone_keeps_offset():
    parsed = parse_time("05/01/2020 12:30 +0100", "%d/%m/%Y %H:%M %z")
    assert parsed.utcoffset() == dt.timedelta(hours=1)
    assert parsed.hour == 12


def test_custom_format_mismatch_raises():
    with pytest.raises(ValueError):
        parse_time("2020-01-05T00:00:00Z", "%Y-%m-%d")
