"""Duration grammar tests."""

from __future__ import annotations

import datetime as dt

import pytest

from typedenv.parsing.duration import parse_duration, parse_duration_nanos


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1h30m", dt.timedelta(minutes=90)),
        ("300ms", dt.timedelta(milliseconds=300)),
        ("2h45m30.5s", dt.timedelta(hours=2, minutes=45, seconds=30.5)),
        ("-1.5h", -dt.timedelta(hours=1, minutes=30)),
        ("+10s", dt.timedelta(seconds=10)),
        (".5s", dt.timedelta(milliseconds=500)),
        ("1us", dt.timedelta(microseconds=1)),
        ("1µs", dt.timedelta(microseconds=1)),
        ("1μs", dt.timedelta(microseconds=1)),
        ("0", dt.timedelta(0)),
        ("-0", dt.timedelta(0)),
    ],
)
def test_parse_duration_valid(raw, expected):
    assert parse_duration(raw) == expected


def test_sub_microsecond_remainder_is_truncated():
    assert parse_duration_nanos("1500ns") == 1500
    assert parse_duration("1500ns") == dt.timedelta(microseconds=1)
    assert parse_duration("-1500ns") == dt.timedelta(microseconds=-1)


@pytest.mark.parametrize("raw", ["", "-", "1", "10", "1d", "h", ".s", "1h 30m", " 1h", "1h-30m", "1.5"])
def test_parse_duration_invalid(raw):
    with pytest.raises(ValueError):
        parse_duration(raw)


def test_parse_duration_range_is_signed_64_bit_nanoseconds():
    assert parse_duration_nanos("2562047h47m16.854775807s") == 2**63 - 1
    assert parse_duration_nanos("-2562047h47m16.854775808s") == -(2**63)
    with pytest.raises(ValueError):
        parse_duration_nanos("2562047h47m16.854775808s")
    with pytest.raises(ValueError):
        parse_duration_nanos("9999999999h")


def test_missing_unit_is_reported():
    with pytest.raises(ValueError, match="missing unit"):
        parse_duration("15")
