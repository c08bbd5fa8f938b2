"""Human-readable duration parsing ("300ms", "1h30m", "-1.5h")."""

from __future__ import annotations

import datetime as dt
import re
from fractions import Fraction

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek small letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_MAX_NANOS = 2**63 - 1

_COMPONENT_RE = re.compile(r"(?P<int>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?P<unit>[^0-9.]*)")


def parse_duration_nanos(raw: str) -> int:
    """Parse ``raw`` into a signed count of nanoseconds."""
    text = raw
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]
    if text == "0":
        return 0
    if not text:
        raise ValueError(f"invalid duration {raw!r}")

    total = 0
    pos = 0
    while pos < len(text):
        match = _COMPONENT_RE.match(text, pos)
        int_part = match.group("int")
        frac_part = match.group("frac")
        unit = match.group("unit")
        if not int_part and not frac_part:
            raise ValueError(f"invalid duration {raw!r}")
        if not unit:
            raise ValueError(f"missing unit in duration {raw!r}")
        scale = UNITS.get(unit)
        if scale is None:
            raise ValueError(f"unknown unit {unit!r} in duration {raw!r}")
        magnitude = Fraction(int(int_part or "0"))
        if frac_part:
            magnitude += Fraction(int(frac_part), 10 ** len(frac_part))
        total += int(magnitude * scale)
        if total > _MAX_NANOS + 1:
            raise ValueError(f"invalid duration {raw!r}")
        pos = match.end()

    if negative:
        return -total
    if total > _MAX_NANOS:
        raise ValueError(f"invalid duration {raw!r}")
    return total


def parse_duration(raw: str) -> dt.timedelta:
    """Parse ``raw`` into a timedelta; sub-microsecond digits are truncated."""
    nanos = parse_duration_nanos(raw)
    micros = abs(nanos) // MICROSECOND
    return dt.timedelta(microseconds=-micros if nanos < 0 else micros)


__all__ = [
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "UNITS",
    "parse_duration_nanos",
    "parse_duration",
]
