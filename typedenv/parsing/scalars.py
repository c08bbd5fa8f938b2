"""Scalar value parsers shared by both accessor modes.

Every parser raises ``ValueError`` with a short reason on bad input; the
accessor layer decides whether that becomes a fallback or an error.
"""

from __future__ import annotations

import math
import re
import struct

INT_BITS = (16, 32, 64)
FLOAT_BITS = (32, 64)

# Integers are always parsed with a 32-bit range, whatever the target width.
PARSE_INT_MIN = -(2**31)
PARSE_INT_MAX = 2**31 - 1

_TRUE_VALUES = frozenset({"true", "1"})
_FALSE_VALUES = frozenset({"false", "0"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_RE = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)


def check_int_bits(bits: int) -> int:
    if bits not in INT_BITS:
        raise ValueError(f"unsupported integer width: {bits} (expected one of {INT_BITS})")
    return bits


def check_float_bits(bits: int) -> int:
    if bits not in FLOAT_BITS:
        raise ValueError(f"unsupported float width: {bits} (expected one of {FLOAT_BITS})")
    return bits


def parse_bool(raw: str) -> bool:
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean: {raw!r}")


def narrow_int(value: int, bits: int) -> int:
    """Convert to a signed ``bits``-wide integer, wrapping on overflow."""
    span = 1 << bits
    value &= span - 1
    if value >= span >> 1:
        value -= span
    return value


def parse_int(raw: str, bits: int = 64) -> int:
    check_int_bits(bits)
    if not _INT_RE.fullmatch(raw):
        raise ValueError(f"invalid integer: {raw!r}")
    value = int(raw, 10)
    if not PARSE_INT_MIN <= value <= PARSE_INT_MAX:
        raise ValueError(f"integer out of range: {raw!r}")
    return narrow_int(value, bits)


def narrow_float(value: float, bits: int) -> float:
    """Round to single precision for ``bits=32``; overflow becomes infinity."""
    if bits == 64 or math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_float(raw: str, bits: int = 64) -> float:
    check_float_bits(bits)
    if _SPECIAL_RE.fullmatch(raw):
        return narrow_float(float(raw), bits)
    if not _DECIMAL_RE.fullmatch(raw):
        raise ValueError(f"invalid float: {raw!r}")
    value = float(raw)
    if math.isinf(value):
        raise ValueError(f"float out of range: {raw!r}")
    return narrow_float(value, bits)


def parse_bytes(raw: str) -> bytes:
    return raw.encode("utf-8", "surrogateescape")


__all__ = [
    "INT_BITS",
    "FLOAT_BITS",
    "PARSE_INT_MIN",
    "PARSE_INT_MAX",
    "check_int_bits",
    "check_float_bits",
    "parse_bool",
    "narrow_int",
    "parse_int",
    "narrow_float",
    "parse_float",
    "parse_bytes",
]
