"""Optional accessors: parse an environment variable or return the fallback.

None of these raise for bad data. An absent, empty or malformed value yields
the caller's fallback unchanged; only ``get_string`` keeps an empty value.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Callable, Mapping, Optional, TypeVar

from typedenv.config.settings import RFC3339, lookup, resolve_separators
from typedenv.parsing.collections import parse_list, parse_map
from typedenv.parsing.duration import parse_duration
from typedenv.parsing.scalars import (
    check_float_bits,
    check_int_bits,
    parse_bool,
    parse_bytes,
    parse_float,
    parse_int,
)
from typedenv.parsing.timestamps import parse_time

T = TypeVar("T")

_logger = logging.getLogger("typedenv.get")


def _get(
    name: str,
    fallback: T,
    expected: str,
    parse: Callable[[str], T],
    environ: Optional[Mapping[str, str]],
) -> T:
    raw = lookup(name, environ)
    if not raw:
        return fallback
    try:
        return parse(raw)
    except ValueError:
        # Never log the raw value.
        _logger.debug("ENV %s is not %s, using fallback", name, expected)
        return fallback


def get_string(name: str, fallback: str, *, environ: Optional[Mapping[str, str]] = None) -> str:
    value = lookup(name, environ)
    if value is None:
        return fallback
    return value


def get_bool(name: str, fallback: bool, *, environ: Optional[Mapping[str, str]] = None) -> bool:
    return _get(name, fallback, "a boolean", parse_bool, environ)


def get_int(
    name: str,
    fallback: int,
    *,
    bits: int = 64,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Integer in the 32-bit range, converted to a ``bits``-wide signed value."""
    check_int_bits(bits)
    return _get(name, fallback, "an integer", lambda raw: parse_int(raw, bits), environ)


def get_float(
    name: str,
    fallback: float,
    *,
    bits: int = 64,
    environ: Optional[Mapping[str, str]] = None,
) -> float:
    check_float_bits(bits)
    return _get(name, fallback, "a float", lambda raw: parse_float(raw, bits), environ)


def get_duration(
    name: str,
    fallback: dt.timedelta,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> dt.timedelta:
    return _get(name, fallback, "a parsable duration", parse_duration, environ)


def get_time(
    name: str,
    fmt: str,
    fallback: dt.datetime,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> dt.datetime:
    """Timestamp in ``fmt`` (strptime directives); empty ``fmt`` means RFC 3339."""
    fmt = fmt or RFC3339
    return _get(name, fallback, "a parsable time", lambda raw: parse_time(raw, fmt), environ)


def get_bytes(name: str, fallback: bytes, *, environ: Optional[Mapping[str, str]] = None) -> bytes:
    return _get(name, fallback, "a byte string", parse_bytes, environ)


def get_strings(
    name: str,
    sep: str,
    fallback: list[str],
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> list[str]:
    return _get(name, fallback, "a string list", lambda raw: parse_list(raw, sep, str), environ)


def get_ints(
    name: str,
    sep: str,
    fallback: list[int],
    *,
    bits: int = 64,
    environ: Optional[Mapping[str, str]] = None,
) -> list[int]:
    check_int_bits(bits)
    return _get(
        name,
        fallback,
        "an integer list",
        lambda raw: parse_list(raw, sep, lambda item: parse_int(item, bits)),
        environ,
    )


def get_floats(
    name: str,
    sep: str,
    fallback: list[float],
    *,
    bits: int = 64,
    environ: Optional[Mapping[str, str]] = None,
) -> list[float]:
    check_float_bits(bits)
    return _get(
        name,
        fallback,
        "a float list",
        lambda raw: parse_list(raw, sep, lambda item: parse_float(item, bits)),
        environ,
    )


def get_strings_map(
    name: str,
    sep: str,
    kv_sep: str,
    fallback: dict[str, str],
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> dict[str, str]:
    """Map such as ``key=value1,key2=value2``; empty separators use ``,`` and ``=``."""
    separators = resolve_separators(sep, kv_sep)
    return _get(
        name,
        fallback,
        "a string map",
        lambda raw: parse_map(raw, separators, str, ""),
        environ,
    )


def get_ints_map(
    name: str,
    sep: str,
    kv_sep: str,
    fallback: dict[str, int],
    *,
    bits: int = 64,
    environ: Optional[Mapping[str, str]] = None,
) -> dict[str, int]:
    check_int_bits(bits)
    separators = resolve_separators(sep, kv_sep)
    return _get(
        name,
        fallback,
        "an integer map",
        lambda raw: parse_map(raw, separators, lambda value: parse_int(value, bits), 0),
        environ,
    )


def get_floats_map(
    name: str,
    sep: str,
    kv_sep: str,
    fallback: dict[str, float],
    *,
    bits: int = 64,
    environ: Optional[Mapping[str, str]] = None,
) -> dict[str, float]:
    check_float_bits(bits)
    separators = resolve_separators(sep, kv_sep)
    return _get(
        name,
        fallback,
        "a float map",
        lambda raw: parse_map(raw, separators, lambda value: parse_float(value, bits), 0.0),
        environ,
    )


__all__ = [
    "get_string",
    "get_bool",
    "get_int",
    "get_float",
    "get_duration",
    "get_time",
    "get_bytes",
    "get_strings",
    "get_ints",
    "get_floats",
    "get_strings_map",
    "get_ints_map",
    "get_floats_map",
]
