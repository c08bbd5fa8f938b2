"""Required accessors: parse an environment variable or raise.

An absent or empty variable raises ``EnvNotSetError``; a value that cannot be
converted raises ``EnvParseError`` carrying the offending raw text. Whether
that ends the process is up to the caller.
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
from typedenv.shared.exceptions import EnvNotSetError, EnvParseError

T = TypeVar("T")

_logger = logging.getLogger("typedenv.must")


def _lookup_set(name: str, environ: Optional[Mapping[str, str]]) -> str:
    raw = lookup(name, environ)
    if not raw:
        _logger.debug("required ENV %s is not set", name)
        raise EnvNotSetError(name)
    return raw


def _must(
    name: str,
    expected: str,
    parse: Callable[[str], T],
    environ: Optional[Mapping[str, str]],
    *,
    with_reason: bool = False,
) -> T:
    raw = _lookup_set(name, environ)
    try:
        return parse(raw)
    except ValueError as exc:
        _logger.debug("required ENV %s is not %s", name, expected)
        raise EnvParseError(name, raw, expected, str(exc) if with_reason else "") from exc


def must_string(name: str, *, environ: Optional[Mapping[str, str]] = None) -> str:
    return _lookup_set(name, environ)


def must_bool(name: str, *, environ: Optional[Mapping[str, str]] = None) -> bool:
    return _must(name, "a boolean", parse_bool, environ)


def must_int(name: str, *, bits: int = 64, environ: Optional[Mapping[str, str]] = None) -> int:
    check_int_bits(bits)
    return _must(name, "an integer", lambda raw: parse_int(raw, bits), environ)


def must_float(name: str, *, bits: int = 64, environ: Optional[Mapping[str, str]] = None) -> float:
    check_float_bits(bits)
    return _must(name, "a float", lambda raw: parse_float(raw, bits), environ)


def must_duration(name: str, *, environ: Optional[Mapping[str, str]] = None) -> dt.timedelta:
    return _must(name, "a parsable duration", parse_duration, environ, with_reason=True)


def must_time(
    name: str,
    fmt: str = RFC3339,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> dt.datetime:
    """Timestamp in ``fmt`` (strptime directives); empty ``fmt`` means RFC 3339."""
    return _must(
        name,
        "a parsable time",
        lambda raw: parse_time(raw, fmt),
        environ,
        with_reason=True,
    )


def must_bytes(name: str, *, environ: Optional[Mapping[str, str]] = None) -> bytes:
    return parse_bytes(_lookup_set(name, environ))


def must_strings(name: str, sep: str = "", *, environ: Optional[Mapping[str, str]] = None) -> list[str]:
    return _must(name, "a string list", lambda raw: parse_list(raw, sep, str), environ)


def must_ints(
    name: str,
    sep: str = "",
    *,
    bits: int = 64,
    environ: Optional[Mapping[str, str]] = None,
) -> list[int]:
    check_int_bits(bits)
    return _must(
        name,
        "an integer list",
        lambda raw: parse_list(raw, sep, lambda item: parse_int(item, bits)),
        environ,
    )


def must_floats(
    name: str,
    sep: str = "",
    *,
    bits: int = 64,
    environ: Optional[Mapping[str, str]] = None,
) -> list[float]:
    check_float_bits(bits)
    return _must(
        name,
        "a float list",
        lambda raw: parse_list(raw, sep, lambda item: parse_float(item, bits)),
        environ,
    )


def must_strings_map(
    name: str,
    sep: str = "",
    kv_sep: str = "",
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> dict[str, str]:
    separators = resolve_separators(sep, kv_sep)
    return _must(name, "a string map", lambda raw: parse_map(raw, separators, str, ""), environ)


def must_ints_map(
    name: str,
    sep: str = "",
    kv_sep: str = "",
    *,
    bits: int = 64,
    environ: Optional[Mapping[str, str]] = None,
) -> dict[str, int]:
    check_int_bits(bits)
    separators = resolve_separators(sep, kv_sep)
    return _must(
        name,
        "an integer map",
        lambda raw: parse_map(raw, separators, lambda value: parse_int(value, bits), 0),
        environ,
    )


def must_floats_map(
    name: str,
    sep: str = "",
    kv_sep: str = "",
    *,
    bits: int = 64,
    environ: Optional[Mapping[str, str]] = None,
) -> dict[str, float]:
    check_float_bits(bits)
    separators = resolve_separators(sep, kv_sep)
    return _must(
        name,
        "a float map",
        lambda raw: parse_map(raw, separators, lambda value: parse_float(value, bits), 0.0),
        environ,
    )


__all__ = [
    "must_string",
    "must_bool",
    "must_int",
    "must_float",
    "must_duration",
    "must_time",
    "must_bytes",
    "must_strings",
    "must_ints",
    "must_floats",
    "must_strings_map",
    "must_ints_map",
    "must_floats_map",
]
