"""Deterministic parsing helpers shared by the accessors."""

from typedenv.parsing.collections import parse_list, parse_map, split_tokens
from typedenv.parsing.duration import parse_duration, parse_duration_nanos
from typedenv.parsing.scalars import parse_bool, parse_bytes, parse_float, parse_int
from typedenv.parsing.timestamps import parse_rfc3339, parse_time

__all__ = [
    "parse_bool",
    "parse_bytes",
    "parse_duration",
    "parse_duration_nanos",
    "parse_float",
    "parse_int",
    "parse_list",
    "parse_map",
    "parse_rfc3339",
    "parse_time",
    "split_tokens",
]
