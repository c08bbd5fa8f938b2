"""Typed access to process environment variables.

``get_*`` accessors return a caller-supplied fallback on any failure;
``must_*`` accessors raise ``EnvNotSetError`` / ``EnvParseError`` instead.
All accessors accept ``environ=`` to read from a mapping other than
``os.environ``.
"""

from typedenv.config.settings import DEFAULT_KV_SEP, DEFAULT_SEP, RFC3339, Separators
from typedenv.get import (
    get_bool,
    get_bytes,
    get_duration,
    get_float,
    get_floats,
    get_floats_map,
    get_int,
    get_ints,
    get_ints_map,
    get_string,
    get_strings,
    get_strings_map,
    get_time,
)
from typedenv.must import (
    must_bool,
    must_bytes,
    must_duration,
    must_float,
    must_floats,
    must_floats_map,
    must_int,
    must_ints,
    must_ints_map,
    must_string,
    must_strings,
    must_strings_map,
    must_time,
)
from typedenv.shared.exceptions import EnvError, EnvNotSetError, EnvParseError

__all__ = [
    "DEFAULT_SEP",
    "DEFAULT_KV_SEP",
    "RFC3339",
    "Separators",
    "EnvError",
    "EnvNotSetError",
    "EnvParseError",
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
