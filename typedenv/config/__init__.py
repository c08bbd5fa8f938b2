"""Accessor configuration helpers."""

from typedenv.config.settings import (
    DEFAULT_KV_SEP,
    DEFAULT_SEP,
    RFC3339,
    Separators,
    lookup,
    resolve_environ,
    resolve_separators,
)

__all__ = [
    "DEFAULT_SEP",
    "DEFAULT_KV_SEP",
    "RFC3339",
    "Separators",
    "lookup",
    "resolve_environ",
    "resolve_separators",
]
