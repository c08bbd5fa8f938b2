"""Delimited list and key-value map assembly.

Structural noise (stray separators, empty keys) is dropped quietly, while a
single element that fails to parse rejects the whole value.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from typedenv.config.settings import DEFAULT_SEP, Separators

T = TypeVar("T")


def split_tokens(raw: str, sep: str) -> list[str]:
    """Split on ``sep`` and drop empty tokens."""
    return [token for token in raw.split(sep or DEFAULT_SEP) if token]


def parse_list(raw: str, sep: str, parse_item: Callable[[str], T]) -> list[T]:
    tokens = split_tokens(raw, sep)
    if not tokens:
        raise ValueError("no elements after removing empty tokens")
    return [parse_item(token) for token in tokens]


def parse_map(
    raw: str,
    separators: Separators,
    parse_value: Callable[[str], T],
    empty_value: T,
) -> dict[str, T]:
    """Parse ``k1=v1,k2=v2`` into a dict.

    A token that does not split into exactly one key and one value rejects
    the whole map. Empty keys are skipped, empty values become
    ``empty_value`` and repeated keys keep the last value.
    """
    tokens = split_tokens(raw, separators.sep)
    if not tokens:
        raise ValueError("no pairs after removing empty tokens")

    result: dict[str, T] = {}
    for token in tokens:
        parts = token.split(separators.kv_sep)
        if len(parts) != 2:
            raise ValueError(f"malformed pair {token!r}")
        key, value = parts
        if not key:
            continue
        result[key] = parse_value(value) if value else empty_value

    if not result:
        raise ValueError("no pairs with a non-empty key")
    return result


__all__ = ["split_tokens", "parse_list", "parse_map"]
