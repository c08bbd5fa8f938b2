"""Accessor defaults and environment source resolution."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, model_validator

DEFAULT_SEP = ","
DEFAULT_KV_SEP = "="

# Empty format selects the RFC 3339 parser instead of strptime.
RFC3339 = ""


class Separators(BaseModel):
    """Element and key-value delimiters for list and map values."""

    sep: str = Field(default=DEFAULT_SEP)
    kv_sep: str = Field(default=DEFAULT_KV_SEP)

    @model_validator(mode="after")
    def _fill_empty(self) -> "Separators":
        if not self.sep:
            self.sep = DEFAULT_SEP
        if not self.kv_sep:
            self.kv_sep = DEFAULT_KV_SEP
        return self


def resolve_separators(sep: Optional[str] = None, kv_sep: Optional[str] = None) -> Separators:
    return Separators(sep=sep or "", kv_sep=kv_sep or "")


def resolve_environ(environ: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    """Return the mapping to read from: the caller's, or the live process table."""
    if environ is None:
        return os.environ
    return environ


def lookup(name: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    return resolve_environ(environ).get(name)


__all__ = [
    "DEFAULT_SEP",
    "DEFAULT_KV_SEP",
    "RFC3339",
    "Separators",
    "resolve_separators",
    "resolve_environ",
    "lookup",
]
