"""Shared cross-module types and exceptions."""

from typedenv.shared.exceptions import EnvError, EnvNotSetError, EnvParseError

__all__ = ["EnvError", "EnvNotSetError", "EnvParseError"]
