"""Separator defaults and environment source resolution tests."""

from __future__ import annotations

import os

from typedenv.config.settings import Separators, lookup, resolve_environ, resolve_separators


def test_separators_defaults():
    separators = Separators()
    assert separators.sep == ","
    assert separators.kv_sep == "="


def test_empty_separators_fall_back_to_defaults():
    separators = resolve_separators("", "")
    assert (separators.sep, separators.kv_sep) == (",", "=")
    assert resolve_separators(";", None).kv_sep == "="
    assert resolve_separators(None, ":").sep == ","


def test_explicit_separators_are_kept():
    separators = resolve_separators("|", "->")
    assert (separators.sep, separators.kv_sep) == ("|", "->")


def test_resolve_environ_defaults_to_process_table():
    assert resolve_environ() is os.environ
    table = {"A": "1"}
    assert resolve_environ(table) is table


def test_lookup_reads_live_environment(monkeypatch):
    assert lookup("TYPEDENV_LIVE") is None
    monkeypatch.setenv("TYPEDENV_LIVE", "on")
    assert lookup("TYPEDENV_LIVE") == "on"
    monkeypatch.setenv("TYPEDENV_LIVE", "off")
    assert lookup("TYPEDENV_LIVE") == "off"


def test_lookup_uses_injected_mapping_only():
    assert lookup("PATH", {}) is None
    assert lookup("X", {"X": ""}) == ""
