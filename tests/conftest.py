"""Global pytest fixtures: isolated environment tables."""

import pytest

LIVE_VARS = ("TYPEDENV_LIVE", "TYPEDENV_LIVE_LIST", "TYPEDENV_LIVE_MAP")


@pytest.fixture(autouse=True)
def no_live_vars(monkeypatch):
    """Unset the names that tests read through the real os.environ."""
    for name in LIVE_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def environ():
    """An injectable environment table, separate from os.environ."""
    return {
        "STR": "hello",
        "EMPTY": "",
        "BOOL_TRUE": "true",
        "BOOL_ONE": "1",
        "BOOL_FALSE": "false",
        "BOOL_ZERO": "0",
        "BOOL_BAD": "yes",
        "INT": "123",
        "INT_NEG": "-42",
        "INT_BIG": "12345678901234567890",
        "FLOAT": "1.5",
        "DURATION": "1h30m",
        "TIME": "2020-01-05T00:00:00Z",
        "LIST": "a,b,,c",
        "ONLY_SEPS": ",,,",
        "INTS": "1,2,3",
        "INTS_BAD": "1,2,three",
        "FLOATS": "1.5,2.25",
        "MAP": "key1=v1,key2=v2",
        "MAP_BAD_PAIR": "key1=v1,key2=v2,key3",
        "MAP_EMPTY_KEY": "=,key2=v2",
        "INT_MAP": "key1=1,key2=",
        "FLOAT_MAP": "a=0.5,b=",
    }
