"""Tests for the configuration-driven timeouts module."""

import pytest
from timeouts import TIMEOUTS, get_timeout, override_name


def test_all_timeout_keys_exist():
    expected_keys = {"search_debounce_ms", "api_request_s", "worker_shutdown_ms"}
    assert expected_keys.issubset(set(TIMEOUTS.keys()))


def test_debounce_default_is_300ms():
    assert TIMEOUTS["search_debounce_ms"] == 300


def test_get_timeout_returns_defaults():
    for key, value in TIMEOUTS.items():
        assert get_timeout({}, key) == value


def test_get_timeout_with_override():
    env = {"LYRICFINDER_TIMEOUT_SEARCH_DEBOUNCE_MS": "150"}
    assert get_timeout(env, "search_debounce_ms") == 150


def test_override_name():
    assert override_name("api_request_s") == "LYRICFINDER_TIMEOUT_API_REQUEST_S"


def test_get_timeout_with_none_overrides():
    assert get_timeout(None, "api_request_s") == 15


def test_get_timeout_unknown_key():
    with pytest.raises(KeyError):
        get_timeout({}, "nonexistent_key")


@pytest.mark.parametrize("bad", ["not_a_number", "", "-5"])
def test_get_timeout_bad_override_falls_back(bad):
    env = {"LYRICFINDER_TIMEOUT_API_REQUEST_S": bad}
    assert get_timeout(env, "api_request_s") == 15
