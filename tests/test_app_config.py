"""Tests for application configuration loading."""

from unittest.mock import patch

import pytest

from app_config import (
    DEFAULT_ARTIST, DEFAULT_LYRICS_URL, DEFAULT_SEARCH_URL, DEFAULT_TRACK,
    AppConfig, load_config,
)


@pytest.fixture(autouse=True)
def no_keyring():
    with patch("secure_config.keyring.get_password", return_value=None):
        yield


def test_defaults():
    config = load_config({})
    assert config.lyrics_url == DEFAULT_LYRICS_URL
    assert config.search_url == DEFAULT_SEARCH_URL
    assert config.lastfm_api_key is None
    assert config.debounce_ms == 300
    assert config.request_timeout_s == 15
    assert config.worker_shutdown_ms == 2000
    assert config.suggestion_limit == 12
    assert (config.default_track, config.default_artist) == (DEFAULT_TRACK, DEFAULT_ARTIST)


def test_seeded_query():
    assert DEFAULT_TRACK == "她说"
    assert DEFAULT_ARTIST == "林俊杰"


def test_environment_overrides():
    config = load_config({
        "LYRICFINDER_LYRICS_URL": "http://localhost:8000/api/get",
        "LYRICFINDER_SEARCH_URL": "http://localhost:9000/",
        "LASTFM_API_KEY": "secret",
        "LYRICFINDER_TIMEOUT_SEARCH_DEBOUNCE_MS": "100",
        "LYRICFINDER_TIMEOUT_API_REQUEST_S": "5",
    })
    assert config.lyrics_url == "http://localhost:8000/api/get"
    assert config.search_url == "http://localhost:9000/"
    assert config.lastfm_api_key == "secret"
    assert config.debounce_ms == 100
    assert config.request_timeout_s == 5


def test_config_is_immutable():
    config = AppConfig()
    with pytest.raises(Exception):
        config.debounce_ms = 1


def test_user_agent_names_app():
    assert AppConfig().user_agent.startswith("LyricFinder/")
