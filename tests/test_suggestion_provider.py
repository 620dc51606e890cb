"""Tests for the Last.fm suggestion provider."""

from unittest.mock import MagicMock

import pytest
import requests

from conftest import make_response
from models import SuggestionField
from suggestion_provider import API_BASE, SuggestionProvider


def _track_body(names):
    return {"results": {"trackmatches": {"track": [{"name": n, "artist": "x"} for n in names]}}}


def _artist_body(names):
    return {"results": {"artistmatches": {"artist": [{"name": n} for n in names]}}}


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def provider(session):
    return SuggestionProvider(api_key="test-key", session=session)


# ------------------------------------------------------------------
# Short-circuits (no network call)
# ------------------------------------------------------------------

class TestShortCircuit:
    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_query_makes_no_call(self, provider, session, text):
        assert provider.search(SuggestionField.ARTIST, text) == []
        assert session.get.call_count == 0

    @pytest.mark.parametrize("artist", [None, "", "   "])
    def test_track_search_requires_artist(self, provider, session, artist):
        assert provider.search(SuggestionField.TRACK, "she", artist_name=artist) == []
        assert session.get.call_count == 0

    def test_missing_api_key_makes_no_call(self, session):
        provider = SuggestionProvider(api_key=None, session=session)
        assert provider.search(SuggestionField.ARTIST, "jj") == []
        assert session.get.call_count == 0


# ------------------------------------------------------------------
# Requests
# ------------------------------------------------------------------

class TestRequests:
    def test_artist_search_params(self, provider, session):
        session.get.return_value = make_response(json_data=_artist_body(["林俊杰"]))

        provider.search(SuggestionField.ARTIST, " 林俊 ")

        session.get.assert_called_once()
        call = session.get.call_args
        assert call.args[0] == API_BASE
        assert call.kwargs["params"] == {
            "method": "artist.search",
            "artist": "林俊",
            "api_key": "test-key",
            "format": "json",
            "limit": 12,
        }
        assert call.kwargs["timeout"] == 15

    def test_track_search_scoped_by_artist(self, provider, session):
        session.get.return_value = make_response(json_data=_track_body(["她说"]))

        provider.search(SuggestionField.TRACK, "她", artist_name="林俊杰")

        params = session.get.call_args.kwargs["params"]
        assert params["method"] == "track.search"
        assert params["track"] == "她"
        assert params["artist"] == "林俊杰"

    def test_user_agent_header_set(self, session):
        SuggestionProvider(api_key="k", session=session, user_agent="LyricFinder/9")
        session.headers.update.assert_called_with({"User-Agent": "LyricFinder/9"})


# ------------------------------------------------------------------
# Decoding
# ------------------------------------------------------------------

class TestDecoding:
    def test_returns_names_in_upstream_order(self, provider, session):
        session.get.return_value = make_response(json_data=_track_body(["B", "A", "C"]))
        assert provider.search(SuggestionField.TRACK, "x", "y") == ["B", "A", "C"]

    def test_truncates_to_twelve(self, provider, session):
        names = [f"Artist {i}" for i in range(30)]
        session.get.return_value = make_response(json_data=_artist_body(names))

        result = provider.search(SuggestionField.ARTIST, "artist")

        assert len(result) == 12
        assert result == names[:12]

    def test_single_object_instead_of_list(self, provider, session):
        body = {"results": {"artistmatches": {"artist": {"name": "Solo"}}}}
        session.get.return_value = make_response(json_data=body)
        assert provider.search(SuggestionField.ARTIST, "so") == ["Solo"]

    def test_skips_blank_and_malformed_items(self, provider, session):
        body = {"results": {"artistmatches": {"artist": [
            {"name": "Good"}, {"name": ""}, {"nope": 1}, "junk", {"name": 5},
        ]}}}
        session.get.return_value = make_response(json_data=body)
        assert provider.search(SuggestionField.ARTIST, "g") == ["Good"]

    def test_no_matches(self, provider, session):
        session.get.return_value = make_response(json_data=_artist_body([]))
        assert provider.search(SuggestionField.ARTIST, "zzzz") == []


# ------------------------------------------------------------------
# Failures are absorbed
# ------------------------------------------------------------------

class TestFailures:
    def test_connection_error(self, provider, session):
        session.get.side_effect = requests.ConnectionError("offline")
        assert provider.search(SuggestionField.ARTIST, "a") == []

    def test_timeout(self, provider, session):
        session.get.side_effect = requests.Timeout("slow")
        assert provider.search(SuggestionField.ARTIST, "a") == []

    def test_http_error(self, provider, session):
        session.get.return_value = make_response(status_code=500)
        assert provider.search(SuggestionField.ARTIST, "a") == []

    def test_invalid_json(self, provider, session):
        session.get.return_value = make_response(json_error=ValueError("bad json"))
        assert provider.search(SuggestionField.ARTIST, "a") == []

    def test_api_error_body(self, provider, session):
        body = {"error": 10, "message": "Invalid API key"}
        session.get.return_value = make_response(json_data=body)
        assert provider.search(SuggestionField.ARTIST, "a") == []

    def test_unexpected_shape(self, provider, session):
        session.get.return_value = make_response(json_data=["not", "a", "dict"])
        assert provider.search(SuggestionField.ARTIST, "a") == []
