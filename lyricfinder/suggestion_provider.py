"""
LyricFinder - Autocomplete Suggestion Provider

Queries the Last.fm search API (``track.search`` / ``artist.search``) for
name completions while the user types.

Autocomplete degrades silently: every transport or decoding failure is
logged and turned into an empty list.  Nothing raised here ever reaches the
user.
"""

import logging
from typing import Any, Optional

import requests

from models import SuggestionField

logger = logging.getLogger("lyricfinder.search")

API_BASE = "https://ws.audioscrobbler.com/2.0/"
DEFAULT_LIMIT = 12

# method name, query parameter, results container, item list
_METHODS = {
    SuggestionField.TRACK: ("track.search", "track", "trackmatches", "track"),
    SuggestionField.ARTIST: ("artist.search", "artist", "artistmatches", "artist"),
}


class SuggestionProvider:
    """Track and artist name completions from the metadata search API."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = API_BASE,
        limit: int = DEFAULT_LIMIT,
        timeout: float = 15,
        user_agent: str = "LyricFinder",
        session: Optional[requests.Session] = None,
    ):
        self.api_key = (api_key or "").strip() or None
        self.base_url = base_url
        self.limit = limit
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": user_agent})
        self._warned_no_key = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def search(
        self,
        kind: SuggestionField,
        query_text: str,
        artist_name: Optional[str] = None,
    ) -> list[str]:
        """Return up to ``limit`` candidate names for a partial input.

        Args:
            kind: TRACK or ARTIST completion.
            query_text: The partial text typed so far.
            artist_name: Scopes a TRACK search; required for that kind.

        Returns:
            Candidate names in upstream order.  Empty when the input is
            blank, when a track search has no artist, when no API key is
            configured, or when anything goes wrong.
        """
        query_text = (query_text or "").strip()
        artist_name = (artist_name or "").strip()
        if not query_text:
            return []
        if kind is SuggestionField.TRACK and not artist_name:
            return []
        if not self.api_key:
            if not self._warned_no_key:
                logger.warning("No Last.fm API key configured; suggestions disabled")
                self._warned_no_key = True
            return []

        method, param, container, item_key = _METHODS[kind]
        params = {
            "method": method,
            param: query_text,
            "api_key": self.api_key,
            "format": "json",
            "limit": self.limit,
        }
        if kind is SuggestionField.TRACK:
            params["artist"] = artist_name

        logger.debug("%s for %r (artist=%r)", method, query_text, artist_name or None)
        try:
            resp = self.session.get(self.base_url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("%s failed for %r: %s", method, query_text, exc)
            return []

        names = self._parse_names(data, container, item_key)
        return names[: self.limit]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_names(data: Any, container: str, item_key: str) -> list[str]:
        """Pull ``results.<container>.<item_key>[].name`` out of a response body."""
        if not isinstance(data, dict):
            logger.warning("Unexpected search response type: %s", type(data).__name__)
            return []
        if "error" in data:
            logger.warning(
                "Search API error %s: %s", data.get("error"), data.get("message", "")
            )
            return []

        results = data.get("results")
        matches = results.get(container) if isinstance(results, dict) else None
        items = matches.get(item_key) if isinstance(matches, dict) else None
        if isinstance(items, dict):
            items = [items]
        if not isinstance(items, list):
            return []

        names = []
        for item in items:
            if not isinstance(item, dict):
                continue
            name = item.get("name")
            if isinstance(name, str) and name.strip():
                names.append(name.strip())
        return names
