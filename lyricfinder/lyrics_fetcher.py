"""
LyricFinder - Lyrics Fetcher

Exact track + artist lookup against the LRCLIB ``/api/get`` endpoint.

Unlike suggestions, lyrics failures are user-visible: every failure is
raised as a ``LyricsFetchError`` subclass whose message is shown verbatim.
"""

import logging
import math
from typing import Any, Optional

import requests

from models import FailureKind, LyricsResult, Query

logger = logging.getLogger("lyricfinder.lyrics")

API_URL = "https://lrclib.net/api/get"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class LyricsFetchError(Exception):
    """Base class for lyrics lookup failures."""

    kind: FailureKind = FailureKind.TRANSPORT


class LyricsNotFoundError(LyricsFetchError):
    """The lyrics service has no match for the track/artist pair."""

    kind = FailureKind.NOT_FOUND


class LyricsTransportError(LyricsFetchError):
    """Network failure, timeout, or unexpected HTTP status."""

    kind = FailureKind.TRANSPORT


class LyricsInvalidError(LyricsFetchError):
    """The response body could not be decoded into a LyricsResult."""

    kind = FailureKind.INVALID


# ---------------------------------------------------------------------------
# LyricsFetcher
# ---------------------------------------------------------------------------

class LyricsFetcher:
    """Fetches lyrics for an exact track/artist match."""

    def __init__(
        self,
        base_url: str = API_URL,
        timeout: float = 15,
        user_agent: str = "LyricFinder",
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": user_agent})

    def fetch_lyrics(self, query: Query) -> LyricsResult:
        """Look up lyrics for ``query``.

        Raises:
            LyricsNotFoundError: No match upstream.
            LyricsTransportError: Network or HTTP-layer failure.
            LyricsInvalidError: Undecodable or malformed response.
        """
        track = query.track_name.strip()
        artist = query.artist_name.strip()
        params = {"track_name": track, "artist_name": artist}
        logger.info("Fetching lyrics: %r by %r", track, artist)

        try:
            resp = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.Timeout as exc:
            raise LyricsTransportError(
                f"The lyrics service did not respond in time ({self.timeout}s)"
            ) from exc
        except requests.RequestException as exc:
            raise LyricsTransportError(f"Could not reach the lyrics service: {exc}") from exc

        if resp.status_code == 404:
            raise LyricsNotFoundError(self._not_found_message(resp, track, artist))
        if resp.status_code >= 400:
            raise LyricsTransportError(
                f"Lyrics service returned HTTP {resp.status_code}"
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise LyricsInvalidError("Lyrics service returned a non-JSON response") from exc

        if isinstance(data, dict) and data.get("error"):
            raise LyricsNotFoundError(
                self._error_text(data) or self._default_not_found(track, artist)
            )
        result = self._parse_result(data)
        logger.debug(
            "Got %r by %r (%d lines)", result.name, result.artist_name, result.line_count
        )
        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _default_not_found(track: str, artist: str) -> str:
        return f'No lyrics found for "{track}" by {artist}'

    @classmethod
    def _not_found_message(cls, resp, track: str, artist: str) -> str:
        try:
            data = resp.json()
        except ValueError:
            data = None
        text = cls._error_text(data) if isinstance(data, dict) else None
        return text or cls._default_not_found(track, artist)

    @staticmethod
    def _error_text(data: dict) -> Optional[str]:
        """Prefer the human-readable ``message``, then a string ``error``."""
        for key in ("message", "error"):
            value = data.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
        return None

    @staticmethod
    def _parse_result(data: Any) -> LyricsResult:
        """Decode an LRCLIB record.

        Raises:
            LyricsInvalidError: If required fields are missing or mistyped.
        """
        if not isinstance(data, dict):
            raise LyricsInvalidError("Lyrics response is not a JSON object")

        name = data.get("name")
        artist_name = data.get("artistName")
        if not isinstance(name, str) or not isinstance(artist_name, str):
            raise LyricsInvalidError("Lyrics response is missing the track or artist name")

        album_name = data.get("albumName")
        if album_name is not None and not isinstance(album_name, str):
            raise LyricsInvalidError("Lyrics response has a malformed album name")

        duration = data.get("duration")
        if duration is not None:
            # bool is an int subclass; reject it explicitly
            if (isinstance(duration, bool) or not isinstance(duration, (int, float))
                    or not math.isfinite(duration)):
                raise LyricsInvalidError("Lyrics response has a malformed duration")
            duration = int(round(duration))

        instrumental = data.get("instrumental")
        if instrumental is None:
            instrumental = False
        elif not isinstance(instrumental, bool):
            raise LyricsInvalidError("Lyrics response has a malformed instrumental flag")

        plain = data.get("plainLyrics")
        if plain is not None and not isinstance(plain, str):
            raise LyricsInvalidError("Lyrics response has malformed lyrics text")

        return LyricsResult(
            name=name,
            artist_name=artist_name,
            album_name=album_name or None,
            duration_seconds=duration,
            instrumental=instrumental,
            plain_lyrics=plain,
        )
