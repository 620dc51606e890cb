"""
LyricFinder - Application Configuration

Collects endpoints, credentials and timing into one immutable object at
startup.  Everything downstream receives its settings explicitly from
``AppConfig``; nothing reads the environment after ``load_config()``.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from secure_config import get_secret
from timeouts import get_timeout

VERSION = "0.1.0"

DEFAULT_LYRICS_URL = "https://lrclib.net/api/get"
DEFAULT_SEARCH_URL = "https://ws.audioscrobbler.com/2.0/"
DEFAULT_TRACK = "她说"
DEFAULT_ARTIST = "林俊杰"
SUGGESTION_LIMIT = 12


@dataclass(frozen=True)
class AppConfig:
    lyrics_url: str = DEFAULT_LYRICS_URL
    search_url: str = DEFAULT_SEARCH_URL
    lastfm_api_key: Optional[str] = None
    debounce_ms: int = 300
    request_timeout_s: float = 15
    worker_shutdown_ms: int = 2000
    suggestion_limit: int = SUGGESTION_LIMIT
    default_track: str = DEFAULT_TRACK
    default_artist: str = DEFAULT_ARTIST
    user_agent: str = f"LyricFinder/{VERSION}"


def load_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """Build the configuration from the environment (and system keyring).

    Recognised variables:
        LYRICFINDER_LYRICS_URL, LYRICFINDER_SEARCH_URL: endpoint overrides.
        LASTFM_API_KEY: metadata search credential (keyring takes precedence).
        LYRICFINDER_TIMEOUT_<KEY>: see ``timeouts.TIMEOUTS``.
    """
    env = os.environ if environ is None else environ
    return AppConfig(
        lyrics_url=env.get("LYRICFINDER_LYRICS_URL") or DEFAULT_LYRICS_URL,
        search_url=env.get("LYRICFINDER_SEARCH_URL") or DEFAULT_SEARCH_URL,
        lastfm_api_key=get_secret("lastfm_api_key", environ=env),
        debounce_ms=get_timeout(env, "search_debounce_ms"),
        request_timeout_s=get_timeout(env, "api_request_s"),
        worker_shutdown_ms=get_timeout(env, "worker_shutdown_ms"),
    )
