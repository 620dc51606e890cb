"""
LyricFinder - Data Model

Immutable value types shared by the fetchers, the controller and the
widgets.  State objects are replaced wholesale on every transition, so a
subscriber that keeps a reference never sees it change underneath it.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class SuggestionField(str, Enum):
    """The two independently tracked autocomplete targets."""
    TRACK = "track"
    ARTIST = "artist"


class SuggestionStatus(str, Enum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    LOADING = "loading"
    READY = "ready"
    EMPTY = "empty"


class FetchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class FailureKind(str, Enum):
    NOT_FOUND = "not_found"
    TRANSPORT = "transport"
    INVALID = "invalid"


@dataclass(frozen=True)
class Query:
    track_name: str = ""
    artist_name: str = ""

    def with_field(self, which: SuggestionField, text: str) -> "Query":
        """Return a copy with the track or artist name replaced."""
        if which is SuggestionField.TRACK:
            return replace(self, track_name=text)
        return replace(self, artist_name=text)

    def get(self, which: SuggestionField) -> str:
        if which is SuggestionField.TRACK:
            return self.track_name
        return self.artist_name


@dataclass(frozen=True)
class LyricsResult:
    """A single exact-match lyrics record."""
    name: str
    artist_name: str
    album_name: Optional[str] = None
    duration_seconds: Optional[int] = None
    instrumental: bool = False
    plain_lyrics: Optional[str] = None

    @property
    def has_lyrics(self) -> bool:
        return bool(self.plain_lyrics and self.plain_lyrics.strip())

    @property
    def line_count(self) -> int:
        """Number of non-blank lines in the plain lyrics."""
        if not self.plain_lyrics:
            return 0
        return sum(1 for line in self.plain_lyrics.split("\n") if line.strip())

    @property
    def duration_label(self) -> Optional[str]:
        """Duration as ``m:ss``, or None when unknown."""
        if not self.duration_seconds:
            return None
        minutes, seconds = divmod(self.duration_seconds, 60)
        return f"{minutes}:{seconds:02d}"


@dataclass(frozen=True)
class SuggestionSet:
    field: SuggestionField
    query: str = ""
    items: tuple[str, ...] = ()
    status: SuggestionStatus = SuggestionStatus.IDLE

    @classmethod
    def idle(cls, which: SuggestionField) -> "SuggestionSet":
        return cls(field=which)


@dataclass(frozen=True)
class LyricsState:
    """View model for the lyrics half of the window."""
    status: FetchStatus = FetchStatus.IDLE
    query: Optional[Query] = None
    result: Optional[LyricsResult] = None
    error_message: Optional[str] = None
    error_kind: Optional[FailureKind] = None

    @property
    def is_loading(self) -> bool:
        return self.status is FetchStatus.LOADING


EMPTY_LYRICS_STATE = LyricsState()
SUGGESTION_FIELDS = (SuggestionField.TRACK, SuggestionField.ARTIST)
