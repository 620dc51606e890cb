"""
LyricFinder - Search Controller

Owns the query, both suggestion fields and the lyrics view model, and is
the only place any of them change.

Suggestion field lifecycle::

    IDLE -> DEBOUNCING -> LOADING -> READY | EMPTY
      ^         |  ^                     |
      |         |  +---- keystroke ------+
      +---------+-- blur / selection / submit / blank text

Every outbound request is stamped with a token from ``RequestTokens``.  A
completion is applied only while its token is still the latest for its key,
so responses arriving out of order can never overwrite newer state.
"""

import logging
from functools import partial
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from debouncer import Debouncer
from lyrics_fetcher import LyricsFetchError, LyricsFetcher
from models import (
    EMPTY_LYRICS_STATE, SUGGESTION_FIELDS, FailureKind, FetchStatus,
    LyricsResult, LyricsState, Query, SuggestionField, SuggestionSet,
    SuggestionStatus,
)
from request_runner import RequestRunner
from request_tokens import RequestTokens
from suggestion_provider import SuggestionProvider
from validators import format_errors, validate_query

logger = logging.getLogger("lyricfinder.controller")

LYRICS_KEY = "lyrics"


class SearchController(QObject):
    """Coordinates autocomplete and lyrics lookups for one search form.

    Signals:
        query_changed(Query): the track or artist text changed.
        suggestions_changed(SuggestionSet): a field's suggestions changed.
        lyrics_changed(LyricsState): the lyrics view model changed.
    """

    query_changed = pyqtSignal(object)
    suggestions_changed = pyqtSignal(object)
    lyrics_changed = pyqtSignal(object)

    def __init__(
        self,
        provider: SuggestionProvider,
        fetcher: LyricsFetcher,
        debouncer: Optional[Debouncer] = None,
        runner: Optional[RequestRunner] = None,
        tokens: Optional[RequestTokens] = None,
        default_query: Optional[Query] = None,
        debounce_ms: int = 300,
        parent=None,
    ):
        super().__init__(parent)
        self._provider = provider
        self._fetcher = fetcher
        self._debouncer = debouncer if debouncer is not None else Debouncer(self)
        self._runner = runner if runner is not None else RequestRunner(self)
        self._tokens = tokens if tokens is not None else RequestTokens()
        self._debounce_ms = debounce_ms

        self._query = default_query or Query()
        self._suggestions = {f: SuggestionSet.idle(f) for f in SUGGESTION_FIELDS}
        self._lyrics = EMPTY_LYRICS_STATE

    # ------------------------------------------------------------------
    # View model
    # ------------------------------------------------------------------

    @property
    def query(self) -> Query:
        return self._query

    @property
    def lyrics_state(self) -> LyricsState:
        return self._lyrics

    @property
    def runner(self) -> RequestRunner:
        return self._runner

    def suggestions(self, which: SuggestionField) -> SuggestionSet:
        return self._suggestions[which]

    # ------------------------------------------------------------------
    # Typing
    # ------------------------------------------------------------------

    def set_text(self, which: SuggestionField, text: str) -> None:
        """Handle a keystroke: update the query now, debounce the lookup."""
        self._set_query(self._query.with_field(which, text))

        if not text.strip():
            self._reset_field(which)
            return

        # A newer request is now pending; anything in flight is outdated
        self._tokens.invalidate(which)
        self._set_suggestions(SuggestionSet(
            field=which, query=text, status=SuggestionStatus.DEBOUNCING,
        ))
        self._debouncer.schedule(
            which, partial(self._request_suggestions, which), self._debounce_ms,
        )

    def set_track_name(self, text: str) -> None:
        self.set_text(SuggestionField.TRACK, text)

    def set_artist_name(self, text: str) -> None:
        self.set_text(SuggestionField.ARTIST, text)

    def select_suggestion(self, which: SuggestionField, text: str) -> None:
        """Accept a suggestion.  Does not start a lyrics lookup."""
        self._set_query(self._query.with_field(which, text))
        self._reset_field(which)

    def dismiss_suggestions(self, which: SuggestionField) -> None:
        """Close a field's suggestions (input lost focus)."""
        self._reset_field(which)

    # ------------------------------------------------------------------
    # Lyrics
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Initial lookup with the seeded query, same as a submit."""
        self.submit()

    def submit(self) -> None:
        """Cancel suggestion work and look up lyrics for the current query."""
        self._debouncer.cancel_all()
        for which in SUGGESTION_FIELDS:
            self._reset_field(which)

        query = self._query
        token = self._tokens.issue(LYRICS_KEY)

        errors = validate_query(query.track_name, query.artist_name)
        if errors:
            self._set_lyrics(LyricsState(
                status=FetchStatus.ERROR, query=query, error_message=format_errors(errors),
            ))
            return

        self._set_lyrics(LyricsState(status=FetchStatus.LOADING, query=query))
        self._runner.submit(
            self._fetcher.fetch_lyrics,
            (query,),
            on_done=partial(self._apply_lyrics, token, query),
            on_error=partial(self._apply_lyrics_error, token, query),
        )

    def shutdown(self) -> None:
        """Drop pending timers and make every in-flight response stale."""
        self._debouncer.cancel_all()
        self._tokens.invalidate_all()

    # ------------------------------------------------------------------
    # Suggestion pipeline
    # ------------------------------------------------------------------

    def _request_suggestions(self, which: SuggestionField) -> None:
        text = self._query.get(which)
        artist = self._query.artist_name if which is SuggestionField.TRACK else None
        token = self._tokens.issue(which)

        self._set_suggestions(SuggestionSet(
            field=which, query=text, status=SuggestionStatus.LOADING,
        ))
        self._runner.submit(
            self._provider.search,
            (which, text, artist),
            on_done=partial(self._apply_suggestions, which, token, text),
            on_error=partial(self._apply_suggestion_error, which, token, text),
        )

    def _apply_suggestions(
        self, which: SuggestionField, token: int, text: str, items: list,
    ) -> None:
        if not self._tokens.is_current(which, token):
            logger.debug("Discarding stale %s suggestions for %r", which.value, text)
            return
        items = tuple(items or ())
        status = SuggestionStatus.READY if items else SuggestionStatus.EMPTY
        self._set_suggestions(SuggestionSet(
            field=which, query=text, items=items, status=status,
        ))

    def _apply_suggestion_error(
        self, which: SuggestionField, token: int, text: str, exc: BaseException,
    ) -> None:
        logger.warning("Suggestion lookup for %r failed: %s", text, exc)
        self._apply_suggestions(which, token, text, [])

    def _reset_field(self, which: SuggestionField) -> None:
        self._debouncer.cancel(which)
        self._tokens.invalidate(which)
        if self._suggestions[which].status is not SuggestionStatus.IDLE:
            self._set_suggestions(SuggestionSet.idle(which))

    # ------------------------------------------------------------------
    # Lyrics completion
    # ------------------------------------------------------------------

    def _apply_lyrics(self, token: int, query: Query, result: LyricsResult) -> None:
        if not self._tokens.is_current(LYRICS_KEY, token):
            logger.debug("Discarding stale lyrics for %r", query.track_name)
            return
        self._set_lyrics(LyricsState(status=FetchStatus.READY, query=query, result=result))

    def _apply_lyrics_error(self, token: int, query: Query, exc: BaseException) -> None:
        if not self._tokens.is_current(LYRICS_KEY, token):
            return
        if isinstance(exc, LyricsFetchError):
            message, kind = str(exc), exc.kind
            logger.info("Lyrics lookup failed (%s): %s", kind.value, message)
        else:
            message, kind = f"Unexpected error: {exc}", FailureKind.TRANSPORT
            logger.error("Lyrics lookup crashed: %s", exc)
        # Failed lookups clear the previous result
        self._set_lyrics(LyricsState(
            status=FetchStatus.ERROR, query=query,
            error_message=message or "Failed to fetch lyrics", error_kind=kind,
        ))

    # ------------------------------------------------------------------
    # State setters
    # ------------------------------------------------------------------

    def _set_query(self, query: Query) -> None:
        if query != self._query:
            self._query = query
            self.query_changed.emit(query)

    def _set_suggestions(self, suggestion_set: SuggestionSet) -> None:
        self._suggestions[suggestion_set.field] = suggestion_set
        self.suggestions_changed.emit(suggestion_set)

    def _set_lyrics(self, state: LyricsState) -> None:
        self._lyrics = state
        self.lyrics_changed.emit(state)
