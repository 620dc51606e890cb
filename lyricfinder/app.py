"""
LyricFinder - Main Window

Wires the search form and lyrics panel to a ``SearchController``.  The
window holds no search state of its own; it renders whatever the
controller emits.
"""

import logging

from PyQt6.QtWidgets import (
    QFormLayout, QHBoxLayout, QLabel, QMainWindow, QPushButton, QStatusBar,
    QVBoxLayout, QWidget,
)

from app_config import AppConfig
from lyrics_fetcher import LyricsFetcher
from models import FetchStatus, LyricsState, Query, SuggestionField, SuggestionSet
from search_controller import SearchController
from suggestion_provider import SuggestionProvider
from theme import Theme
from widgets import LyricsPanel, StatusBadge, SuggestField

logger = logging.getLogger("lyricfinder.ui")


def build_controller(config: AppConfig, parent=None) -> SearchController:
    """Create a controller with live HTTP collaborators from ``config``."""
    provider = SuggestionProvider(
        api_key=config.lastfm_api_key,
        base_url=config.search_url,
        limit=config.suggestion_limit,
        timeout=config.request_timeout_s,
        user_agent=config.user_agent,
    )
    fetcher = LyricsFetcher(
        base_url=config.lyrics_url,
        timeout=config.request_timeout_s,
        user_agent=config.user_agent,
    )
    return SearchController(
        provider,
        fetcher,
        default_query=Query(config.default_track, config.default_artist),
        debounce_ms=config.debounce_ms,
        parent=parent,
    )


class MainWindow(QMainWindow):
    def __init__(self, config: AppConfig, controller: SearchController = None):
        super().__init__()
        self.setWindowTitle("LyricFinder")
        self.setMinimumSize(720, 820)

        self.config = config
        if controller is None:
            controller = build_controller(config, parent=self)
        self.controller = controller

        self._setup_form()
        self._setup_status_bar()
        self._connect_controller()
        self._sync_query(self.controller.query)

    def _setup_form(self):
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)

        heading = QLabel("Search for Lyrics")
        heading.setStyleSheet(f"color: {Theme.ACCENT}; font-size: 18px; font-weight: bold;")
        layout.addWidget(heading)

        form = QFormLayout()
        self.track_input = SuggestField("Enter track name")
        self.artist_input = SuggestField("Enter artist name")
        form.addRow("Track Name:", self.track_input)
        form.addRow("Artist Name:", self.artist_input)
        layout.addLayout(form)

        button_row = QHBoxLayout()
        self.search_btn = QPushButton("Search Lyrics")
        self.search_btn.setStyleSheet(Theme.accent_button_style())
        self.search_btn.clicked.connect(self.controller.submit)
        button_row.addWidget(self.search_btn, stretch=1)
        self.status_badge = StatusBadge()
        button_row.addWidget(self.status_badge)
        layout.addLayout(button_row)

        self.lyrics_panel = LyricsPanel()
        layout.addWidget(self.lyrics_panel, stretch=1)

        self.setCentralWidget(central)

        self._fields = {
            SuggestionField.TRACK: self.track_input,
            SuggestionField.ARTIST: self.artist_input,
        }
        for which, widget in self._fields.items():
            widget.text_typed.connect(
                lambda text, w=which: self.controller.set_text(w, text)
            )
            widget.suggestion_chosen.connect(
                lambda text, w=which: self.controller.select_suggestion(w, text)
            )
            widget.focus_lost.connect(
                lambda w=which: self.controller.dismiss_suggestions(w)
            )
            widget.returnPressed.connect(self.controller.submit)

    def _setup_status_bar(self):
        status_bar = QStatusBar()
        self.setStatusBar(status_bar)
        if not self.config.lastfm_api_key:
            status_bar.showMessage("Suggestions disabled: set LASTFM_API_KEY")

    def _connect_controller(self):
        self.controller.query_changed.connect(self._sync_query)
        self.controller.suggestions_changed.connect(self._show_suggestions)
        self.controller.lyrics_changed.connect(self._show_lyrics)

    # ------------------------------------------------------------------
    # Controller -> widgets
    # ------------------------------------------------------------------

    def _sync_query(self, query: Query):
        self.track_input.set_text_quietly(query.track_name)
        self.artist_input.set_text_quietly(query.artist_name)

    def _show_suggestions(self, suggestion_set: SuggestionSet):
        self._fields[suggestion_set.field].show_suggestions(suggestion_set)

    def _show_lyrics(self, state: LyricsState):
        loading = state.is_loading
        self.search_btn.setEnabled(not loading)
        self.search_btn.setText("Searching..." if loading else "Search Lyrics")
        self.status_badge.set_status(state.status)
        self.lyrics_panel.render(state)
        if state.status is FetchStatus.READY and state.result is not None:
            self.statusBar().showMessage(
                f"Loaded {state.result.name} by {state.result.artist_name}", 5000
            )

    def closeEvent(self, event):
        self.controller.shutdown()
        self.controller.runner.shutdown(self.config.worker_shutdown_ms)
        logger.info("Window closed")
        super().closeEvent(event)
