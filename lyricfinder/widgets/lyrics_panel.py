"""
LyricFinder - Lyrics Panel Widget

Renders a ``LyricsState``: loading text, error box, or the song header,
lyrics body and metadata line.
"""

import html

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QTextOption
from PyQt6.QtWidgets import QLabel, QTextEdit, QVBoxLayout, QWidget

from models import FetchStatus, LyricsState
from theme import Theme


class LyricsPanel(QWidget):
    """Read-only view of the current lyrics lookup."""

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.loading_label = QLabel("Loading lyrics...")
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.loading_label.setStyleSheet(f"color: {Theme.DIMMED};")
        layout.addWidget(self.loading_label)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(Theme.error_label_style())
        layout.addWidget(self.error_label)

        self.title_label = QLabel()
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title_font = QFont()
        title_font.setPointSize(18)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        self.artist_label = QLabel()
        self.artist_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.artist_label)

        self.album_label = QLabel()
        self.album_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.album_label.setStyleSheet(f"color: {Theme.DIMMED};")
        layout.addWidget(self.album_label)

        self.lyrics_text = QTextEdit()
        self.lyrics_text.setReadOnly(True)
        self.lyrics_text.document().setDefaultTextOption(
            QTextOption(Qt.AlignmentFlag.AlignCenter)
        )
        self.lyrics_text.setStyleSheet(Theme.lyrics_text_style())
        layout.addWidget(self.lyrics_text, stretch=1)

        self.no_lyrics_label = QLabel("No lyrics found for this song.")
        self.no_lyrics_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.no_lyrics_label.setStyleSheet(f"color: {Theme.DIMMED}; padding: 40px;")
        layout.addWidget(self.no_lyrics_label)

        self.meta_label = QLabel()
        self.meta_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.meta_label.setStyleSheet(f"color: {Theme.DIMMED};")
        layout.addWidget(self.meta_label)

        self.render(LyricsState())

    def render(self, state: LyricsState) -> None:
        loading = state.is_loading
        self.loading_label.setVisible(loading)

        self.error_label.setVisible(state.status is FetchStatus.ERROR)
        self.error_label.setText(
            f"<b>Error Loading Lyrics</b><br>{html.escape(state.error_message or '')}"
        )

        result = state.result if not loading else None
        for widget in (self.title_label, self.artist_label, self.meta_label):
            widget.setVisible(result is not None)
        if result is None:
            self.album_label.hide()
            self.lyrics_text.hide()
            self.no_lyrics_label.hide()
            self.lyrics_text.clear()
            return

        self.title_label.setText(result.name)
        self.artist_label.setText(f"by {result.artist_name}")
        self.album_label.setText(f"Album: {result.album_name}" if result.album_name else "")
        self.album_label.setVisible(bool(result.album_name))

        self.lyrics_text.setVisible(result.has_lyrics)
        self.no_lyrics_label.setVisible(not result.has_lyrics)
        self.lyrics_text.setPlainText(result.plain_lyrics or "")

        self.meta_label.setText(self.metadata_text(state))

    @staticmethod
    def metadata_text(state: LyricsState) -> str:
        """``Duration: 4:20   Instrumental: No   Lines: 38``"""
        result = state.result
        if result is None:
            return ""
        parts = []
        if result.duration_label:
            parts.append(f"Duration: {result.duration_label}")
        parts.append(f"Instrumental: {'Yes' if result.instrumental else 'No'}")
        if result.plain_lyrics:
            parts.append(f"Lines: {result.line_count}")
        return "   ".join(parts)
