"""LyricFinder - Shared Widget Library."""

from widgets.status_badge import StatusBadge
from widgets.suggest_field import SuggestField
from widgets.lyrics_panel import LyricsPanel

__all__ = ["StatusBadge", "SuggestField", "LyricsPanel"]
