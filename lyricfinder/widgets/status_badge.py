"""
LyricFinder - Status Badge Widget

Pill next to the Search button showing where the current lyrics lookup is.
"""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel

from models import FetchStatus
from theme import Theme

TOOLTIPS = {
    FetchStatus.IDLE: "No lookup yet",
    FetchStatus.LOADING: "Waiting for the lyrics service",
    FetchStatus.READY: "Lyrics loaded",
    FetchStatus.ERROR: "The last lookup failed",
}


class StatusBadge(QLabel):
    """Colored label tracking a ``FetchStatus``."""

    def __init__(self, status: FetchStatus = FetchStatus.IDLE, parent=None):
        super().__init__(parent)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._status = None
        self.set_status(status)

    @property
    def status(self) -> FetchStatus:
        return self._status

    def set_status(self, status: FetchStatus) -> None:
        if status is self._status:
            return
        self._status = status
        self.setText(status.value.capitalize())
        self.setToolTip(TOOLTIPS[status])
        self.setStyleSheet(Theme.badge_style(Theme.FETCH_STATUS_COLORS[status.value]))
