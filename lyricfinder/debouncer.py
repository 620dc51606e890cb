"""
LyricFinder - Keyed Debouncer

Trailing-edge debounce on single-shot ``QTimer`` instances, one per key.
Scheduling a key again before its timer fires restarts the delay, so only
the last call after a pause actually runs.
"""

import logging
from typing import Callable, Hashable

from PyQt6.QtCore import QObject, QTimer

logger = logging.getLogger("lyricfinder.controller")


class Debouncer(QObject):
    """Coalesces rapid repeated calls per key into one delayed call."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._timers: dict[Hashable, QTimer] = {}

    def schedule(self, key: Hashable, fn: Callable[[], None], delay_ms: int) -> None:
        """Cancel any pending call under ``key`` and schedule ``fn`` after ``delay_ms``."""
        self.cancel(key)

        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.setInterval(max(0, int(delay_ms)))
        timer.timeout.connect(lambda: self._fire(key, timer, fn))
        self._timers[key] = timer
        timer.start()

    def cancel(self, key: Hashable) -> bool:
        """Drop the pending call for ``key``.  Returns True if one was pending."""
        timer = self._timers.pop(key, None)
        if timer is None:
            return False
        timer.stop()
        timer.deleteLater()
        return True

    def cancel_all(self) -> None:
        """Drop every pending call (used on submit and shutdown)."""
        for key in list(self._timers):
            self.cancel(key)

    def is_pending(self, key: Hashable) -> bool:
        return key in self._timers

    def pending_keys(self) -> list:
        return list(self._timers)

    def _fire(self, key: Hashable, timer: QTimer, fn: Callable[[], None]) -> None:
        # A stopped timer can still have a queued timeout; only the timer
        # currently registered for the key may run.
        if self._timers.get(key) is not timer:
            return
        del self._timers[key]
        timer.deleteLater()
        fn()
