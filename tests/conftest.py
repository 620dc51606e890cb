"""
LyricFinder Test Fixtures

Shared pytest fixtures: the Qt application, and hand-driven stand-ins for
the debouncer, request runner and HTTP clients so controller tests decide
exactly when timers fire and in which order responses arrive.
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Ensure the lyricfinder modules are importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "lyricfinder"))

os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qt_app():
    """Create a single QApplication instance for the entire test session."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


def spin_event_loop(app, ms: int) -> None:
    """Run the Qt event loop for ``ms`` milliseconds."""
    from PyQt6.QtCore import QTimer

    QTimer.singleShot(ms, app.quit)
    app.exec()


class ManualDebouncer:
    """Debouncer stand-in: calls stay pending until the test fires them."""

    def __init__(self):
        self.pending = {}
        self.delays = {}

    def schedule(self, key, fn, delay_ms):
        self.pending[key] = fn
        self.delays[key] = delay_ms

    def cancel(self, key):
        return self.pending.pop(key, None) is not None

    def cancel_all(self):
        self.pending.clear()

    def is_pending(self, key):
        return key in self.pending

    def fire(self, key):
        self.pending.pop(key)()


class ManualRunner:
    """Runner stand-in: records submissions; the test completes them in any order."""

    def __init__(self):
        self.calls = []

    def submit(self, fn, args=(), on_done=None, on_error=None):
        self.calls.append({"fn": fn, "args": args, "on_done": on_done, "on_error": on_error})

    def complete(self, index, result):
        self.calls[index]["on_done"](result)

    def fail(self, index, exc):
        self.calls[index]["on_error"](exc)

    def run(self, index):
        """Execute the recorded call for real and deliver its outcome."""
        call = self.calls[index]
        try:
            result = call["fn"](*call["args"])
        except Exception as exc:
            call["on_error"](exc)
        else:
            call["on_done"](result)

    def wait_for_all(self, timeout_ms):
        return True

    def shutdown(self, timeout_ms):
        return True


class InlineRunner(ManualRunner):
    """Runner stand-in that executes every submission immediately."""

    def submit(self, fn, args=(), on_done=None, on_error=None):
        super().submit(fn, args, on_done, on_error)
        self.run(len(self.calls) - 1)


@pytest.fixture
def manual_debouncer():
    return ManualDebouncer()


@pytest.fixture
def manual_runner():
    return ManualRunner()


@pytest.fixture
def provider():
    """SuggestionProvider double; ``search`` returns [] unless told otherwise."""
    from suggestion_provider import SuggestionProvider

    fake = MagicMock(spec=SuggestionProvider)
    fake.search.return_value = []
    return fake


@pytest.fixture
def fetcher():
    from lyrics_fetcher import LyricsFetcher

    return MagicMock(spec=LyricsFetcher)


@pytest.fixture
def controller(qt_app, provider, fetcher, manual_debouncer, manual_runner):
    from models import Query
    from search_controller import SearchController

    return SearchController(
        provider,
        fetcher,
        debouncer=manual_debouncer,
        runner=manual_runner,
        default_query=Query("她说", "林俊杰"),
    )


@pytest.fixture
def sample_payload():
    """An LRCLIB /api/get response body."""
    return {
        "id": 3396226,
        "name": "她说",
        "trackName": "她说",
        "artistName": "林俊杰",
        "albumName": "她说 概念自选辑",
        "duration": 320.0,
        "instrumental": False,
        "plainLyrics": "他静悄悄地来过\n他慢慢带走沉默\n\n只是最后的承诺\n还是没有带走了寂寞",
        "syncedLyrics": "[00:27.93] 他静悄悄地来过",
    }


def make_response(status_code=200, json_data=None, json_error=None):
    """Build a MagicMock shaped like ``requests.Response``."""
    import requests

    resp = MagicMock()
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = json_data
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"HTTP {status_code}")
    return resp
