"""
LyricFinder - Background Request Runner

HTTP calls block, so each one runs on its own short-lived ``QThread``.  The
worker reports back through queued signals, which means the completion
callbacks always run on the UI thread and the controller never needs locks.
"""

import logging
from functools import partial
from typing import Any, Callable, Optional

from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

logger = logging.getLogger("lyricfinder.controller")


class RequestWorker(QThread):
    """Runs ``fn(*args)`` off the main thread and emits the outcome."""

    succeeded = pyqtSignal(object, object)   # (worker, result)
    failed = pyqtSignal(object, object)      # (worker, exception)

    def __init__(
        self,
        fn: Callable[..., Any],
        args: tuple,
        on_done: Callable[[Any], None],
        on_error: Optional[Callable[[BaseException], None]] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._fn = fn
        self._args = args
        self.on_done = on_done
        self.on_error = on_error

    def run(self):
        try:
            result = self._fn(*self._args)
        except Exception as exc:
            self.failed.emit(self, exc)
            return
        self.succeeded.emit(self, result)


class RequestRunner(QObject):
    """Submits blocking calls to background workers.

    ``on_done(result)`` or ``on_error(exc)`` is invoked on the thread that
    owns the runner (the UI thread) once the call completes.

    Workers are not Qt children of the runner: a ``QThread`` destroyed while
    still running aborts the process, so the runner keeps its own references
    and ``shutdown()`` hands any worker that outlives it to ``_detached``.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._workers: set[RequestWorker] = set()

    def submit(
        self,
        fn: Callable[..., Any],
        args: tuple = (),
        on_done: Callable[[Any], None] = None,
        on_error: Optional[Callable[[BaseException], None]] = None,
    ) -> RequestWorker:
        worker = RequestWorker(fn, args, on_done, on_error)
        worker.succeeded.connect(self._on_succeeded)
        worker.failed.connect(self._on_failed)
        worker.finished.connect(self._on_finished)
        self._workers.add(worker)
        worker.start()
        return worker

    def active_workers(self) -> list[RequestWorker]:
        return [w for w in self._workers if w.isRunning()]

    def wait_for_all(self, timeout_ms: int) -> bool:
        """Block until running workers finish.  Returns False on timeout."""
        ok = True
        for worker in self.active_workers():
            if not worker.wait(timeout_ms):
                logger.warning("Request worker still running after %d ms", timeout_ms)
                ok = False
        return ok

    def shutdown(self, timeout_ms: int) -> bool:
        """Wait up to ``timeout_ms`` per worker, then let go of the stragglers.

        A worker still running afterwards is disconnected, so its outcome
        is dropped, and kept alive until its thread ends.  Returns False
        if any worker had to be detached.
        """
        if self.wait_for_all(timeout_ms):
            return True
        for worker in self.active_workers():
            worker.succeeded.disconnect(self._on_succeeded)
            worker.failed.disconnect(self._on_failed)
            worker.finished.disconnect(self._on_finished)
            self._workers.discard(worker)
            _detach(worker)
        return False

    @pyqtSlot(object, object)
    def _on_succeeded(self, worker: RequestWorker, result: Any) -> None:
        if worker.on_done is not None:
            worker.on_done(result)

    @pyqtSlot(object, object)
    def _on_failed(self, worker: RequestWorker, exc: BaseException) -> None:
        if worker.on_error is not None:
            worker.on_error(exc)
        else:
            logger.error("Background request failed: %s", exc)

    @pyqtSlot()
    def _on_finished(self) -> None:
        worker = self.sender()
        if worker in self._workers:
            worker.wait()
            self._workers.discard(worker)


# Workers whose runner shut down before they finished.  Module level so
# they live as long as the process rather than the window.
_detached: set[RequestWorker] = set()


def _detach(worker: RequestWorker) -> None:
    logger.info("Detaching request worker still running at shutdown")
    _detached.add(worker)
    worker.finished.connect(partial(_release, worker))


def _release(worker: RequestWorker) -> None:
    worker.wait()
    _detached.discard(worker)


def detached_workers() -> list[RequestWorker]:
    return list(_detached)


def wait_for_detached(timeout_ms: int) -> bool:
    """Block until detached workers finish; call once the event loop has exited."""
    ok = True
    for worker in list(_detached):
        if worker.wait(timeout_ms):
            _detached.discard(worker)
        else:
            logger.warning("Detached request worker still running after %d ms", timeout_ms)
            ok = False
    return ok
