#!/usr/bin/env python3
"""LyricFinder — search song lyrics with track and artist autocomplete."""

import sys
import os

# Add the lyricfinder directory to the path (skip when frozen via PyInstaller)
if not getattr(sys, 'frozen', False):
    sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from logging_config import setup_logging
from PyQt6.QtWidgets import QApplication
from theme import Theme
from app import MainWindow
from app_config import load_config
from request_runner import wait_for_detached


def main():
    setup_logging()

    app = QApplication(sys.argv)
    app.setApplicationName("LyricFinder")
    app.setStyleSheet(Theme.global_stylesheet())

    config = load_config()
    window = MainWindow(config)
    window.show()
    window.controller.start()

    code = app.exec()
    # Requests abandoned on close still hold a live QThread
    wait_for_detached(int(config.request_timeout_s * 1000) + config.worker_shutdown_ms)
    sys.exit(code)


if __name__ == "__main__":
    main()
