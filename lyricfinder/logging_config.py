"""
LyricFinder - Logging Setup

Everything the application logs goes through named loggers under the
``lyricfinder`` namespace (``lyricfinder.lyrics``, ``lyricfinder.search``,
``lyricfinder.controller``, ``lyricfinder.security``, ``lyricfinder.ui``).
``setup_logging()`` runs once from main.py and routes them to a rotating
file plus stderr.

Connection-level messages from urllib3 (retries, dropped connections) also
go to the file, since they explain most failed lookups.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

LOG_DIR = os.path.expanduser("~/.lyricfinder/logs/")
LOG_FILE = "lyricfinder.log"
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 3

FILE_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
CONSOLE_FORMAT = "[%(name)s] %(levelname)s: %(message)s"


def _file_handler(log_dir: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        os.path.join(log_dir, LOG_FILE),
        maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging(log_dir: str | None = None,
                  console_level: int = logging.WARNING) -> logging.Logger:
    """Attach file and console handlers to the ``lyricfinder`` logger.

    Safe to call more than once; later calls return the configured logger
    untouched.
    """
    root = logging.getLogger("lyricfinder")
    if root.handlers:
        return root

    log_dir = log_dir or LOG_DIR
    os.makedirs(log_dir, exist_ok=True)
    root.setLevel(logging.DEBUG)

    file_handler = _file_handler(log_dir)
    root.addHandler(file_handler)

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console)

    http_logger = logging.getLogger("urllib3")
    if file_handler not in http_logger.handlers:
        http_logger.setLevel(logging.INFO)
        http_logger.addHandler(file_handler)
    return root
