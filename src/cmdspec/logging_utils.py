"""Logging setup for applications built on cmdspec."""

from __future__ import annotations

import logging
from pathlib import Path

from .constants import LOG_FILE_ENCODING, LOG_FORMAT


def setup_logging(log_file: str | Path | None = None) -> None:
    """Set up logging configuration.

    With a path, everything at DEBUG and above goes to that file. Without
    one, logging is disabled.
    """
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_path), encoding=LOG_FILE_ENCODING)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.disable(logging.NOTSET)
        logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)
    else:
        logging.disable(logging.CRITICAL)
