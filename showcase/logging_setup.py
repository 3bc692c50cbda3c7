"""
logging_setup.py

Responsibility: Console logging for the CLI.

Attaches a single stderr handler to the root logger; calling it again only
adjusts the level.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.INFO) -> None:
    root = logging.getLogger()
    root.setLevel(level)

    # Avoid duplicate handlers when called more than once
    for h in root.handlers:
        if getattr(h, "_showcase_console", False):
            h.setLevel(level)
            return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.setLevel(level)
    handler._showcase_console = True  # type: ignore[attr-defined]
    root.addHandler(handler)
