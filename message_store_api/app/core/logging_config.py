"""
Logging configuration for the Message Store API.

``setup_logging`` attaches console and optional file handlers to the
root logger the first time it runs.  The level of the
``message_store_api`` package logger is applied on every call, so
each application built by ``create_app`` logs store activity at the
level its settings ask for, even when a host (uvicorn, the test
runner) already owns the root handlers.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "message_store_api"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging for the application.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  Only honoured when the
        root handlers are attached by this call.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
