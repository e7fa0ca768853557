"""
Logging setup for the tournament app.

LOG_LEVEL (DEBUG|INFO|WARNING|ERROR|CRITICAL) picks the level; DEBUG also
switches to a verbose format with module and line numbers.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Literal, Optional

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _resolve_level(level: Optional[str] = None) -> int:
    level_str = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    return _LEVELS.get(level_str, logging.INFO)


def setup_logging(level: Optional[LogLevel] = None) -> None:
    """Configure the root logger, replacing any handlers already installed."""
    numeric_level = _resolve_level(level)

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    is_debug = numeric_level <= logging.DEBUG
    fmt_verbose = (
        "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(funcName)s | %(message)s"
    )
    fmt_concise = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt=fmt_verbose if is_debug else fmt_concise, datefmt="%H:%M:%S")
    )

    root.setLevel(numeric_level)
    root.addHandler(handler)

    # SQL echo only when explicitly debugging
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if is_debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
