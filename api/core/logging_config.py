"""
Root logger setup.

`setup_logging` attaches a single console handler the first time it runs;
later calls (tests, repeated app construction) only adjust the level.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _numeric_level(level: str) -> int:
    value = getattr(logging, (level or "").strip().upper(), None)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(_numeric_level(level))
    if root.handlers:
        return None

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)


def level_name(level: str) -> str:
    """
    Lowercase standard level name ("warning" for "WARN"), as uvicorn expects.
    """
    numeric = _numeric_level(level)
    if numeric == logging.NOTSET:
        return "info"
    return logging.getLevelName(numeric).lower()
