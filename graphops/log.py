"""Logging for graphops.

Loggers live under the ``graphops.`` namespace and write to stderr through
rich's handler, so log lines never mix with command output on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from graphops import config

_ROOT = "graphops"

_loggers: dict[str, logging.Logger] = {}


def _level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _root_logger() -> logging.Logger:
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)
        root.setLevel(_level(config.LOG_LEVEL))
        root.propagate = False
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a cached logger, typically ``get_logger(__name__)``."""
    if name is None:
        name = _ROOT
    logger_name = name if name == _ROOT or name.startswith(f"{_ROOT}.") else f"{_ROOT}.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    _root_logger()
    logger = logging.getLogger(logger_name)
    _loggers[logger_name] = logger
    return logger


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Set the level for every graphops logger."""
    _root_logger().setLevel(_level(level))
