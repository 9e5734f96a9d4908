"""Centralized logging configuration for the ``quarta`` package.

- ``configure_logging(...)`` attaches a single ``StreamHandler`` to the
  package root logger. Entry points (the CLI) call it once at startup.
- ``get_logger(name)`` returns a logger, giving the package root logger a
  ``NullHandler`` while nothing has been configured so library use stays
  silent.

Library modules never attach handlers themselves.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from quarta.config import load_settings

_PKG_LOGGER_NAME = "quarta"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        return logging.WARNING
    return _parse_level(load_settings().log_level)


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Configure the package root logger exactly once.

    Args:
        level: Level as ``int`` or level name. ``None`` falls back to the
            ``QUARTA_LOG_LEVEL`` environment variable, then ``WARNING``.
        fmt: Optional format string.
        stream: Output stream for the handler (defaults to ``sys.stderr``).
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name with library-safe defaults."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
