"""
Logging configuration for the ``dining_wrap`` package.

Entrypoints (the CLI, the API app factory) call ``configure_logging`` once.
Library modules only call ``get_logger(__name__)`` and never attach handlers.
"""
from __future__ import annotations

import logging
import sys
from typing import IO

from dining_wrap.config import LOG_LEVEL

_PKG_LOGGER_NAME = "dining_wrap"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if level is None:
        level = LOG_LEVEL
    level = str(level).strip().upper()
    if level.isdigit():
        return int(level)
    numeric = getattr(logging, level, None)
    return numeric if isinstance(numeric, int) else logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Attach a single StreamHandler to the package logger, once per process.

    ``level`` defaults to ``DINING_WRAP_LOG_LEVEL`` (INFO when unset).
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s"))
    logger.setLevel(_parse_level(level))
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, keeping the package silent until configured."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
