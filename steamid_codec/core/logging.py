"""Centralized logging configuration for steamid-codec.

Library modules only emit records on loggers below ``steamidcodec``; handlers
are attached here, by the command line entry point or by the embedding
application. Console output goes to stderr so that converted ids are the
only thing written to stdout.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

__all__ = ["logger", "setup_logging"]

logger = logging.getLogger("steamidcodec")

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"

# handlers attached by setup_logging, replaced on every call
_installed: list[logging.Handler] = []


def _remove_installed_handlers() -> None:
    while _installed:
        handler = _installed.pop()
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    level: int = logging.WARNING,
    log_file: Path | None = None,
) -> None:
    """Configure the package logger.

    Repeated calls replace the handlers installed by the previous call, so
    the console handler always writes to the current ``sys.stderr``.
    Handlers added by an embedding application are left alone.

    Args:
        level: Level for the logger and the console handler.
        log_file: Optional log file; it receives every record down to DEBUG
            that passes the logger level.
    """
    _remove_installed_handlers()
    logger.setLevel(level)

    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    _installed.append(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        to_file = logging.FileHandler(log_file, encoding="utf-8")
        to_file.setLevel(logging.DEBUG)
        to_file.setFormatter(formatter)
        _installed.append(to_file)

    for handler in _installed:
        logger.addHandler(handler)
