"""Logging setup for the ``marchsq`` package logger."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "marchsq"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_file: str | Path | None = None,
) -> logging.Logger:
    """Route ``marchsq`` records to stdout and, optionally, a file.

    Handlers from an earlier call are closed and replaced, so repeated
    runs in one process neither duplicate lines nor leak open files.

    Args:
        level: Logging level (e.g. ``logging.DEBUG``).
        log_file: Optional path, truncated, that also receives every record.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(_FORMAT, datefmt="%H:%M:%S")
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging initialised at level %s", logging.getLevelName(level))
    return logger
