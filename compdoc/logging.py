"""Logging setup for documentation runs.

Every compdoc module logs through a child of the ``compdoc`` logger, so the CLI can
route progress lines (config in effect, discovery count, skipped components) with a
single call to :func:`configure_logging`.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "compdoc"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``compdoc.<name>``, e.g. ``compdoc.scanner``."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send run progress to stderr, and to ``log_file`` when one is given.

    ``verbose`` lowers the threshold to DEBUG, which adds per-file write details.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # main() may run more than once per process (tests, embedding).
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter("[compdoc] %(levelname)s %(message)s"))
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
