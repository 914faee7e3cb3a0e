"""Logging setup for the pdf-text-diff command line."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(log_level: int | str) -> logging.Logger:
    """Send log records to stderr at the given level.

    stdout carries only the diff report, so the root logger is reset to a
    single stderr handler.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "WARNING"). Unknown names
        fall back to INFO.

    Returns
    -------
    logging.Logger
        The configured root logger.

    """
    if isinstance(log_level, int):
        level = log_level
    else:
        level = getattr(logging, str(log_level).upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return root_logger
