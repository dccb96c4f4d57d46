"""Logging utilities for pydataview.

Rendering never logs at levels above DEBUG on the happy path; configuration
mistakes are raised, not logged.
"""

from __future__ import annotations

import logging
import sys


class _LoggerHolder:
    """Holder for the package logger instance."""

    instance: logging.Logger | None = None


def get_logger() -> logging.Logger:
    """Get the pydataview logger instance.

    The level and format are taken from ``LogSettings`` the first time the
    logger is requested.

    Returns
    -------
    logging.Logger
        The pydataview logger configured with a stream handler.
    """
    if _LoggerHolder.instance is None:
        from .config import get_settings

        log_settings = get_settings().log
        logger = logging.getLogger("pydataview")
        logger.setLevel(log_settings.level)

        # Only add handler if none exists
        if not logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(logging.Formatter(log_settings.format))
            logger.addHandler(handler)

        _LoggerHolder.instance = logger

    return _LoggerHolder.instance


def debug(msg: str) -> None:
    """Log a debug message.

    Parameters
    ----------
    msg : str
        The message to log.
    """
    get_logger().debug(msg)


def warn(msg: str) -> None:
    """Log a warning message.

    Parameters
    ----------
    msg : str
        The warning message to log.
    """
    get_logger().warning(msg)


def set_level(level: int | str) -> None:
    """Set the logging level.

    Parameters
    ----------
    level : int or str
        The logging level (e.g., logging.DEBUG, "DEBUG").
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    get_logger().setLevel(level)


def enable_debug() -> None:
    """Enable debug logging for container, sort-link and grid rendering events."""
    set_level(logging.DEBUG)


def reset_logger() -> None:
    """Forget the cached logger so the next call re-reads settings."""
    _LoggerHolder.instance = None
