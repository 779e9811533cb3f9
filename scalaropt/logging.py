"""Logging utilities for scalaropt.

Solvers log through per-module loggers obtained from :func:`get_logger`.
Nothing is printed by the numerical routines themselves.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_LEVEL_ENV_VAR = "SCALAROPT_LOG_LEVEL"
_FORMAT = "[%(levelname)s] %(name)s.%(funcName)s: %(message)s"


def _level_from_env() -> int:
    value = os.getenv(_LEVEL_ENV_VAR, "WARNING")
    return getattr(logging, value.upper(), logging.WARNING)


_DEFAULT_LEVEL = _level_from_env()

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached to avoid duplicate handlers. The logger name should
    typically be `__name__` from the calling module.

    Args:
        name: Logger name (typically `__name__`). If None, returns the package
            logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from scalaropt.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("bracket shrunk")
    """
    if name is None:
        name = "scalaropt"

    logger_name = name if name.startswith("scalaropt") else f"scalaropt.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all scalaropt loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for scalaropt.

    Replaces the handlers of every logger created so far and sets the
    default used for loggers created later.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).

    Example:
        >>> from scalaropt.logging import configure_logging
        >>> import logging
        >>> configure_logging(level=logging.DEBUG)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    if stream is None:
        stream = sys.stderr

    formatter = logging.Formatter(format_string or _FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


__all__ = ["configure_logging", "get_logger", "set_log_level"]
