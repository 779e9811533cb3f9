"""Iteration monitors accepted by every solver's ``monitor=`` argument.

Solvers call the monitor synchronously: Newton solvers with the current
iterate ``x``, golden-section search with the bracket ``(a, b)`` and
parabolic interpolation with the running triple ``(a, b, c)``.
"""

from __future__ import annotations

from typing import Any, List, Optional

import numpy as np

from .logging import get_logger


def noop_monitor(*args: Any) -> None:
    """Monitor that ignores its arguments."""


class TraceMonitor:
    """Record every monitor call.

    Single-argument calls are stored as the bare value, multi-argument calls
    as a tuple.

    Example
    -------
    >>> trace = TraceMonitor()
    >>> trace(1.0)
    >>> trace(2.0)
    >>> trace.history
    [1.0, 2.0]
    """

    def __init__(self) -> None:
        self.history: List[Any] = []

    def __call__(self, *args: Any) -> None:
        if len(args) == 1:
            self.history.append(float(args[0]))
        else:
            self.history.append(tuple(float(v) for v in args))

    def __len__(self) -> int:
        return len(self.history)

    @property
    def values(self) -> np.ndarray:
        """History as an array of shape (ncalls,) or (ncalls, nargs)."""
        return np.asarray(self.history, dtype=float)

    def clear(self) -> None:
        self.history.clear()


def log_monitor(name: Optional[str] = None):
    """Return a monitor that logs each call at DEBUG level."""
    logger = get_logger(name or "monitor")

    def monitor(*args: Any) -> None:
        logger.debug("iterate %s", ", ".join(f"{float(v):.16g}" for v in args))

    return monitor


__all__ = ["TraceMonitor", "log_monitor", "noop_monitor"]
