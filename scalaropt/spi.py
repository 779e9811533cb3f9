"""Successive parabolic interpolation."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .core import ConvergenceError, Monitor, Scalar, SolverConfig, resolve_config
from .logging import get_logger
from .monitors import noop_monitor

logger = get_logger(__name__)


def simple_spi(
    g: Scalar,
    a: float,
    b: float,
    *,
    atol: Optional[float] = None,
    nsteps: Optional[int] = None,
    monitor: Optional[Monitor] = None,
    config: Optional[SolverConfig] = None,
) -> float:
    """Locate a stationary point of ``g`` by successive parabolic interpolation.

    Starting from ``a``, ``b`` and ``c = (a+b)/2``, each step moves to the
    vertex of the parabola through the three most recent points and drops
    the oldest one. Convergence is superlinear (order about 1.3) near a
    minimum with nonzero curvature; there is no global guarantee.

    Degenerate curvature is not guarded against: the divided differences use
    IEEE arithmetic, so coincident points or a flat parabola produce
    ``inf``/``nan`` iterates that only show up as non-convergence.

    Parameters
    ----------
    g:
        Objective.
    a, b:
        Two starting points.
    atol, nsteps:
        Stop when ``|b - c| < atol``; give up after ``nsteps`` steps.
    monitor:
        Called with ``(a, b, c)`` before the loop and after every step.

    Raises
    ------
    ConvergenceError
        If the window does not collapse within ``nsteps`` steps.
    """
    cfg = resolve_config(config, atol=atol, nsteps=nsteps)
    if monitor is None:
        monitor = noop_monitor
    a, b = np.float64(a), np.float64(b)
    c = (a + b) / 2
    ga, gb, gc = g(a), g(b), g(c)
    monitor(a, b, c)
    with np.errstate(divide="ignore", invalid="ignore"):
        for step in range(1, cfg.nsteps + 1):
            gab = (gb - ga) / (b - a)
            gbc = (gc - gb) / (c - b)
            gabc = (gbc - gab) / (c - a)
            x = (a + b) / 2 - gab / (2 * gabc)
            a, b, c = b, c, x
            ga, gb, gc = gb, gc, g(x)
            monitor(a, b, c)
            if abs(b - c) < cfg.atol:
                logger.debug("converged to %.16g after %d steps", c, step)
                return float(c)
    raise ConvergenceError("simple_spi", cfg.nsteps)


__all__ = ["simple_spi"]
