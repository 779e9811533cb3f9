"""Golden-section search for the minimizer of a unimodal function."""

from __future__ import annotations

import math
from typing import Optional

from .core import Monitor, Scalar, SolverConfig, resolve_config
from .logging import get_logger
from .monitors import noop_monitor

logger = get_logger(__name__)

PHI = (1 + math.sqrt(5)) / 2


def golden_section(
    g: Scalar,
    a: float,
    b: float,
    *,
    atol: Optional[float] = None,
    monitor: Optional[Monitor] = None,
    config: Optional[SolverConfig] = None,
) -> float:
    """Shrink the bracket ``[a, b]`` around the minimizer of ``g``.

    The interior points sit at ``b + (a-b)/phi`` and ``a + (b-a)/phi`` so one
    of them (and its function value) carries over to the next bracket; each
    iteration costs a single evaluation and shrinks the width by ``1/phi``.
    When both interior values tie, the bracket shrinks to the interior
    points and both are recomputed.

    Parameters
    ----------
    g:
        Objective, assumed unimodal on ``[a, b]``.
    a, b:
        Initial bracket, ``a < b``.
    atol:
        The search stops once ``b - a <= 2*atol``; the returned midpoint is
        then within ``atol`` of the minimizer. Unset values come from ``config``
        (or the package defaults); ``config.dtol`` and ``config.nsteps`` are
        not used because the bracket shrinks by a fixed factor.
    monitor:
        Called with ``(a, b)`` before the loop and after every update.

    Returns
    -------
    float
        Midpoint of the final bracket.
    """
    if not a < b:
        raise ValueError("bracket must satisfy a < b")
    atol = resolve_config(config, atol=atol).atol
    if monitor is None:
        monitor = noop_monitor
    a, b = float(a), float(b)
    x1 = b + (a - b) / PHI
    x2 = a + (b - a) / PHI
    g1, g2 = g(x1), g(x2)
    nfev = 2
    monitor(a, b)
    while abs(b - a) > 2 * atol:
        if g1 < g2:
            b, x2, g2 = x2, x1, g1
            x1 = b + (a - b) / PHI
            g1 = g(x1)
            nfev += 1
        elif g1 > g2:
            a, x1, g1 = x1, x2, g2
            x2 = a + (b - a) / PHI
            g2 = g(x2)
            nfev += 1
        else:
            a, b = x1, x2
            x1 = b + (a - b) / PHI
            x2 = a + (b - a) / PHI
            g1, g2 = g(x1), g(x2)
            nfev += 2
        monitor(a, b)
    logger.debug("finished with bracket [%.16g, %.16g] after %d evaluations", a, b, nfev)
    return (a + b) / 2


__all__ = ["PHI", "golden_section"]
