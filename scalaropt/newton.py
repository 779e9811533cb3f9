"""Newton iterations for stationary points of a scalar function.

Both solvers look for a zero of ``g'`` using ``g''``; neither distinguishes
minima from maxima or saddle points on its own. :func:`newton_v2` adds a
descent guard that only accepts steps decreasing ``g``.
"""

from __future__ import annotations

from typing import Optional

from .core import ConvergenceError, Monitor, Scalar, SolverConfig, resolve_config, safe_ratio
from .logging import get_logger
from .monitors import noop_monitor

logger = get_logger(__name__)

BACKTRACK_MODES = ("iterate", "step")


def newton_v1(
    x0: float,
    dg: Scalar,
    d2g: Scalar,
    *,
    dtol: Optional[float] = None,
    atol: Optional[float] = None,
    nsteps: Optional[int] = None,
    monitor: Optional[Monitor] = None,
    config: Optional[SolverConfig] = None,
) -> float:
    """Plain Newton iteration ``x <- x - g'(x)/g''(x)``.

    Parameters
    ----------
    x0:
        Initial guess.
    dg, d2g:
        First and second derivative of the objective.
    dtol, atol, nsteps:
        Stop when ``|g'(x)| < dtol`` or the last step is shorter than
        ``atol``; give up after ``nsteps`` updates. Unset values come from
        ``config`` (or the package defaults).
    monitor:
        Called with ``x`` before the loop and after every update.

    Raises
    ------
    ConvergenceError
        If neither tolerance is met within ``nsteps`` updates.
    """
    cfg = resolve_config(config, dtol=dtol, atol=atol, nsteps=nsteps)
    if monitor is None:
        monitor = noop_monitor
    x = float(x0)
    monitor(x)
    for step in range(1, cfg.nsteps + 1):
        dx = safe_ratio(dg(x), d2g(x))
        x -= dx
        monitor(x)
        if abs(dx) < cfg.atol or abs(dg(x)) < cfg.dtol:
            logger.debug("converged to %.16g after %d steps", x, step)
            return x
    raise ConvergenceError("newton_v1", cfg.nsteps)


def newton_v2(
    x0: float,
    g: Scalar,
    dg: Scalar,
    d2g: Scalar,
    *,
    dtol: Optional[float] = None,
    atol: Optional[float] = None,
    nsteps: Optional[int] = None,
    monitor: Optional[Monitor] = None,
    config: Optional[SolverConfig] = None,
    backtrack: str = "iterate",
) -> float:
    """Newton iteration that only accepts steps decreasing ``g``.

    A full step ``x + alpha*p`` (``alpha = 1``) is tried first and accepted
    when ``g`` strictly decreases; the direction is then recomputed at the
    new point and ``alpha`` reset. A rejected step is handled according to
    ``backtrack``:

    ``"iterate"``
        halve the current iterate ``x`` itself. This moves ``x`` towards zero
        rather than shortening the step and is most likely a slip for halving
        alpha; kept as the default for reproducibility of existing results.
    ``"step"``
        halve ``alpha`` (classical backtracking).

    Accepted objective values form a strictly decreasing sequence in both
    modes. ``monitor`` is called with ``x`` before the loop and after each
    accepted step.

    Raises
    ------
    ConvergenceError
        If no tolerance is met within ``nsteps`` iterations (accepted and
        rejected trials both count).
    ValueError
        If ``backtrack`` is not one of ``"iterate"`` or ``"step"``.
    """
    if backtrack not in BACKTRACK_MODES:
        raise ValueError(f"backtrack must be one of {BACKTRACK_MODES}, got {backtrack!r}")
    cfg = resolve_config(config, dtol=dtol, atol=atol, nsteps=nsteps)
    if monitor is None:
        monitor = noop_monitor
    x = float(x0)
    monitor(x)
    gx = g(x)
    p = -safe_ratio(dg(x), d2g(x))
    alpha = 1.0
    for step in range(1, cfg.nsteps + 1):
        xnew = x + alpha * p
        gxnew = g(xnew)
        if gxnew < gx:
            xold, x, gx = x, xnew, gxnew
            dgx = dg(x)
            p = -safe_ratio(dgx, d2g(x))
            alpha = 1.0
            monitor(x)
            if abs(dgx) < cfg.dtol or abs(x - xold) < cfg.atol:
                logger.debug("converged to %.16g after %d steps", x, step)
                return x
        elif backtrack == "iterate":
            logger.debug("rejected step from %.16g; halving iterate", x)
            x *= 0.5
        else:
            logger.debug("rejected step from %.16g; halving alpha", x)
            alpha *= 0.5
    raise ConvergenceError("newton_v2", cfg.nsteps)


__all__ = ["BACKTRACK_MODES", "newton_v1", "newton_v2"]
