"""Core interfaces shared across the one-dimensional solvers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional

import numpy as np

Scalar = Callable[[float], float]
Monitor = Callable[..., None]

DTOL = 1e-8
ATOL = 1e-8
NSTEPS = 100


class ConvergenceError(RuntimeError):
    """Raised when a solver exhausts its iteration cap."""

    def __init__(self, method: str, nsteps: int) -> None:
        super().__init__(f"{method} did not converge in {nsteps} steps")
        self.method = method
        self.nsteps = nsteps


@dataclass(frozen=True)
class SolverConfig:
    """
    Stopping criteria for the iterative solvers.

    Args:
        dtol: Stop once the derivative magnitude falls below this value.
        atol: Stop once the step (or bracket half-width) falls below this value.
        nsteps: Iteration cap; exceeding it raises :class:`ConvergenceError`.
    """

    dtol: float = DTOL
    atol: float = ATOL
    nsteps: int = NSTEPS

    def __post_init__(self) -> None:
        if not self.dtol > 0:
            raise ValueError("dtol must be positive")
        if not self.atol > 0:
            raise ValueError("atol must be positive")
        if self.nsteps < 1:
            raise ValueError("nsteps must be at least 1")


DEFAULT_CONFIG = SolverConfig()


def resolve_config(
    config: Optional[SolverConfig] = None,
    dtol: Optional[float] = None,
    atol: Optional[float] = None,
    nsteps: Optional[int] = None,
) -> SolverConfig:
    """Merge explicit keyword values into `config` (or the defaults)."""
    base = DEFAULT_CONFIG if config is None else config
    overrides = {
        name: value
        for name, value in (("dtol", dtol), ("atol", atol), ("nsteps", nsteps))
        if value is not None
    }
    if not overrides:
        return base
    return replace(base, **overrides)


def safe_ratio(num: float, den: float) -> float:
    """Divide with IEEE semantics: x/0 gives +-inf and 0/0 gives nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(num) / np.float64(den))


__all__ = [
    "ATOL",
    "ConvergenceError",
    "DEFAULT_CONFIG",
    "DTOL",
    "Monitor",
    "NSTEPS",
    "Scalar",
    "SolverConfig",
    "resolve_config",
    "safe_ratio",
]
