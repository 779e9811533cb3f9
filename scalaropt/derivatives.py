"""Derivative helpers: finite-difference checks and exact autograd derivatives.

The finite-difference estimators are meant as independent sanity checks for
hand-written ``dg``/``d2g`` functions. :func:`autodiff_derivatives` builds the
derivatives of an objective written with torch operations, so Newton solvers
can be driven from ``g`` alone.
"""

from __future__ import annotations

from typing import Callable, Tuple

import torch

from .core import Scalar


def deriv_fd(g: Scalar, x: float, h: float = 1e-6) -> float:
    """Central-difference estimate of g'(x)."""
    if h <= 0:
        raise ValueError("h must be positive")
    return (g(x + h) - g(x - h)) / (2.0 * h)


def deriv2_fd(g: Scalar, x: float, h: float = 1e-4) -> float:
    """Central-difference estimate of g''(x)."""
    if h <= 0:
        raise ValueError("h must be positive")
    return (g(x + h) - 2.0 * g(x) + g(x - h)) / (h**2)


def _evaluate(g: Callable[[torch.Tensor], torch.Tensor], x: float) -> Tuple[torch.Tensor, torch.Tensor]:
    t = torch.tensor(float(x), dtype=torch.float64, requires_grad=True)
    value = g(t)
    if not isinstance(value, torch.Tensor) or value.ndim != 0:
        raise ValueError("objective must return a scalar (0D) tensor")
    return t, value


def autodiff_derivatives(
    g: Callable[[torch.Tensor], torch.Tensor],
) -> Tuple[Scalar, Scalar]:
    """
    Build g' and g'' using PyTorch's autograd.

    Args:
        g: Objective taking a 0D float64 tensor and returning a 0D tensor,
            written with torch operations (``torch.cos``, ``torch.log``, ...).

    Returns:
        ``(dg, d2g)``, two callables mapping a float to a float.

    Raises:
        ValueError: If ``g`` does not return a scalar tensor.

    Example:
        >>> dg, d2g = autodiff_derivatives(lambda x: (x - 2.0) ** 2)
        >>> dg(0.0), d2g(0.0)
        (-4.0, 2.0)
    """

    def dg(x: float) -> float:
        t, value = _evaluate(g, x)
        if not value.requires_grad:
            return 0.0
        (grad,) = torch.autograd.grad(value, t, allow_unused=True)
        return 0.0 if grad is None else float(grad)

    def d2g(x: float) -> float:
        t, value = _evaluate(g, x)
        if not value.requires_grad:
            return 0.0
        (grad,) = torch.autograd.grad(value, t, create_graph=True, allow_unused=True)
        if grad is None or not grad.requires_grad:
            return 0.0
        (hess,) = torch.autograd.grad(grad, t, allow_unused=True)
        return 0.0 if hess is None else float(hess)

    return dg, d2g


__all__ = ["autodiff_derivatives", "deriv2_fd", "deriv_fd"]
