"""Chebyshev surrogates for global minimization on an interval.

A function sampled at Chebyshev nodes is represented by its expansion
coefficients ``a`` in the basis ``T_0, T_1, ...`` on ``[-1, 1]``:

    p(x) = a[0] + a[1] T_1(x) + ... + a[N-1] T_{N-1}(x)

with ``T_0 = 1``, ``T_1 = x`` and ``T_{j+1} = 2x T_j - T_{j-1}``. The
surrogate can be evaluated, differentiated and its real roots found from
the eigenvalues of the colleague matrix. :func:`chebmin` composes these
steps into a global minimizer: the smallest value over the critical points
of the surrogate and the two endpoints.

Example
-------
>>> import numpy as np
>>> a = chebfit(np.cos, 20)
>>> float(abs(chebeval(a, 0.3) - np.cos(0.3))) < 1e-12
True
"""

from __future__ import annotations

from typing import Callable, Union

import numpy as np

from .core import Scalar
from .logging import get_logger

logger = get_logger(__name__)

ArrayLike = Union[float, np.ndarray]


def chebnodes(N: int) -> np.ndarray:
    """Return the ``N`` Chebyshev points ``cos(pi (k + 1/2) / N)``."""
    if N < 1:
        raise ValueError("N must be at least 1")
    return np.cos(np.pi * (np.arange(N) + 0.5) / N)


def chebfit(f: Scalar, N: int) -> np.ndarray:
    """Fit a degree ``N-1`` Chebyshev expansion to ``f`` on ``[-1, 1]``.

    ``f`` is sampled once at each Chebyshev node. The coefficients follow the
    discrete orthogonality of ``T_k`` on those nodes: ``a[0]`` is the mean of
    the samples and ``a[k] = (2/N) sum_i T_k(x_i) f(x_i)`` for ``k >= 1``.
    """
    x = chebnodes(N)
    fx = np.array([f(float(xi)) for xi in x], dtype=float)
    a = np.zeros(N)
    a[0] = np.mean(fx)
    if N == 1:
        return a
    Tkm1 = np.ones(N)
    Tk = x.copy()
    a[1] = 2.0 * np.dot(Tk, fx) / N
    for k in range(2, N):
        Tkm1, Tk = Tk, 2.0 * x * Tk - Tkm1
        a[k] = 2.0 * np.dot(Tk, fx) / N
    return a


def chebeval(a: np.ndarray, x: ArrayLike) -> ArrayLike:
    """Evaluate the expansion with coefficients ``a`` at ``x``.

    Scalars give a float, arrays give an array of the same shape.
    """
    a = np.asarray(a, dtype=float)
    xs = np.asarray(x, dtype=float)
    p = np.full(xs.shape, a[0] if a.size else 0.0)
    if a.size > 1:
        Tkm1 = np.ones_like(xs)
        Tk = xs.copy()
        p = p + a[1] * Tk
        for k in range(2, a.size):
            Tkm1, Tk = Tk, 2.0 * xs * Tk - Tkm1
            p = p + a[k] * Tk
    if np.ndim(x) == 0:
        return float(p)
    return p


def chebderiv(a: np.ndarray) -> np.ndarray:
    """Coefficients (length ``N-1``) of the derivative of the expansion ``a``."""
    a = np.asarray(a, dtype=float)
    n = a.size - 1
    if n < 1:
        return np.zeros(0)
    b = np.zeros(n)
    for k in range(n - 1, -1, -1):
        b[k] = 2.0 * (k + 1) * a[k + 1] + (b[k + 2] if k + 2 < n else 0.0)
    b[0] /= 2.0
    return b


def chebzeros(a: np.ndarray, *, tol: float = 0.0) -> np.ndarray:
    """Real roots of the expansion ``a`` in ``[-1, 1]``, in ascending order.

    The roots are the eigenvalues of the colleague matrix, which encodes
    ``x T_j = (T_{j+1} + T_{j-1}) / 2`` on the vector
    ``(T_{n-1}, ..., T_1, T_0)`` with ``T_n`` eliminated through ``a``.
    Exactly zero trailing coefficients are ignored when fixing the degree.
    Only eigenvalues with an exactly zero imaginary part are kept; ``tol``
    widens the accepted interval to ``[-1 - tol, 1 + tol]`` for roots that
    land on an endpoint up to rounding.
    """
    a = np.asarray(a, dtype=float)
    nonzero = np.nonzero(a)[0]
    n = int(nonzero[-1]) if nonzero.size else 0
    if n < 1:
        return np.zeros(0)
    if n == 1:
        roots = np.array([-a[0] / a[1]])
    else:
        A = np.diag(np.ones(n - 1), 1) + np.diag(np.ones(n - 1), -1)
        A[n - 1, n - 2] = 2.0
        A[0, :] -= a[n - 1 :: -1] / a[n]
        A *= 0.5
        eigvals = np.linalg.eigvals(A)
        roots = eigvals[np.imag(eigvals) == 0].real
    roots = roots[(roots >= -1.0 - tol) & (roots <= 1.0 + tol)]
    return np.sort(roots)


def chebtrim(a: np.ndarray, tol: float = 1e-14) -> np.ndarray:
    """Drop trailing coefficients below ``tol`` relative to the largest one."""
    a = np.asarray(a, dtype=float)
    if a.size == 0:
        return a.copy()
    scale = np.max(np.abs(a))
    if scale == 0.0:
        return a[:1].copy()
    keep = np.nonzero(np.abs(a) > tol * scale)[0]
    return a[: keep[-1] + 1].copy()


def chebcheck(f: Scalar, a: np.ndarray, npts: int = 1000) -> float:
    """Maximum error of the expansion against ``f`` on a uniform grid.

    The grid shares no points with the fitting nodes except by accident, so
    this is a held-out estimate of the approximation error.
    """
    if npts < 2:
        raise ValueError("npts must be at least 2")
    x = np.linspace(-1.0, 1.0, npts)
    fx = np.array([f(float(xi)) for xi in x], dtype=float)
    return float(np.max(np.abs(chebeval(a, x) - fx)))


def to_canonical(x: ArrayLike, lo: float, hi: float) -> ArrayLike:
    """Map ``[lo, hi]`` onto ``[-1, 1]``."""
    if np.ndim(x):
        x = np.asarray(x, dtype=float)
    return 2.0 * (x - lo) / (hi - lo) - 1.0


def from_canonical(t: ArrayLike, lo: float, hi: float) -> ArrayLike:
    """Map ``[-1, 1]`` onto ``[lo, hi]``."""
    if np.ndim(t):
        t = np.asarray(t, dtype=float)
    return lo + (t + 1.0) * (hi - lo) / 2.0


def remap(g: Scalar, lo: float, hi: float) -> Callable[[float], float]:
    """Return ``t -> g(x(t))`` where ``x(t)`` maps ``[-1, 1]`` onto ``[lo, hi]``."""
    if not lo < hi:
        raise ValueError("interval must satisfy lo < hi")

    def canonical(t: float) -> float:
        return g(from_canonical(t, lo, hi))

    return canonical


def chebmin(
    g: Scalar,
    N: int,
    *,
    lo: float = -1.0,
    hi: float = 1.0,
    trim: float = 1e-14,
    use_surrogate: bool = False,
) -> float:
    """Global minimizer of ``g`` on ``[lo, hi]`` through a Chebyshev surrogate.

    The surrogate of ``g`` (``N`` nodes) is differentiated, the derivative's
    tail is trimmed with :func:`chebtrim` (``trim=0`` keeps every
    coefficient) and its real roots become the candidate critical points.
    ``g`` itself, or the surrogate when ``use_surrogate`` is set, is
    evaluated at the candidates and both endpoints; the argument of the
    smallest value is returned in ``[lo, hi]`` coordinates.

    The answer is only as good as the fit; check it with :func:`chebcheck`.
    """
    gt = remap(g, lo, hi)
    a = chebfit(gt, N)
    da = chebderiv(a)
    if trim > 0:
        da = chebtrim(da, trim)
    candidates = np.concatenate(([-1.0], chebzeros(da), [1.0]))
    if use_surrogate:
        values = chebeval(a, candidates)
    else:
        values = np.array([gt(float(t)) for t in candidates], dtype=float)
    best = int(np.argmin(values))
    logger.debug(
        "checked %d candidates; best t=%.16g value=%.16g",
        candidates.size,
        candidates[best],
        values[best],
    )
    return float(from_canonical(float(candidates[best]), lo, hi))


__all__ = [
    "chebcheck",
    "chebderiv",
    "chebeval",
    "chebfit",
    "chebmin",
    "chebnodes",
    "chebtrim",
    "chebzeros",
    "from_canonical",
    "remap",
    "to_canonical",
]
