"""
Example: One-dimensional minimization with scalaropt

This example runs every method in the package on a few test problems:
a cubic with a single local minimum on [0, 2], the convex function
exp(x) - 2x, and the oscillating function cos(x) log(x), whose global
minimum over [0.5, 5 pi] sits at the right endpoint.
"""

import math

import torch

from scalaropt import (
    ConvergenceError,
    TraceMonitor,
    autodiff_derivatives,
    chebmin,
    deriv2_fd,
    deriv_fd,
    golden_section,
    newton_v1,
    newton_v2,
    remap,
    simple_spi,
)


def cubic(x):
    return x * x * x - x


def cubic_d(x):
    return 3 * x * x - 1


def cubic_d2(x):
    return 6 * x


def objective(x):
    return math.cos(x) * math.log(x)


def example_newton():
    """Example: Newton's method on the cubic x^3 - x."""
    print("=" * 60)
    print("Example 1: Newton's Method - Cubic x^3 - x")
    print("=" * 60)

    trace = TraceMonitor()
    x = newton_v1(0.5, cubic_d, cubic_d2, monitor=trace)
    print(f"newton_v1 minimizer: {x:.12f} (exact {1 / math.sqrt(3):.12f})")
    print(f"Iterates recorded: {len(trace)}")

    x = newton_v2(0.5, cubic, cubic_d, cubic_d2)
    print(f"newton_v2 minimizer: {x:.12f}")

    # Started on the concave side, the pure Newton step heads for the maximum
    x = newton_v1(-0.5, cubic_d, cubic_d2)
    print(f"newton_v1 from -0.5 finds the stationary point {x:.12f}")
    print()


def example_bracketing():
    """Example: Golden-section search and parabolic interpolation."""
    print("=" * 60)
    print("Example 2: Bracketing Methods - exp(x) - 2x")
    print("=" * 60)

    g = lambda x: math.exp(x) - 2 * x  # noqa: E731
    golden_trace = TraceMonitor()
    x = golden_section(g, 0.0, 1.5, atol=1e-8, monitor=golden_trace)
    print(f"golden_section: {x:.10f} after {len(golden_trace)} bracket updates")

    spi_trace = TraceMonitor()
    x = simple_spi(g, 0.0, 1.5, atol=1e-8, monitor=spi_trace)
    print(f"simple_spi:     {x:.10f} after {len(spi_trace)} interpolations")
    print(f"Exact minimizer ln 2 = {math.log(2.0):.10f}")

    try:
        simple_spi(lambda x: 2 * x + 1, 0.0, 1.0, nsteps=10)
    except ConvergenceError as exc:
        print(f"Linear objective: {exc}")
    print()


def example_derivatives():
    """Example: Finite differences against automatic differentiation."""
    print("=" * 60)
    print("Example 3: Derivatives - cos(x) log(x)")
    print("=" * 60)

    dg, d2g = autodiff_derivatives(lambda t: torch.cos(t) * torch.log(t))
    x = 3 * math.pi
    print(f"g'(3 pi):  finite difference {deriv_fd(objective, x):+.8f}, autodiff {dg(x):+.8f}")
    print(f"g''(3 pi): finite difference {deriv2_fd(objective, x):+.8f}, autodiff {d2g(x):+.8f}")

    xmin = newton_v2(x, objective, dg, d2g, backtrack="step")
    print(f"Local minimizer near 3 pi: {xmin:.10f}, g = {objective(xmin):.10f}")
    print()


def example_global():
    """Example: Global minimization through a Chebyshev surrogate."""
    print("=" * 60)
    print("Example 4: Global Minimization - Chebyshev Critical Points")
    print("=" * 60)

    lo, hi = 0.5, 5 * math.pi
    x = chebmin(objective, 100, lo=lo, hi=hi)
    print(f"chebmin over [{lo}, 5 pi]: x = {x:.10f}, g = {objective(x):.10f}")

    gt = remap(objective, lo, hi)
    t = golden_section(gt, 0.62, 1.0, atol=1e-10)
    print(f"golden_section on the last basin: g = {gt(t):.10f}")

    x = chebmin(objective, 100, lo=lo, hi=4 * math.pi)
    print(f"chebmin over [{lo}, 4 pi]: x = {x:.10f}, g = {objective(x):.10f}")
    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("scalaropt - One-Dimensional Minimization Examples")
    print("=" * 60 + "\n")

    example_newton()
    example_bracketing()
    example_derivatives()
    example_global()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
