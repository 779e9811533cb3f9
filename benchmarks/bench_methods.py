"""Benchmark evaluation counts and wall-clock time per minimization method."""

import math
import time
from typing import Callable, Dict

from scalaropt import TraceMonitor, chebmin, golden_section, newton_v1, newton_v2, simple_spi


class CountingObjective:
    """Wrap a scalar function and count its evaluations."""

    def __init__(self, f: Callable[[float], float]) -> None:
        self.f = f
        self.nfev = 0

    def __call__(self, x: float) -> float:
        self.nfev += 1
        return self.f(x)


def _objective(x: float) -> float:
    return math.exp(x) - 2.0 * x


def _objective_d(x: float) -> float:
    return math.exp(x) - 2.0


def _objective_d2(x: float) -> float:
    return math.exp(x)


def benchmark_method(name: str, atol: float = 1e-8, repeats: int = 200) -> Dict[str, float]:
    """Benchmark a single method on exp(x) - 2x.

    Args:
        name: One of 'newton_v1', 'newton_v2', 'golden_section', 'simple_spi'.
        atol: Absolute tolerance passed to the method.
        repeats: Number of timed runs.

    Returns:
        Dictionary with evaluation counts, error and timing results.
    """
    g = CountingObjective(_objective)
    dg = CountingObjective(_objective_d)
    d2g = CountingObjective(_objective_d2)
    trace = TraceMonitor()

    runners = {
        "newton_v1": lambda: newton_v1(1.5, dg, d2g, atol=atol, monitor=trace),
        "newton_v2": lambda: newton_v2(1.5, g, dg, d2g, atol=atol, monitor=trace),
        "golden_section": lambda: golden_section(g, 0.0, 1.5, atol=atol, monitor=trace),
        "simple_spi": lambda: simple_spi(g, 0.0, 1.5, atol=atol, monitor=trace),
    }
    if name not in runners:
        raise ValueError(f"Unknown method '{name}'. Choose from {sorted(runners)}.")
    run = runners[name]

    x = run()
    counts = {"nfev": g.nfev, "ndev": dg.nfev, "nhev": d2g.nfev, "niter": len(trace)}

    start = time.perf_counter()
    for _ in range(repeats):
        run()
    end = time.perf_counter()

    return {
        "method": name,
        "x": x,
        "error": abs(x - math.log(2.0)),
        **counts,
        "time_per_solve_us": (end - start) / repeats * 1e6,
    }


def benchmark_chebmin(N: int, repeats: int = 20) -> Dict[str, float]:
    """Benchmark chebmin on cos(x) log(x) over [0.5, 5 pi]."""
    g = CountingObjective(lambda x: math.cos(x) * math.log(x))
    x = chebmin(g, N, lo=0.5, hi=5 * math.pi)
    nfev = g.nfev

    start = time.perf_counter()
    for _ in range(repeats):
        chebmin(g, N, lo=0.5, hi=5 * math.pi)
    end = time.perf_counter()

    return {
        "N": N,
        "x": x,
        "value": math.cos(x) * math.log(x),
        "nfev": nfev,
        "time_per_solve_ms": (end - start) / repeats * 1e3,
    }


def main():
    """Run all method benchmarks."""
    print("Method benchmarks on exp(x) - 2x")
    print("=" * 60)
    for name in ("newton_v1", "newton_v2", "golden_section", "simple_spi"):
        result = benchmark_method(name)
        print(
            f"{name:>15}: error={result['error']:.2e}, nfev={result['nfev']}, "
            f"ndev={result['ndev']}, nhev={result['nhev']}, "
            f"{result['time_per_solve_us']:.1f} us/solve"
        )

    print()
    print("chebmin on cos(x) log(x) over [0.5, 5 pi]")
    print("=" * 60)
    for N in (25, 50, 100, 200):
        result = benchmark_chebmin(N)
        print(
            f"N={N:>4}: x={result['x']:.8f}, g={result['value']:.8f}, "
            f"nfev={result['nfev']}, {result['time_per_solve_ms']:.2f} ms/solve"
        )


if __name__ == "__main__":
    main()
