import math

import numpy as np
import pytest

from scalaropt import ConvergenceError, SolverConfig, TraceMonitor, simple_spi


def expx(x: float) -> float:
    return math.exp(x) - 2.0 * x


def test_spi_converges_to_minimum():
    x = simple_spi(expx, 0.0, 1.5, atol=1e-7)
    assert abs(x - math.log(2.0)) < 1e-6
    assert isinstance(x, float)


def test_spi_exact_on_quadratic():
    trace = TraceMonitor()
    x = simple_spi(lambda x: (x - 3.0) ** 2, 0.0, 1.0, monitor=trace)
    assert x == pytest.approx(3.0, abs=1e-12)
    assert len(trace) == 3
    assert trace.history[0] == (0.0, 1.0, 0.5)


def test_spi_superlinear_convergence():
    trace = TraceMonitor()
    simple_spi(expx, 0.0, 1.5, atol=1e-7, monitor=trace)
    errors = np.abs(trace.values[:, 2] - math.log(2.0))
    first_small = int(np.argmax(errors < 1e-2))
    first_tiny = int(np.argmax(errors < 1e-6))
    assert errors[first_small] < 1e-2
    assert errors[first_tiny] < 1e-6
    # linear convergence at the golden-section rate would need ~19 steps
    assert first_tiny - first_small <= 5
    ratios = errors[first_small + 1 : first_tiny + 1] / errors[first_small:first_tiny]
    assert ratios[-1] < 0.1


def test_spi_degenerate_curvature_reports_non_convergence():
    with pytest.raises(ConvergenceError) as excinfo:
        simple_spi(lambda x: 2.0 * x + 1.0, 0.0, 1.0, nsteps=10)
    assert excinfo.value.method == "simple_spi"


def test_spi_respects_config_cap():
    with pytest.raises(ConvergenceError):
        simple_spi(expx, 0.0, 1.5, config=SolverConfig(atol=1e-7, nsteps=2))
