import math

import numpy as np
import pytest

from scalaropt import (
    chebcheck,
    chebderiv,
    chebeval,
    chebfit,
    chebmin,
    chebnodes,
    chebtrim,
    chebzeros,
    from_canonical,
    golden_section,
    remap,
    to_canonical,
)


def cubic(x: float) -> float:
    return x**3 - x


def test_chebfit_cos3x_accuracy():
    a = chebfit(lambda x: math.cos(3 * x), 30)
    xx = np.linspace(-1.0, 1.0, 2001)
    assert np.max(np.abs(chebeval(a, xx) - np.cos(3 * xx))) < 1e-6
    assert chebcheck(lambda x: math.cos(3 * x), a) < 1e-6


def test_chebfit_reproduces_samples_at_nodes():
    def f(x: float) -> float:
        return math.exp(x) * math.sin(5 * x)

    N = 12
    a = chebfit(f, N)
    nodes = chebnodes(N)
    expected = np.array([f(x) for x in nodes])
    assert np.allclose(chebeval(a, nodes), expected, atol=1e-13)


def test_chebfit_low_degree_coefficients():
    assert np.allclose(chebfit(lambda x: 3.0, 1), [3.0])
    assert np.allclose(chebfit(cubic, 4), [0.0, -0.25, 0.0, 0.25], atol=1e-15)
    with pytest.raises(ValueError):
        chebfit(cubic, 0)


def test_chebeval_scalar_and_array_inputs():
    a = np.array([1.0, 2.0, 3.0])  # 1 + 2x + 3(2x^2 - 1)
    value = chebeval(a, 0.5)
    assert isinstance(value, float)
    assert value == pytest.approx(1.0 + 1.0 + 3.0 * (2 * 0.25 - 1))
    grid = np.linspace(-1.0, 1.0, 7).reshape(7, 1)
    assert chebeval(a, grid).shape == (7, 1)
    assert chebeval(np.array([2.5]), 0.3) == 2.5


def test_chebderiv_of_sine_matches_cosine():
    a = chebfit(math.sin, 20)
    xx = np.linspace(-1.0, 1.0, 501)
    assert np.max(np.abs(chebeval(chebderiv(a), xx) - np.cos(xx))) < 1e-10


def test_chebderiv_exact_coefficients():
    # d/dx (T_3 - T_1)/4 = 3x^2 - 1 = 0.5 T_0 + 1.5 T_2
    assert np.allclose(chebderiv([0.0, -0.25, 0.0, 0.25]), [0.5, 0.0, 1.5])
    assert chebderiv([4.0]).size == 0
    assert len(chebderiv(np.ones(9))) == 8


def test_chebzeros_cubic_roots():
    a = chebfit(cubic, 4)
    roots = chebzeros(a, tol=1e-10)
    assert np.allclose(roots, [-1.0, 0.0, 1.0], atol=1e-10)


def test_chebzeros_after_trimming_overfit_coefficients():
    a = chebtrim(chebfit(cubic, 10))
    assert a.size == 4
    roots = chebzeros(a, tol=1e-10)
    assert np.allclose(roots, [-1.0, 0.0, 1.0], atol=1e-10)


def test_chebzeros_filters_complex_and_out_of_range_roots():
    assert np.allclose(chebzeros([0.0, 0.0, 1.0]), [-1 / math.sqrt(2), 1 / math.sqrt(2)])
    assert chebzeros([2.0, 0.0, 1.0]).size == 0  # 2x^2 + 1
    assert chebzeros([-4.0, 0.0, 1.0]).size == 0  # roots at +-sqrt(2.5)
    assert np.allclose(chebzeros([0.5, 1.0]), [-0.5])
    assert chebzeros([3.0]).size == 0
    assert np.allclose(chebzeros([0.0, 0.0, 1.0, 0.0]), [-1 / math.sqrt(2), 1 / math.sqrt(2)])


def test_chebzeros_matches_sampled_sign_changes():
    a = chebfit(lambda x: math.cos(6 * x), 40)
    roots = chebzeros(chebtrim(a))
    expected = np.array([(2 * k + 1) * math.pi / 12 for k in range(-2, 2)])
    assert np.allclose(roots, expected, atol=1e-8)


def test_chebtrim():
    assert np.allclose(chebtrim([1.0, 1e-3, 1e-20, 0.0]), [1.0, 1e-3])
    assert np.allclose(chebtrim([0.0, 0.0]), [0.0])
    assert chebtrim([]).size == 0


def test_interval_maps():
    assert from_canonical(-1.0, 0.5, 3.0) == 0.5
    assert from_canonical(1.0, 0.5, 3.0) == 3.0
    assert to_canonical(1.75, 0.5, 3.0) == pytest.approx(0.0)
    assert np.allclose(to_canonical(np.array([0.5, 3.0]), 0.5, 3.0), [-1.0, 1.0])
    g = remap(lambda x: x * x, 2.0, 4.0)
    assert g(0.0) == pytest.approx(9.0)
    with pytest.raises(ValueError):
        remap(abs, 1.0, 1.0)


def objective(x: float) -> float:
    return math.cos(x) * math.log(x)


def test_chebmin_matches_golden_section_on_full_range():
    lo, hi = 0.5, 5 * math.pi
    x = chebmin(objective, 100, lo=lo, hi=hi)
    gt = remap(objective, lo, hi)
    t_golden = golden_section(gt, 0.62, 1.0, atol=1e-10)
    assert objective(x) == pytest.approx(gt(t_golden), abs=1e-6)
    assert objective(x) == pytest.approx(-math.log(5 * math.pi), abs=1e-6)


def test_chebmin_finds_interior_critical_point():
    lo, hi = 0.5, 4 * math.pi
    x = chebmin(objective, 100, lo=lo, hi=hi)
    gt = remap(objective, lo, hi)
    t_golden = golden_section(
        gt, to_canonical(2.5 * math.pi, lo, hi), to_canonical(3.5 * math.pi, lo, hi), atol=1e-10
    )
    assert x == pytest.approx(from_canonical(t_golden, lo, hi), abs=1e-5)
    assert objective(x) == pytest.approx(gt(t_golden), abs=1e-9)
    assert abs(-math.sin(x) * math.log(x) + math.cos(x) / x) < 1e-6


def test_chebmin_surrogate_values_and_defaults():
    assert chebmin(lambda x: (x - 0.3) ** 2, 10, use_surrogate=True) == pytest.approx(0.3, abs=1e-10)
    assert chebmin(lambda x: x, 5) == pytest.approx(-1.0)
    assert chebmin(lambda x: (x + 0.4) ** 2, 3, trim=0.0) == pytest.approx(-0.4, abs=1e-12)
    with pytest.raises(ValueError):
        chebmin(abs, 10, lo=2.0, hi=1.0)
