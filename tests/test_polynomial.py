import pytest

from minirt.polynomial import discriminant, solve_quadratic
from minirt.vector import EPS, TMAX


def evaluate(a, b, c, x):
    return a * x * x + b * x + c


def test_discriminant_sign():
    assert discriminant(1, 0, 1) < 0
    assert discriminant(1, 0, -1) > 0
    assert discriminant(1, 2, 1) == 0


def test_no_real_roots():
    assert solve_quadratic(1, 0, 1) == ()


def test_two_positive_roots_sorted_and_valid():
    roots = solve_quadratic(1, -5, 6)
    assert len(roots) == 2
    assert roots[0] < roots[1]
    for r in roots:
        assert evaluate(1, -5, 6, r) == pytest.approx(0.0, abs=1e-9)


def test_negative_leading_coefficient_still_sorted():
    roots = solve_quadratic(-1, 5, -6)
    assert len(roots) == 2
    assert roots[0] <= roots[1]


def test_double_root_returned_once():
    roots = solve_quadratic(1, -4, 4)
    assert len(roots) == 1
    assert evaluate(1, -4, 4, roots[0]) == pytest.approx(0.0, abs=1e-9)
    assert roots[0] > EPS


def test_double_root_behind_origin_discarded():
    assert solve_quadratic(1, 4, 4) == ()


def test_mixed_sign_roots_discarded():
    assert solve_quadratic(1, 0, -1) == ()


def test_roots_beyond_tmax_discarded():
    big = TMAX * 10
    assert solve_quadratic(1, -(big + 2 * big), big * 2 * big) == ()


def test_degenerate_linear_equation_has_no_roots():
    assert solve_quadratic(0, 2, -4) == ()