"""Tests for analysiskit.analysis.convexity."""

import numpy as np
import pytest

from analysiskit.analysis.convexity import (
    find_inflection_points,
    is_concave,
    is_convex,
    verify_convexity_by_definition,
)
from analysiskit.errors import InvalidArgumentError
from analysiskit.settings import NumericalSettings


def neg_square(x):
    """Returns -x**2."""
    return -(x * x)


def test_square_is_convex_not_concave(square):
    """x**2 is convex on [-1, 1]."""
    assert is_convex(square, -1.0, 1.0, 100)
    assert not is_concave(square, -1.0, 1.0, 100)


def test_negative_square_is_concave_not_convex():
    """-x**2 is concave on [-1, 1]."""
    assert is_concave(neg_square, -1.0, 1.0, 100)
    assert not is_convex(neg_square, -1.0, 1.0, 100)


def test_cube_is_neither_on_symmetric_interval(cube):
    """x**3 changes curvature at 0."""
    assert not is_convex(cube, -2.0, 2.0, 100)
    assert not is_concave(cube, -2.0, 2.0, 100)


def test_cube_is_convex_on_positive_half(cube):
    """x**3 is convex on [1, 2]."""
    assert is_convex(cube, 1.0, 2.0, 50)


def test_inflection_point_of_cube_near_zero(cube):
    """The sign change of 6x is reported within one grid step of 0."""
    pts = find_inflection_points(cube, -2.0, 2.0, 100)
    assert isinstance(pts, np.ndarray)
    assert pts.size >= 1
    assert np.min(np.abs(pts)) <= 0.04 + 1e-9
    assert np.all(np.abs(pts) <= 0.08 + 1e-9)


def test_no_inflection_points_for_square(square):
    """f'' of x**2 never changes sign."""
    pts = find_inflection_points(square, -1.0, 1.0, 100)
    assert pts.size == 0


def test_inflection_points_of_sine():
    """sin has inflection points at multiples of pi."""
    pts = find_inflection_points(np.sin, 1.0, 5.0, 400, settings=NumericalSettings(step=1e-4))
    assert pts.size >= 1
    assert np.min(np.abs(pts - np.pi)) <= 0.01 + 1e-9


def test_verify_convexity_by_definition(square):
    """The midpoint inequality holds for x**2 and fails for -x**2."""
    assert verify_convexity_by_definition(square, -1.0, 1.0, 20)
    assert not verify_convexity_by_definition(neg_square, -1.0, 1.0, 20)


def test_verify_convexity_by_definition_linear_is_convex():
    """Equality in the midpoint inequality counts as convex."""
    assert verify_convexity_by_definition(lambda x: 2.0 * x - 1.0, 0.0, 1.0, 10)


@pytest.mark.parametrize("a, b, n", [(1.0, 0.0, 10), (0.0, 1.0, 0)])
def test_invalid_grids_raise(square, a, b, n):
    """Reversed intervals and empty grids are rejected."""
    with pytest.raises(InvalidArgumentError):
        is_convex(square, a, b, n)
    with pytest.raises(InvalidArgumentError):
        find_inflection_points(square, a, b, n)
