"""Tests for analysiskit.finite.forward."""

import math

import numpy as np
import pytest

from analysiskit.errors import InvalidArgumentError
from analysiskit.finite.forward import (
    approximate_derivative,
    difference_quotient,
    first_derivative,
    second_derivative,
)
from analysiskit.settings import NumericalSettings


def test_difference_quotient_secant_slope(square):
    """The secant of x**2 through 2 and 2.1 has slope 4.1."""
    assert difference_quotient(square, 2.0, 0.1) == pytest.approx(4.1, abs=1e-12)


def test_difference_quotient_negative_step(square):
    """A negative step gives the backward secant."""
    assert difference_quotient(square, 2.0, -0.1) == pytest.approx(3.9, abs=1e-12)


@pytest.mark.parametrize("h", [0.0, 1e-11, -1e-11])
def test_difference_quotient_rejects_zero_step(square, h):
    """Steps within the tolerance of zero are rejected."""
    with pytest.raises(InvalidArgumentError):
        difference_quotient(square, 2.0, h)


def test_approximate_derivative_matches_first_derivative(square):
    """Both use the configured step."""
    assert approximate_derivative(square, 1.5) == pytest.approx(
        first_derivative(square, 1.5), abs=1e-12
    )


@pytest.mark.parametrize(
    "func, dfunc, x",
    [
        (lambda x: x * x, lambda x: 2 * x, 2.0),
        (math.sin, math.cos, 0.3),
        (math.exp, math.exp, 1.0),
        (lambda x: 3.0 * x + 1.0, lambda x: 3.0, -4.0),
    ],
)
def test_first_derivative_known(func, dfunc, x):
    """Forward differences approximate known derivatives to about 1e-6."""
    assert first_derivative(func, x) == pytest.approx(dfunc(x), abs=1e-6)


def test_first_derivative_bias_is_half_step_times_curvature(square):
    """For x**2 the forward difference at 0 equals the step."""
    assert first_derivative(square, 0.0) == pytest.approx(1e-7, rel=1e-6)


def test_first_derivative_custom_step(square):
    """A coarser step shows up in the bias."""
    coarse = NumericalSettings(step=1e-2)
    assert first_derivative(square, 1.0, settings=coarse) == pytest.approx(2.01, abs=1e-10)


@pytest.mark.parametrize(
    "func, d2, x",
    [
        (lambda x: x * x, 2.0, 1.0),
        (lambda x: -(x * x), -2.0, 0.5),
        (lambda x: x**3, 6.0, 1.0),
    ],
)
def test_second_derivative_default_step(func, d2, x):
    """The nested forward difference is only good to a few digits."""
    assert second_derivative(func, x) == pytest.approx(d2, abs=0.5)


def test_second_derivative_coarser_step_is_more_accurate():
    """With a larger step round-off no longer dominates."""
    s = NumericalSettings(step=1e-4)
    assert second_derivative(np.sin, 0.5, settings=s) == pytest.approx(-math.sin(0.5), abs=1e-3)


def test_first_derivative_passes_nan_through():
    """Values outside the domain propagate unchanged."""
    assert math.isnan(first_derivative(lambda x: math.nan, 0.0))
