"""Tests for the scanners in analysiskit.sequences."""

import logging
import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from analysiskit.errors import InvalidArgumentError
from analysiskit.sequences import bounded, cauchy, monotone, subsequences


def harmonic_terms(n):
    """Returns 1, 1/2, ..., 1/n."""
    return np.array([1.0 / k for k in range(1, n + 1)])


@pytest.mark.parametrize(
    "values, inc, sinc, dec, sdec",
    [
        ([1.0, 2.0, 3.0], True, True, False, False),
        ([3.0, 2.0, 1.0], False, False, True, True),
        ([1.0, 1.0, 1.0], True, False, True, False),
        ([1.0, 2.0, 2.0, 3.0], True, False, False, False),
        ([1.0, -1.0, 1.0, -1.0], False, False, False, False),
    ],
)
def test_monotone_predicates(values, inc, sinc, dec, sdec):
    """Non-strict and strict predicates on small sequences."""
    values = np.asarray(values)
    tol = 1e-10
    assert monotone.is_monotone_increasing(values, tol) is inc
    assert monotone.is_strictly_monotone_increasing(values, tol) is sinc
    assert monotone.is_monotone_decreasing(values, tol) is dec
    assert monotone.is_strictly_monotone_decreasing(values, tol) is sdec
    assert monotone.is_monotone(values, tol) is (inc or dec)


def test_monotone_tolerance_absorbs_small_steps():
    """Differences below the tolerance compare equal."""
    values = np.array([1.0, 1.0 + 1e-12, 1.0])
    assert monotone.is_monotone_increasing(values, 1e-10)
    assert not monotone.is_strictly_monotone_increasing(values, 1e-10)


def test_short_sequences_are_monotone():
    """Empty and single-element sequences satisfy every predicate vacuously."""
    for values in (np.array([]), np.array([4.0])):
        assert monotone.is_strictly_monotone_increasing(values, 0.0)
        assert monotone.is_strictly_monotone_decreasing(values, 0.0)


def test_supremum_and_infimum():
    """Running extrema of a finite sequence."""
    values = np.array([2.0, -1.0, 5.0, 0.0])
    assert bounded.supremum(values) == 5.0
    assert bounded.infimum(values) == -1.0
    assert bounded.supremum(np.array([])) == -math.inf
    assert bounded.infimum(np.array([])) == math.inf


def test_bounds_require_finite_values():
    """Infinite or nan terms make a sequence unbounded."""
    assert bounded.is_bounded(np.array([1.0, 2.0]))
    assert not bounded.is_bounded_above(np.array([1.0, np.inf]))
    assert bounded.is_bounded_below(np.array([1.0, np.inf]))
    assert not bounded.is_bounded_below(np.array([-np.inf, 0.0]))
    assert not bounded.is_bounded(np.array([0.0, np.nan]))


def test_cauchy_heuristic_on_harmonic_terms():
    """1/n settles within the default epsilons."""
    assert cauchy.is_cauchy(harmonic_terms(200))


def test_cauchy_heuristic_rejects_growing_sequence():
    """1, 2, ..., 10 never settles below epsilon = 1."""
    values = np.arange(1.0, 11.0)
    assert not cauchy.is_cauchy(values)
    assert cauchy.cauchy_index(values, 1.0, 5) is None


def test_cauchy_constant_sequence_from_start():
    """A constant sequence satisfies the window condition from index 0."""
    values = np.full(10, 3.0)
    assert cauchy.cauchy_index(values, 0.01, 5) == 0
    assert cauchy.is_cauchy(values)


def test_cauchy_index_of_harmonic_terms():
    """The first admissible index grows as epsilon shrinks."""
    values = harmonic_terms(200)
    n_coarse = cauchy.cauchy_index(values, 0.1, 5)
    n_fine = cauchy.cauchy_index(values, 0.01, 5)
    assert n_coarse is not None and n_fine is not None
    assert n_coarse < n_fine


@pytest.mark.parametrize("epsilon, window", [(0.0, 5), (-1.0, 5), (0.1, 1)])
def test_cauchy_rejects_bad_parameters(epsilon, window):
    """epsilon must be positive and the window at least 2."""
    with pytest.raises(InvalidArgumentError):
        cauchy.cauchy_index(np.ones(10), epsilon, window)


def test_cauchy_warns_on_short_sequence(caplog):
    """A sequence shorter than the window is scanned with a warning."""
    with caplog.at_level(logging.WARNING, logger="analysiskit"):
        assert cauchy.is_cauchy_with_window(np.array([1.0, 1.5, 1.2]), 1.0, 5)
    assert any("shorter than the Cauchy window" in r.getMessage() for r in caplog.records)


def test_convergence_rate():
    """Distances between consecutive terms, capped at the available pairs."""
    values = np.array([1.0, 0.5, 0.25, 0.125])
    assert_allclose(cauchy.convergence_rate(values, 2), [0.5, 0.25])
    assert_allclose(cauchy.convergence_rate(values, 10), [0.5, 0.25, 0.125])
    assert cauchy.convergence_rate(values, 0).size == 0


def test_dominance_indices_of_increasing_sequence():
    """Running minima and running maxima of 1, 2, 3, 4, 5."""
    inc, dec = subsequences.dominance_indices(np.arange(1.0, 6.0), 1e-10)
    assert inc.tolist() == [0]
    assert dec.tolist() == [0, 1, 2, 3, 4]


def test_dominance_indices_mixed():
    """For 3, 1, 2 the minima are 3, 1 and the maxima just 3."""
    inc, dec = subsequences.dominance_indices(np.array([3.0, 1.0, 2.0]), 1e-10)
    assert inc.tolist() == [0, 1]
    assert dec.tolist() == [0]


def test_accumulation_points_of_alternating_sequence():
    """Both 1 and -1 are approached by three or more terms, 0 is not."""
    values = np.array([1.0, -1.0, 1.0, -1.0, 1.0])
    assert subsequences.count_near(values, 1.0, 0.1) == 3
    assert subsequences.is_accumulation_point(values, 1.0, 0.1)
    assert not subsequences.is_accumulation_point(values, -1.0, 0.1)
    assert subsequences.is_accumulation_point(values, -1.0, 0.1, min_count=2)
    assert not subsequences.is_accumulation_point(values, 0.0, 0.1)
