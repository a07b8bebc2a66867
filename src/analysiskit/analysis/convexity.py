"""Convexity and concavity checks by exhaustive sampling.

A twice differentiable function is convex on ``[a, b]`` if ``f''(x) >= 0``
there, concave if ``f''(x) <= 0``, and has an inflection point where ``f''``
changes sign. The checks below sample ``f''`` on the grid
``a, a + step, ..., b`` with ``step = (b - a) / num_points``; the gaps between
samples are never examined, so a ``True`` answer is a sampling heuristic and
not a proof.

Examples:
--------
>>> from analysiskit.analysis.convexity import is_convex, find_inflection_points
>>> is_convex(lambda x: x * x, -1.0, 1.0, 100)
True
>>> pts = find_inflection_points(lambda x: x**3, -2.0, 2.0, 100)
>>> bool(abs(pts).min() <= 0.04 + 1e-12)
True
"""

from __future__ import annotations

import numpy as np

from analysiskit.finite.forward import second_derivative
from analysiskit.logger import analysiskit_logger
from analysiskit.settings import DEFAULT_SETTINGS, NumericalSettings
from analysiskit.utils.grid import eval_points, sample_grid
from analysiskit.utils.types import FloatArray, RealFunction

__all__ = [
    "is_convex",
    "is_concave",
    "find_inflection_points",
    "verify_convexity_by_definition",
]


def is_convex(
    function: RealFunction,
    a: float,
    b: float,
    num_points: int,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> bool:
    """Checks ``f'' >= -tolerance`` at every grid point of ``[a, b]``.

    Args:
        function: The function to analyse.
        a: Left endpoint.
        b: Right endpoint.
        num_points: Number of grid subintervals.
        settings: Finite-difference step and tolerance.

    Returns:
        ``False`` as soon as a sampled second derivative is below
        ``-tolerance``, ``True`` if no sample violates the bound.

    Raises:
        InvalidArgumentError: If the interval or ``num_points`` is invalid.
    """
    for x in sample_grid(a, b, num_points):
        if second_derivative(function, float(x), settings=settings) < -settings.tolerance:
            return False
    return True


def is_concave(
    function: RealFunction,
    a: float,
    b: float,
    num_points: int,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> bool:
    """Checks ``f'' <= tolerance`` at every grid point of ``[a, b]``.

    Mirror image of :func:`is_convex`.
    """
    for x in sample_grid(a, b, num_points):
        if second_derivative(function, float(x), settings=settings) > settings.tolerance:
            return False
    return True


def find_inflection_points(
    function: RealFunction,
    a: float,
    b: float,
    num_points: int,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> FloatArray:
    """Returns grid points where the sampled second derivative changes sign or vanishes.

    The grid is walked from left to right starting at its second point. A
    point is recorded when the product of the previous and the current
    second derivative is negative, or when the current one is within the
    tolerance of zero. Both conditions are tested independently, so the
    result may hold neighbouring candidates around a single true
    inflection point.

    Args:
        function: The function to analyse.
        a: Left endpoint.
        b: Right endpoint.
        num_points: Number of grid subintervals.
        settings: Finite-difference step and tolerance.

    Returns:
        Candidate inflection points in ascending order (possibly empty).
    """
    xs = sample_grid(a, b, num_points)
    candidates: list[float] = []

    prev = second_derivative(function, float(xs[0]), settings=settings)
    for x in xs[1:]:
        current = second_derivative(function, float(x), settings=settings)
        if prev * current < 0 or settings.is_zero(current):
            candidates.append(float(x))
        prev = current

    analysiskit_logger.debug(
        "find_inflection_points: %d candidate(s) on [%g, %g] with %d subintervals.",
        len(candidates), a, b, num_points,
    )
    return np.asarray(candidates, dtype=float)


def verify_convexity_by_definition(
    function: RealFunction,
    a: float,
    b: float,
    num_points: int,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> bool:
    """Checks the midpoint convexity inequality for every pair of grid points.

    For each pair ``x1 < x2`` of the grid this tests
    ``f((x1 + x2) / 2) <= (f(x1) + f(x2)) / 2 + tolerance``, which is the
    definition of convexity with ``lambda = 0.5``. The pair enumeration is
    quadratic in ``num_points``.

    Returns:
        ``False`` on the first violating pair, ``True`` otherwise.
    """
    xs = sample_grid(a, b, num_points)
    fx = eval_points(function, xs)

    lam = 0.5
    for i in range(xs.size):
        for j in range(i + 1, xs.size):
            mid = xs[i] + lam * (xs[j] - xs[i])
            line = fx[i] + lam * (fx[j] - fx[i])
            if function(float(mid)) > line + settings.tolerance:
                return False
    return True
