"""Local extrema classification, Rolle's theorem and mean value search.

The derivative tests report their verdict as an :class:`Extremum`, an
``IntEnum`` whose values follow the usual sign convention (``1`` for a local
minimum, ``-1`` for a local maximum, ``0`` when the test is inconclusive).

The forward difference approximates ``f'(x) + H f''(x) / 2``. With the
default settings this bias is much larger than the zero tolerance, so even
exact stationary points of
curved functions are usually not recognised. Pass settings with a larger
tolerance to classify them:

>>> from analysiskit.analysis.extrema import first_derivative_test
>>> from analysiskit.settings import NumericalSettings
>>> loose = NumericalSettings(tolerance=1e-6)
>>> first_derivative_test(lambda x: x * x, 0.0, settings=loose)
<Extremum.MINIMUM: 1>
"""

from __future__ import annotations

from enum import IntEnum

from analysiskit.errors import InvalidArgumentError, SearchResult
from analysiskit.finite.forward import first_derivative, second_derivative
from analysiskit.logger import analysiskit_logger
from analysiskit.settings import DEFAULT_SETTINGS, NumericalSettings
from analysiskit.utils.grid import half_open_grid
from analysiskit.utils.types import RealFunction
from analysiskit.utils.validate import validate_interval

__all__ = [
    "Extremum",
    "is_stationary_point",
    "first_derivative_test",
    "second_derivative_test",
    "satisfies_rolle_theorem",
    "search_mean_value_point",
    "find_mean_value_point",
]


class Extremum(IntEnum):
    """Verdict of a derivative test."""

    MAXIMUM = -1
    INCONCLUSIVE = 0
    MINIMUM = 1


def is_stationary_point(
    function: RealFunction,
    x: float,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> bool:
    """Whether ``|f'(x)|`` is below the tolerance."""
    return settings.is_zero(first_derivative(function, x, settings=settings))


def first_derivative_test(
    function: RealFunction,
    x: float,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> Extremum:
    """Classifies ``x`` by the sign of ``f'`` one step to either side.

    Returns:
        ``INCONCLUSIVE`` if ``x`` is not stationary. Otherwise ``MINIMUM`` when
        ``f'(x - H) < 0 < f'(x + H)``, ``MAXIMUM`` when
        ``f'(x - H) > 0 > f'(x + H)`` and ``INCONCLUSIVE`` in every other case
        (saddles, flat regions).
    """
    if not is_stationary_point(function, x, settings=settings):
        return Extremum.INCONCLUSIVE

    h = settings.step
    left = first_derivative(function, x - h, settings=settings)
    right = first_derivative(function, x + h, settings=settings)

    if left < 0 < right:
        return Extremum.MINIMUM
    if left > 0 > right:
        return Extremum.MAXIMUM
    return Extremum.INCONCLUSIVE


def second_derivative_test(
    function: RealFunction,
    x: float,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> Extremum:
    """Classifies ``x`` by the sign of ``f''(x)``.

    Returns:
        ``INCONCLUSIVE`` if ``x`` is not stationary or ``f''(x) == 0``;
        otherwise ``MINIMUM`` for a positive and ``MAXIMUM`` for a negative
        second derivative. There is no fallback to the first derivative test.
    """
    if not is_stationary_point(function, x, settings=settings):
        return Extremum.INCONCLUSIVE

    d2 = second_derivative(function, x, settings=settings)
    if d2 > 0:
        return Extremum.MINIMUM
    if d2 < 0:
        return Extremum.MAXIMUM
    return Extremum.INCONCLUSIVE


def satisfies_rolle_theorem(
    function: RealFunction,
    a: float,
    b: float,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> bool:
    """Checks the ``f(a) = f(b)`` hypothesis of Rolle's theorem.

    Continuity on ``[a, b]`` and differentiability on ``(a, b)`` are assumed;
    they cannot be tested numerically.
    """
    return settings.is_zero(function(a) - function(b))


def search_mean_value_point(
    function: RealFunction,
    a: float,
    b: float,
    *,
    num_points: int = 1000,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> SearchResult:
    """Scans ``[a, b)`` for a point whose derivative equals the mean slope.

    The mean slope is ``(f(b) - f(a)) / (b - a)``. The scan visits
    ``num_points`` equally spaced points from ``a`` and stops at the first one
    whose forward-difference derivative is within the tolerance of the mean
    slope. A point guaranteed by the mean value theorem may fall between two
    samples, in which case the search reports ``NOT_FOUND``.

    Args:
        function: The function to analyse.
        a: Left endpoint.
        b: Right endpoint.
        num_points: Number of samples in ``[a, b)``.
        settings: Finite-difference step and tolerance.

    Returns:
        A :class:`SearchResult` holding the first matching sample, tagged
        ``NOT_FOUND`` if no sample matches, or ``INVALID_ARGUMENT`` if the
        interval or sample count is invalid.
    """
    try:
        a, b = validate_interval(a, b)
        xs = half_open_grid(a, b, num_points)
    except InvalidArgumentError as exc:
        return SearchResult.from_exception(exc)

    mean_slope = (function(b) - function(a)) / (b - a)

    for x in xs:
        if settings.is_zero(first_derivative(function, float(x), settings=settings) - mean_slope):
            return SearchResult.found(x)

    analysiskit_logger.warning(
        "Mean value point not found on [%g, %g] with %d samples "
        "(mean slope %.6g, tolerance %.1e).",
        a, b, num_points, mean_slope, settings.tolerance,
    )
    return SearchResult.not_found("Mean value point not found")


def find_mean_value_point(
    function: RealFunction,
    a: float,
    b: float,
    *,
    num_points: int = 1000,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> float:
    """Returns the point located by :func:`search_mean_value_point`.

    Raises:
        InvalidArgumentError: If the interval or sample count is invalid.
        NotFoundError: If no sample matches the mean slope.
    """
    return search_mean_value_point(
        function, a, b, num_points=num_points, settings=settings
    ).unwrap()
