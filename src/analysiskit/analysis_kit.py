"""Provides the AnalysisKit class.

A light wrapper around the finite-difference and analysis helpers that binds
one function and one set of numerical settings, so the same function can be
probed repeatedly without passing them every time.

Typical usage examples:

>>> from analysiskit.analysis_kit import AnalysisKit
>>> from analysiskit.settings import NumericalSettings
>>>
>>> kit = AnalysisKit(lambda x: x * x, settings=NumericalSettings(tolerance=1e-6))
>>> kit.is_convex(-1.0, 1.0, 100)
True
>>> [int(v) for v in kit.classify_critical_point(0.0)]
[1, 1]
"""

from __future__ import annotations

from analysiskit.analysis import convexity, extrema
from analysiskit.errors import SearchResult
from analysiskit.finite import forward
from analysiskit.settings import DEFAULT_SETTINGS, NumericalSettings
from analysiskit.utils.types import FloatArray, RealFunction


class AnalysisKit:
    """Provides derivatives, convexity and extremum checks for one function."""

    def __init__(
        self,
        function: RealFunction,
        *,
        settings: NumericalSettings = DEFAULT_SETTINGS,
    ):
        """Initialise with the function to analyse.

        Args:
            function: Maps a float to a float.
            settings: Finite-difference step and tolerance used by every method.
        """
        self.function = function
        self.settings = settings

    def derivative(self, x: float) -> float:
        """Returns the forward-difference first derivative at ``x``."""
        return forward.first_derivative(self.function, x, settings=self.settings)

    def second_derivative(self, x: float) -> float:
        """Returns the nested forward-difference second derivative at ``x``."""
        return forward.second_derivative(self.function, x, settings=self.settings)

    def is_convex(self, a: float, b: float, num_points: int) -> bool:
        return convexity.is_convex(self.function, a, b, num_points, settings=self.settings)

    def is_concave(self, a: float, b: float, num_points: int) -> bool:
        return convexity.is_concave(self.function, a, b, num_points, settings=self.settings)

    def inflection_points(self, a: float, b: float, num_points: int) -> FloatArray:
        return convexity.find_inflection_points(
            self.function, a, b, num_points, settings=self.settings
        )

    def classify_critical_point(self, x: float) -> tuple[extrema.Extremum, extrema.Extremum]:
        """Returns the verdicts of the first and second derivative tests at ``x``."""
        return (
            extrema.first_derivative_test(self.function, x, settings=self.settings),
            extrema.second_derivative_test(self.function, x, settings=self.settings),
        )

    def mean_value_point(self, a: float, b: float, *, num_points: int = 1000) -> SearchResult:
        """Returns the tagged result of the mean value point search on ``[a, b)``."""
        return extrema.search_mean_value_point(
            self.function, a, b, num_points=num_points, settings=self.settings
        )
