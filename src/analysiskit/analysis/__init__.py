"""Convexity and extrema analysis of real functions."""

from .convexity import (
    find_inflection_points,
    is_concave,
    is_convex,
    verify_convexity_by_definition,
)
from .extrema import (
    Extremum,
    find_mean_value_point,
    first_derivative_test,
    is_stationary_point,
    satisfies_rolle_theorem,
    search_mean_value_point,
    second_derivative_test,
)

__all__ = [
    "find_inflection_points",
    "is_concave",
    "is_convex",
    "verify_convexity_by_definition",
    "Extremum",
    "find_mean_value_point",
    "first_derivative_test",
    "is_stationary_point",
    "satisfies_rolle_theorem",
    "search_mean_value_point",
    "second_derivative_test",
]
