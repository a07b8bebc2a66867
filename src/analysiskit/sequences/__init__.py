"""Property scanners for finite real sequences."""

from .bounded import infimum, is_bounded, is_bounded_above, is_bounded_below, supremum
from .cauchy import convergence_rate, is_cauchy, is_cauchy_with_window
from .monotone import (
    is_monotone,
    is_monotone_decreasing,
    is_monotone_increasing,
    is_strictly_monotone_decreasing,
    is_strictly_monotone_increasing,
)
from .subsequences import dominance_indices, is_accumulation_point

__all__ = [
    "infimum",
    "is_bounded",
    "is_bounded_above",
    "is_bounded_below",
    "supremum",
    "convergence_rate",
    "is_cauchy",
    "is_cauchy_with_window",
    "is_monotone",
    "is_monotone_decreasing",
    "is_monotone_increasing",
    "is_strictly_monotone_decreasing",
    "is_strictly_monotone_increasing",
    "dominance_indices",
    "is_accumulation_point",
]
