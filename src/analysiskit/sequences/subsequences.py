"""Subsequence extraction and accumulation point checks.

A subsequence keeps some terms of a sequence in their original order. An
accumulation point is a value that infinitely many terms come arbitrarily
close to; for a finite sample this is approximated by counting terms inside
an ``epsilon`` neighbourhood.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from analysiskit.sequences.monotone import is_less
from analysiskit.utils.types import FloatArray

__all__ = [
    "DEFAULT_MIN_COUNT",
    "dominance_indices",
    "count_near",
    "is_accumulation_point",
]

DEFAULT_MIN_COUNT = 3


def dominance_indices(
    values: FloatArray,
    tolerance: float,
) -> tuple[NDArray[np.intp], NDArray[np.intp]]:
    """Returns the index sets of the two "monotone" candidate subsequences.

    Index ``i`` joins the first set when no earlier element is strictly less
    than ``values[i]`` and the second set when no earlier element is strictly
    greater. The first set therefore collects the running minima (a
    non-increasing subsequence) and the second the running maxima (a
    non-decreasing one). This is a quadratic filter, not a longest monotone
    subsequence search.

    Args:
        values: The sequence terms.
        tolerance: Comparison tolerance.

    Returns:
        ``(increasing_candidates, decreasing_candidates)`` as index arrays.
    """
    inc: list[int] = []
    dec: list[int] = []
    for i in range(len(values)):
        found_smaller = False
        found_larger = False
        for j in range(i):
            if is_less(values[j], values[i], tolerance):
                found_smaller = True
            if is_less(values[i], values[j], tolerance):
                found_larger = True
        if not found_smaller:
            inc.append(i)
        if not found_larger:
            dec.append(i)
    return np.asarray(inc, dtype=np.intp), np.asarray(dec, dtype=np.intp)


def count_near(values: FloatArray, point: float, epsilon: float) -> int:
    """Number of terms whose distance to ``point`` is below ``epsilon``."""
    values = np.asarray(values, dtype=float)
    return int(np.count_nonzero(np.abs(values - point) < epsilon))


def is_accumulation_point(
    values: FloatArray,
    point: float,
    epsilon: float,
    min_count: int = DEFAULT_MIN_COUNT,
) -> bool:
    """Whether at least ``min_count`` terms lie within ``epsilon`` of ``point``."""
    return count_near(values, point, epsilon) >= min_count
