"""Monotonicity predicates for finite sequences.

A sequence is monotonically increasing if ``a[n] <= a[n + 1]`` for all ``n``
and strictly increasing if ``a[n] < a[n + 1]``; the decreasing variants are
mirror images. Comparisons use a tolerance: ``a`` is "less than" ``b`` only
when ``b - a`` exceeds it, so values closer than the tolerance compare equal.
"""

from __future__ import annotations

import numpy as np

from analysiskit.utils.types import FloatArray

__all__ = [
    "is_less",
    "is_monotone_increasing",
    "is_strictly_monotone_increasing",
    "is_monotone_decreasing",
    "is_strictly_monotone_decreasing",
    "is_monotone",
]


def is_less(a: float, b: float, tolerance: float) -> bool:
    """Whether ``b`` exceeds ``a`` by more than ``tolerance``."""
    return (b - a) > tolerance


def is_monotone_increasing(values: FloatArray, tolerance: float) -> bool:
    """No element is (tolerantly) greater than its successor."""
    for prev, cur in zip(values[:-1], values[1:]):
        if is_less(cur, prev, tolerance):
            return False
    return True


def is_strictly_monotone_increasing(values: FloatArray, tolerance: float) -> bool:
    """Every element is (tolerantly) less than its successor."""
    for prev, cur in zip(values[:-1], values[1:]):
        if not is_less(prev, cur, tolerance):
            return False
    return True


def is_monotone_decreasing(values: FloatArray, tolerance: float) -> bool:
    """No element is (tolerantly) less than its successor."""
    for prev, cur in zip(values[:-1], values[1:]):
        if is_less(prev, cur, tolerance):
            return False
    return True


def is_strictly_monotone_decreasing(values: FloatArray, tolerance: float) -> bool:
    """Every element is (tolerantly) greater than its successor."""
    for prev, cur in zip(values[:-1], values[1:]):
        if not is_less(cur, prev, tolerance):
            return False
    return True


def is_monotone(values: FloatArray, tolerance: float) -> bool:
    """Monotonically increasing or monotonically decreasing."""
    values = np.asarray(values, dtype=float)
    return is_monotone_increasing(values, tolerance) or is_monotone_decreasing(
        values, tolerance
    )
