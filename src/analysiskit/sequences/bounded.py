"""Suprema, infima and boundedness of finite sequences.

A sequence is bounded above if some real ``B`` satisfies ``a[n] <= B`` for all
``n`` and bounded below if some real ``b`` satisfies ``a[n] >= b``. For a
finite sequence the candidate bound is its largest (smallest) element; it is
found with one pass and then confirmed with a second pass over all elements.
A bound is only accepted if it is a finite real number, so sequences holding
``inf`` or ``nan`` are reported as unbounded.
"""

from __future__ import annotations

import math

from analysiskit.utils.types import FloatArray

__all__ = [
    "supremum",
    "infimum",
    "is_bounded_above",
    "is_bounded_below",
    "is_bounded",
]


def supremum(values: FloatArray) -> float:
    """Running maximum of ``values``; ``-inf`` for an empty sequence."""
    sup = -math.inf
    for v in values:
        if v > sup:
            sup = float(v)
    return sup


def infimum(values: FloatArray) -> float:
    """Running minimum of ``values``; ``inf`` for an empty sequence."""
    inf = math.inf
    for v in values:
        if v < inf:
            inf = float(v)
    return inf


def is_bounded_above(values: FloatArray) -> bool:
    """Whether the running maximum is a finite upper bound of every element."""
    if len(values) == 0:
        return True
    bound = supremum(values)
    if not math.isfinite(bound):
        return False
    for v in values:
        if not v <= bound:
            return False
    return True


def is_bounded_below(values: FloatArray) -> bool:
    """Whether the running minimum is a finite lower bound of every element."""
    if len(values) == 0:
        return True
    bound = infimum(values)
    if not math.isfinite(bound):
        return False
    for v in values:
        if not v >= bound:
            return False
    return True


def is_bounded(values: FloatArray) -> bool:
    """Bounded above and below."""
    return is_bounded_above(values) and is_bounded_below(values)
