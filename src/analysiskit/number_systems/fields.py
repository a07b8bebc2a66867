"""Spot checks of the field and ordered-field axioms on floating point numbers.

Floating point arithmetic is not a field: addition is not associative and
``a * (1 / a)`` is not always ``1``. The checks compare both sides exactly by
default, which exposes these failures; pass a ``tolerance`` to compare
within an absolute margin instead.

>>> from analysiskit.number_systems.fields import associativity
>>> associativity(3.0, 4.0, 5.0)
True
>>> associativity(0.1, 0.2, 0.3)
False
>>> associativity(0.1, 0.2, 0.3, tolerance=1e-12)
True
"""

from __future__ import annotations

__all__ = [
    "commutativity",
    "associativity",
    "neutral_elements",
    "inverses",
    "distributive_law",
    "is_positive",
    "addition_preserves_positivity",
    "multiplication_preserves_positivity",
]


def _same(lhs: float, rhs: float, tolerance: float) -> bool:
    if tolerance == 0.0:
        return lhs == rhs
    return abs(lhs - rhs) <= tolerance


def commutativity(a: float, b: float, *, tolerance: float = 0.0) -> bool:
    """``a + b = b + a`` and ``a b = b a``."""
    return _same(a + b, b + a, tolerance) and _same(a * b, b * a, tolerance)


def associativity(a: float, b: float, c: float, *, tolerance: float = 0.0) -> bool:
    """``(a + b) + c = a + (b + c)`` and ``(a b) c = a (b c)``."""
    return _same((a + b) + c, a + (b + c), tolerance) and _same(
        (a * b) * c, a * (b * c), tolerance
    )


def neutral_elements(a: float, *, tolerance: float = 0.0) -> bool:
    """``a + 0 = a`` and ``a 1 = a``."""
    return _same(a + 0, a, tolerance) and _same(a * 1, a, tolerance)


def inverses(a: float, *, tolerance: float = 0.0) -> bool:
    """``a + (-a) = 0`` and, for ``a != 0``, ``a (1 / a) = 1``.

    Zero has no multiplicative inverse, so ``inverses(0)`` is ``False``.
    """
    if a == 0:
        return False
    return _same(a + (-a), 0.0, tolerance) and _same(a * (1 / a), 1.0, tolerance)


def distributive_law(a: float, b: float, c: float, *, tolerance: float = 0.0) -> bool:
    """``a (b + c) = a b + a c``."""
    return _same(a * (b + c), a * b + a * c, tolerance)


def is_positive(x: float) -> bool:
    return x > 0


def addition_preserves_positivity(a: float, b: float) -> bool:
    """``a > 0`` and ``b > 0`` imply ``a + b > 0``; false unless both are positive."""
    return is_positive(a) and is_positive(b) and is_positive(a + b)


def multiplication_preserves_positivity(a: float, b: float) -> bool:
    """``a > 0`` and ``b > 0`` imply ``a b > 0``; false unless both are positive.

    Underflow makes this fail for very small positive numbers.
    """
    return is_positive(a) and is_positive(b) and is_positive(a * b)
