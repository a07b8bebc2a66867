"""Properties of the real line: Archimedean property, completeness, intervals and number classes."""

from __future__ import annotations

import math
from collections.abc import Iterable
from fractions import Fraction

from analysiskit.errors import InvalidArgumentError

__all__ = [
    "archimedean_n",
    "supremum",
    "infimum",
    "in_closed_interval",
    "in_open_interval",
    "in_half_open_interval",
    "is_natural",
    "is_whole",
    "is_integer",
    "is_rational",
    "is_real",
]


def archimedean_n(a: float, b: float) -> int:
    """Returns the smallest natural number ``n`` with ``n a > b``.

    When ``b / a`` overflows a float the answer is computed exactly as
    ``floor(b / a) + 1`` on the rational values of ``a`` and ``b``.

    Args:
        a: Positive real.
        b: Positive real.

    Raises:
        InvalidArgumentError: If ``a`` or ``b`` is not positive and finite.
    """
    if not (a > 0 and b > 0) or not (math.isfinite(a) and math.isfinite(b)):
        raise InvalidArgumentError("Both a and b must be positive.")
    ratio = b / a
    if not math.isfinite(ratio):
        # n a overflows as a float, so count in exact rationals.
        return Fraction(b) // Fraction(a) + 1
    n = max(int(math.floor(ratio)), 1)
    # b / a is rounded, so step to the exact boundary in floating point.
    while n * a <= b:
        n += 1
    while n > 1 and (n - 1) * a > b:
        n -= 1
    return n


def supremum(values: Iterable[float]) -> float:
    """Largest element of a finite collection; ``-inf`` when it is empty."""
    return max(values, default=-math.inf)


def infimum(values: Iterable[float]) -> float:
    """Smallest element of a finite collection; ``inf`` when it is empty."""
    return min(values, default=math.inf)


def in_closed_interval(x: float, a: float, b: float) -> bool:
    """``x`` in ``[a, b]``."""
    return a <= x <= b


def in_open_interval(x: float, a: float, b: float) -> bool:
    """``x`` in ``(a, b)``."""
    return a < x < b


def in_half_open_interval(x: float, a: float, b: float) -> bool:
    """``x`` in ``[a, b)``."""
    return a <= x < b


def is_natural(n: int) -> bool:
    """Positive integers ``1, 2, 3, ...``."""
    return n > 0


def is_whole(n: int) -> bool:
    """Non-negative integers ``0, 1, 2, ...``."""
    return n >= 0


def is_integer(x: float) -> bool:
    """Finite value without a fractional part."""
    return math.isfinite(x) and x % 1 == 0


def is_rational(numerator: int, denominator: int) -> bool:
    """Any quotient of integers with a non-zero denominator."""
    return denominator != 0


def is_real(x: float) -> bool:
    """Anything except ``nan``."""
    return not math.isnan(x)
