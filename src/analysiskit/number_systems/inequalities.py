"""Triangle inequality ``|a + b| <= |a| + |b|`` for real and complex numbers."""

from __future__ import annotations

from typing import Union

from analysiskit.number_systems.complex_number import ComplexNumber
from analysiskit.settings import DEFAULT_SETTINGS, NumericalSettings

__all__ = ["check_triangle_inequality"]

Scalar = Union[float, complex, ComplexNumber]


def check_triangle_inequality(
    a: Scalar,
    b: Scalar,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> bool:
    """Checks ``|a + b| <= |a| + |b|``.

    Works for floats, built-in complex numbers and :class:`ComplexNumber`
    (both arguments of the same kind). The right-hand side is relaxed by
    ``settings.tolerance`` so that rounding in the moduli of parallel complex
    numbers does not produce a false negative.

    >>> check_triangle_inequality(3, -4)
    True
    """
    return abs(a + b) <= abs(a) + abs(b) + settings.tolerance
