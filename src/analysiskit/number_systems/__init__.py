"""Number systems: b-adic expansions, complex numbers and axioms of the reals."""

from .badic import BAdicNumber
from .complex_number import ComplexNumber
from .fields import (
    addition_preserves_positivity,
    associativity,
    commutativity,
    distributive_law,
    inverses,
    is_positive,
    multiplication_preserves_positivity,
    neutral_elements,
)
from .inequalities import check_triangle_inequality
from .real_line import (
    archimedean_n,
    in_closed_interval,
    in_half_open_interval,
    in_open_interval,
    infimum,
    is_integer,
    is_natural,
    is_rational,
    is_real,
    is_whole,
    supremum,
)

__all__ = [
    "BAdicNumber",
    "ComplexNumber",
    "check_triangle_inequality",
    "addition_preserves_positivity",
    "associativity",
    "commutativity",
    "distributive_law",
    "inverses",
    "is_positive",
    "multiplication_preserves_positivity",
    "neutral_elements",
    "archimedean_n",
    "in_closed_interval",
    "in_half_open_interval",
    "in_open_interval",
    "infimum",
    "is_integer",
    "is_natural",
    "is_rational",
    "is_real",
    "is_whole",
    "supremum",
]
