"""Forward finite-difference primitives and differentiation rules."""

from .forward import (
    approximate_derivative,
    difference_quotient,
    first_derivative,
    second_derivative,
)
from .rules import chain_rule, product_rule, quotient_rule, sum_rule

__all__ = [
    "approximate_derivative",
    "difference_quotient",
    "first_derivative",
    "second_derivative",
    "chain_rule",
    "product_rule",
    "quotient_rule",
    "sum_rule",
]
