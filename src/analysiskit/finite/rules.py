"""Differentiation rules for combined functions.

Each rule returns a new callable that evaluates the derivative of the
combination, built from forward differences of the parts:

* Sum rule: ``(f + g)' = f' + g'``
* Product rule: ``(f g)' = f' g + f g'``
* Quotient rule: ``(f / g)' = (f' g - f g') / g**2``
* Chain rule: ``(f o g)' = (f' o g) g'``

Example:
    >>> from analysiskit.finite.rules import product_rule
    >>> d = product_rule(lambda x: x**2, lambda x: x + 1)
    >>> round(d(2.0), 4)
    16.0
"""

from __future__ import annotations

from analysiskit.errors import ArithmeticDomainError
from analysiskit.finite.forward import first_derivative
from analysiskit.settings import DEFAULT_SETTINGS, NumericalSettings
from analysiskit.utils.types import RealFunction

__all__ = ["sum_rule", "product_rule", "quotient_rule", "chain_rule"]


def sum_rule(
    f: RealFunction,
    g: RealFunction,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> RealFunction:
    """Returns the derivative of ``f + g``."""

    def derivative(x: float) -> float:
        return first_derivative(f, x, settings=settings) + first_derivative(
            g, x, settings=settings
        )

    return derivative


def product_rule(
    f: RealFunction,
    g: RealFunction,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> RealFunction:
    """Returns the derivative of ``f * g``."""

    def derivative(x: float) -> float:
        return first_derivative(f, x, settings=settings) * g(x) + f(x) * first_derivative(
            g, x, settings=settings
        )

    return derivative


def quotient_rule(
    f: RealFunction,
    g: RealFunction,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> RealFunction:
    """Returns the derivative of ``f / g``.

    The returned callable raises :class:`ArithmeticDomainError` at points
    where ``|g(x)|`` is smaller than the finite-difference step.
    """

    def derivative(x: float) -> float:
        gx = g(x)
        if abs(gx) < settings.step:
            raise ArithmeticDomainError(
                f"Division by zero in quotient rule: |g({x})| = {abs(gx):.3g}."
            )
        df = first_derivative(f, x, settings=settings)
        dg = first_derivative(g, x, settings=settings)
        return (df * gx - f(x) * dg) / (gx * gx)

    return derivative


def chain_rule(
    f: RealFunction,
    g: RealFunction,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> RealFunction:
    """Returns the derivative of ``f(g(x))``."""

    def derivative(x: float) -> float:
        return first_derivative(f, g(x), settings=settings) * first_derivative(
            g, x, settings=settings
        )

    return derivative
