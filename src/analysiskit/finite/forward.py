"""Forward finite-difference approximations of first and second derivatives.

All approximations use a fixed step ``H = settings.step``. No symbolic or
automatic differentiation is involved; accuracy is traded for simplicity.

Examples:
--------
>>> from analysiskit.finite.forward import difference_quotient, first_derivative
>>> f = lambda x: x**2
>>> round(difference_quotient(f, 2.0, 0.1), 10)
4.1
>>> abs(first_derivative(f, 2.0) - 4.0) < 1e-6
True
"""

from __future__ import annotations

from analysiskit.errors import InvalidArgumentError
from analysiskit.settings import DEFAULT_SETTINGS, NumericalSettings
from analysiskit.utils.types import RealFunction

__all__ = [
    "difference_quotient",
    "approximate_derivative",
    "first_derivative",
    "second_derivative",
]


def difference_quotient(
    function: RealFunction,
    x: float,
    h: float,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> float:
    """Returns the slope of the secant through ``(x, f(x))`` and ``(x + h, f(x + h))``.

    Args:
        function: The function to differentiate.
        x: Base point.
        h: Step. May be negative, but not (numerically) zero.
        settings: Supplies the tolerance under which ``h`` counts as zero.

    Returns:
        ``(f(x + h) - f(x)) / h``.

    Raises:
        InvalidArgumentError: If ``|h| < settings.tolerance``.
    """
    if settings.is_zero(h):
        raise InvalidArgumentError(f"h must not be zero; got {h!r}.")
    fx = function(x)
    fxh = function(x + h)
    return (fxh - fx) / h


def approximate_derivative(
    function: RealFunction,
    x: float,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> float:
    """Returns the difference quotient at ``x`` with ``h = settings.step``."""
    return difference_quotient(function, x, settings.step, settings=settings)


def first_derivative(
    function: RealFunction,
    x: float,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> float:
    """Returns the forward difference ``(f(x + H) - f(x)) / H``.

    Nothing is checked about ``function``: if it is undefined near ``x + H``
    whatever it returns (``nan``, ``inf``) or raises is passed through.
    """
    h = settings.step
    return (function(x + h) - function(x)) / h


def second_derivative(
    function: RealFunction,
    x: float,
    *,
    settings: NumericalSettings = DEFAULT_SETTINGS,
) -> float:
    """Returns the forward difference of the forward difference at ``x``.

    This is the first derivative applied twice,
    ``(f'(x + H) - f'(x)) / H``, not a centred second difference. Its
    truncation error is O(H) and round-off grows like ``eps * |f| / H**2``,
    so values are only reliable up to a few significant digits with the
    default step.
    """
    h = settings.step
    return (
        first_derivative(function, x + h, settings=settings)
        - first_derivative(function, x, settings=settings)
    ) / h
