"""Sampling grids and sequential evaluation of functions on them."""

from __future__ import annotations

from typing import Any, Callable, Sequence

import numpy as np

from analysiskit.utils.types import FloatArray
from analysiskit.utils.validate import validate_interval, validate_num_points

__all__ = ["sample_grid", "half_open_grid", "eval_points"]


def sample_grid(a: float, b: float, num_points: int) -> FloatArray:
    """Returns the closed grid ``a, a + step, ..., b`` with ``step = (b - a) / num_points``.

    The grid has ``num_points + 1`` points; both endpoints are included.

    Args:
        a: Left endpoint.
        b: Right endpoint. Must be larger than ``a``.
        num_points: Number of subintervals. Must be at least 1.

    Returns:
        Array of sample locations in ascending order.
    """
    a, b = validate_interval(a, b)
    n = validate_num_points(num_points)
    return np.linspace(a, b, n + 1)


def half_open_grid(a: float, b: float, num_points: int) -> FloatArray:
    """Returns ``num_points`` equally spaced points of ``[a, b)``."""
    a, b = validate_interval(a, b)
    n = validate_num_points(num_points)
    step = (b - a) / n
    return a + step * np.arange(n, dtype=float)


def eval_points(
    func: Callable[[float], Any],
    xs: Sequence[float],
) -> FloatArray:
    """Evaluates ``func`` at each point of ``xs``, one call per point.

    Args:
        func: Callable taking a single float.
        xs: 1D sequence of points.

    Returns:
        Array of function values, in the order of ``xs``.
    """
    return np.asarray([func(float(x)) for x in xs], dtype=float)
