"""Plane curves in parametric form ``t -> (x(t), y(t))``.

Typical usage examples:

>>> import math
>>> from analysiskit.geometry.curves import ParametricCurve
>>> circle = ParametricCurve(math.cos, math.sin, 0.0, 2 * math.pi)
>>> round(circle.approximate_length(1000), 4)
6.2832
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from analysiskit.errors import InvalidArgumentError
from analysiskit.utils.grid import eval_points
from analysiskit.utils.types import RealFunction
from analysiskit.utils.validate import validate_interval, validate_num_points

__all__ = ["Point2D", "ParametricCurve"]


class Point2D(NamedTuple):
    """A point of the plane."""

    x: float
    y: float


class ParametricCurve:
    """Curve traced by ``(x(t), y(t))`` for ``t`` in ``[t_start, t_end]``.

    Attributes:
        x_function: The ``x`` coordinate as a function of ``t``.
        y_function: The ``y`` coordinate as a function of ``t``.
        t_start: Start of the parameter range.
        t_end: End of the parameter range.
    """

    def __init__(
        self,
        x_function: RealFunction,
        y_function: RealFunction,
        t_start: float,
        t_end: float,
    ):
        """Initialises the curve from its coordinate functions and parameter range.

        Raises:
            InvalidArgumentError: If ``t_start >= t_end``.
        """
        self.t_start, self.t_end = validate_interval(t_start, t_end)
        self.x_function = x_function
        self.y_function = y_function

    def point(self, t: float) -> Point2D:
        """Returns the point at parameter ``t``.

        Raises:
            InvalidArgumentError: If ``t`` lies outside the parameter range.
        """
        if t < self.t_start or t > self.t_end:
            raise InvalidArgumentError(
                f"t out of range: {t} not in [{self.t_start}, {self.t_end}]."
            )
        return Point2D(float(self.x_function(t)), float(self.y_function(t)))

    def _sample(self, num_points: int) -> tuple[np.ndarray, np.ndarray]:
        ts = np.linspace(self.t_start, self.t_end, num_points)
        return eval_points(self.x_function, ts), eval_points(self.y_function, ts)

    def approximate_length(self, num_points: int) -> float:
        """Returns the length of the polyline through ``num_points`` equally spaced curve points.

        Raises:
            InvalidArgumentError: If ``num_points < 2``.
        """
        n = validate_num_points(num_points, minimum=2)
        xs, ys = self._sample(n)
        return float(np.sum(np.hypot(np.diff(xs), np.diff(ys))))

    def generate_points(self, num_points: int) -> list[Point2D]:
        """Returns ``num_points`` curve points at equally spaced parameters, ends included."""
        n = validate_num_points(num_points, minimum=2)
        xs, ys = self._sample(n)
        return [Point2D(float(x), float(y)) for x, y in zip(xs, ys)]

    def is_point_on_curve(
        self,
        point: Point2D | tuple[float, float],
        tolerance: float,
        num_checks: int = 100,
    ) -> bool:
        """Whether one of ``num_checks`` sampled curve points lies within ``tolerance`` of ``point``.

        Points on the curve that fall between two samples may be missed when
        ``tolerance`` is smaller than the sample spacing.
        """
        n = validate_num_points(num_checks, minimum=2, name="num_checks")
        px, py = point
        xs, ys = self._sample(n)
        return bool(np.any(np.hypot(xs - px, ys - py) < tolerance))
