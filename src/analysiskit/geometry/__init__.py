"""Parametric plane curves."""

from .curves import ParametricCurve, Point2D

__all__ = ["ParametricCurve", "Point2D"]
