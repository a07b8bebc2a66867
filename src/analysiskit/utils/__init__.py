"""Utility functions for analysiskit package."""

from .grid import eval_points, half_open_grid, sample_grid
from .validate import validate_interval, validate_num_points

__all__ = [
    "eval_points",
    "half_open_grid",
    "sample_grid",
    "validate_interval",
    "validate_num_points",
]
