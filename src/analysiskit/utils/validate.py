"""Validation utilities for analysiskit."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from analysiskit.errors import InvalidArgumentError

__all__ = [
    "validate_interval",
    "validate_num_points",
    "validate_positive",
    "validate_indices",
    "as_1d_float_array",
]


def validate_interval(a: float, b: float) -> tuple[float, float]:
    """Checks that ``[a, b]`` is a finite interval with ``a < b``.

    Args:
        a: Left endpoint.
        b: Right endpoint.

    Returns:
        The endpoints as floats.

    Raises:
        InvalidArgumentError: If an endpoint is not finite or ``a >= b``.
    """
    a, b = float(a), float(b)
    if not (np.isfinite(a) and np.isfinite(b)):
        raise InvalidArgumentError(f"interval endpoints must be finite; got [{a}, {b}].")
    if not a < b:
        raise InvalidArgumentError(f"interval must satisfy a < b; got [{a}, {b}].")
    return a, b


def validate_num_points(num_points: int, *, minimum: int = 1, name: str = "num_points") -> int:
    """Checks that a sample count is an integer no smaller than ``minimum``."""
    if not isinstance(num_points, (int, np.integer)) or isinstance(num_points, bool):
        raise InvalidArgumentError(
            f"{name} must be an integer; got {type(num_points).__name__}."
        )
    if num_points < minimum:
        raise InvalidArgumentError(f"{name} must be at least {minimum}; got {num_points}.")
    return int(num_points)


def validate_positive(value: float, *, name: str) -> float:
    """Checks that ``value`` is strictly positive and returns it as a float."""
    value = float(value)
    if not value > 0:
        raise InvalidArgumentError(f"{name} must be positive; got {value}.")
    return value


def validate_indices(indices, length: int) -> NDArray[np.intp]:
    """Checks that every index lies in ``[0, length)``.

    Args:
        indices: Iterable of integer indices.
        length: Length of the indexed collection.

    Returns:
        The indices as an integer array.

    Raises:
        InvalidArgumentError: If any index is out of range or not an integer.
    """
    idx = np.asarray(list(indices))
    if idx.size == 0:
        return idx.astype(np.intp)
    if not np.issubdtype(idx.dtype, np.integer):
        raise InvalidArgumentError(f"indices must be integers; got dtype {idx.dtype}.")
    for i in idx:
        if i < 0 or i >= length:
            raise InvalidArgumentError(f"Invalid index: {int(i)} (length {length}).")
    return idx.astype(np.intp)


def as_1d_float_array(x: ArrayLike, *, name: str = "x") -> NDArray[np.float64]:
    """Converts input to a 1D float array.

    Args:
        x: Input array-like.
        name: Name used in error messages.

    Returns:
        1D NumPy array with dtype float64.

    Raises:
        InvalidArgumentError: If the converted array is not 1D.
    """
    arr = np.asarray(x, dtype=float)
    if arr.ndim != 1:
        raise InvalidArgumentError(f"{name} must be 1D, got shape {arr.shape}")
    return arr.astype(np.float64, copy=False)
