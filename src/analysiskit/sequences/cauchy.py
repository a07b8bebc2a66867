"""Windowed Cauchy heuristic for finite sequences.

A sequence is Cauchy if for every ``epsilon > 0`` there is an ``N`` such that
``|a[m] - a[n]| < epsilon`` for all ``m, n >= N``. A finite sample can only
approximate this: :func:`is_cauchy_with_window` looks for an ``N`` past which
every pair of terms inside a sliding window of ``window_size`` terms is closer
than ``epsilon``, and :func:`is_cauchy` repeats that for a few fixed
epsilons. Neither proves anything about the infinite sequence.

Candidate ``N`` are restricted so that at least one full window remains after
them; otherwise the last term alone would vacuously satisfy any ``epsilon``.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from analysiskit.errors import InvalidArgumentError
from analysiskit.logger import analysiskit_logger
from analysiskit.utils.types import FloatArray

__all__ = [
    "DEFAULT_EPSILONS",
    "DEFAULT_WINDOW_SIZE",
    "cauchy_index",
    "is_cauchy_with_window",
    "is_cauchy",
    "convergence_rate",
]

DEFAULT_EPSILONS: tuple[float, ...] = (1.0, 0.1, 0.01)
DEFAULT_WINDOW_SIZE = 5


def _window_close_from(values: FloatArray, start: int, epsilon: float, window_size: int) -> bool:
    """Checks every pair inside each window that begins at or after ``start``."""
    n = len(values)
    for i in range(start, n):
        end = min(i + window_size, n)
        for j in range(i + 1, end):
            if abs(values[i] - values[j]) >= epsilon:
                return False
    return True


def cauchy_index(values: FloatArray, epsilon: float, window_size: int) -> int | None:
    """Returns the smallest admissible ``N`` satisfying the window condition.

    Args:
        values: The sequence terms.
        epsilon: Distance every pair within a window must stay below.
        window_size: Number of consecutive terms compared with each other.

    Returns:
        The index ``N``, or ``None`` if no admissible index works.

    Raises:
        InvalidArgumentError: If ``epsilon <= 0`` or ``window_size < 2``.
    """
    if not epsilon > 0:
        raise InvalidArgumentError(f"epsilon must be positive; got {epsilon}.")
    if window_size < 2:
        raise InvalidArgumentError(f"window_size must be at least 2; got {window_size}.")

    n = len(values)
    if n < 2:
        return 0
    if n < window_size:
        analysiskit_logger.warning(
            "Sequence of length %d is shorter than the Cauchy window (%d).",
            n, window_size,
        )

    last_start = max(n - window_size, 0)
    for start in range(last_start + 1):
        if _window_close_from(values, start, epsilon, window_size):
            analysiskit_logger.debug(
                "Cauchy window condition for epsilon=%g holds from index %d.", epsilon, start
            )
            return start
    return None


def is_cauchy_with_window(values: FloatArray, epsilon: float, window_size: int) -> bool:
    """Whether some admissible ``N`` satisfies the window condition for ``epsilon``."""
    return cauchy_index(values, epsilon, window_size) is not None


def is_cauchy(
    values: FloatArray,
    epsilons: Sequence[float] = DEFAULT_EPSILONS,
    window_size: int = DEFAULT_WINDOW_SIZE,
) -> bool:
    """Whether the window condition holds for every epsilon in ``epsilons``.

    Each epsilon needs at least ``N + window_size`` terms, where ``N`` is the
    first index from which all windows stay within it. Short samples of a
    convergent sequence therefore fail. A sequence shorter than the window
    is only checked from index 0.
    """
    for eps in epsilons:
        if not is_cauchy_with_window(values, eps, window_size):
            return False
    return True


def convergence_rate(values: FloatArray, num_terms: int) -> FloatArray:
    """Returns the distances between the first ``num_terms`` consecutive pairs.

    ``num_terms`` is capped at ``len(values) - 1``.
    """
    values = np.asarray(values, dtype=float)
    k = max(min(int(num_terms), values.size - 1), 0)
    return np.abs(np.diff(values[: k + 1]))
