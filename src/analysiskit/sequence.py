"""Provides the Sequence class.

A light, immutable wrapper around a finite list of reals that exposes the
property scanners of :mod:`analysiskit.sequences` as methods. The starting
index ``n0`` is kept for display only and never enters a computation.

Typical usage examples:

>>> from analysiskit.sequence import Sequence
>>> seq = Sequence([1.0 / n for n in range(1, 201)], start_index=1)
>>> seq.is_strictly_monotone_decreasing()
True
>>> seq.is_cauchy()
True
>>> Sequence([1, -1, 1, -1]).is_monotone()
False
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Sequence as SequenceType

import numpy as np

from analysiskit.errors import InvalidArgumentError
from analysiskit.sequences import bounded, cauchy, monotone, subsequences
from analysiskit.settings import DEFAULT_SETTINGS, NumericalSettings
from analysiskit.utils.types import ArrayLike1D, FloatArray
from analysiskit.utils.validate import as_1d_float_array, validate_indices

__all__ = ["Sequence"]


class Sequence:
    """Finite real sequence ``{a_n}`` for ``n >= n0``.

    Attributes:
        start_index: The display index ``n0`` of the first term.
        settings: Supplies the comparison tolerance used by the monotonicity
            and subsequence scanners.
    """

    def __init__(
        self,
        elements: ArrayLike1D,
        start_index: int = 1,
        *,
        settings: NumericalSettings = DEFAULT_SETTINGS,
    ):
        """Initialises the sequence from its terms.

        Args:
            elements: The terms, as a 1D array-like of reals. They are copied
                into a read-only array.
            start_index: Index of the first term, used by ``repr`` only.
            settings: Numerical settings (only ``tolerance`` is used).
        """
        arr = np.array(as_1d_float_array(elements, name="elements"), dtype=float, copy=True)
        arr.setflags(write=False)
        self._elements = arr
        self.start_index = int(start_index)
        self.settings = settings

    @property
    def elements(self) -> FloatArray:
        """Read-only array of the terms."""
        return self._elements

    def __len__(self) -> int:
        return self._elements.size

    def __getitem__(self, i: int | slice) -> float | Sequence:
        """Returns a term, or a new sequence for a slice.

        The display index of a sliced sequence is shifted by the slice start.
        """
        if isinstance(i, slice):
            start = i.indices(len(self))[0]
            return Sequence(
                self._elements[i], self.start_index + start, settings=self.settings
            )
        return float(self._elements[i])

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        return np.array_equal(self._elements, other._elements)

    __hash__ = None

    def __repr__(self) -> str:
        terms = ", ".join(f"{v:g}" for v in self._elements[:6])
        if self._elements.size > 6:
            terms += ", ..."
        return f"Sequence([{terms}], start_index={self.start_index})"

    # Monotonicity

    def is_monotone_increasing(self) -> bool:
        """Whether ``a[n] <= a[n + 1]`` for every ``n`` (within tolerance)."""
        return monotone.is_monotone_increasing(self._elements, self.settings.tolerance)

    def is_strictly_monotone_increasing(self) -> bool:
        """Whether ``a[n] < a[n + 1]`` for every ``n`` (beyond tolerance)."""
        return monotone.is_strictly_monotone_increasing(self._elements, self.settings.tolerance)

    def is_monotone_decreasing(self) -> bool:
        """Whether ``a[n] >= a[n + 1]`` for every ``n`` (within tolerance)."""
        return monotone.is_monotone_decreasing(self._elements, self.settings.tolerance)

    def is_strictly_monotone_decreasing(self) -> bool:
        """Whether ``a[n] > a[n + 1]`` for every ``n`` (beyond tolerance)."""
        return monotone.is_strictly_monotone_decreasing(self._elements, self.settings.tolerance)

    def is_monotone(self) -> bool:
        """Whether the sequence is monotonically increasing or decreasing."""
        return monotone.is_monotone(self._elements, self.settings.tolerance)

    # Boundedness

    def supremum(self) -> float:
        """Largest term (``-inf`` when empty)."""
        return bounded.supremum(self._elements)

    def infimum(self) -> float:
        """Smallest term (``inf`` when empty)."""
        return bounded.infimum(self._elements)

    def is_bounded_above(self) -> bool:
        return bounded.is_bounded_above(self._elements)

    def is_bounded_below(self) -> bool:
        return bounded.is_bounded_below(self._elements)

    def is_bounded(self) -> bool:
        return bounded.is_bounded(self._elements)

    # Cauchy heuristic

    def is_cauchy_with_window(self, epsilon: float, window_size: int) -> bool:
        """See :func:`analysiskit.sequences.cauchy.is_cauchy_with_window`."""
        return cauchy.is_cauchy_with_window(self._elements, epsilon, window_size)

    def is_cauchy(
        self,
        epsilons: SequenceType[float] = cauchy.DEFAULT_EPSILONS,
        window_size: int = cauchy.DEFAULT_WINDOW_SIZE,
    ) -> bool:
        """Windowed Cauchy check at each of ``epsilons`` (default 1, 0.1, 0.01).

        An index ``N`` only counts if ``window_size`` terms remain from it, so
        the sequence needs at least ``N + window_size`` terms, where ``N`` is
        the first index past which every window stays within the smallest
        epsilon. For ``1/n`` with the defaults ``N`` is 18, so 23 terms are
        needed; the first 10 terms of ``1/n`` are not recognised.
        """
        return cauchy.is_cauchy(self._elements, epsilons, window_size)

    def convergence_rate(self, num_terms: int) -> FloatArray:
        """Distances between consecutive terms, for the first ``num_terms`` pairs."""
        return cauchy.convergence_rate(self._elements, num_terms)

    # Subsequences

    def subsequence(self, indices: Iterable[int]) -> Sequence:
        """Returns the terms at ``indices`` as a new sequence.

        Raises:
            InvalidArgumentError: If an index is outside ``[0, len(self))``.
        """
        idx = validate_indices(indices, len(self))
        return Sequence(self._elements[idx], self.start_index, settings=self.settings)

    def monotone_subsequences(self) -> tuple[Sequence, Sequence]:
        """Returns the two domination-filter subsequences.

        See :func:`analysiskit.sequences.subsequences.dominance_indices` for
        which terms are selected.
        """
        inc, dec = subsequences.dominance_indices(self._elements, self.settings.tolerance)
        return self.subsequence(inc), self.subsequence(dec)

    def is_accumulation_point(
        self,
        point: float,
        epsilon: float,
        min_count: int = subsequences.DEFAULT_MIN_COUNT,
    ) -> bool:
        """Whether at least ``min_count`` terms lie within ``epsilon`` of ``point``."""
        if not epsilon > 0:
            raise InvalidArgumentError(f"epsilon must be positive; got {epsilon}.")
        return subsequences.is_accumulation_point(self._elements, point, epsilon, min_count)
