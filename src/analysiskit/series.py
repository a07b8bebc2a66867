"""Provides the Series and ExponentialSeries classes.

A series is the sequence of partial sums ``S_n = a_1 + ... + a_n`` of its
terms. The convergence checks offered here only look at a finite number of
terms and are heuristics:

* :meth:`Series.appears_to_converge` requires strictly decreasing term
  magnitudes, a necessary but far from sufficient condition (the harmonic
  series passes it).
* :meth:`Series.satisfies_alternating_test` follows the Leibniz criterion with
  a fixed threshold on the last term standing in for ``lim a_n = 0``.

Typical usage examples:

>>> from analysiskit.series import Series, ExponentialSeries
>>> geo = Series.geometric(1.0, 0.5, 10)
>>> round(geo.partial_sum(9), 6)
1.998047
>>> geo.appears_to_converge()
True
>>> round(ExponentialSeries().evaluate(1.0), 8)
2.71828183
"""

from __future__ import annotations

import math

import numpy as np

from analysiskit.errors import InvalidArgumentError
from analysiskit.utils.types import ArrayLike1D, FloatArray
from analysiskit.utils.validate import as_1d_float_array, validate_num_points

__all__ = ["Series", "ExponentialSeries"]


class Series:
    """Finite series built from a list of terms.

    Attributes:
        terms: Read-only array of the terms ``a_1, ..., a_n``.
        partial_sums: Read-only array of ``S_1, ..., S_n``.
    """

    def __init__(self, terms: ArrayLike1D):
        """Initialises the series and accumulates its partial sums.

        Args:
            terms: Non-empty 1D array-like of the terms.

        Raises:
            InvalidArgumentError: If ``terms`` is empty or not 1D.
        """
        arr = np.array(as_1d_float_array(terms, name="terms"), dtype=float, copy=True)
        if arr.size == 0:
            raise InvalidArgumentError("a series needs at least one term.")
        arr.setflags(write=False)
        self.terms = arr

        sums = np.empty_like(arr)
        running = 0.0
        for i, t in enumerate(arr):
            running += t
            sums[i] = running
        sums.setflags(write=False)
        self.partial_sums = sums

    def __len__(self) -> int:
        return self.terms.size

    def __repr__(self) -> str:
        return f"Series(n_terms={self.terms.size}, last_partial_sum={self.partial_sums[-1]:g})"

    @classmethod
    def geometric(cls, a: float, r: float, n: int) -> Series:
        """Returns the series ``a, a r, a r**2, ...`` with ``n`` terms."""
        n = validate_num_points(n, name="n")
        terms = np.empty(n, dtype=float)
        current = float(a)
        for i in range(n):
            terms[i] = current
            current *= r
        return cls(terms)

    @classmethod
    def harmonic(cls, n: int) -> Series:
        """Returns ``1, 1/2, 1/3, ...`` with ``n`` terms."""
        n = validate_num_points(n, name="n")
        return cls(1.0 / np.arange(1, n + 1, dtype=float))

    @classmethod
    def p_series(cls, p: float, n: int) -> Series:
        """Returns ``1, 1/2**p, 1/3**p, ...`` with ``n`` terms."""
        n = validate_num_points(n, name="n")
        return cls(1.0 / np.arange(1, n + 1, dtype=float) ** p)

    @classmethod
    def alternating(cls, base_terms: ArrayLike1D) -> Series:
        """Returns ``b_1, -b_2, b_3, -b_4, ...`` from the given base terms."""
        base = as_1d_float_array(base_terms, name="base_terms")
        signs = np.where(np.arange(base.size) % 2 == 0, 1.0, -1.0)
        return cls(signs * base)

    def partial_sum(self, n: int) -> float:
        """Returns the partial sum with zero-based index ``n``.

        Raises:
            InvalidArgumentError: If ``n`` is outside ``[0, len(self))``.
        """
        if n < 0 or n >= self.partial_sums.size:
            raise InvalidArgumentError(f"Invalid index: {n} (length {self.partial_sums.size}).")
        return float(self.partial_sums[n])

    def appears_to_converge(self) -> bool:
        """Whether every term is strictly smaller in magnitude than the one before."""
        mags = np.abs(self.terms)
        for i in range(1, mags.size):
            if mags[i] >= mags[i - 1]:
                return False
        return True

    def satisfies_alternating_test(self, threshold: float = 0.1) -> bool:
        """Applies the alternating series test to the available terms.

        Args:
            threshold: The last term must be smaller than this in magnitude.

        Returns:
            ``True`` when consecutive terms never share a strict sign, their
            magnitudes strictly decrease and ``|a_n| < threshold``. Always
            ``False`` for fewer than two terms.
        """
        t = self.terms
        if t.size < 2:
            return False

        for prev, cur in zip(t[:-1], t[1:]):
            if (cur > 0 and prev > 0) or (cur < 0 and prev < 0):
                return False

        if not self.appears_to_converge():
            return False

        return abs(t[-1]) < threshold


class ExponentialSeries:
    """Power series ``e**x = sum x**n / n!``.

    Attributes:
        max_terms: Largest number of terms used by :meth:`evaluate`.
        tolerance: :meth:`evaluate` stops once a term is smaller than this.
    """

    def __init__(self, max_terms: int = 20, tolerance: float = 1e-10):
        """Initialises the truncation parameters.

        Args:
            max_terms: Upper bound on the number of summed terms.
            tolerance: Term magnitude at which summation stops early.
        """
        self.max_terms = validate_num_points(max_terms, name="max_terms")
        self.tolerance = float(tolerance)

    def evaluate(self, x: float) -> float:
        """Sums the series at ``x``.

        Each term is obtained from the previous one as ``term * x / n``.
        """
        total = 1.0
        term = 1.0
        for n in range(1, self.max_terms):
            term *= x / n
            total += term
            if abs(term) < self.tolerance:
                break
        return total

    def partial_sums(self, x: float, n: int) -> FloatArray:
        """Returns the first ``n`` partial sums ``1, 1 + x, 1 + x + x**2/2, ...``."""
        n = validate_num_points(n, name="n")
        sums = np.empty(n, dtype=float)
        sums[0] = 1.0
        term = 1.0
        for i in range(1, n):
            term *= x / i
            sums[i] = sums[i - 1] + term
        return sums

    def estimate_error(self, x: float, terms: int) -> float:
        """Returns ``|x**terms / terms!|``, the size of the first omitted term.

        The term is accumulated as a running product ``x / 1 * x / 2 * ...``,
        so large ``terms`` underflow towards zero. Returns ``inf`` when
        ``terms <= 0``.
        """
        if terms <= 0:
            return math.inf
        term = 1.0
        for k in range(1, terms + 1):
            term *= x / k
        return abs(term)
