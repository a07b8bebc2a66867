"""Numerical settings shared by the analysis routines.

Every routine that differentiates numerically or compares floats against zero
takes a keyword-only ``settings`` argument. Passing a tuned instance lets a
caller trade the forward-difference bias against the zero tolerance for a
particular function without touching any module state.

Example:
    >>> from analysiskit.settings import DEFAULT_SETTINGS
    >>> loose = DEFAULT_SETTINGS.replace(tolerance=1e-6)
    >>> loose.step, loose.tolerance
    (1e-07, 1e-06)
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from analysiskit.errors import InvalidArgumentError

__all__ = ["NumericalSettings", "DEFAULT_SETTINGS"]


@dataclass(frozen=True)
class NumericalSettings:
    """Finite-difference step and zero-comparison tolerance.

    Attributes:
        step: Step ``H`` of the forward differences. Must be positive.
        tolerance: Absolute tolerance below which a value counts as zero.
            Must be non-negative.
    """

    step: float = 1e-7
    tolerance: float = 1e-10

    def __post_init__(self) -> None:
        if not self.step > 0:
            raise InvalidArgumentError(f"step must be positive; got {self.step!r}.")
        if not self.tolerance >= 0:
            raise InvalidArgumentError(
                f"tolerance must be non-negative; got {self.tolerance!r}."
            )

    def replace(self, **changes: float) -> NumericalSettings:
        """Returns a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def is_zero(self, value: float) -> bool:
        """Whether ``|value|`` is below the tolerance."""
        return abs(value) < self.tolerance


DEFAULT_SETTINGS = NumericalSettings()
