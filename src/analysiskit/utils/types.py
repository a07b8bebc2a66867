"""Shared typing aliases for analysiskit."""

from __future__ import annotations

from typing import Callable, Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

RealFunction: TypeAlias = Callable[[float], float]
FloatArray: TypeAlias = NDArray[np.float64]

ArrayLike1D: TypeAlias = Sequence[float] | NDArray[np.floating]
