"""Provides all analysiskit methods."""

from importlib.metadata import PackageNotFoundError, version

from analysiskit.analysis.extrema import Extremum
from analysiskit.analysis_kit import AnalysisKit
from analysiskit.errors import (
    AnalysisError,
    ArithmeticDomainError,
    ErrorKind,
    InvalidArgumentError,
    NotFoundError,
    SearchResult,
)
from analysiskit.geometry.curves import ParametricCurve, Point2D
from analysiskit.number_systems.badic import BAdicNumber
from analysiskit.number_systems.complex_number import ComplexNumber
from analysiskit.number_systems.inequalities import check_triangle_inequality
from analysiskit.sequence import Sequence
from analysiskit.series import ExponentialSeries, Series
from analysiskit.settings import DEFAULT_SETTINGS, NumericalSettings

try:
    __version__ = version("analysiskit")
except PackageNotFoundError:
    pass

__all__ = [
    "AnalysisKit",
    "Extremum",
    "AnalysisError",
    "ArithmeticDomainError",
    "ErrorKind",
    "InvalidArgumentError",
    "NotFoundError",
    "SearchResult",
    "ParametricCurve",
    "Point2D",
    "BAdicNumber",
    "ComplexNumber",
    "check_triangle_inequality",
    "Sequence",
    "ExponentialSeries",
    "Series",
    "DEFAULT_SETTINGS",
    "NumericalSettings",
]
