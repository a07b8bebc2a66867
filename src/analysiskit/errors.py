"""Error kinds, exceptions and tagged search results.

Three kinds of failure are distinguished:

* ``INVALID_ARGUMENT``: the caller passed an input the routine cannot work
  with (zero step, base below 2, empty data, index out of range, ...).
* ``ARITHMETIC_DOMAIN``: a computation hit a near-zero denominator.
* ``NOT_FOUND``: a fixed-grid search finished without landing on a point
  that satisfies its condition.

Each kind has a matching exception class. The exceptions also derive from the
closest built-in exception so that ``except ValueError`` and friends keep
working. Search routines additionally return a :class:`SearchResult`, which
carries the kind as a tag so callers can branch without ``try``/``except``.

Example:
    >>> from analysiskit.errors import SearchResult, ErrorKind
    >>> res = SearchResult.not_found("no sample matched")
    >>> res.ok
    False
    >>> res.error is ErrorKind.NOT_FOUND
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

__all__ = [
    "ErrorKind",
    "AnalysisError",
    "InvalidArgumentError",
    "ArithmeticDomainError",
    "NotFoundError",
    "SearchResult",
    "exception_for",
]


class ErrorKind(Enum):
    """Failure categories raised or reported by analysiskit routines."""

    INVALID_ARGUMENT = auto()
    ARITHMETIC_DOMAIN = auto()
    NOT_FOUND = auto()


class AnalysisError(Exception):
    """Base class of all analysiskit exceptions."""

    kind: ErrorKind


class InvalidArgumentError(AnalysisError, ValueError):
    """Raised when an input violates a routine's preconditions."""

    kind = ErrorKind.INVALID_ARGUMENT


class ArithmeticDomainError(AnalysisError, ArithmeticError):
    """Raised when a denominator is too close to zero to divide by."""

    kind = ErrorKind.ARITHMETIC_DOMAIN


class NotFoundError(AnalysisError, LookupError):
    """Raised when a grid search finds no point satisfying its condition."""

    kind = ErrorKind.NOT_FOUND


_EXCEPTIONS: dict[ErrorKind, type[AnalysisError]] = {
    ErrorKind.INVALID_ARGUMENT: InvalidArgumentError,
    ErrorKind.ARITHMETIC_DOMAIN: ArithmeticDomainError,
    ErrorKind.NOT_FOUND: NotFoundError,
}


def exception_for(kind: ErrorKind) -> type[AnalysisError]:
    """Returns the exception class that corresponds to ``kind``."""
    return _EXCEPTIONS[kind]


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a numerical search.

    Attributes:
        value: The located point, or ``None`` when the search failed.
        error: ``None`` on success, otherwise the kind of failure.
        message: Human-readable explanation of a failure.
    """

    value: float | None
    error: ErrorKind | None = None
    message: str = ""

    @classmethod
    def found(cls, value: float) -> SearchResult:
        """Builds a successful result."""
        return cls(value=float(value))

    @classmethod
    def not_found(cls, message: str) -> SearchResult:
        """Builds a result tagged ``NOT_FOUND``."""
        return cls(value=None, error=ErrorKind.NOT_FOUND, message=message)

    @classmethod
    def from_exception(cls, exc: AnalysisError) -> SearchResult:
        """Builds a failed result carrying the kind of ``exc``."""
        return cls(value=None, error=exc.kind, message=str(exc))

    @property
    def ok(self) -> bool:
        """Whether the search located a point."""
        return self.error is None

    def unwrap(self) -> float:
        """Returns the located point or raises the exception matching the tag.

        Raises:
            InvalidArgumentError: If the search was rejected up front.
            ArithmeticDomainError: If the search hit a near-zero denominator.
            NotFoundError: If the search finished without a match.
        """
        if self.error is not None:
            raise exception_for(self.error)(self.message)
        return self.value
