"""Minimal complex number type with the operations of the field of complex numbers."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["ComplexNumber"]


@dataclass(frozen=True)
class ComplexNumber:
    """The complex number ``real + imaginary i``.

    Example:
        >>> z = ComplexNumber(3, 4)
        >>> str(z * ComplexNumber(1, -2))
        '11.0 + -2.0i'
        >>> abs(z)
        5.0
    """

    real: float
    imaginary: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imaginary", float(self.imaginary))

    def add(self, other: ComplexNumber) -> ComplexNumber:
        """``(a + bi) + (c + di) = (a + c) + (b + d)i``."""
        return ComplexNumber(self.real + other.real, self.imaginary + other.imaginary)

    def multiply(self, other: ComplexNumber) -> ComplexNumber:
        """``(a + bi)(c + di) = (ac - bd) + (ad + bc)i``."""
        return ComplexNumber(
            self.real * other.real - self.imaginary * other.imaginary,
            self.real * other.imaginary + self.imaginary * other.real,
        )

    def modulus(self) -> float:
        """``|a + bi| = sqrt(a**2 + b**2)``."""
        return math.hypot(self.real, self.imaginary)

    def conjugate(self) -> ComplexNumber:
        """``a - bi``."""
        return ComplexNumber(self.real, -self.imaginary)

    def __add__(self, other: object) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other: object) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.multiply(other)

    def __abs__(self) -> float:
        return self.modulus()

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def __str__(self) -> str:
        return f"{self.real} + {self.imaginary}i"
