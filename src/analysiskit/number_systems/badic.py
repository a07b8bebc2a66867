"""b-adic expansions of integers and rationals.

A b-adic expansion writes a number with digits ``0 .. b-1`` in base ``b``.
Integers have a finite expansion; a rational ``p / q`` has a fraction part
that either terminates or repeats, and the repeating block is found by
tracking the remainders of the long division: as soon as a remainder comes
back, the digits produced since its first appearance repeat forever.

Digits are rendered with ``0-9`` followed by ``A-Z``, which limits the base
to 36.

Examples:
--------
>>> from analysiskit.number_systems.badic import BAdicNumber
>>> BAdicNumber.from_integer(42, 10).to_decimal_string()
'42'
>>> BAdicNumber.from_integer(42, 16).to_decimal_string()
'2A'
>>> BAdicNumber.from_rational(1, 3, 10, 20).to_decimal_string()
'0.(3)'
>>> BAdicNumber.from_rational(1, 6, 10, 20).to_decimal_string()
'0.1(6)'
"""

from __future__ import annotations

from dataclasses import dataclass

from analysiskit.errors import InvalidArgumentError
from analysiskit.logger import analysiskit_logger

__all__ = ["BAdicNumber", "DIGIT_SYMBOLS", "MAX_BASE"]

DIGIT_SYMBOLS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
MAX_BASE = len(DIGIT_SYMBOLS)


def _validate_base(base: int) -> int:
    if not isinstance(base, int) or isinstance(base, bool):
        raise InvalidArgumentError(f"Base must be an integer; got {type(base).__name__}.")
    if base < 2:
        raise InvalidArgumentError("Base must be at least 2")
    if base > MAX_BASE:
        raise InvalidArgumentError(f"Base must be at most {MAX_BASE}; got {base}.")
    return base


def _integer_digits(number: int, base: int) -> tuple[int, ...]:
    """Digits of a non-negative integer, most significant first."""
    digits = []
    while True:
        number, d = divmod(number, base)
        digits.append(d)
        if number == 0:
            break
    return tuple(reversed(digits))


@dataclass(frozen=True)
class BAdicNumber:
    """A number written in base ``base``.

    Attributes:
        base: The base ``b``, between 2 and 36.
        integer_digits: Digits before the point, most significant first.
        fraction_digits: Digits after the point.
        negative: Whether the number is negative.
        repeat_start: Index into ``fraction_digits`` where the repeating block
            begins, or ``None`` if the expansion does not repeat.
        is_truncated: Whether the fraction was cut off at the digit limit
            before it terminated or repeated.
    """

    base: int
    integer_digits: tuple[int, ...]
    fraction_digits: tuple[int, ...] = ()
    negative: bool = False
    repeat_start: int | None = None
    is_truncated: bool = False

    @property
    def is_repeating(self) -> bool:
        """Whether the fraction ends in a repeating block."""
        return self.repeat_start is not None

    @classmethod
    def from_integer(cls, number: int, base: int) -> BAdicNumber:
        """Converts an integer by repeated division by ``base``.

        Raises:
            InvalidArgumentError: If ``base`` is outside ``[2, 36]``.
        """
        base = _validate_base(base)
        number = int(number)
        return cls(
            base=base,
            integer_digits=_integer_digits(abs(number), base),
            negative=number < 0,
        )

    @classmethod
    def from_rational(
        cls,
        numerator: int,
        denominator: int,
        base: int,
        max_digits: int = 20,
    ) -> BAdicNumber:
        """Converts ``numerator / denominator`` by long division.

        Args:
            numerator: Integer numerator.
            denominator: Non-zero integer denominator.
            base: Target base, between 2 and 36.
            max_digits: Largest number of fraction digits to produce.

        Returns:
            The expansion, with ``repeat_start`` set when a repeating block
            was detected within ``max_digits`` digits.

        Raises:
            InvalidArgumentError: If the denominator is zero, the base is out
                of range or ``max_digits`` is negative.
        """
        base = _validate_base(base)
        numerator, denominator = int(numerator), int(denominator)
        if denominator == 0:
            raise InvalidArgumentError("Denominator cannot be zero")
        if max_digits < 0:
            raise InvalidArgumentError(f"max_digits must be non-negative; got {max_digits}.")

        negative = (numerator < 0) != (denominator < 0) and numerator != 0
        num, den = abs(numerator), abs(denominator)
        whole, remainder = divmod(num, den)

        fraction: list[int] = []
        seen: dict[int, int] = {}
        repeat_start = None
        while remainder != 0 and len(fraction) < max_digits:
            if remainder in seen:
                repeat_start = seen[remainder]
                break
            seen[remainder] = len(fraction)
            digit, remainder = divmod(remainder * base, den)
            fraction.append(digit)

        truncated = False
        if remainder != 0 and repeat_start is None:
            if remainder in seen:
                repeat_start = seen[remainder]
            else:
                truncated = True
                analysiskit_logger.warning(
                    "Expansion of %d/%d in base %d truncated after %d digits.",
                    numerator, denominator, base, max_digits,
                )

        return cls(
            base=base,
            integer_digits=_integer_digits(whole, base),
            fraction_digits=tuple(fraction),
            negative=negative,
            repeat_start=repeat_start,
            is_truncated=truncated,
        )

    def to_decimal_string(self) -> str:
        """Renders the digits, parenthesizing the repeating block.

        Despite the name the digits are those of ``self.base``; only the
        notation (sign, point, parentheses) follows decimal conventions.
        """
        parts = ["-"] if self.negative else []
        parts.extend(DIGIT_SYMBOLS[d] for d in self.integer_digits)
        if self.fraction_digits:
            parts.append(".")
            for i, d in enumerate(self.fraction_digits):
                if i == self.repeat_start:
                    parts.append("(")
                parts.append(DIGIT_SYMBOLS[d])
            if self.is_repeating:
                parts.append(")")
        return "".join(parts)

    def to_float(self) -> float:
        """Returns the value as a float, summing the repeating block as a geometric series."""
        b = self.base
        value = 0.0
        for d in self.integer_digits:
            value = value * b + d

        if self.is_repeating:
            head = self.fraction_digits[: self.repeat_start]
            block = self.fraction_digits[self.repeat_start:]
        else:
            head, block = self.fraction_digits, ()

        scale = 1.0
        for d in head:
            scale /= b
            value += d * scale
        if block:
            block_value = 0.0
            for d in block:
                block_value = block_value * b + d
            # block_value / (b**k - 1), shifted past the head digits
            value += scale * block_value / (b ** len(block) - 1)

        return -value if self.negative else value

    def __str__(self) -> str:
        return self.to_decimal_string()
