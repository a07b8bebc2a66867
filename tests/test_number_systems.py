"""Tests for complex numbers, field axioms, the real line and the triangle inequality."""

import math
from fractions import Fraction

import pytest

from analysiskit.errors import InvalidArgumentError
from analysiskit.number_systems import (
    ComplexNumber,
    addition_preserves_positivity,
    archimedean_n,
    associativity,
    check_triangle_inequality,
    commutativity,
    distributive_law,
    in_closed_interval,
    in_half_open_interval,
    in_open_interval,
    infimum,
    inverses,
    is_integer,
    is_natural,
    is_positive,
    is_rational,
    is_real,
    is_whole,
    multiplication_preserves_positivity,
    neutral_elements,
    supremum,
)


def test_complex_arithmetic():
    """Addition, multiplication, modulus and conjugate."""
    z = ComplexNumber(3, 4)
    w = ComplexNumber(1, -2)
    assert z + w == ComplexNumber(4.0, 2.0)
    assert z * w == ComplexNumber(11.0, -2.0)
    assert z.add(w) == z + w
    assert z.multiply(w) == z * w
    assert z.modulus() == 5.0
    assert abs(z) == 5.0
    assert z.conjugate() == ComplexNumber(3.0, -4.0)
    assert complex(z) == 3 + 4j


def test_complex_matches_builtin_complex():
    """Multiplication agrees with Python's complex type."""
    z, w = ComplexNumber(0.5, -1.5), ComplexNumber(-2.0, 0.25)
    assert complex(z * w) == pytest.approx(complex(z) * complex(w))


def test_complex_str_and_immutability():
    """String form and frozen fields."""
    z = ComplexNumber(1, 2)
    assert str(z) == "1.0 + 2.0i"
    with pytest.raises(AttributeError):
        z.real = 3.0


def test_complex_rejects_foreign_operands():
    """Mixing with other types is unsupported."""
    with pytest.raises(TypeError):
        ComplexNumber(1, 2) + "x"


@pytest.mark.parametrize(
    "a, b",
    [(3.0, -4.0), (1.5, 2.5), (0.0, 0.0), (3 + 4j, -1 + 2j)],
)
def test_triangle_inequality_holds(a, b):
    """|a + b| <= |a| + |b| for reals and complex numbers."""
    assert check_triangle_inequality(a, b)


def test_triangle_inequality_parallel_complex_numbers():
    """Equality case with parallel complex numbers."""
    a = ComplexNumber(0.1, 0.3)
    b = ComplexNumber(0.2, 0.6)
    assert check_triangle_inequality(a, b)


def test_field_axioms_exact_and_tolerant():
    """Exact comparison exposes floating point failures."""
    assert commutativity(0.1, 0.7)
    assert associativity(3.0, 4.0, 5.0)
    assert not associativity(0.1, 0.2, 0.3)
    assert associativity(0.1, 0.2, 0.3, tolerance=1e-12)
    assert neutral_elements(2.5)
    assert distributive_law(2.0, 3.0, 4.0)


def test_inverses():
    """Zero has no multiplicative inverse."""
    assert inverses(4.0)
    assert not inverses(0.0)
    assert inverses(49.0, tolerance=1e-12)


def test_ordered_field_axioms():
    """Positivity is preserved by addition and multiplication."""
    assert is_positive(1e-3)
    assert not is_positive(0.0)
    assert addition_preserves_positivity(1.0, 2.0)
    assert not addition_preserves_positivity(-1.0, 2.0)
    assert multiplication_preserves_positivity(0.5, 4.0)
    assert not multiplication_preserves_positivity(1e-200, 1e-200)


@pytest.mark.parametrize(
    "a, b, expected",
    [(0.5, 5.0, 11), (1.0, 1.0, 2), (2.0, 1.0, 1), (3.0, 10.0, 4), (0.1, 1.0, 11)],
)
def test_archimedean_n(a, b, expected):
    """Smallest n with n a > b."""
    n = archimedean_n(a, b)
    assert n == expected
    assert n * a > b
    assert n == 1 or (n - 1) * a <= b


@pytest.mark.parametrize("a, b", [(1e-300, 1e300), (5e-324, 1.0), (1e-200, 1e200)])
def test_archimedean_n_when_ratio_overflows(a, b):
    """Huge ratios are counted exactly instead of overflowing."""
    n = archimedean_n(a, b)
    assert n == Fraction(b) // Fraction(a) + 1
    assert n * Fraction(a) > Fraction(b)
    assert (n - 1) * Fraction(a) <= Fraction(b)


@pytest.mark.parametrize("a, b", [(0.0, 1.0), (-1.0, 1.0), (1.0, 0.0), (math.inf, 1.0)])
def test_archimedean_n_rejects_non_positive(a, b):
    """Both arguments must be positive reals."""
    with pytest.raises(InvalidArgumentError):
        archimedean_n(a, b)


def test_supremum_infimum_of_finite_sets():
    """Max and min, with infinite defaults for empty input."""
    assert supremum([1.0, 3.0, 2.0]) == 3.0
    assert infimum([1.0, 3.0, 2.0]) == 1.0
    assert supremum([]) == -math.inf
    assert infimum(iter([])) == math.inf


def test_interval_membership():
    """Endpoint handling of closed, open and half-open intervals."""
    assert in_closed_interval(1.0, 0.0, 1.0)
    assert not in_open_interval(1.0, 0.0, 1.0)
    assert in_open_interval(0.5, 0.0, 1.0)
    assert in_half_open_interval(0.0, 0.0, 1.0)
    assert not in_half_open_interval(1.0, 0.0, 1.0)


def test_number_classes():
    """Natural, whole, integer, rational and real numbers."""
    assert is_natural(1) and not is_natural(0)
    assert is_whole(0) and not is_whole(-1)
    assert is_integer(-3.0) and not is_integer(2.5)
    assert not is_integer(math.inf)
    assert is_rational(1, 3) and not is_rational(1, 0)
    assert is_real(math.inf) and not is_real(math.nan)
