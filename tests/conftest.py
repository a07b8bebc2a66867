"""Pytest configuration file with shared numerical settings fixtures."""

import pytest

from analysiskit.settings import NumericalSettings

__all__ = ["loose_settings"]


@pytest.fixture(scope="session")
def loose_settings():
    """Settings whose zero tolerance exceeds the forward-difference bias.

    With the default step the forward difference of a curved function is off
    by roughly ``H * f'' / 2``, so stationary points only register once the
    tolerance is raised above that.
    """
    return NumericalSettings(tolerance=1e-6)


@pytest.fixture
def square():
    """Returns ``x**2``."""
    return lambda x: x * x


@pytest.fixture
def cube():
    """Returns ``x**3``."""
    return lambda x: x**3
