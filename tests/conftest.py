"""
Pytest fixtures: direct-summation DFT and sinusoid samples used as references
"""

import numpy as np
import pytest


def slow_dft(x, inverse=False):
    """O(N²) direct summation; the fast transforms are checked against it."""
    x = np.asarray(x, dtype=complex)
    N = x.size
    n = np.arange(N)
    sign = 1 if inverse else -1
    kn = np.outer(n, n) % N  # keep the angles inside one turn
    return np.exp(sign * 2j * np.pi * kn / N) @ x


def sinusoid_basis(t, period, mean, amplitude, phase):
    """y(t) = mean + amplitude·cos(2π·t/period + phase), in basis form."""
    omega = 2.0 * np.pi / period
    a1 = amplitude * np.cos(phase)
    b1 = -amplitude * np.sin(phase)
    return mean + a1 * np.cos(omega * t) + b1 * np.sin(omega * t)


def max_relative_error(actual, expected):
    """Largest deviation, relative to the largest reference magnitude."""
    actual = np.asarray(actual, dtype=complex)
    expected = np.asarray(expected, dtype=complex)
    assert actual.shape == expected.shape
    scale = np.max(np.abs(expected))
    return np.max(np.abs(actual - expected)) / scale


@pytest.fixture
def reference_dft():
    return slow_dft


@pytest.fixture
def sinusoid():
    return sinusoid_basis


@pytest.fixture
def relative_error():
    return max_relative_error


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def random_signal(rng):
    """Factory for random complex buffers of a given length"""

    def make(n):
        return rng.standard_normal(n) + 1j * rng.standard_normal(n)

    return make
