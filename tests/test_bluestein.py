"""Tests for the Bluestein (chirp-z) engine."""

import numpy as np
import pytest

from bluestein import bluestein_fft, bluestein_fft_inplace, chirp
from radix import InvalidLengthError


def test_chirp_values():
    n = 7
    k = np.arange(n)
    np.testing.assert_allclose(chirp(n, -1), np.exp(-1j * np.pi * k * k / n), atol=1e-14)
    np.testing.assert_allclose(chirp(n, 1), np.conj(chirp(n, -1)), atol=1e-15)


def test_chirp_large_index_stays_on_unit_circle():
    c = chirp(1_000_003)
    np.testing.assert_allclose(np.abs(c[-10:]), 1.0, atol=1e-14)


@pytest.mark.parametrize("n", [1, 2, 3, 5, 7, 12, 17, 100, 101])
def test_matches_reference(n, random_signal, reference_dft, relative_error):
    x = random_signal(n)
    X = bluestein_fft_inplace(x.copy())
    assert relative_error(X, reference_dft(x)) < 1e-13


@pytest.mark.parametrize("n", [3, 7, 30])
def test_inverse_is_unnormalized(n, random_signal, reference_dft, relative_error):
    x = random_signal(n)
    y = bluestein_fft_inplace(x.copy(), sign=1)
    assert relative_error(y, reference_dft(x, inverse=True)) < 1e-13


def test_round_trip(random_signal, relative_error):
    x = random_signal(45)
    y = bluestein_fft(bluestein_fft(x), inverse=True)
    assert relative_error(y / 45, x) < 1e-13


def test_out_of_place_leaves_input(random_signal):
    x = random_signal(11)
    before = x.copy()
    bluestein_fft(x)
    np.testing.assert_array_equal(x, before)


def test_rejects_empty():
    with pytest.raises(InvalidLengthError):
        bluestein_fft([])
