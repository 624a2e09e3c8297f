import numpy as np
import pytest

from benford_audit.digits.extraction import (
    first_significant_digit,
    leading_digits,
    pixel_magnitude,
    pixel_magnitudes,
)


@pytest.mark.parametrize("token", ["0", "", "   ", "+0.00", "-0", "0,000.000", "\n", "abc", "$12"])
def test_tokens_without_significant_digit(token):
    assert first_significant_digit(token) is None


@pytest.mark.parametrize(
    "token, digit",
    [
        ("123", 1),
        ("-42", 4),
        ("007.5", 7),
        ("1,234,567", 1),
        ("  9\n", 9),
        ("+0.0032", 3),
        ("0_008", 8),
        ("5e-3", 5),
    ],
)
def test_tokens_with_significant_digit(token, digit):
    assert first_significant_digit(token) == digit


def test_numeric_inputs():
    assert first_significant_digit(0) is None
    assert first_significant_digit(-731) == 7
    assert first_significant_digit(0.00042) == 4
    assert first_significant_digit(1e-20) == 1
    assert first_significant_digit(np.float64(2.5)) == 2
    assert first_significant_digit(np.int64(86)) == 8
    assert first_significant_digit(10**400) == 1


def test_non_finite_and_missing_inputs():
    assert first_significant_digit(float("nan")) is None
    assert first_significant_digit(float("inf")) is None
    assert first_significant_digit(None) is None
    assert first_significant_digit(True) is None


def test_pixel_magnitude_floors_zero_channels():
    assert pixel_magnitude(0, 0, 0, 0) == 1
    assert pixel_magnitude(2, 3, 4, 0) == 24
    assert pixel_magnitude(255, 255, 255, 255) == 4228250625


def test_pixel_magnitudes_vectorized():
    rgba = np.array([[[0, 0, 0, 0], [2, 3, 4, 1]], [[255, 255, 255, 255], [10, 10, 10, 10]]], dtype=np.uint8)
    assert pixel_magnitudes(rgba).tolist() == [1, 24, 4228250625, 10000]


def test_leading_digits():
    values = np.array([1, 9, 10, 99, 100, 4228250625, 0], dtype=np.uint64)
    assert leading_digits(values).tolist() == [1, 9, 1, 9, 1, 4, 0]
