"""First-significant-digit extraction for text tokens, numbers and pixels."""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Optional

import numpy as np

SKIP_CHARS = frozenset("+-.,_' \t\r\n\f\v")
SIGNIFICANT = frozenset("123456789")


def first_significant_digit(token: object) -> Optional[int]:
    """Return the first significant decimal digit (1-9) of ``token`` or None.

    Signs, grouping separators, decimal points, whitespace and leading zeros are
    skipped. Any other character before a significant digit ends the scan.

    >>> first_significant_digit("-42")
    4
    >>> first_significant_digit("+0.00") is None
    True
    """
    if token is None or isinstance(token, bool):
        return None
    if isinstance(token, Integral):
        text = str(abs(int(token)))
    elif isinstance(token, Real):
        value = float(token)
        if not math.isfinite(value):
            return None
        text = repr(abs(value))
    else:
        text = str(token)

    for char in text:
        if char in SIGNIFICANT:
            return int(char)
        if char == "0" or char in SKIP_CHARS:
            continue
        return None
    return None


def pixel_magnitude(r: int, g: int, b: int, a: int) -> int:
    """Product of RGBA channels with zero channels counted as 1."""
    return max(r, 1) * max(g, 1) * max(b, 1) * max(a, 1)


def pixel_magnitudes(rgba: np.ndarray) -> np.ndarray:
    """Vectorized :func:`pixel_magnitude` over an ``(..., 4)`` uint8 array."""
    channels = np.maximum(np.asarray(rgba, dtype=np.uint64), 1)
    return np.prod(channels, axis=-1, dtype=np.uint64).reshape(-1)


def leading_digits(values: np.ndarray) -> np.ndarray:
    """Leading decimal digit of each non-negative integer; zeros map to 0."""
    digits = np.asarray(values, dtype=np.uint64).copy()
    while True:
        wide = digits >= 10
        if not wide.any():
            return digits.astype(np.int64)
        digits[wide] //= np.uint64(10)


__all__ = ["first_significant_digit", "leading_digits", "pixel_magnitude", "pixel_magnitudes"]
