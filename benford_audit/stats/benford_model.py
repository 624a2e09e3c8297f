"""Benford first-digit probabilities."""

from __future__ import annotations

import math
from typing import Tuple

BENFORD_EXPECTED: Tuple[float, ...] = tuple(math.log10(1.0 + 1.0 / d) for d in range(1, 10))


def expected_probability(digit: int) -> float:
    """P(d) = log10(1 + 1/d) for d in 1..9; any other digit has probability 0."""
    if isinstance(digit, bool) or not isinstance(digit, int) or not 1 <= digit <= 9:
        return 0.0
    return BENFORD_EXPECTED[digit - 1]


__all__ = ["BENFORD_EXPECTED", "expected_probability"]
