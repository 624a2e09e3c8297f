"""Cramér's V effect size."""

from __future__ import annotations

import math

from benford_audit.exceptions import DegenerateInputError


def cramers_v(chi2: float, n: int, k: int = 9) -> float:
    """sqrt(chi2 / (n * (k - 1))) for a goodness-of-fit test over ``k`` categories."""
    if n <= 0:
        raise DegenerateInputError("Cramér's V is undefined for an empty sample")
    if k < 2:
        raise ValueError(f"k must be >= 2, got {k}")
    if chi2 < 0:
        raise ValueError(f"chi-square statistic must be >= 0, got {chi2}")
    return math.sqrt(chi2 / (n * (k - 1)))


__all__ = ["cramers_v"]
