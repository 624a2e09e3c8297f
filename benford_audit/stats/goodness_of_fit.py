"""Chi-square goodness of fit against the Benford first-digit distribution."""

from __future__ import annotations

from benford_audit.digits.accumulator import FrequencyAccumulator
from benford_audit.stats.benford_model import expected_probability
from benford_audit.stats.special_functions import regularized_upper_gamma

DEGREES_OF_FREEDOM = 8


def chi_square(accumulator: FrequencyAccumulator) -> float:
    """Pearson chi-square of observed digit counts vs Benford expectations.

    Digits whose expected count is zero (only when ``total == 0``) contribute nothing,
    so an empty accumulator yields 0.0.
    """
    stat = 0.0
    for digit, observed in enumerate(accumulator.counts, start=1):
        expected = expected_probability(digit) * accumulator.total
        if expected > 0:
            stat += (observed - expected) ** 2 / expected
    return stat


def chi_square_pvalue(chi2: float, df: int = DEGREES_OF_FREEDOM) -> float:
    """Upper-tail probability of the chi-square distribution with ``df`` degrees of freedom."""
    if df <= 0:
        raise ValueError(f"df must be > 0, got {df}")
    if chi2 < 0:
        raise ValueError(f"chi-square statistic must be >= 0, got {chi2}")
    if chi2 == 0:
        return 1.0
    p = regularized_upper_gamma(df / 2.0, chi2 / 2.0)
    return min(1.0, max(0.0, p))


__all__ = ["DEGREES_OF_FREEDOM", "chi_square", "chi_square_pvalue"]
