"""Per-digit deviation from Benford and its MAD / max summaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from benford_audit.digits.accumulator import FrequencyAccumulator
from benford_audit.stats.benford_model import BENFORD_EXPECTED


@dataclass(frozen=True)
class DeviationSummary:
    observed: Tuple[float, ...]
    deviations: Tuple[float, ...]  # expected - observed, digit order 1..9
    mad: float
    max_deviation: float  # signed; largest magnitude, lowest digit on ties


def analyze_deviation(accumulator: FrequencyAccumulator) -> DeviationSummary:
    """Raises DegenerateInputError when the accumulator is empty."""
    observed = tuple(accumulator.observed_fractions())
    deviations = tuple(expected - obs for expected, obs in zip(BENFORD_EXPECTED, observed))
    mad = sum(abs(d) for d in deviations) / len(deviations)

    max_deviation = 0.0
    for deviation in deviations:
        if abs(deviation) > abs(max_deviation):
            max_deviation = deviation

    return DeviationSummary(observed=observed, deviations=deviations, mad=mad, max_deviation=max_deviation)


__all__ = ["DeviationSummary", "analyze_deviation"]
