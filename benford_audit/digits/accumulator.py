"""Per-dataset first-digit frequency accumulator."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral
from typing import Iterable, List, Optional, Sequence

from benford_audit.exceptions import DegenerateInputError

N_DIGITS = 9


def _zeros() -> List[int]:
    return [0] * N_DIGITS


def _is_digit(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool) and 1 <= value <= N_DIGITS


@dataclass
class FrequencyAccumulator:
    """Observed counts for digits 1-9; ``counts[i]`` holds digit ``i + 1``.

    ``total`` always equals ``sum(counts)``. Out-of-range observations are ignored.
    """

    counts: List[int] = field(default_factory=_zeros)
    total: int = 0

    def __post_init__(self) -> None:
        if len(self.counts) != N_DIGITS:
            raise ValueError(f"counts must have {N_DIGITS} entries, got {len(self.counts)}")
        if any(int(c) < 0 for c in self.counts):
            raise ValueError("counts must be non-negative")
        self.counts = [int(c) for c in self.counts]
        self.total = sum(self.counts)

    def increment(self, digit: Optional[int]) -> bool:
        """Count one observation; return False (and change nothing) for non-digits."""
        if not _is_digit(digit):
            return False
        self.counts[int(digit) - 1] += 1
        self.total += 1
        return True

    def extend(self, digits: Iterable[Optional[int]]) -> int:
        accepted = 0
        for digit in digits:
            if self.increment(digit):
                accepted += 1
        return accepted

    def add_counts(self, counts: Sequence[int]) -> None:
        """Bulk-add a 9-vector of counts (vectorized ingestion paths)."""
        other = FrequencyAccumulator(list(counts))
        for idx, value in enumerate(other.counts):
            self.counts[idx] += value
        self.total += other.total

    def reset(self) -> None:
        self.counts = _zeros()
        self.total = 0

    def observed_fractions(self) -> List[float]:
        if self.total == 0:
            raise DegenerateInputError("no digit observations recorded; observed fractions are undefined")
        return [c / self.total for c in self.counts]

    @classmethod
    def from_counts(cls, counts: Sequence[int]) -> "FrequencyAccumulator":
        return cls(list(counts))

    @classmethod
    def merged(cls, accumulators: Iterable["FrequencyAccumulator"]) -> "FrequencyAccumulator":
        """New accumulator over the union of all observations in ``accumulators``."""
        union = cls()
        for acc in accumulators:
            union.add_counts(acc.counts)
        return union


__all__ = ["FrequencyAccumulator", "N_DIGITS"]
