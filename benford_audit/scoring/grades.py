"""Qualitative grade bands."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Literal

from benford_audit.scoring.composer import MAD_ACCEPTABLE, MAD_CLOSE, MAD_MARGINAL

Grade = Literal["Close", "Acceptable", "Marginal", "Non-Conforming"]
Verdict = Literal["PASSED", "FAILED"]

VERDICT_DESCRIPTIONS = {
    "PASSED": "Probably Not Manipulated",
    "FAILED": "Data Likely Manipulated",
}

SCREEN_MAX_DEVIATION = 0.02
SCREEN_MAD = 0.007


def grade(score: float) -> Grade:
    """Band a 0-100 score."""
    if score >= 85:
        return "Close"
    if score >= 70:
        return "Acceptable"
    if score >= 55:
        return "Marginal"
    return "Non-Conforming"


def result_by_mad(mad: float) -> Grade:
    """Nigrini first-digit conformity band taken straight from MAD."""
    if mad <= MAD_CLOSE:
        return "Close"
    if mad <= MAD_ACCEPTABLE:
        return "Acceptable"
    if mad <= MAD_MARGINAL:
        return "Marginal"
    return "Non-Conforming"


def screening_verdict(max_deviation: float, mad: float) -> Verdict:
    # Coarse pass/fail screen: every digit within 2 points and MAD under 0.007.
    if abs(max_deviation) < SCREEN_MAX_DEVIATION and mad < SCREEN_MAD:
        return "PASSED"
    return "FAILED"


@dataclass(frozen=True)
class GradeSet:
    practical_fit: Grade
    significance: Grade
    by_mad: Grade

    def to_dict(self) -> dict:
        return asdict(self)


__all__ = [
    "Grade",
    "GradeSet",
    "VERDICT_DESCRIPTIONS",
    "Verdict",
    "grade",
    "result_by_mad",
    "screening_verdict",
]
