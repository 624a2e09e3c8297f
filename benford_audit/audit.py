"""
audit.py

Accumulate -> derive -> score pipeline for a single dataset or for the union
of several. ``compute_fit_metrics`` is pure and raises on degenerate or
non-convergent input; ``audit_dataset`` and ``audit_group`` sit at the dataset
boundary and turn those errors into failed reports so sibling datasets keep
going.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from benford_audit.digits.accumulator import FrequencyAccumulator
from benford_audit.errors import handle_degenerate_input, record_numeric_failure
from benford_audit.exceptions import DegenerateInputError, NumericNonConvergenceError
from benford_audit.models import DatasetKind, DatasetReport, FitMetrics
from benford_audit.scoring.composer import compose_scores
from benford_audit.scoring.grades import GradeSet, grade, result_by_mad, screening_verdict
from benford_audit.stats.benford_model import BENFORD_EXPECTED
from benford_audit.stats.deviation import analyze_deviation
from benford_audit.stats.effect_size import cramers_v
from benford_audit.stats.goodness_of_fit import chi_square, chi_square_pvalue
from benford_audit.utils.logging import get_logger

log = get_logger(__name__, component="audit")


def compute_fit_metrics(accumulator: FrequencyAccumulator) -> FitMetrics:
    """Derive the full metric set for one accumulator.

    Raises:
        DegenerateInputError: the accumulator holds no observations.
        NumericNonConvergenceError: the p-value evaluation did not converge.
    """
    if accumulator.total == 0:
        raise DegenerateInputError("cannot score an accumulator with zero observations")

    deviation = analyze_deviation(accumulator)
    chi2 = chi_square(accumulator)
    p_value = chi_square_pvalue(chi2)
    v = cramers_v(chi2, accumulator.total)
    scores = compose_scores(
        mad=deviation.mad,
        max_deviation=deviation.max_deviation,
        p_value=p_value,
        cramers_v=v,
    )
    grades = GradeSet(
        practical_fit=grade(scores.practical_fit),
        significance=grade(scores.significance),
        by_mad=result_by_mad(deviation.mad),
    )
    return FitMetrics(
        counts=tuple(accumulator.counts),
        total=accumulator.total,
        expected=BENFORD_EXPECTED,
        observed=deviation.observed,
        deviations=deviation.deviations,
        chi_square=chi2,
        p_value=p_value,
        mad=deviation.mad,
        max_deviation=deviation.max_deviation,
        cramers_v=v,
        scores=scores,
        grades=grades,
        screening_verdict=screening_verdict(deviation.max_deviation, deviation.mad),
    )


def audit_dataset(
    name: str,
    accumulator: FrequencyAccumulator,
    *,
    kind: DatasetKind = "counts",
    source: str | List[str] = "",
    rejected: int = 0,
) -> DatasetReport:
    """Score one dataset, converting core failures into a failed report."""
    try:
        metrics = compute_fit_metrics(accumulator)
    except DegenerateInputError:
        return handle_degenerate_input(name, kind=kind, source=source, rejected=rejected)
    except NumericNonConvergenceError as exc:
        return record_numeric_failure(
            name, error=exc, kind=kind, source=source, observations=accumulator.total
        )

    log.info(
        "Dataset scored",
        extra={
            "dataset": name,
            "kind": kind,
            "observations": accumulator.total,
            "practical_fit": round(metrics.scores.practical_fit, 2),
            "grade": metrics.grades.practical_fit,
        },
    )
    return DatasetReport(
        name=name,
        kind=kind,
        source=source,
        observations=accumulator.total,
        metrics=metrics,
        rejected=rejected,
    )


def audit_group(name: str, members: Sequence[Tuple[str, FrequencyAccumulator]]) -> DatasetReport:
    """Score the union of several datasets' observations as one aggregate."""
    union = FrequencyAccumulator.merged(acc for _, acc in members)
    return audit_dataset(name, union, kind="aggregate", source=[member for member, _ in members])


__all__ = ["audit_dataset", "audit_group", "compute_fit_metrics"]
