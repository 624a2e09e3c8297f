"""End-to-end scoring of accumulators through compute_fit_metrics / audit_dataset."""

import json

import pytest

from benford_audit.audit import audit_dataset, audit_group, compute_fit_metrics
from benford_audit.digits.accumulator import FrequencyAccumulator
from benford_audit.exceptions import DegenerateInputError, NumericNonConvergenceError

NEAR_BENFORD = [301, 176, 125, 97, 79, 68, 59, 52, 47]
UNIFORM = [112] * 9


def test_near_benford_counts_grade_close() -> None:
    metrics = compute_fit_metrics(FrequencyAccumulator.from_counts(NEAR_BENFORD))
    assert metrics.total == 1004
    assert metrics.mad < 0.002
    assert metrics.scores.practical_fit >= 85
    assert metrics.grades.practical_fit == "Close"
    assert metrics.grades.by_mad == "Close"
    assert metrics.p_value > 0.9
    assert metrics.grades.significance == "Close"
    assert metrics.screening_verdict == "PASSED"


def test_uniform_counts_grade_non_conforming() -> None:
    metrics = compute_fit_metrics(FrequencyAccumulator.from_counts(UNIFORM))
    assert metrics.total == 1008
    assert metrics.mad > 0.05
    assert metrics.grades.practical_fit == "Non-Conforming"
    assert metrics.grades.by_mad == "Non-Conforming"
    assert metrics.p_value < 1e-10
    assert metrics.screening_verdict == "FAILED"


def test_metric_ranges() -> None:
    metrics = compute_fit_metrics(FrequencyAccumulator.from_counts(UNIFORM))
    assert sum(metrics.expected) == pytest.approx(1.0, abs=1e-9)
    assert metrics.chi_square >= 0
    assert 0.0 <= metrics.p_value <= 1.0
    assert metrics.cramers_v >= 0
    for value in (metrics.scores.mad_score, metrics.scores.max_score, metrics.scores.p_score, metrics.scores.v_score):
        assert 0.0 <= value <= 1.0
    assert 0.0 <= metrics.scores.practical_fit <= 100.0
    assert 0.0 <= metrics.scores.significance <= 100.0


def test_pipeline_is_idempotent() -> None:
    acc = FrequencyAccumulator.from_counts(NEAR_BENFORD)
    first = compute_fit_metrics(acc)
    second = compute_fit_metrics(acc)
    assert first == second
    assert acc.counts == NEAR_BENFORD


def test_zero_total_raises_degenerate_input() -> None:
    with pytest.raises(DegenerateInputError):
        compute_fit_metrics(FrequencyAccumulator())


def test_audit_dataset_reports_degenerate_input_without_nan() -> None:
    report = audit_dataset("empty.txt", FrequencyAccumulator(), kind="text", source="empty.txt", rejected=4)
    assert not report.succeeded
    assert report.metrics is None
    assert report.error_kind == "DegenerateInputError"
    assert "no usable observations" in report.error
    payload = json.dumps(report.to_dict(), allow_nan=False)
    assert '"status": "failed"' in payload


def test_audit_dataset_reports_non_convergence(monkeypatch) -> None:
    def _boom(chi2, df=8):
        raise NumericNonConvergenceError("series did not converge")

    monkeypatch.setattr("benford_audit.audit.chi_square_pvalue", _boom)
    report = audit_dataset("big.png", FrequencyAccumulator.from_counts(UNIFORM), kind="image", source="big.png")
    assert not report.succeeded
    assert report.error_kind == "NumericNonConvergenceError"
    assert report.error.startswith("computation failed")
    assert report.observations == 1008


def test_audit_dataset_success_report() -> None:
    report = audit_dataset("ok", FrequencyAccumulator.from_counts(NEAR_BENFORD))
    assert report.succeeded
    assert report.kind == "counts"
    assert report.to_dict()["metrics"]["grades"]["practical_fit"] == "Close"


def test_audit_group_scores_union() -> None:
    a = FrequencyAccumulator.from_counts(NEAR_BENFORD)
    b = FrequencyAccumulator.from_counts(UNIFORM)
    report = audit_group("2020 candidates", [("a.txt", a), ("b.txt", b)])
    assert report.kind == "aggregate"
    assert report.source == ["a.txt", "b.txt"]
    assert report.metrics.total == 1004 + 1008
    assert report.metrics.counts[0] == 301 + 112


def test_audit_group_without_members_fails_cleanly() -> None:
    report = audit_group("nobody", [])
    assert not report.succeeded
    assert report.error_kind == "DegenerateInputError"
