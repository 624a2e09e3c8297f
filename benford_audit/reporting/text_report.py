"""Plain-text report rendering (pure; no I/O)."""

from __future__ import annotations

from typing import List

from benford_audit.models import AuditRun, DatasetReport, FitMetrics
from benford_audit.scoring.grades import VERDICT_DESCRIPTIONS

RULE = "-" * 75
UNITS = {"text": "items", "table": "rows", "image": "pixels", "aggregate": "items", "counts": "items"}
LABEL_WIDTH = 37


def _line(label: str, value: str) -> str:
    return f"{label:<{LABEL_WIDTH}}{value}"


def render_digit_table(metrics: FitMetrics) -> List[str]:
    lines = [
        "Digit   Benford [%]   Observed [%]   Deviation",
        "=====   ===========   ============   =========",
    ]
    for idx, (expected, observed, deviation) in enumerate(
        zip(metrics.expected, metrics.observed, metrics.deviations), start=1
    ):
        lines.append(f"{idx:<8}{expected * 100:05.2f}         {observed * 100:05.2f}          {deviation:.6f}")
    return lines


def render_metrics(metrics: FitMetrics) -> List[str]:
    scores, grades = metrics.scores, metrics.grades
    verdict = metrics.screening_verdict
    return [
        *render_digit_table(metrics),
        "",
        _line("LARGEST VARIANCE:", f"{metrics.max_deviation:.6f}"),
        _line("AVERAGE VARIANCE (ABS):", f"{metrics.mad:.6f}"),
        _line("CHI-SQUARE (df=8):", f"{metrics.chi_square:.4f}"),
        _line("P-VALUE:", f"{metrics.p_value:.6f}"),
        _line("CRAMER'S V:", f"{metrics.cramers_v:.6f}"),
        _line("PRACTICAL FIT:", f"{scores.practical_fit:.2f} ({grades.practical_fit})"),
        _line("SIGNIFICANCE:", f"{scores.significance:.2f} ({grades.significance})"),
        _line("MAD CONFORMITY:", grades.by_mad),
        _line("RESULT:", f"{verdict} ({VERDICT_DESCRIPTIONS[verdict]})"),
    ]


def render_dataset(report: DatasetReport) -> str:
    unit = UNITS.get(report.kind, "items")
    title = f"Analyzing {report.name} ({report.observations:,} {unit})..."
    if report.kind == "aggregate" and isinstance(report.source, list):
        title = f"Aggregate {report.name} of {', '.join(report.source)} ({report.observations:,} {unit})..."
    lines = [title, RULE]
    if report.succeeded and report.metrics is not None:
        lines.extend(render_metrics(report.metrics))
    else:
        lines.append(_line("FAILED:", report.error or "unknown error"))
    if report.rejected:
        lines.append(_line("SKIPPED (NO SIGNIFICANT DIGIT):", f"{report.rejected:,}"))
    lines.append("")
    return "\n".join(lines) + "\n"


def render_text(run: AuditRun) -> str:
    return "".join(render_dataset(report) for report in run.reports)


__all__ = ["render_dataset", "render_digit_table", "render_metrics", "render_text"]
