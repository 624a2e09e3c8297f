"""Score CLI command: audit a raw digit-count vector."""

from __future__ import annotations

import typer

from benford_audit.audit import audit_dataset
from benford_audit.cli.validation import parse_counts
from benford_audit.digits.accumulator import FrequencyAccumulator
from benford_audit.exceptions import ConfigValidationError
from benford_audit.models import AuditRun
from benford_audit.reporting.json_report import render_json
from benford_audit.reporting.text_report import render_text

EXIT_DATASET_FAILED = 3


def score(
    counts: str = typer.Option(..., "--counts", help="Nine comma-separated counts for digits 1-9"),
    name: str = typer.Option("counts", "--name", help="Dataset label used in the report"),
    report_format: str = typer.Option("text", "--format", help="Report format: text|json"),
) -> None:
    """Score observed first-digit counts directly."""
    report_format = report_format.lower()
    if report_format not in {"text", "json"}:
        raise ConfigValidationError("format must be one of ['text', 'json']")

    accumulator = FrequencyAccumulator.from_counts(parse_counts(counts))
    run = AuditRun(run_id=name, reports=[audit_dataset(name, accumulator, kind="counts", source="cli")])
    typer.echo(render_json(run) if report_format == "json" else render_text(run), nl=False)
    if run.failed:
        raise typer.Exit(code=EXIT_DATASET_FAILED)


__all__ = ["score"]
