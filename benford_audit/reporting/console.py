"""Rich console summary of an audit run."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from benford_audit.models import AuditRun

GRADE_STYLES = {
    "Close": "green",
    "Acceptable": "cyan",
    "Marginal": "yellow",
    "Non-Conforming": "red",
}


def build_summary_table(run: AuditRun) -> Table:
    table = Table(title=f"Benford audit {run.run_id}")
    table.add_column("Dataset")
    table.add_column("Kind")
    table.add_column("N", justify="right")
    table.add_column("MAD", justify="right")
    table.add_column("p-value", justify="right")
    table.add_column("Practical fit", justify="right")
    table.add_column("Grade")
    table.add_column("MAD band")
    for report in run.reports:
        metrics = report.metrics
        if metrics is None:
            table.add_row(
                report.name,
                report.kind,
                f"{report.observations:,}",
                "-",
                "-",
                "-",
                "[red]FAILED[/red]",
                report.error_kind or "",
            )
            continue
        style = GRADE_STYLES.get(metrics.grades.practical_fit, "white")
        table.add_row(
            report.name,
            report.kind,
            f"{metrics.total:,}",
            f"{metrics.mad:.6f}",
            f"{metrics.p_value:.4f}",
            f"{metrics.scores.practical_fit:.2f}",
            f"[{style}]{metrics.grades.practical_fit}[/{style}]",
            metrics.grades.by_mad,
        )
    return table


def print_summary(run: AuditRun, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(build_summary_table(run))
    for report in run.failures:
        console.print(f"[red]{report.name}: {report.error}[/red]")


__all__ = ["build_summary_table", "print_summary"]
