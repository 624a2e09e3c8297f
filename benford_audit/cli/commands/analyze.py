"""Analyze CLI command: audit every dataset under a directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from benford_audit.cli.validation import (
    parse_bool,
    parse_groups,
    parse_patterns,
    validate_log_level,
)
from benford_audit.config.loader import load_config_with_precedence
from benford_audit.config.schema import AuditConfig
from benford_audit.data.discovery import DEFAULT_PATTERNS
from benford_audit.reporting.console import print_summary
from benford_audit.reporting.json_report import render_json
from benford_audit.reporting.text_report import render_text
from benford_audit.reporting.writer import write_report
from benford_audit.runner import run_audit
from benford_audit.utils.logging import get_logger

console = Console()
log = get_logger(__name__, component="cli.analyze")

EXIT_DATASET_FAILED = 3


def analyze(
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", help="Directory holding the datasets"),
    pattern: Optional[List[str]] = typer.Option(
        None, "--pattern", help="Glob pattern relative to data dir (repeatable)"
    ),
    column: Optional[str] = typer.Option(None, "--column", help="Column to read from CSV/Parquet datasets"),
    group: Optional[List[str]] = typer.Option(
        None, "--group", help="Aggregate datasets as NAME=a.txt,b.txt (repeatable)"
    ),
    output: Optional[Path] = typer.Option(None, "--output", help="Report file path"),
    report_format: Optional[str] = typer.Option(None, "--format", help="Report format: text|json"),
    no_write: bool = typer.Option(False, "--no-write", help="Print the report instead of writing it"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG|INFO|WARNING|ERROR"),
) -> None:
    """Score every dataset against Benford's Law and write a report."""
    defaults = {
        "data_dir": ".",
        "patterns": list(DEFAULT_PATTERNS),
        "column": None,
        "groups": {},
        "output": "output.txt",
        "format": "text",
        "write_output": True,
        "log_level": "INFO",
    }
    cli_values = {
        "data_dir": str(data_dir) if data_dir else None,
        "patterns": list(pattern) if pattern else None,
        "column": column,
        "groups": list(group) if group else None,
        "output": str(output) if output else None,
        "format": report_format,
        "write_output": False if no_write else None,
        "log_level": log_level,
    }
    casters = {
        "data_dir": str,
        "patterns": parse_patterns,
        "column": str,
        "groups": parse_groups,
        "output": str,
        "format": lambda v: str(v).lower(),
        "write_output": parse_bool,
        "log_level": validate_log_level,
    }
    cfg = load_config_with_precedence(
        config_path=config,
        env_prefix="BENFORD_",
        cli_values=cli_values,
        defaults=defaults,
        casters=casters,
    )
    logging.getLogger().setLevel(cfg.pop("log_level"))
    audit_config = AuditConfig.from_dict(cfg)

    log.info("Starting Benford audit", extra={"data_dir": audit_config.data_dir})
    run = run_audit(audit_config)

    rendered = render_json(run) if audit_config.format == "json" else render_text(run)
    if audit_config.write_output:
        target = audit_config.report_path()
        write_report(rendered, target)
        print_summary(run, console)
        console.print(f"Report written to {target}")
    else:
        typer.echo(rendered, nl=False)

    if run.failed:
        raise typer.Exit(code=EXIT_DATASET_FAILED)


__all__ = ["analyze"]
