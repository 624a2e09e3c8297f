"""Audit run orchestration: discover -> ingest -> score -> aggregate."""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Dict, List, Optional

from benford_audit.audit import audit_dataset, audit_group
from benford_audit.config.schema import AuditConfig
from benford_audit.data import DatasetSource, IngestResult
from benford_audit.data.discovery import discover_datasets
from benford_audit.data.factory import ingest
from benford_audit.errors import record_source_failure
from benford_audit.exceptions import ConfigValidationError, DataSourceError
from benford_audit.models import AuditRun, DatasetReport
from benford_audit.utils.logging import get_logger
from benford_audit.utils.profiling import track_time

log = get_logger(__name__, component="runner")


def _audit_source(source: DatasetSource, column: Optional[str]) -> tuple[DatasetReport, Optional[IngestResult]]:
    with track_time("dataset", dataset=source.name, kind=source.kind):
        try:
            ingested = ingest(source, column=column)
        except DataSourceError as exc:
            return record_source_failure(source.name, error=exc, kind=source.kind, source=str(source.path)), None
        report = audit_dataset(
            source.name,
            ingested.accumulator,
            kind=source.kind,
            source=str(source.path),
            rejected=ingested.rejected,
        )
    return report, ingested


def _resolve_groups(groups: Dict[str, List[str]], known: List[str]) -> None:
    for group, members in groups.items():
        missing = [m for m in members if m not in known]
        if missing:
            raise ConfigValidationError(
                f"group '{group}' references unknown datasets: {', '.join(missing)}"
            )


def run_audit(config: AuditConfig, *, run_id: Optional[str] = None) -> AuditRun:
    """Audit every discovered dataset, then every configured group.

    Dataset-level failures (unreadable file, no observations, non-convergence)
    become failed reports; discovery and group configuration errors raise.
    A group containing a failed member is scored over the readable members.
    """
    run = AuditRun(run_id=run_id or uuid.uuid4().hex[:12])
    report = config.report_path().resolve()
    sources = [
        s for s in discover_datasets(Path(config.data_dir), config.patterns) if s.path.resolve() != report
    ]
    if not sources:
        raise DataSourceError(
            f"No datasets matched {list(config.patterns)} under {config.data_dir}"
        )
    _resolve_groups(config.groups, [s.name for s in sources])

    ingested: Dict[str, IngestResult] = {}
    for source in sources:
        report, result = _audit_source(source, config.column)
        run.reports.append(report)
        if result is not None:
            ingested[source.name] = result

    for group, members in config.groups.items():
        available = [(m, ingested[m].accumulator) for m in members if m in ingested]
        with track_time("aggregate", dataset=group, kind="aggregate"):
            run.reports.append(audit_group(group, available))

    log.info(
        "Audit run finished",
        extra={"datasets": len(sources), "groups": len(config.groups), "failed": len(run.failures)},
    )
    return run


__all__ = ["run_audit"]
