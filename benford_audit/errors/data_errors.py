"""Empty-dataset and unreadable-source handling for dataset audits."""

from __future__ import annotations

from typing import List

from benford_audit.models import DatasetKind, DatasetReport
from benford_audit.utils.logging import get_logger

log = get_logger(__name__, component="audit_errors")


def handle_degenerate_input(
    name: str,
    *,
    kind: DatasetKind,
    source: str | List[str],
    rejected: int = 0,
) -> DatasetReport:
    """Failed report for a dataset that produced no usable first digits."""

    message = f"no usable observations in {name} ({rejected} rejected); Benford metrics are undefined"
    log.warning(
        "Skipping dataset with no observations",
        extra={"dataset": name, "kind": kind, "observations": 0, "rejected": rejected},
    )
    return DatasetReport(
        name=name,
        kind=kind,
        source=source,
        observations=0,
        rejected=rejected,
        error=message,
        error_kind="DegenerateInputError",
    )


def record_source_failure(name: str, *, error: Exception, kind: DatasetKind, source: str) -> DatasetReport:
    """Failed report for a dataset whose file could not be read."""

    message = str(error)
    log.warning("Dataset could not be read", extra={"dataset": name, "kind": kind, "error": message})
    return DatasetReport(
        name=name,
        kind=kind,
        source=source,
        observations=0,
        error=f"read failed: {message}",
        error_kind=type(error).__name__,
    )


__all__ = ["handle_degenerate_input", "record_source_failure"]
