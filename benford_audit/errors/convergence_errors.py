"""Numeric failure helpers for dataset audits."""

from __future__ import annotations

from typing import List

from benford_audit.models import DatasetKind, DatasetReport
from benford_audit.utils.logging import get_logger

log = get_logger(__name__, component="audit_errors")


def record_numeric_failure(
    name: str,
    *,
    error: Exception | str,
    kind: DatasetKind,
    source: str | List[str],
    observations: int,
) -> DatasetReport:
    """Log a computation failure and return a failed DatasetReport placeholder."""

    message = str(error)
    log.warning(
        "Statistics did not converge",
        extra={"dataset": name, "kind": kind, "observations": observations, "error": message},
    )
    return DatasetReport(
        name=name,
        kind=kind,
        source=source,
        observations=observations,
        error=f"computation failed: {message}",
        error_kind=type(error).__name__ if isinstance(error, Exception) else "NumericNonConvergenceError",
    )


__all__ = ["record_numeric_failure"]
