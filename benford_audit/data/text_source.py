"""One-token-per-line text datasets (e.g. precinct vote tallies)."""

from __future__ import annotations

from typing import Optional

from benford_audit.data import DatasetSource, IngestResult
from benford_audit.digits.extraction import first_significant_digit
from benford_audit.exceptions import DataSourceError
from benford_audit.utils.logging import get_logger

log = get_logger(__name__, component="text_source")


def read_text_digits(source: DatasetSource, *, column: Optional[str] = None) -> IngestResult:
    result = IngestResult(source=source)
    try:
        with source.path.open("r", encoding="utf-8-sig", errors="replace") as handle:
            for line in handle:
                if not result.accumulator.increment(first_significant_digit(line)):
                    result.rejected += 1
    except OSError as exc:
        raise DataSourceError(f"Cannot read {source.path}: {exc}") from exc

    if result.rejected:
        log.info(
            "Lines without a significant digit skipped",
            extra={"dataset": source.name, "rejected": result.rejected},
        )
    return result


__all__ = ["read_text_digits"]
