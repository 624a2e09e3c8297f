"""Dataset sources and ingestion results.

Readers turn a file into a :class:`IngestResult`: a filled
``FrequencyAccumulator`` plus the number of raw values that carried no
significant digit. Readers never score anything themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional, Protocol, runtime_checkable

from benford_audit.digits.accumulator import FrequencyAccumulator

SourceKind = Literal["text", "table", "image"]


@dataclass(slots=True, frozen=True)
class DatasetSource:
    """A discovered dataset file."""

    name: str
    path: Path
    kind: SourceKind


@dataclass(slots=True)
class IngestResult:
    source: DatasetSource
    accumulator: FrequencyAccumulator = field(default_factory=FrequencyAccumulator)
    rejected: int = 0


@runtime_checkable
class DigitReader(Protocol):
    """Callable reading one dataset file into digit counts."""

    def __call__(self, source: DatasetSource, *, column: Optional[str] = None) -> IngestResult:
        ...


__all__ = ["DatasetSource", "DigitReader", "IngestResult", "SourceKind"]
