"""Shared result models for Benford audits."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

from benford_audit.scoring.composer import ScoreSet
from benford_audit.scoring.grades import GradeSet, Verdict

DatasetKind = Literal["text", "table", "image", "aggregate", "counts"]


@dataclass(frozen=True)
class FitMetrics:
    counts: Tuple[int, ...]
    total: int
    expected: Tuple[float, ...]
    observed: Tuple[float, ...]
    deviations: Tuple[float, ...]
    chi_square: float
    p_value: float
    mad: float
    max_deviation: float
    cramers_v: float
    scores: ScoreSet
    grades: GradeSet
    screening_verdict: Verdict

    def to_dict(self) -> dict:
        return {
            "counts": list(self.counts),
            "total": self.total,
            "expected": list(self.expected),
            "observed": list(self.observed),
            "deviations": list(self.deviations),
            "chi_square": self.chi_square,
            "p_value": self.p_value,
            "mad": self.mad,
            "max_deviation": self.max_deviation,
            "cramers_v": self.cramers_v,
            "scores": self.scores.to_dict(),
            "grades": self.grades.to_dict(),
            "screening_verdict": self.screening_verdict,
        }


@dataclass
class DatasetReport:
    name: str
    kind: DatasetKind
    source: str | List[str]
    observations: int
    metrics: Optional[FitMetrics] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    rejected: int = 0

    @property
    def succeeded(self) -> bool:
        return self.metrics is not None and self.error is None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "kind": self.kind,
            "source": self.source,
            "observations": self.observations,
            "rejected": self.rejected,
            "status": "ok" if self.succeeded else "failed",
            "error": self.error,
            "error_kind": self.error_kind,
            "metrics": self.metrics.to_dict() if self.metrics else None,
        }


@dataclass
class AuditRun:
    run_id: str
    reports: List[DatasetReport] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return any(not r.succeeded for r in self.reports)

    @property
    def failures(self) -> List[DatasetReport]:
        return [r for r in self.reports if not r.succeeded]

    def to_dict(self) -> dict:
        return {
            "run_id": self.run_id,
            "failed": self.failed,
            "datasets": [r.to_dict() for r in self.reports],
        }


__all__ = ["AuditRun", "DatasetKind", "DatasetReport", "FitMetrics"]
