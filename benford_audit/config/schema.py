"""Audit run configuration schema and validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Literal, Optional

from benford_audit.data.discovery import DEFAULT_PATTERNS
from benford_audit.exceptions import ConfigValidationError

ReportFormat = Literal["text", "json"]
REPORT_FORMATS = ("text", "json")


def _default_patterns() -> List[str]:
    return list(DEFAULT_PATTERNS)


@dataclass(slots=True)
class AuditConfig:
    data_dir: str = "."
    patterns: List[str] = field(default_factory=_default_patterns)
    column: Optional[str] = None
    groups: Dict[str, List[str]] = field(default_factory=dict)
    output: str = "output.txt"
    format: ReportFormat = "text"
    write_output: bool = True

    def __post_init__(self) -> None:
        if not self.data_dir:
            raise ConfigValidationError("data_dir is required")
        if isinstance(self.patterns, str):
            self.patterns = [self.patterns]
        if not self.patterns or any(not str(p).strip() for p in self.patterns):
            raise ConfigValidationError("patterns must be a non-empty list of glob patterns")
        if self.format not in REPORT_FORMATS:
            raise ConfigValidationError(f"format must be one of {list(REPORT_FORMATS)}")
        if not isinstance(self.groups, dict):
            raise ConfigValidationError("groups must map a group name to a list of dataset names")
        for name, members in self.groups.items():
            if not str(name).strip():
                raise ConfigValidationError("group names must be non-empty")
            if isinstance(members, str) or not members:
                raise ConfigValidationError(f"group '{name}' must list at least one dataset")
        if self.write_output and not self.output:
            raise ConfigValidationError("output path is required when write_output is enabled")

    def report_path(self) -> Path:
        """Report target; relative paths resolve against ``data_dir``."""
        target = Path(self.output)
        return target if target.is_absolute() else Path(self.data_dir) / target

    @classmethod
    def from_dict(cls, data: dict) -> "AuditConfig":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    def to_dict(self) -> dict:
        return {
            "data_dir": self.data_dir,
            "patterns": list(self.patterns),
            "column": self.column,
            "groups": {k: list(v) for k, v in self.groups.items()},
            "output": self.output,
            "format": self.format,
            "write_output": self.write_output,
        }


__all__ = ["AuditConfig", "REPORT_FORMATS", "ReportFormat"]
