"""CLI input parsing and validation helpers."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

from benford_audit.digits.accumulator import N_DIGITS
from benford_audit.exceptions import ConfigValidationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_counts(raw: str) -> List[int]:
    """Parse ``"301,176,..."`` into nine non-negative integer counts."""
    parts = [p.strip() for p in raw.replace(";", ",").split(",") if p.strip()]
    if len(parts) != N_DIGITS:
        raise ConfigValidationError(f"counts must list {N_DIGITS} values for digits 1-9, got {len(parts)}")
    try:
        counts = [int(p) for p in parts]
    except ValueError as exc:
        raise ConfigValidationError(f"counts must be integers: {exc}") from exc
    if any(c < 0 for c in counts):
        raise ConfigValidationError("counts must be non-negative")
    return counts


def parse_group(raw: str) -> Tuple[str, List[str]]:
    """Parse ``NAME=a.txt,b.txt`` into a group name and its members."""
    name, sep, members = raw.partition("=")
    name = name.strip()
    listed = [m.strip() for m in members.split(",") if m.strip()]
    if not sep or not name or not listed:
        raise ConfigValidationError(f"group must look like NAME=dataset[,dataset...], got '{raw}'")
    return name, listed


def parse_groups(raw: Any) -> Dict[str, List[str]]:
    """Accept a mapping, a JSON object string, or an iterable of NAME=a,b entries."""
    if raw is None:
        return {}
    if isinstance(raw, dict):
        return {str(k): [str(m) for m in v] if not isinstance(v, str) else [v] for k, v in raw.items()}
    if isinstance(raw, str):
        try:
            decoded = json.loads(raw)
        except json.JSONDecodeError:
            decoded = None
        if isinstance(decoded, dict):
            return parse_groups(decoded)
        raw = [raw]
    groups: Dict[str, List[str]] = {}
    for entry in raw:
        name, members = parse_group(str(entry))
        groups.setdefault(name, []).extend(members)
    return groups


def parse_patterns(raw: Any) -> List[str]:
    if isinstance(raw, str):
        return [p.strip() for p in raw.split(",") if p.strip()]
    return [str(p) for p in raw]


def parse_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}


def validate_log_level(level: str) -> str:
    normalized = str(level).strip().upper()
    if normalized not in LOG_LEVELS:
        raise ConfigValidationError(f"log level must be one of {list(LOG_LEVELS)}")
    return normalized


__all__ = [
    "parse_bool",
    "parse_counts",
    "parse_group",
    "parse_groups",
    "parse_patterns",
    "validate_log_level",
]
