"""Glob-based dataset discovery."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence

from benford_audit.data import DatasetSource, SourceKind
from benford_audit.exceptions import DataSourceError
from benford_audit.utils.logging import get_logger

log = get_logger(__name__, component="discovery")

SUFFIX_KINDS: Dict[str, SourceKind] = {
    ".txt": "text",
    ".lst": "text",
    ".csv": "table",
    ".tsv": "table",
    ".parquet": "table",
    ".jpg": "image",
    ".jpeg": "image",
    ".tif": "image",
    ".tiff": "image",
    ".png": "image",
    ".bmp": "image",
}

DEFAULT_PATTERNS = ("*.txt", "images/*.jpg", "images/*.tiff")


def classify(path: Path) -> SourceKind:
    kind = SUFFIX_KINDS.get(path.suffix.lower())
    if kind is None:
        supported = ", ".join(sorted(SUFFIX_KINDS))
        raise DataSourceError(f"Unsupported dataset type '{path.suffix}' for {path} (supported: {supported})")
    return kind


def discover_datasets(data_dir: Path, patterns: Sequence[str] = DEFAULT_PATTERNS) -> List[DatasetSource]:
    """Expand ``patterns`` under ``data_dir``.

    Patterns are visited in order, matches within a pattern in sorted path order;
    a file matched by several patterns is kept once. Dataset names are paths
    relative to ``data_dir`` in POSIX form.
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise DataSourceError(f"Data directory not found: {data_dir}")

    seen: set[Path] = set()
    sources: List[DatasetSource] = []
    for pattern in patterns:
        matches = sorted(p for p in data_dir.glob(pattern) if p.is_file())
        if not matches:
            log.info("Pattern matched no files", extra={"pattern": pattern, "data_dir": str(data_dir)})
        for path in matches:
            resolved = path.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)
            sources.append(
                DatasetSource(name=path.relative_to(data_dir).as_posix(), path=path, kind=classify(path))
            )
    log.info("Discovered datasets", extra={"count": len(sources), "data_dir": str(data_dir)})
    return sources


__all__ = ["DEFAULT_PATTERNS", "SUFFIX_KINDS", "classify", "discover_datasets"]
