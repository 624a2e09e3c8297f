"""Report persistence."""

from __future__ import annotations

from pathlib import Path

from benford_audit.exceptions import ReportWriteError
from benford_audit.utils.logging import get_logger

log = get_logger(__name__, component="report_writer")


def write_report(text: str, path: Path) -> Path:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ReportWriteError(f"Cannot write report to {path}: {exc}") from exc
    log.info("Report written", extra={"path": str(path), "bytes": len(text.encode("utf-8"))})
    return path


__all__ = ["write_report"]
