"""Structured logging utilities with JSON output."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

DEFAULT_FIELDS = {
    "run_id",
    "component",
    "dataset",
    "kind",
    "observations",
    "rejected",
    "error",
    "practical_fit",
    "grade",
    "segment",
    "duration_ms",
    "cpu_seconds",
    "data_dir",
    "pattern",
    "path",
    "column",
    "bytes",
    "count",
    "datasets",
    "groups",
    "failed",
    "sources",
}


class JSONFormatter(logging.Formatter):
    """JSON formatter adding common contextual fields when present."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in DEFAULT_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _context_filter(run_id: Optional[str], component: Optional[str]) -> logging.Filter:
    class ContextFilter(logging.Filter):
        def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
            if run_id and not hasattr(record, "run_id"):
                record.run_id = run_id
            if component and not hasattr(record, "component"):
                record.component = component
            return True

    return ContextFilter()


def configure_logging(
    run_id: Optional[str] = None,
    component: Optional[str] = None,
    level: int | str = logging.INFO,
) -> None:
    """Configure root logger with structured JSON output on stderr.

    Embeds run_id/component defaults so downstream loggers inherit context without
    requiring every call to pass `extra`. Reports own stdout, logs stay on stderr.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(_context_filter(run_id, component))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)


def get_logger(name: str, run_id: Optional[str] = None, component: Optional[str] = None) -> logging.Logger:
    """Convenience helper to fetch a logger with optional context defaults."""

    logger = logging.getLogger(name)
    if run_id or component:
        logger.addFilter(_context_filter(run_id, component))
    return logger
