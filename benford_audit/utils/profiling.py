"""Timing helpers for per-dataset audit segments."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from benford_audit.utils.logging import get_logger

log = get_logger(__name__, component="profiling")


@dataclass
class Timing:
    wall: float
    cpu: float


def _now() -> Timing:
    return Timing(wall=time.perf_counter(), cpu=time.process_time())


@contextmanager
def track_time(name: str, *, warn_budget: float | None = None, **context: object) -> Iterator[Timing]:
    """Log wall/cpu time of the wrapped block; warn when ``warn_budget`` seconds is exceeded."""
    start = _now()
    try:
        yield start
    finally:
        end = _now()
        wall_elapsed = end.wall - start.wall
        cpu_elapsed = end.cpu - start.cpu
        extra = {
            "segment": name,
            "duration_ms": round(wall_elapsed * 1000.0, 3),
            "cpu_seconds": round(cpu_elapsed, 4),
            **context,
        }
        if warn_budget is not None and wall_elapsed >= warn_budget:
            log.warning("Segment exceeded time budget", extra=extra)
        else:
            log.info("Segment timing", extra=extra)
