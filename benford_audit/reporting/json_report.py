"""JSON report rendering."""

from __future__ import annotations

import json

from benford_audit.models import AuditRun


def render_json(run: AuditRun, *, indent: int = 2) -> str:
    return json.dumps(run.to_dict(), indent=indent, allow_nan=False) + "\n"


__all__ = ["render_json"]
