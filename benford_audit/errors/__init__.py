"""Failure helpers turning per-dataset errors into failed reports."""

from __future__ import annotations

from .convergence_errors import record_numeric_failure
from .data_errors import handle_degenerate_input, record_source_failure

__all__ = [
    "handle_degenerate_input",
    "record_numeric_failure",
    "record_source_failure",
]
