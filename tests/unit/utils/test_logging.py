import json
import logging

from benford_audit.errors import record_numeric_failure
from benford_audit.utils.logging import JSONFormatter, _context_filter
from benford_audit.utils.profiling import track_time


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("benford_audit.test", logging.INFO, __file__, 1, "Dataset scored", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_context_fields():
    payload = json.loads(JSONFormatter().format(_record(dataset="a.txt", observations=12, ignored="x")))
    assert payload["message"] == "Dataset scored"
    assert payload["level"] == "INFO"
    assert payload["dataset"] == "a.txt"
    assert payload["observations"] == 12
    assert "ignored" not in payload
    assert payload["timestamp"].endswith("Z")


def test_context_filter_fills_defaults_without_overriding():
    record = _record(component="runner")
    _context_filter("run-1", "cli").filter(record)
    assert record.run_id == "run-1"
    assert record.component == "runner"


def _formatted(caplog) -> list[dict]:
    formatter = JSONFormatter()
    return [json.loads(formatter.format(r)) for r in caplog.records]


def test_failed_dataset_log_carries_error(caplog):
    with caplog.at_level("INFO"):
        record_numeric_failure(
            "big.png", error="series did not converge", kind="image", source="big.png", observations=5
        )
    payload = _formatted(caplog)[-1]
    assert payload["dataset"] == "big.png"
    assert payload["error"] == "series did not converge"


def test_timing_log_carries_segment(caplog):
    with caplog.at_level("INFO"):
        with track_time("aggregate", dataset="all"):
            pass
    payload = _formatted(caplog)[-1]
    assert payload["segment"] == "aggregate"
    assert "cpu_seconds" in payload
    assert "duration_ms" in payload
