"""Reader selection by dataset kind."""

from __future__ import annotations

from typing import Dict, Optional

from benford_audit.data import DatasetSource, DigitReader, IngestResult, SourceKind
from benford_audit.data.image_source import read_image_digits
from benford_audit.data.table_source import read_table_digits
from benford_audit.data.text_source import read_text_digits
from benford_audit.exceptions import DataSourceError

READERS: Dict[SourceKind, DigitReader] = {
    "text": read_text_digits,
    "table": read_table_digits,
    "image": read_image_digits,
}


def get_reader(kind: str) -> DigitReader:
    try:
        return READERS[kind]  # type: ignore[index]
    except KeyError as exc:
        raise DataSourceError(f"No reader for dataset kind '{kind}'") from exc


def ingest(source: DatasetSource, *, column: Optional[str] = None) -> IngestResult:
    return get_reader(source.kind)(source, column=column)


__all__ = ["READERS", "get_reader", "ingest"]
