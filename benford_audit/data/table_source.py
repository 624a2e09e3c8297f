"""Tabular datasets (CSV/TSV/Parquet) read with pandas."""

from __future__ import annotations

from typing import Optional

import pandas as pd

from benford_audit.data import DatasetSource, IngestResult
from benford_audit.digits.extraction import first_significant_digit
from benford_audit.exceptions import DataSourceError
from benford_audit.utils.logging import get_logger

log = get_logger(__name__, component="table_source")


def _read_frame(source: DatasetSource) -> pd.DataFrame:
    suffix = source.path.suffix.lower()
    try:
        if suffix == ".parquet":
            return pd.read_parquet(source.path)
        if suffix == ".tsv":
            return pd.read_csv(source.path, sep="\t", dtype=str, keep_default_na=False)
        return pd.read_csv(source.path, dtype=str, keep_default_na=False)
    except (OSError, ValueError, ImportError) as exc:
        raise DataSourceError(f"Cannot read table {source.path}: {exc}") from exc


def _pick_column(df: pd.DataFrame, column: Optional[str]) -> str:
    if df.columns.empty:
        raise DataSourceError("Table has no columns")
    if column is not None:
        if column not in df.columns:
            available = ", ".join(str(c) for c in df.columns)
            raise DataSourceError(f"Column '{column}' not found (available: {available})")
        return column
    for name in df.columns:
        values = pd.to_numeric(df[name], errors="coerce")
        if values.notna().any():
            return name
    return df.columns[0]


def read_table_digits(source: DatasetSource, *, column: Optional[str] = None) -> IngestResult:
    """Count first digits of one column; the first numeric column when none is named."""
    df = _read_frame(source)
    name = _pick_column(df, column)
    result = IngestResult(source=source)
    for value in df[name].tolist():
        if not result.accumulator.increment(first_significant_digit(value)):
            result.rejected += 1
    log.info(
        "Table column ingested",
        extra={
            "dataset": source.name,
            "column": str(name),
            "observations": result.accumulator.total,
            "rejected": result.rejected,
        },
    )
    return result


__all__ = ["read_table_digits"]
