from pathlib import Path

import pytest

from benford_audit.data.discovery import classify, discover_datasets
from benford_audit.exceptions import DataSourceError


def _touch(path: Path, text: str = "1\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


def test_discover_default_layout(tmp_path):
    _touch(tmp_path / "2020-Trump.txt")
    _touch(tmp_path / "2020-Biden.txt")
    (tmp_path / "images").mkdir()
    (tmp_path / "images" / "b.tiff").write_bytes(b"")
    (tmp_path / "images" / "a.jpg").write_bytes(b"")
    _touch(tmp_path / "notes.md")

    sources = discover_datasets(tmp_path)

    assert [s.name for s in sources] == ["2020-Biden.txt", "2020-Trump.txt", "images/a.jpg", "images/b.tiff"]
    assert [s.kind for s in sources] == ["text", "text", "image", "image"]


def test_discover_deduplicates_across_patterns(tmp_path):
    _touch(tmp_path / "a.txt")
    sources = discover_datasets(tmp_path, ["*.txt", "a.*"])
    assert [s.name for s in sources] == ["a.txt"]


def test_discover_missing_directory(tmp_path):
    with pytest.raises(DataSourceError):
        discover_datasets(tmp_path / "missing")


def test_classify_suffixes():
    assert classify(Path("x.CSV")) == "table"
    assert classify(Path("x.parquet")) == "table"
    assert classify(Path("x.PNG")) == "image"
    assert classify(Path("x.lst")) == "text"
    with pytest.raises(DataSourceError):
        classify(Path("x.docx"))
