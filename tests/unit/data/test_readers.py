import numpy as np
import pytest

from benford_audit.data import DatasetSource
from benford_audit.data.factory import get_reader, ingest
from benford_audit.data.image_source import image_digit_counts
from benford_audit.exceptions import DataSourceError


def test_text_reader_skips_lines_without_digits(tmp_path):
    path = tmp_path / "votes.txt"
    path.write_text("123\n-42\n0\n\n007.5\nabc\n1,204\n")
    result = ingest(DatasetSource(name="votes.txt", path=path, kind="text"))

    assert result.accumulator.counts == [2, 0, 0, 1, 0, 0, 1, 0, 0]
    assert result.accumulator.total == 4
    assert result.rejected == 3


def test_text_reader_missing_file(tmp_path):
    with pytest.raises(DataSourceError):
        ingest(DatasetSource(name="gone.txt", path=tmp_path / "gone.txt", kind="text"))


def test_table_reader_picks_first_numeric_column(tmp_path):
    path = tmp_path / "ledger.csv"
    path.write_text("precinct,votes,notes\nP1,120,x\nP2,0,y\nP3,9.5,z\nP4,,w\n")
    result = ingest(DatasetSource(name="ledger.csv", path=path, kind="table"))

    assert result.accumulator.counts == [1, 0, 0, 0, 0, 0, 0, 0, 1]
    assert result.rejected == 2


def test_table_reader_named_column(tmp_path):
    path = tmp_path / "ledger.csv"
    path.write_text("a,b\n5,300\n6,40\n")
    result = ingest(DatasetSource(name="ledger.csv", path=path, kind="table"), column="b")
    assert result.accumulator.counts == [0, 0, 1, 1, 0, 0, 0, 0, 0]


def test_table_reader_unknown_column(tmp_path):
    path = tmp_path / "ledger.csv"
    path.write_text("a\n1\n")
    with pytest.raises(DataSourceError):
        ingest(DatasetSource(name="ledger.csv", path=path, kind="table"), column="missing")


def test_image_digit_counts():
    rgba = np.array(
        [[[0, 0, 0, 0], [2, 3, 4, 1]], [[255, 255, 255, 255], [10, 10, 10, 10]]],
        dtype=np.uint8,
    )
    counts = image_digit_counts(rgba)
    assert counts.tolist() == [0, 2, 1, 0, 1, 0, 0, 0, 0, 0]


def test_image_reader_counts_every_pixel(tmp_path):
    Image = pytest.importorskip("PIL.Image")
    rgba = np.array(
        [[[0, 0, 0, 0], [2, 3, 4, 1]], [[255, 255, 255, 255], [10, 10, 10, 10]]],
        dtype=np.uint8,
    )
    path = tmp_path / "tiny.png"
    Image.fromarray(rgba).save(path)

    result = ingest(DatasetSource(name="tiny.png", path=path, kind="image"))
    assert result.accumulator.counts == [2, 1, 0, 1, 0, 0, 0, 0, 0]
    assert result.accumulator.total == 4
    assert result.rejected == 0


def test_image_reader_rejects_garbage(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"not an image")
    with pytest.raises(DataSourceError):
        ingest(DatasetSource(name="broken.png", path=path, kind="image"))


def test_image_reader_oversized_image_is_read_failure(tmp_path, monkeypatch):
    Image = pytest.importorskip("PIL.Image")
    path = tmp_path / "huge.png"
    Image.fromarray(np.full((4, 4, 4), 9, dtype=np.uint8)).save(path)
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1)

    with pytest.raises(DataSourceError):
        ingest(DatasetSource(name="huge.png", path=path, kind="image"))


def test_get_reader_unknown_kind():
    with pytest.raises(DataSourceError):
        get_reader("audio")
