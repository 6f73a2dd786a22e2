"""Unit tests for the source table reader."""

from __future__ import annotations

import io
from dataclasses import replace
from pathlib import Path
from typing import Any

import pytest

from core.config import PlasticListConfig
from core.errors import PlasticListIngestError
from ingest import table_reader
from ingest.table_reader import parse_table_text, read_table_rows
from tests.fixture_paths import sample_dataset_path


def test_read_table_rows_reads_every_data_line() -> None:
    """Reader should return one row per data line of the sample file."""
    config = PlasticListConfig.from_env()

    rows = read_table_rows(str(sample_dataset_path()), config)

    assert len(rows) == 6


def test_read_table_rows_keys_rows_by_header() -> None:
    """Reader should key each cell by its header column."""
    config = PlasticListConfig.from_env()

    rows = read_table_rows(str(sample_dataset_path()), config)

    assert rows[0]["product"] == "Organic Whole Milk" and rows[0]["DBP_ng_g"] == "<LOQ"


def test_read_table_rows_raises_for_missing_file(tmp_path: Path) -> None:
    """Reader should fail when the dataset file is missing."""
    config = PlasticListConfig.from_env()
    missing_path = tmp_path / "missing.tsv"

    with pytest.raises(PlasticListIngestError):
        read_table_rows(str(missing_path), config)


def test_read_table_rows_raises_for_empty_file(tmp_path: Path) -> None:
    """Reader should fail when the dataset has no header row."""
    config = PlasticListConfig.from_env()
    empty_path = tmp_path / "empty.tsv"
    empty_path.write_text("\n\n", encoding="utf-8")

    with pytest.raises(PlasticListIngestError):
        read_table_rows(str(empty_path), config)


def test_parse_table_text_pads_short_rows() -> None:
    """Cells missing from a short row should default to empty text."""
    rows = parse_table_text("id\tproduct\ttags\n7\tKale\n", source="inline")

    assert rows == [{"id": "7", "product": "Kale", "tags": ""}]


def test_parse_table_text_ignores_cells_beyond_header() -> None:
    """Extra trailing cells should be dropped."""
    rows = parse_table_text("id\tproduct\n7\tKale\textra\n", source="inline")

    assert rows == [{"id": "7", "product": "Kale"}]


def test_parse_table_text_returns_no_rows_for_header_only() -> None:
    """A header-only table should load as an empty dataset."""
    assert parse_table_text("id\tproduct\n", source="inline") == []


def test_read_table_rows_downloads_s3_object(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reader should parse an S3 object body through the boto3 client."""
    requested: dict[str, Any] = {}

    class _FakeS3Client:
        def get_object(self, Bucket: str, Key: str) -> dict[str, Any]:
            requested.update(bucket=Bucket, key=Key)
            return {"Body": io.BytesIO(b"id\tproduct\n1\tMilk\n")}

    monkeypatch.setattr(table_reader, "_create_s3_client", lambda config: _FakeS3Client())
    config = replace(PlasticListConfig.from_env(), data_path="s3://bucket/data/list.tsv")

    rows = read_table_rows(config.data_path, config)

    assert rows == [{"id": "1", "product": "Milk"}] and requested["key"] == "data/list.tsv"


def test_read_table_rows_wraps_s3_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    """S3 download errors should surface as ingest errors."""

    class _BrokenS3Client:
        def get_object(self, Bucket: str, Key: str) -> dict[str, Any]:
            raise RuntimeError("access denied")

    monkeypatch.setattr(table_reader, "_create_s3_client", lambda config: _BrokenS3Client())
    config = PlasticListConfig.from_env()

    with pytest.raises(PlasticListIngestError):
        read_table_rows("s3://bucket/list.tsv", config)


def test_read_table_rows_rejects_s3_uri_without_key() -> None:
    """An S3 URI without an object key should be rejected."""
    config = PlasticListConfig.from_env()

    with pytest.raises(PlasticListIngestError):
        read_table_rows("s3://bucket", config)


def test_parse_table_text_splits_rows_on_newline_only() -> None:
    """Form feeds and other line separators inside a cell should not split the row."""
    rows = parse_table_text("id\tproduct\n7\tKale\x0cChips Bag\n", source="inline")

    assert rows == [{"id": "7", "product": "Kale\x0cChips Bag"}]


def test_parse_table_text_drops_carriage_returns() -> None:
    """CRLF line endings should not leak into the last cell."""
    rows = parse_table_text("id\tproduct\r\n7\tKale\r\n8\tMilk\r\n", source="inline")

    assert rows == [{"id": "7", "product": "Kale"}, {"id": "8", "product": "Milk"}]
