"""Source table readers for ingestion.

This module loads the tab-separated dataset from a local path or S3.
It normalizes every row into a header-keyed mapping of raw text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from core.config import PlasticListConfig
from core.constants import TABLE_DELIMITER
from core.errors import PlasticListDependencyError, PlasticListIngestError
from core.s3_uri import S3Location, is_s3_uri, parse_s3_uri


def read_table_rows(data_path: str, config: PlasticListConfig) -> list[dict[str, str]]:
    """Load header-keyed rows from a local file or S3 object.

    Args:
        data_path: Local file path or ``s3://`` URI.
        config: Runtime configuration for S3 session defaults.

    Returns:
        Ordered list of rows, one per data line.

    Raises:
        PlasticListIngestError: If the source cannot be read.
    """
    if is_s3_uri(data_path):
        text = _read_s3_text(parse_s3_uri(data_path), config)
    else:
        text = _read_local_text(Path(data_path).expanduser())
    return parse_table_text(text, source=data_path)


def parse_table_text(text: str, source: str) -> list[dict[str, str]]:
    """Split tab-separated text into header-keyed rows.

    Rows are split on "\n" only, dropping a trailing "\r". Cells missing from
    a short row default to empty text. Cells beyond the header width are
    ignored.

    Args:
        text: Full table text including the header line.
        source: Source location used in error messages.

    Returns:
        Ordered list of row mappings.

    Raises:
        PlasticListIngestError: If the table has no header row.
    """
    stripped_text = text.strip()
    if not stripped_text:
        raise PlasticListIngestError(
            f"Failed to read dataset at {source}: file is empty. "
            "Provide a tab-separated file with a header row."
        )
    lines = [line.removesuffix("\r") for line in stripped_text.split("\n")]
    headers = lines[0].split(TABLE_DELIMITER)
    rows: list[dict[str, str]] = []
    for line in lines[1:]:
        values = line.split(TABLE_DELIMITER)
        rows.append(
            {
                header: values[index] if index < len(values) else ""
                for index, header in enumerate(headers)
            }
        )
    return rows


def _read_local_text(source_path: Path) -> str:
    """Read dataset text from the local file system.

    Args:
        source_path: Dataset file path.

    Returns:
        Decoded file contents.

    Raises:
        PlasticListIngestError: If path is missing or unreadable.
    """
    if not source_path.is_file():
        raise PlasticListIngestError(
            f"Failed to read dataset at {source_path}: file does not exist. "
            "Set PLASTICLIST_DATA_PATH to the PlasticList TSV export."
        )
    try:
        return source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise PlasticListIngestError(
            f"Failed to read dataset at {source_path}: {error}."
        ) from error


def _read_s3_text(location: S3Location, config: PlasticListConfig) -> str:
    """Download dataset text from one S3 object.

    Args:
        location: Target bucket/key.
        config: Runtime config for region/profile.

    Returns:
        Decoded object body.

    Raises:
        PlasticListIngestError: If the object cannot be fetched.
    """
    s3_client = _create_s3_client(config)
    try:
        body = s3_client.get_object(Bucket=location.bucket, Key=location.key)["Body"]
        return body.read().decode("utf-8")
    except Exception as error:
        raise PlasticListIngestError(
            f"Failed to read dataset at s3://{location.bucket}/{location.key}: {error}."
        ) from error


def _create_s3_client(config: PlasticListConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        PlasticListDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise PlasticListDependencyError(
            "S3 support requires boto3, but it is not installed. "
            "Install the 's3' extra to load datasets from s3:// URIs."
        ) from error
    session_kwargs = _build_boto3_session_kwargs(config)
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")


def _build_boto3_session_kwargs(config: PlasticListConfig) -> dict[str, str]:
    """Build boto3 Session kwargs from config.

    Args:
        config: Runtime config.

    Returns:
        Session keyword arguments.
    """
    kwargs: dict[str, str] = {}
    if config.s3_profile:
        kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        kwargs["region_name"] = config.s3_region
    return kwargs
