"""S3 URI parsing helpers.

This module centralizes S3 URI parsing for dataset sources.
It keeps URI validation behavior consistent across the codebase.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import S3_URI_PREFIX
from core.errors import PlasticListIngestError


@dataclass(frozen=True)
class S3Location:
    """Parsed S3 object location."""

    bucket: str
    key: str


def is_s3_uri(uri: str) -> bool:
    """Return whether a dataset location points at S3."""
    return uri.startswith(S3_URI_PREFIX)


def parse_s3_uri(uri: str) -> S3Location:
    """Parse and validate an S3 object URI.

    Args:
        uri: URI in format ``s3://bucket/key``.

    Returns:
        Parsed bucket and key pair.

    Raises:
        PlasticListIngestError: If bucket or key is missing.
    """
    stripped_uri = uri.removeprefix(S3_URI_PREFIX)
    bucket, _, key = stripped_uri.partition("/")
    if not bucket or not key:
        raise PlasticListIngestError(
            f"Invalid S3 URI '{uri}': expected s3://bucket/key. "
            "Provide both bucket and object key."
        )
    return S3Location(bucket=bucket, key=key)
