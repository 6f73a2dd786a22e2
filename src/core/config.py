"""Runtime configuration model for PlasticList.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_DATA_PATH,
    DEFAULT_MAX_SAFEST_RESULTS,
    DEFAULT_SERVER_NAME,
    S3_URI_PREFIX,
)
from core.errors import PlasticListConfigError


@dataclass(frozen=True)
class PlasticListConfig:
    """Validated runtime configuration.

    Attributes:
        data_path: Local TSV path or ``s3://`` URI of the dataset.
        server_name: Name advertised by the MCP server.
        s3_region: Optional default AWS region for S3 reads.
        s3_profile: Optional AWS profile for boto3 session initialization.
        max_safest_results: Cap on entries returned by category rankings.
    """

    data_path: str
    server_name: str
    s3_region: str | None
    s3_profile: str | None
    max_safest_results: int

    @classmethod
    def from_env(cls) -> "PlasticListConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            PlasticListConfigError: If environment values are invalid.
        """
        data_path_value = os.getenv("PLASTICLIST_DATA_PATH", DEFAULT_DATA_PATH)
        max_results_value = os.getenv(
            "PLASTICLIST_MAX_SAFEST_RESULTS", str(DEFAULT_MAX_SAFEST_RESULTS)
        )
        return cls(
            data_path=resolve_data_path(data_path_value),
            server_name=os.getenv("PLASTICLIST_SERVER_NAME", DEFAULT_SERVER_NAME),
            s3_region=os.getenv("PLASTICLIST_S3_REGION"),
            s3_profile=os.getenv("PLASTICLIST_S3_PROFILE"),
            max_safest_results=_parse_max_safest_results(max_results_value),
        )


def resolve_data_path(raw_value: str) -> str:
    """Normalize a dataset location.

    Args:
        raw_value: Local path or ``s3://`` URI.

    Returns:
        Absolute local path, or the URI unchanged.
    """
    if raw_value.startswith(S3_URI_PREFIX):
        return raw_value
    return str(Path(raw_value).expanduser().resolve())


def _parse_max_safest_results(raw_value: str) -> int:
    """Parse the ranking cap environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive integer.

    Raises:
        PlasticListConfigError: If value is not a positive integer.
    """
    try:
        parsed = int(raw_value)
    except ValueError as error:
        raise PlasticListConfigError(
            "Invalid PLASTICLIST_MAX_SAFEST_RESULTS value: "
            f"expected integer, got '{raw_value}'. "
            "Set PLASTICLIST_MAX_SAFEST_RESULTS to a numeric value."
        ) from error
    if parsed < 1:
        raise PlasticListConfigError(
            "Invalid PLASTICLIST_MAX_SAFEST_RESULTS value: "
            f"expected a positive integer, got {parsed}."
        )
    return parsed
