"""Startup load orchestration.

This module reads the configured dataset once and builds the record store.
Any failure here is fatal: the server must not start without data.
"""

from __future__ import annotations

from core.config import PlasticListConfig
from core.logging_config import get_logger
from ingest.table_reader import read_table_rows
from store.record_store import RecordStore

_LOGGER = get_logger(__name__)


def load_record_store(config: PlasticListConfig) -> RecordStore:
    """Load the configured dataset into an immutable store.

    Args:
        config: Runtime configuration naming the dataset location.

    Returns:
        Record store in source row order.

    Raises:
        PlasticListIngestError: If the dataset cannot be read.
        PlasticListDependencyError: If S3 support is required but missing.
    """
    rows = read_table_rows(config.data_path, config)
    store = RecordStore.from_rows(rows)
    _LOGGER.info("dataset_loaded", source=config.data_path, record_count=len(store))
    return store
