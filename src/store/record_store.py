"""Immutable in-memory product record store.

This module builds frozen product records from raw table rows.
The store is read-only and preserves source row order.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from core.constants import (
    CHEMICAL_NAMES,
    MEASUREMENT_COLUMN_SUFFIX,
    PERCENTILE_CHEMICAL_NAMES,
    PERCENTILE_COLUMN_SUFFIX,
)
from core.types import ProductRecord

_MEASUREMENT_COLUMNS = tuple(
    f"{name}{MEASUREMENT_COLUMN_SUFFIX}" for name in CHEMICAL_NAMES
) + tuple(f"{name}{PERCENTILE_COLUMN_SUFFIX}" for name in PERCENTILE_CHEMICAL_NAMES)


class RecordStore:
    """Ordered, read-only sequence of product records."""

    def __init__(self, records: Iterable[ProductRecord]) -> None:
        """Create a store from already-built records.

        Args:
            records: Product records in source order.
        """
        self._records: tuple[ProductRecord, ...] = tuple(records)

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, str]]) -> "RecordStore":
        """Build a store from header-keyed table rows.

        Args:
            rows: Raw rows in source order.

        Returns:
            Store holding one record per row.
        """
        return cls(build_product_record(row) for row in rows)

    def all(self) -> tuple[ProductRecord, ...]:
        """Return every record in source order."""
        return self._records

    def __iter__(self) -> Iterator[ProductRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


def build_product_record(row: Mapping[str, str]) -> ProductRecord:
    """Convert one raw row into a product record.

    Args:
        row: Header-keyed raw text values.

    Returns:
        Frozen record with empty-string defaults for absent fields.
    """
    measurement_text = {column: row.get(column) or "" for column in _MEASUREMENT_COLUMNS}
    return ProductRecord(
        id=row.get("id") or "",
        product_id=row.get("product_id") or "",
        product=row.get("product") or "",
        tags=row.get("tags") or "",
        collected_at=row.get("collected_at") or "",
        collected_on=row.get("collected_on") or "",
        serving_size_g=row.get("serving_size_g") or "",
        measurement_text=MappingProxyType(measurement_text),
    )
