"""Product identifier resolution.

This module resolves a single product from an id, product id, or name.
It scans the store in order and returns the first record that matches.
"""

from __future__ import annotations

from core.types import ProductRecord
from store.record_store import RecordStore


def resolve_product(store: RecordStore, identifier: str) -> ProductRecord | None:
    """Find the first record matching an identifier.

    All three predicates are tested together for each record, so an earlier
    record matching by name wins over a later record matching by ``id``.

    Args:
        store: Record store to scan.
        identifier: Row id, product id, or product name.

    Returns:
        First matching record, or ``None`` when nothing matches.
    """
    lowered_identifier = identifier.lower()
    for record in store:
        if matches_identifier(record, identifier, lowered_identifier):
            return record
    return None


def matches_identifier(record: ProductRecord, identifier: str, lowered_identifier: str) -> bool:
    """Return whether a record matches any identity predicate."""
    return (
        record.id == identifier
        or record.product_id == identifier
        or record.product.lower() == lowered_identifier
    )
