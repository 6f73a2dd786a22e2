"""Single-product detail and multi-product comparison queries."""

from __future__ import annotations

from typing import Any, Sequence

from core.constants import PRODUCT_NOT_FOUND_MESSAGE
from query.projections import project_comparison_entry, project_details
from store.product_lookup import resolve_product
from store.record_store import RecordStore


def get_product_details(store: RecordStore, identifier: str) -> dict[str, Any]:
    """Return the full detail view for one product.

    Args:
        store: Record store to scan.
        identifier: Row id, product id, or product name.

    Returns:
        Detail payload, or ``{"error": "Product not found"}``.
    """
    record = resolve_product(store, identifier)
    if record is None:
        return {"error": PRODUCT_NOT_FOUND_MESSAGE}
    return project_details(record)


def compare_products(store: RecordStore, identifiers: Sequence[str]) -> dict[str, Any]:
    """Compare chemical levels across several products.

    Identifiers that resolve to nothing are dropped without a report.
    Repeated identifiers produce repeated entries.

    Args:
        store: Record store to scan.
        identifiers: Ordered identifiers to resolve.

    Returns:
        Comparison entries and their count.
    """
    comparison: list[dict[str, Any]] = []
    for identifier in identifiers:
        record = resolve_product(store, identifier)
        if record is not None:
            comparison.append(project_comparison_entry(record))
    return {"comparison": comparison, "count": len(comparison)}
