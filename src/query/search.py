"""Product search by name, tags, or location.

This module implements case-insensitive substring search. The ``all``
mode matches when any one of the three fields contains the query.
"""

from __future__ import annotations

from typing import Any

from core.constants import DEFAULT_SEARCH_FIELD, SEARCH_FIELDS
from core.errors import PlasticListQueryError
from core.types import ProductRecord
from query.projections import project_search_hit
from query.text_matching import contains_text
from store.record_store import RecordStore


def search_products(
    store: RecordStore,
    query: str,
    search_by: str = DEFAULT_SEARCH_FIELD,
) -> list[dict[str, Any]]:
    """Search products by substring.

    Args:
        store: Record store to scan.
        query: Text to look for.
        search_by: One of ``all``, ``name``, ``tags``, ``location``.

    Returns:
        Matching products in store order.

    Raises:
        PlasticListQueryError: If ``search_by`` is not a known field.
    """
    if search_by not in SEARCH_FIELDS:
        raise PlasticListQueryError(
            f"Unsupported search_by value '{search_by}'. "
            f"Expected one of: {', '.join(SEARCH_FIELDS)}."
        )
    return [
        project_search_hit(record)
        for record in store
        if _matches(record, query, search_by)
    ]


def _matches(record: ProductRecord, query: str, search_by: str) -> bool:
    """Return whether a record matches the query in the selected fields."""
    searched_values: list[str] = []
    if search_by in ("name", "all"):
        searched_values.append(record.product)
    if search_by in ("tags", "all"):
        searched_values.append(record.tags)
    if search_by in ("location", "all"):
        searched_values.append(record.collected_at)
    return any(contains_text(value, query) for value in searched_values)
