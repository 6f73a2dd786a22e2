"""Lowest-exposure ranking within a tag category."""

from __future__ import annotations

from typing import Any

from core.constants import DEFAULT_MAX_SAFEST_RESULTS, RANKING_CHEMICAL
from query.projections import project_ranking_entry
from query.text_matching import filter_by_tags
from store.record_store import RecordStore


def find_safest_in_category(
    store: RecordStore,
    category: str,
    limit: int = DEFAULT_MAX_SAFEST_RESULTS,
) -> dict[str, Any]:
    """Rank category products by ascending DEHP-equivalents.

    Ties keep store order.

    Args:
        store: Record store to scan.
        category: Tag substring selecting the category.
        limit: Maximum number of ranked entries to return.

    Returns:
        Category name, total match count, and the lowest entries.
    """
    matches = filter_by_tags(store.all(), category)
    ranked = sorted(matches, key=lambda record: record.measurement(RANKING_CHEMICAL))
    return {
        "category": category,
        "total_products": len(ranked),
        "safest_products": [project_ranking_entry(record) for record in ranked[:limit]],
    }
