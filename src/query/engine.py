"""Query engine facade over the record store.

This module bundles the six analytic operations behind one object.
The store is injected once and only ever read.
"""

from __future__ import annotations

from typing import Any, Sequence

from core.constants import DEFAULT_MAX_SAFEST_RESULTS, DEFAULT_SEARCH_FIELD
from query.category_ranking import find_safest_in_category
from query.exposure_stats import analyze_by_packaging, organic_vs_conventional
from query.product_details import compare_products, get_product_details
from query.search import search_products
from store.record_store import RecordStore


class QueryEngine:
    """Read-only analytic queries over one loaded dataset."""

    def __init__(
        self,
        store: RecordStore,
        max_safest_results: int = DEFAULT_MAX_SAFEST_RESULTS,
    ) -> None:
        """Create query engine.

        Args:
            store: Immutable record store.
            max_safest_results: Cap on category ranking entries.
        """
        self._store = store
        self._max_safest_results = max_safest_results

    @property
    def record_count(self) -> int:
        """Return number of loaded records."""
        return len(self._store)

    def search(self, query: str, search_by: str = DEFAULT_SEARCH_FIELD) -> list[dict[str, Any]]:
        """Search products by name, tags, or location."""
        return search_products(self._store, query, search_by)

    def get_details(self, identifier: str) -> dict[str, Any]:
        """Return full details for one product or a not-found payload."""
        return get_product_details(self._store, identifier)

    def compare(self, identifiers: Sequence[str]) -> dict[str, Any]:
        """Compare chemical levels between resolved products."""
        return compare_products(self._store, identifiers)

    def find_safest_in_category(self, category: str) -> dict[str, Any]:
        """Rank category products by ascending DEHP-equivalents."""
        return find_safest_in_category(self._store, category, self._max_safest_results)

    def analyze_by_packaging(self, packaging_type: str | None = None) -> dict[str, Any]:
        """Summarize DEHP-equivalents per packaging material."""
        return analyze_by_packaging(self._store, packaging_type)

    def organic_vs_conventional(self, food_type: str | None = None) -> dict[str, Any]:
        """Compare organic and conventional products."""
        return organic_vs_conventional(self._store, food_type)
