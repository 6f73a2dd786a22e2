"""Result projections for query payloads.

Each function maps a product record onto the plain dictionary shape a
query returns. Measured fields are always normalized numbers.
"""

from __future__ import annotations

from typing import Any

from core.constants import (
    CHEMICAL_NAMES,
    COMPARISON_CHEMICAL_NAMES,
    HEADLINE_CHEMICAL_NAMES,
    MEASUREMENT_COLUMN_SUFFIX,
    PERCENTILE_CHEMICAL_NAMES,
    RANKING_CHEMICAL,
)
from core.types import ProductRecord


def project_search_hit(record: ProductRecord) -> dict[str, Any]:
    """Project a search hit with identity, location, and headline chemicals.

    Args:
        record: Matching product record.

    Returns:
        Search result entry.
    """
    payload: dict[str, Any] = {
        "id": record.id,
        "product_id": record.product_id,
        "product": record.product,
        "location": record.collected_at,
        "tags": record.tags,
    }
    payload.update(_measurement_columns(record, HEADLINE_CHEMICAL_NAMES))
    return payload


def project_details(record: ProductRecord) -> dict[str, Any]:
    """Project the full detail view of one product.

    Args:
        record: Resolved product record.

    Returns:
        Detail payload with every chemical and percentile.
    """
    return {
        "id": record.id,
        "product_id": record.product_id,
        "product": record.product,
        "tags": record.tags,
        "collected_at": record.collected_at,
        "collected_on": record.collected_on,
        "serving_size_g": record.serving_size(),
        "chemicals_ng_g": {name: record.measurement(name) for name in CHEMICAL_NAMES},
        "percentiles": {name: record.percentile(name) for name in PERCENTILE_CHEMICAL_NAMES},
    }


def project_comparison_entry(record: ProductRecord) -> dict[str, Any]:
    """Project one side of a product comparison.

    Args:
        record: Resolved product record.

    Returns:
        Comparison entry.
    """
    payload: dict[str, Any] = {
        "id": record.id,
        "product": record.product,
        "tags": record.tags,
        "location": record.collected_at,
    }
    payload.update(_measurement_columns(record, COMPARISON_CHEMICAL_NAMES))
    payload["percentile_DEHP_equiv"] = record.percentile(RANKING_CHEMICAL)
    return payload


def project_ranking_entry(record: ProductRecord) -> dict[str, Any]:
    """Project a ranked category entry."""
    return {
        "id": record.id,
        "product": record.product,
        "tags": record.tags,
        "location": record.collected_at,
        "DEHP_equivalents_ng_g": record.measurement(RANKING_CHEMICAL),
        "DEHP_equivalents_percentile": record.percentile(RANKING_CHEMICAL),
    }


def _measurement_columns(record: ProductRecord, chemicals: tuple[str, ...]) -> dict[str, float]:
    return {
        f"{name}{MEASUREMENT_COLUMN_SUFFIX}": record.measurement(name) for name in chemicals
    }
