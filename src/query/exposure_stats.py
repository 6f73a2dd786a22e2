"""Grouped DEHP-equivalents statistics.

This module powers the packaging and organic-versus-conventional
analyses. Averages are rendered as text with two decimal places.
"""

from __future__ import annotations

from typing import Any, Callable

from core.constants import (
    ALL_FOOD_TYPES_LABEL,
    AVERAGE_DECIMAL_PLACES,
    MAX_ORGANIC_EXAMPLES,
    MAX_PACKAGING_EXAMPLES,
    MEASUREMENT_COLUMN_SUFFIX,
    ORGANIC_TAG,
    PACKAGING_TYPES,
    RANKING_CHEMICAL,
)
from core.types import ProductRecord
from query.text_matching import contains_text, filter_by_tags, tags_contain
from store.record_store import RecordStore

_RANKING_COLUMN = f"{RANKING_CHEMICAL}{MEASUREMENT_COLUMN_SUFFIX}"

ExampleProjector = Callable[[ProductRecord], dict[str, Any]]


def analyze_by_packaging(
    store: RecordStore,
    packaging_type: str | None = None,
) -> dict[str, dict[str, Any]]:
    """Summarize DEHP-equivalents per packaging material.

    Buckets without any matching product are left out of the result.

    Args:
        store: Record store to scan.
        packaging_type: Optional tag substring narrowing the working set.

    Returns:
        Mapping of packaging type to its statistics.
    """
    working_set = store.all()
    if packaging_type:
        working_set = filter_by_tags(working_set, packaging_type)
    analysis: dict[str, dict[str, Any]] = {}
    for material in PACKAGING_TYPES:
        bucket = filter_by_tags(working_set, material)
        stats = summarize_exposure(bucket, MAX_PACKAGING_EXAMPLES, _packaging_example)
        if stats is not None:
            analysis[material] = stats
    return analysis


def organic_vs_conventional(
    store: RecordStore,
    food_type: str | None = None,
) -> dict[str, Any]:
    """Compare organic and conventional products.

    Both partitions are always present; an empty one is ``None``.

    Args:
        store: Record store to scan.
        food_type: Optional substring matched against tags or product name.

    Returns:
        Food type label with organic and conventional statistics.
    """
    working_set = store.all()
    if food_type:
        working_set = tuple(
            record
            for record in working_set
            if contains_text(record.tags, food_type) or contains_text(record.product, food_type)
        )
    organic = tuple(record for record in working_set if tags_contain(record, ORGANIC_TAG))
    conventional = tuple(
        record for record in working_set if not tags_contain(record, ORGANIC_TAG)
    )
    return {
        "food_type": food_type or ALL_FOOD_TYPES_LABEL,
        "organic": summarize_exposure(organic, MAX_ORGANIC_EXAMPLES, _organic_example),
        "conventional": summarize_exposure(
            conventional, MAX_ORGANIC_EXAMPLES, _organic_example
        ),
    }


def summarize_exposure(
    records: tuple[ProductRecord, ...],
    max_examples: int,
    project_example: ExampleProjector,
) -> dict[str, Any] | None:
    """Compute count, average, min, max, and examples for a group.

    Args:
        records: Group members in store order.
        max_examples: Number of leading records to include as examples.
        project_example: Projection applied to each example.

    Returns:
        Statistics payload, or ``None`` for an empty group.
    """
    if not records:
        return None
    values = [record.measurement(RANKING_CHEMICAL) for record in records]
    average = sum(values) / len(values)
    return {
        "count": len(records),
        "avg_DEHP_equivalents": f"{average:.{AVERAGE_DECIMAL_PLACES}f}",
        "min_DEHP_equivalents": min(values),
        "max_DEHP_equivalents": max(values),
        "examples": [project_example(record) for record in records[:max_examples]],
    }


def _packaging_example(record: ProductRecord) -> dict[str, Any]:
    return {
        "product": record.product,
        _RANKING_COLUMN: record.measurement(RANKING_CHEMICAL),
    }


def _organic_example(record: ProductRecord) -> dict[str, Any]:
    return {
        "product": record.product,
        "tags": record.tags,
        _RANKING_COLUMN: record.measurement(RANKING_CHEMICAL),
    }
