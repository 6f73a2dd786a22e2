"""Unit tests for product search."""

from __future__ import annotations

import pytest

from core.errors import PlasticListQueryError
from query.search import search_products
from store.record_store import RecordStore
from tests.store_builders import build_store


def _store() -> RecordStore:
    return build_store(
        {"id": "1", "product": "Whole Milk", "tags": "dairy", "collected_at": "Safeway"},
        {"id": "2", "product": "Kale Chips", "tags": "snack,organic", "collected_at": "Target"},
        {"id": "3", "product": "Orange Juice", "tags": "juice", "collected_at": "Milky Way Market"},
    )


def test_search_all_matches_tags_only_hit() -> None:
    """Search across all fields should return a record matched only by tags."""
    results = search_products(_store(), "ORGANIC")

    assert [result["id"] for result in results] == ["2"]


def test_search_all_uses_any_field() -> None:
    """Search across all fields should OR name, tags, and location."""
    results = search_products(_store(), "milk", "all")

    assert [result["id"] for result in results] == ["1", "3"]


def test_search_by_name_ignores_location() -> None:
    """Name search should not match the location field."""
    results = search_products(_store(), "milk", "name")

    assert [result["id"] for result in results] == ["1"]


def test_search_by_location_matches_store_text() -> None:
    """Location search should match the collected_at field."""
    results = search_products(_store(), "target", "location")

    assert [result["id"] for result in results] == ["2"]


def test_search_by_tags_ignores_name() -> None:
    """Tag search should not match product names."""
    assert search_products(_store(), "juice chips", "tags") == []


def test_search_projects_headline_chemicals() -> None:
    """Search hits should carry normalized headline chemicals."""
    store = build_store(
        {
            "id": "1",
            "product_id": "P1",
            "product": "Milk",
            "collected_at": "Safeway",
            "DEHP_equivalents_ng_g": "12.5",
            "BPA_ng_g": "<LOQ",
            "DINP_ng_g": "900",
        }
    )

    result = search_products(store, "milk")[0]

    assert result == {
        "id": "1",
        "product_id": "P1",
        "product": "Milk",
        "location": "Safeway",
        "tags": "",
        "DEHP_equivalents_ng_g": 12.5,
        "DEHP_ng_g": 0.0,
        "DBP_ng_g": 0.0,
        "BBP_ng_g": 0.0,
        "BPA_ng_g": 0.0,
        "BPS_ng_g": 0.0,
    }


def test_search_rejects_unknown_field() -> None:
    """Unknown search fields should raise a query error."""
    with pytest.raises(PlasticListQueryError):
        search_products(_store(), "milk", "brand")
