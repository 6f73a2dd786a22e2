"""Case-insensitive substring predicates.

Tags are a single denormalized string, so category tests are raw
substring checks: "milk" also matches "buttermilk".
"""

from __future__ import annotations

from core.types import ProductRecord


def contains_text(haystack: str, needle: str) -> bool:
    """Return whether ``needle`` occurs in ``haystack`` ignoring case."""
    return needle.lower() in haystack.lower()


def tags_contain(record: ProductRecord, needle: str) -> bool:
    """Return whether the record tags contain ``needle`` ignoring case."""
    return contains_text(record.tags, needle)


def filter_by_tags(records: tuple[ProductRecord, ...], needle: str) -> tuple[ProductRecord, ...]:
    """Keep records whose tags contain ``needle``, in input order."""
    return tuple(record for record in records if tags_contain(record, needle))
