"""Shared typed models.

This module defines the immutable product record shared by the ingest,
store, and query layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from core.constants import MEASUREMENT_COLUMN_SUFFIX, PERCENTILE_COLUMN_SUFFIX
from core.value_parsing import normalize_value

_EMPTY_MEASUREMENTS: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class ProductRecord:
    """One measured food item from the source table.

    Raw chemical and percentile text is kept private to the record and is
    only exposed in normalized form.

    Attributes:
        id: Row identifier.
        product_id: Product identifier, possibly shared across rows.
        product: Product name.
        tags: Comma/space-delimited category labels in one string.
        collected_at: Store or location where the sample was bought.
        collected_on: Collection date text.
        serving_size_g: Serving size in grams, as raw text.
        measurement_text: Raw chemical and percentile columns keyed by header.
    """

    id: str = ""
    product_id: str = ""
    product: str = ""
    tags: str = ""
    collected_at: str = ""
    collected_on: str = ""
    serving_size_g: str = ""
    measurement_text: Mapping[str, str] = field(
        default_factory=lambda: _EMPTY_MEASUREMENTS, repr=False
    )

    def measurement(self, chemical: str) -> float:
        """Return the normalized ng/g value for one chemical.

        Args:
            chemical: Chemical name such as ``DEHP_equivalents``.

        Returns:
            Normalized concentration.
        """
        return normalize_value(self.measurement_text.get(f"{chemical}{MEASUREMENT_COLUMN_SUFFIX}", ""))

    def percentile(self, chemical: str) -> float:
        """Return the normalized percentile rank for one chemical.

        Args:
            chemical: Chemical name such as ``DEHP_equivalents``.

        Returns:
            Normalized percentile.
        """
        return normalize_value(self.measurement_text.get(f"{chemical}{PERCENTILE_COLUMN_SUFFIX}", ""))

    def serving_size(self) -> float:
        """Return the normalized serving size in grams."""
        return normalize_value(self.serving_size_g)
