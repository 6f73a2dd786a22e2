"""Numeric normalization for raw table values.

Every measured field passes through ``normalize_value`` before it reaches a
caller. The function never raises: 0 is the fallback for detection-limit
markers, blanks, and text without a numeric prefix. A 0 result therefore
means "unknown or zero" and must not be read as proof of absence.
"""

from __future__ import annotations

import math
import re

from core.constants import DETECTION_LIMIT_PREFIX

_NUMERIC_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def normalize_value(raw_value: str | None) -> float:
    """Convert raw field text into a numeric quantity.

    Parsing reads the longest leading numeric literal and ignores any
    trailing text, so ``"12.5 ng"`` yields 12.5.

    Args:
        raw_value: Raw text from the source table.

    Returns:
        Parsed value, or 0.0 when no usable quantity is present.
    """
    if not raw_value or raw_value.startswith(DETECTION_LIMIT_PREFIX):
        return 0.0
    match = _NUMERIC_PREFIX.match(raw_value)
    if match is None:
        return 0.0
    parsed = float(match.group(1).replace("Infinity", "inf"))
    if math.isnan(parsed):
        return 0.0
    return parsed
