"""Tool argument validation and dispatch.

This module maps named tool invocations onto query engine calls and
serializes results as JSON text. Any failure inside one invocation is
turned into an error response so the server keeps running.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import math
from typing import Any, Callable, Mapping

from core.constants import DEFAULT_SEARCH_FIELD, JSON_INDENT, PACKAGING_TYPES, SEARCH_FIELDS
from core.errors import PlasticListServeError
from core.logging_config import get_logger
from query.engine import QueryEngine

_LOGGER = get_logger(__name__)

ToolHandler = Callable[[Mapping[str, Any]], Any]


@dataclass(frozen=True)
class ToolResponse:
    """Serialized result of one tool invocation.

    Attributes:
        text: JSON payload on success, ``Error: ...`` text on failure.
        is_error: Whether the invocation failed.
    """

    text: str
    is_error: bool = False


class ToolDispatcher:
    """Dispatch named tools to the query engine."""

    def __init__(self, engine: QueryEngine) -> None:
        """Create dispatcher.

        Args:
            engine: Query engine serving every tool.
        """
        self._engine = engine
        self._handlers: dict[str, ToolHandler] = {
            "search_products": self._search_products,
            "get_product_details": self._get_product_details,
            "compare_products": self._compare_products,
            "find_safest_in_category": self._find_safest_in_category,
            "analyze_by_packaging": self._analyze_by_packaging,
            "organic_vs_conventional": self._organic_vs_conventional,
        }

    @property
    def tool_names(self) -> tuple[str, ...]:
        """Return supported tool names in registration order."""
        return tuple(self._handlers)

    def call(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolResponse:
        """Invoke one tool and serialize its result.

        Args:
            name: Tool name.
            arguments: Tool argument object.

        Returns:
            JSON response, or an error response if anything fails.
        """
        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise PlasticListServeError(f"Unknown tool: {name}")
            result = handler(arguments or {})
            payload = _replace_non_finite(result)
            return ToolResponse(text=json.dumps(payload, indent=JSON_INDENT, allow_nan=False))
        except Exception as error:
            _LOGGER.warning("tool_call_failed", tool=name, error=str(error))
            return ToolResponse(text=f"Error: {error}", is_error=True)

    def _search_products(self, arguments: Mapping[str, Any]) -> Any:
        query = _require_string(arguments, "query")
        search_by = _optional_string(arguments, "search_by") or DEFAULT_SEARCH_FIELD
        _require_choice("search_by", search_by, SEARCH_FIELDS)
        return self._engine.search(query, search_by)

    def _get_product_details(self, arguments: Mapping[str, Any]) -> Any:
        return self._engine.get_details(_require_string(arguments, "identifier"))

    def _compare_products(self, arguments: Mapping[str, Any]) -> Any:
        identifiers = arguments.get("identifiers")
        if not isinstance(identifiers, list) or not all(
            isinstance(identifier, str) for identifier in identifiers
        ):
            raise PlasticListServeError(
                "Invalid argument 'identifiers': expected an array of strings."
            )
        return self._engine.compare(identifiers)

    def _find_safest_in_category(self, arguments: Mapping[str, Any]) -> Any:
        return self._engine.find_safest_in_category(_require_string(arguments, "category"))

    def _analyze_by_packaging(self, arguments: Mapping[str, Any]) -> Any:
        packaging_type = _optional_string(arguments, "packaging_type")
        if packaging_type:
            _require_choice("packaging_type", packaging_type, PACKAGING_TYPES)
        return self._engine.analyze_by_packaging(packaging_type)

    def _organic_vs_conventional(self, arguments: Mapping[str, Any]) -> Any:
        return self._engine.organic_vs_conventional(_optional_string(arguments, "food_type"))


def _require_string(arguments: Mapping[str, Any], key: str) -> str:
    """Return a required string argument.

    Raises:
        PlasticListServeError: If the argument is missing or not a string.
    """
    value = arguments.get(key)
    if not isinstance(value, str):
        raise PlasticListServeError(
            f"Invalid argument '{key}': expected a string, got {type(value).__name__}."
        )
    return value


def _optional_string(arguments: Mapping[str, Any], key: str) -> str | None:
    """Return an optional string argument, or ``None`` when absent.

    Raises:
        PlasticListServeError: If the argument is present but not a string.
    """
    value = arguments.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise PlasticListServeError(
            f"Invalid argument '{key}': expected a string, got {type(value).__name__}."
        )
    return value


def _require_choice(key: str, value: str, choices: tuple[str, ...]) -> None:
    """Validate enum membership of an argument value."""
    if value not in choices:
        raise PlasticListServeError(
            f"Invalid argument '{key}': '{value}' is not one of {', '.join(choices)}."
        )


def _replace_non_finite(value: Any) -> Any:
    """Replace infinite and NaN floats with ``None`` so output stays strict JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _replace_non_finite(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_replace_non_finite(item) for item in value]
    return value
