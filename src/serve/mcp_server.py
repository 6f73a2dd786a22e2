"""MCP stdio server exposing the query tools.

This module registers the six query tools on a fastmcp server. Each tool
forwards its arguments to the dispatcher; dispatcher failures become
``isError`` tool results rather than transport faults.
"""

from typing import Annotated, Any, Literal

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from core.config import PlasticListConfig
from core.logging_config import get_logger
from ingest.pipeline import load_record_store
from query.engine import QueryEngine
from serve.tool_dispatch import ToolDispatcher

_LOGGER = get_logger(__name__)

SearchField = Literal["all", "name", "tags", "location"]
PackagingType = Literal["glass", "plastic", "carton"]


def build_mcp_server(dispatcher: ToolDispatcher, server_name: str) -> FastMCP:
    """Create a fastmcp server with every query tool registered.

    Args:
        dispatcher: Dispatcher backing the tools.
        server_name: Name advertised to MCP clients.

    Returns:
        Configured server, not yet running.
    """
    mcp = FastMCP(server_name)

    def search_products(
        query: Annotated[str, Field(description="Search query (product name, tag, or location)")],
        search_by: Annotated[
            SearchField, Field(description="Field to search in (default: all)")
        ] = "all",
    ) -> str:
        return _respond(dispatcher, "search_products", {"query": query, "search_by": search_by})

    def get_product_details(
        identifier: Annotated[str, Field(description="Product ID, product_id, or product name")],
    ) -> str:
        return _respond(dispatcher, "get_product_details", {"identifier": identifier})

    def compare_products(
        identifiers: Annotated[
            list[str], Field(description="Array of product IDs or names to compare")
        ],
    ) -> str:
        return _respond(dispatcher, "compare_products", {"identifiers": identifiers})

    def find_safest_in_category(
        category: Annotated[
            str,
            Field(description="Category tag (e.g., baby_food, dairy, organic, vegetables)"),
        ],
    ) -> str:
        return _respond(dispatcher, "find_safest_in_category", {"category": category})

    def analyze_by_packaging(
        packaging_type: Annotated[
            PackagingType | None,
            Field(
                description="Optional: specific packaging type to analyze (glass, plastic, carton)"
            ),
        ] = None,
    ) -> str:
        return _respond(dispatcher, "analyze_by_packaging", {"packaging_type": packaging_type})

    def organic_vs_conventional(
        food_type: Annotated[
            str | None,
            Field(description="Optional: specific food type to analyze (e.g., milk, broccoli)"),
        ] = None,
    ) -> str:
        return _respond(dispatcher, "organic_vs_conventional", {"food_type": food_type})

    mcp.tool(
        name="search_products",
        description=(
            "Search products by name, tags, or location. "
            "Returns matching products with key chemical levels."
        ),
    )(search_products)
    mcp.tool(
        name="get_product_details",
        description="Get full details for a specific product by ID or name",
    )(get_product_details)
    mcp.tool(
        name="compare_products",
        description="Compare chemical levels between two or more products",
    )(compare_products)
    mcp.tool(
        name="find_safest_in_category",
        description=(
            "Find products with lowest DEHP equivalents in a category "
            "(e.g., baby_food, dairy, organic)"
        ),
    )(find_safest_in_category)
    mcp.tool(
        name="analyze_by_packaging",
        description="Compare chemical levels by packaging type (glass, plastic, carton)",
    )(analyze_by_packaging)
    mcp.tool(
        name="organic_vs_conventional",
        description="Compare organic vs conventional versions of foods",
    )(organic_vs_conventional)
    return mcp


def run_server(config: PlasticListConfig) -> None:
    """Load the dataset and serve MCP over stdio until the client disconnects.

    Args:
        config: Runtime configuration.

    Raises:
        PlasticListIngestError: If the dataset cannot be loaded.
    """
    store = load_record_store(config)
    engine = QueryEngine(store, config.max_safest_results)
    mcp = build_mcp_server(ToolDispatcher(engine), config.server_name)
    _LOGGER.info("mcp_server_starting", name=config.server_name, record_count=len(store))
    mcp.run()


def _respond(dispatcher: ToolDispatcher, name: str, arguments: dict[str, Any]) -> str:
    """Dispatch one call and raise ``ToolError`` for failed invocations."""
    response = dispatcher.call(name, arguments)
    if response.is_error:
        raise ToolError(response.text)
    return response.text
