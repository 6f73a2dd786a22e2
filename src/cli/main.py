"""PlasticList CLI entry points.

This module exposes the MCP server command and one command per query.
Query commands print the same JSON payload the matching tool returns.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import sys
from typing import Any, Sequence

from core.config import PlasticListConfig, resolve_data_path
from core.constants import DEFAULT_SEARCH_FIELD, PACKAGING_TYPES, SEARCH_FIELDS
from core.errors import PlasticListError
from core.logging_config import get_logger
from ingest.pipeline import load_record_store
from query.engine import QueryEngine
from serve.mcp_server import run_server
from serve.tool_dispatch import ToolDispatcher

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="plasticlist", description="PlasticList food contamination queries"
    )
    parser.add_argument("--data-path", help="Override PLASTICLIST_DATA_PATH for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("serve", help="Serve the query tools over MCP stdio")
    _add_query_commands(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the PlasticList CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.data_path)
        if args.command == "serve":
            run_server(config)
            return 0
        dispatcher = ToolDispatcher(
            QueryEngine(load_record_store(config), config.max_safest_results)
        )
    except PlasticListError as error:
        _LOGGER.error("startup_failed", error=str(error))
        return 1
    tool_name, arguments = _tool_call_from_args(args)
    response = dispatcher.call(tool_name, arguments)
    if response.is_error:
        print(response.text, file=sys.stderr)
        return 1
    print(response.text)
    return 0


def _build_config(data_path: str | None) -> PlasticListConfig:
    """Build runtime config with optional data-path override.

    Args:
        data_path: Optional override path or URI.

    Returns:
        Runtime configuration.
    """
    config = PlasticListConfig.from_env()
    if data_path:
        config = replace(config, data_path=resolve_data_path(data_path))
    return config


def _tool_call_from_args(args: argparse.Namespace) -> tuple[str, dict[str, Any]]:
    """Translate a parsed query command into a tool name and arguments.

    Args:
        args: Parsed CLI args.

    Returns:
        Tool name and argument object.
    """
    if args.command == "search":
        return "search_products", {"query": args.query, "search_by": args.search_by}
    if args.command == "details":
        return "get_product_details", {"identifier": args.identifier}
    if args.command == "compare":
        return "compare_products", {"identifiers": list(args.identifiers)}
    if args.command == "safest":
        return "find_safest_in_category", {"category": args.category}
    if args.command == "packaging":
        return "analyze_by_packaging", {"packaging_type": args.packaging_type}
    return "organic_vs_conventional", {"food_type": args.food_type}


def _add_query_commands(subparsers: Any) -> None:
    """Register one subcommand per query tool.

    Args:
        subparsers: Argparse subparsers group.
    """
    search_parser = subparsers.add_parser("search", help="Search products")
    search_parser.add_argument("query", help="Product name, tag, or location text")
    search_parser.add_argument(
        "--search-by",
        choices=SEARCH_FIELDS,
        default=DEFAULT_SEARCH_FIELD,
        help="Field to search in",
    )
    details_parser = subparsers.add_parser("details", help="Show one product")
    details_parser.add_argument("identifier", help="Product ID, product_id, or product name")
    compare_parser = subparsers.add_parser("compare", help="Compare products")
    compare_parser.add_argument("identifiers", nargs="+", help="Product IDs or names")
    safest_parser = subparsers.add_parser("safest", help="Lowest DEHP equivalents in a category")
    safest_parser.add_argument("category", help="Category tag, e.g. dairy")
    packaging_parser = subparsers.add_parser("packaging", help="Compare packaging types")
    packaging_parser.add_argument("--packaging-type", choices=PACKAGING_TYPES)
    organic_parser = subparsers.add_parser("organic", help="Organic vs conventional")
    organic_parser.add_argument("--food-type", help="Food type, e.g. milk")
