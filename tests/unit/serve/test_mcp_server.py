"""Unit tests for MCP tool registration."""

from __future__ import annotations

import asyncio
import json
from dataclasses import replace
from pathlib import Path

import pytest
from fastmcp import Client, FastMCP

from core.config import PlasticListConfig
from core.errors import PlasticListIngestError
from query.engine import QueryEngine
from serve.mcp_server import build_mcp_server, run_server
from serve.tool_dispatch import ToolDispatcher
from tests.store_builders import build_store, product_row


def _server() -> FastMCP:
    store = build_store(
        product_row("1", "Milk", "dairy,organic", "10"),
        product_row("2", "Milk Conventional", "dairy", "<LOQ"),
    )
    return build_mcp_server(ToolDispatcher(QueryEngine(store)), "test-server")


def test_build_mcp_server_registers_six_tools() -> None:
    """Server should advertise every query tool."""

    async def _list_tool_names() -> set[str]:
        async with Client(_server()) as client:
            tools = await client.list_tools()
        return {tool.name for tool in tools}

    assert asyncio.run(_list_tool_names()) == {
        "search_products",
        "get_product_details",
        "compare_products",
        "find_safest_in_category",
        "analyze_by_packaging",
        "organic_vs_conventional",
    }


def test_mcp_tool_returns_json_text() -> None:
    """A tool call should return the dispatcher JSON as text content."""

    async def _call() -> str:
        async with Client(_server()) as client:
            result = await client.call_tool("organic_vs_conventional", {"food_type": "milk"})
        return result.content[0].text

    payload = json.loads(asyncio.run(_call()))

    assert payload["organic"]["avg_DEHP_equivalents"] == "10.00"


def test_mcp_tool_reports_not_found_without_error_flag() -> None:
    """A missing product should be a normal result carrying an error field."""

    async def _call() -> tuple[bool, str]:
        async with Client(_server()) as client:
            result = await client.call_tool(
                "get_product_details", {"identifier": "ghost-id"}, raise_on_error=False
            )
        return result.is_error, result.content[0].text

    is_error, text = asyncio.run(_call())

    assert is_error is False and json.loads(text) == {"error": "Product not found"}


def test_run_server_fails_before_serving_without_dataset(tmp_path: Path) -> None:
    """Startup should abort when the dataset cannot be loaded."""
    config = replace(PlasticListConfig.from_env(), data_path=str(tmp_path / "missing.tsv"))

    with pytest.raises(PlasticListIngestError):
        run_server(config)


def test_mcp_tool_reports_engine_failure_as_error_result(monkeypatch: pytest.MonkeyPatch) -> None:
    """An engine exception should become an error result and leave the server usable."""

    def _explode(self: QueryEngine, identifiers: list[str]) -> dict[str, object]:
        raise RuntimeError("projection failed")

    monkeypatch.setattr(QueryEngine, "compare", _explode)

    async def _calls() -> tuple[bool, str, bool]:
        async with Client(_server()) as client:
            failed = await client.call_tool(
                "compare_products", {"identifiers": ["1"]}, raise_on_error=False
            )
            recovered = await client.call_tool(
                "find_safest_in_category", {"category": "dairy"}, raise_on_error=False
            )
        return failed.is_error, failed.content[0].text, recovered.is_error

    failed_is_error, failed_text, recovered_is_error = asyncio.run(_calls())

    assert (failed_is_error, recovered_is_error) == (True, False) and (
        "Error: projection failed" in failed_text
    )
