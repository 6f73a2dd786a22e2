"""Public SDK surface for PlasticList.

This module provides a stable import path for library users.
It re-exports the record store, query engine, and server builders.
"""

from __future__ import annotations

from core.config import PlasticListConfig
from core.types import ProductRecord
from core.value_parsing import normalize_value
from ingest.pipeline import load_record_store
from query.engine import QueryEngine
from serve.mcp_server import build_mcp_server, run_server
from serve.tool_dispatch import ToolDispatcher, ToolResponse
from store.product_lookup import resolve_product
from store.record_store import RecordStore

__all__ = [
    "PlasticListConfig",
    "ProductRecord",
    "QueryEngine",
    "RecordStore",
    "ToolDispatcher",
    "ToolResponse",
    "build_mcp_server",
    "load_record_store",
    "normalize_value",
    "resolve_product",
    "run_server",
]
