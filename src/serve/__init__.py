"""Protocol-facing serving components.

This package validates tool arguments, dispatches them to the query
engine, and exposes the tools over MCP with fastmcp.
"""
