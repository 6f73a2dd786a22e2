"""Dataset ingestion.

This package reads the tab-separated source table once at startup.
It turns raw rows into the immutable record store used by queries.
"""
