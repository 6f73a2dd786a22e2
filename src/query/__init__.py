"""Analytic query operations.

This package implements search, detail, comparison, ranking, and
aggregation queries as pure reads over the record store.
"""
