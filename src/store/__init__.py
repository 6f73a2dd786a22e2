"""In-memory record storage.

This package holds the immutable product record sequence loaded at
startup and the identifier lookup used by detail queries.
"""
