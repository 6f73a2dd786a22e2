"""PlasticList exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class PlasticListError(Exception):
    """Base exception for all PlasticList failures."""


class PlasticListConfigError(PlasticListError):
    """Raised for invalid runtime configuration."""


class PlasticListIngestError(PlasticListError):
    """Raised when the source table cannot be read or parsed."""


class PlasticListQueryError(PlasticListError):
    """Raised for invalid query arguments reaching the engine."""


class PlasticListServeError(PlasticListError):
    """Raised for tool dispatch and protocol failures."""


class PlasticListDependencyError(PlasticListError):
    """Raised when an optional runtime dependency is missing."""
