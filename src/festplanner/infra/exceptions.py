"""
Custom exceptions for festplanner operations.

Only load-time failures are fatal. Everything the planning core does at
runtime degrades to a defined default instead of raising.
"""


class FestPlannerError(Exception):
    """Base exception for all festplanner errors."""

    pass


class CatalogError(FestPlannerError):
    """Raised when the catalog document cannot be read or is invalid."""

    pass


class StorageError(FestPlannerError):
    """Raised by key/value storage backends when a read or write fails."""

    pass
