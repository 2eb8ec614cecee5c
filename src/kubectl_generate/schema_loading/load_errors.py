"""Schema loading errors."""

from __future__ import annotations


class LoadError(Exception):
    """Raised when a schema document cannot be fetched, read or parsed."""


class SchemaNotFoundError(LoadError):
    """Raised when a schema source does not exist."""


class NetworkError(LoadError):
    """Raised when fetching a remote schema source fails."""


class ParseError(LoadError):
    """Raised when a payload is not a valid schema document."""


class ConnectivityError(LoadError):
    """Raised when the cluster cannot be configured, reached or queried."""
