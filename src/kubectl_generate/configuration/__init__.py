"""Configuration domain exports."""

from .loader import ConfigurationError, build_connection_settings, parse_request_timeout
from .runtime_settings import ConnectionSettings

__all__ = [
    "ConnectionSettings",
    "ConfigurationError",
    "build_connection_settings",
    "parse_request_timeout",
]
