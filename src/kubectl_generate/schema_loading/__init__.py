"""Schema loading exports."""

from .document_parsing import decode_schema_text, parse_schema_document
from .load_errors import (
    ConnectivityError,
    LoadError,
    NetworkError,
    ParseError,
    SchemaNotFoundError,
)
from .loaders import (
    OpenAPISchemaSource,
    load_custom_schema,
    load_local_schema,
    load_upstream_schema,
)
from .local_examples import SUPPORTED_RESOURCE_ALIASES

__all__ = [
    "LoadError",
    "SchemaNotFoundError",
    "NetworkError",
    "ParseError",
    "ConnectivityError",
    "OpenAPISchemaSource",
    "SUPPORTED_RESOURCE_ALIASES",
    "decode_schema_text",
    "parse_schema_document",
    "load_custom_schema",
    "load_local_schema",
    "load_upstream_schema",
]
