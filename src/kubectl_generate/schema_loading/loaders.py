"""Upstream, local and custom schema loaders."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any, Protocol

import httpx

from kubectl_generate.schema_management.schema_models import SchemaDocument

from .document_parsing import decode_schema_text, parse_schema_document
from .load_errors import LoadError, NetworkError, ParseError, SchemaNotFoundError
from .local_examples import LOCAL_SCHEMA_SOURCE, LOCAL_SCHEMA_TEXT

UPSTREAM_SCHEMA_SOURCE = "upstream"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0

_LOGGER = logging.getLogger(__name__)


class OpenAPISchemaSource(Protocol):  # pylint: disable=too-few-public-methods
    """Discovery capability that reports the cluster's OpenAPI v2 document."""

    def openapi_schema(self) -> Mapping[str, Any]: ...


def load_upstream_schema(discovery: OpenAPISchemaSource) -> SchemaDocument:
    """Load the OpenAPI v2 document reported by the connected cluster."""
    _LOGGER.debug("Requesting OpenAPI v2 document from the cluster")
    document = parse_schema_document(discovery.openapi_schema(), source=UPSTREAM_SCHEMA_SOURCE)
    _LOGGER.debug("Upstream schema has %d definitions", len(document.definitions))
    return document


@lru_cache(maxsize=1)
def load_local_schema() -> SchemaDocument:
    """Parse the curated examples bundled with the plugin.

    The result is cached for the lifetime of the process. SchemaDocument is
    immutable, so every caller can share the same instance.
    """
    try:
        return parse_schema_document(
            decode_schema_text(LOCAL_SCHEMA_TEXT, source=LOCAL_SCHEMA_SOURCE),
            source=LOCAL_SCHEMA_SOURCE,
        )
    except ParseError as exc:  # pragma: no cover - packaging defect
        raise ParseError(f"Bundled example schema is broken: {exc}") from exc


def load_custom_schema(
    location: str,
    *,
    http_client: httpx.Client | None = None,
) -> SchemaDocument:
    """Load a user-provided schema from a local file or, failing that, a URL.

    Args:
      location: Filesystem path or http(s) URL.
      http_client: Client used for remote fetches. A short-lived client is created
        when omitted.

    Raises:
      SchemaNotFoundError: If the path does not exist and is not a URL, or the
        server answers 404.
      NetworkError: If the remote fetch fails.
      ParseError: If the content is not a schema document.
    """
    if not location.strip():
        raise SchemaNotFoundError("Schema source must not be empty.")
    path = Path(location)
    if path.exists():
        _LOGGER.debug("Reading custom schema from file %s", path)
        payload = _read_schema_file(path)
    else:
        _LOGGER.debug("Fetching custom schema from %s", location)
        payload = _fetch_schema_url(location, http_client)
    return parse_schema_document(decode_schema_text(payload, source=location), source=location)


def _read_schema_file(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        raise SchemaNotFoundError(f"Schema file not found: {path}") from exc
    except OSError as exc:
        raise LoadError(f"Failed to read schema file {path}: {exc}") from exc


def _fetch_schema_url(location: str, http_client: httpx.Client | None) -> bytes:
    try:
        url = httpx.URL(location)
    except httpx.InvalidURL as exc:
        raise SchemaNotFoundError(f"Schema source is neither a file nor a URL: {location}") from exc
    if url.scheme not in ("http", "https"):
        raise SchemaNotFoundError(f"Schema source is neither a file nor a URL: {location}")

    client = http_client or httpx.Client(
        timeout=DEFAULT_HTTP_TIMEOUT_SECONDS, follow_redirects=True
    )
    try:
        response = client.get(url)
    except httpx.HTTPError as exc:
        raise NetworkError(f"Failed to fetch schema from {location}: {exc}") from exc
    finally:
        if http_client is None:
            client.close()

    if response.status_code == httpx.codes.NOT_FOUND:
        raise SchemaNotFoundError(f"Schema not found at {location} (HTTP 404).")
    if response.is_error:
        raise NetworkError(
            f"Failed to fetch schema from {location}: HTTP {response.status_code}."
        )
    return response.content
