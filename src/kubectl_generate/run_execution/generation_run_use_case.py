"""Example generation use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from kubectl_generate.cluster_connection import (
    ClusterConnection,
    DiscoveryRESTMapper,
    open_cluster_connection,
)
from kubectl_generate.configuration import ConnectionSettings
from kubectl_generate.resource_resolution import (
    RESTMapper,
    ResolutionError,
    resolve_type_identifier,
)
from kubectl_generate.schema_loading import (
    SUPPORTED_RESOURCE_ALIASES,
    LoadError,
    load_custom_schema,
    load_local_schema,
    load_upstream_schema,
)
from kubectl_generate.schema_management import (
    ExtractionError,
    SchemaDocument,
    extract_example,
    merge_examples,
)

from .run_contracts import GenerateOutcome, GenerateRequest

_LOGGER = logging.getLogger(__name__)

ConnectionFactory = Callable[[ConnectionSettings], ClusterConnection]
RESTMapperFactory = Callable[[ClusterConnection], RESTMapper]


class ValidationError(Exception):
    """Raised when the requested resource is missing or unsupported."""


class GenerationRunError(Exception):
    """Raised when a generation run cannot be completed.

    `kind` names the underlying error class for diagnostics.
    """

    def __init__(self, message: str, *, kind: str) -> None:
        super().__init__(message)
        self.kind = kind


def validate_resource_names(resource_names: tuple[str, ...]) -> str:
    """Return the single requested resource token, lowercased."""
    if len(resource_names) != 1:
        raise ValidationError("Resource to generate required")
    resource_name = resource_names[0].strip().lower()
    if resource_name.partition(".")[0] not in SUPPORTED_RESOURCE_ALIASES:
        supported = ", ".join(sorted(set(SUPPORTED_RESOURCE_ALIASES.values())))
        raise ValidationError(
            f"Resource {resource_name!r} is not supported. Supported kinds: {supported}."
        )
    return resource_name


def execute_generation_run(
    request: GenerateRequest,
    *,
    connection_factory: ConnectionFactory | None = None,
    rest_mapper_factory: RESTMapperFactory | None = None,
    http_client: httpx.Client | None = None,
) -> GenerateOutcome:
    """Produce the example manifest for the requested resource."""
    resolved_connection_factory = connection_factory or open_cluster_connection
    resolved_rest_mapper_factory = rest_mapper_factory or DiscoveryRESTMapper
    try:
        resource_name = validate_resource_names(request.resource_names)
        with resolved_connection_factory(request.connection) as connection:
            gvk = resolve_type_identifier(
                resource_name,
                resolved_rest_mapper_factory(connection),
                api_version=request.api_version,
            )
            upstream = load_upstream_schema(connection)
        examples = _load_examples_schema(request.schema_source, http_client)
        example = extract_example(merge_examples(examples, upstream), gvk)
    except (ValidationError, ResolutionError, LoadError, ExtractionError) as exc:
        raise GenerationRunError(str(exc), kind=type(exc).__name__) from exc
    _LOGGER.debug("Generated example for %s", gvk)
    return GenerateOutcome(type_identifier=gvk, example=example)


def _load_examples_schema(
    schema_source: str | None, http_client: httpx.Client | None
) -> SchemaDocument:
    if schema_source is not None:
        return load_custom_schema(schema_source, http_client=http_client)
    return load_local_schema()
