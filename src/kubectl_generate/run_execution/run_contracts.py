"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from kubectl_generate.configuration.runtime_settings import ConnectionSettings
from kubectl_generate.resource_resolution.type_identifiers import GroupVersionKind


@dataclass(frozen=True)
class GenerateRequest:
    """Input contract for generating one example manifest."""

    resource_names: tuple[str, ...]
    connection: ConnectionSettings = field(default_factory=ConnectionSettings)
    schema_source: str | None = None
    api_version: str | None = None


@dataclass(frozen=True)
class GenerateOutcome:
    """Output contract for one completed run."""

    type_identifier: GroupVersionKind
    example: str
