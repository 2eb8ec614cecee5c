"""Resolution of resource name tokens into GroupVersionKind identifiers."""

from __future__ import annotations

import logging
import re
from typing import Protocol

from .type_identifiers import GroupVersionKind, ResourceRequest

_LOGGER = logging.getLogger(__name__)

_SEGMENT = re.compile(r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?$")


class ResolutionError(Exception):
    """Raised when a resource token cannot be mapped to a kind."""


class RESTMapper(Protocol):  # pylint: disable=too-few-public-methods
    """Capability translating a resource request into its kind."""

    def kind_for(self, request: ResourceRequest) -> GroupVersionKind:
        """Return the matching kind, or an empty GroupVersionKind when none matches."""
        ...


def parse_resource_arg(token: str) -> tuple[ResourceRequest | None, ResourceRequest]:
    """Split a resource token into its fully specified and group-only readings.

    `deployments.v1.apps` reads as resource `deployments`, version `v1`, group
    `apps` and also as resource `deployments` in group `v1.apps`. Tokens with fewer
    than three segments have no fully specified reading.
    """
    segments = token.split(".")
    if not token or not all(_SEGMENT.match(segment) for segment in segments):
        raise ResolutionError(f"Invalid resource name: {token!r}")

    resource, _, group = token.partition(".")
    group_resource = ResourceRequest(resource=resource, group=group)
    if len(segments) < 3:
        return None, group_resource
    version, _, group = group.partition(".")
    return ResourceRequest(resource=resource, version=version, group=group), group_resource


def parse_group_version(api_version: str) -> tuple[str, str]:
    """Parse `group/version` (or a bare core `version`) into its parts."""
    parts = api_version.split("/")
    if len(parts) == 1 and parts[0]:
        return "", parts[0]
    if len(parts) == 2 and all(parts):
        return parts[0], parts[1]
    raise ResolutionError(f"Unexpected API version string: {api_version!r}")


def resolve_type_identifier(
    resource_name: str,
    rest_mapper: RESTMapper,
    *,
    api_version: str | None = None,
) -> GroupVersionKind:
    """Resolve a lowercase resource token to its GroupVersionKind.

    When `api_version` is given its group and version replace the resolved ones
    while the resolved kind is kept.
    """
    gvk = GroupVersionKind.empty()
    for request in _candidate_requests(*parse_resource_arg(resource_name)):
        gvk = rest_mapper.kind_for(request)
        if not gvk.is_empty:
            break
    if gvk.is_empty:
        raise ResolutionError(f"The server doesn't have a resource type {resource_name!r}")
    _LOGGER.debug("Resolved %s to %s", resource_name, gvk)

    if api_version:
        group, version = parse_group_version(api_version)
        gvk = gvk.with_group_version(group, version)
        _LOGGER.debug("API version override applied: %s", gvk)
    return gvk


def _candidate_requests(
    fully_specified: ResourceRequest | None, group_resource: ResourceRequest
) -> list[ResourceRequest]:
    candidates: list[ResourceRequest] = []
    if fully_specified is not None:
        candidates.extend([fully_specified, fully_specified.without_version()])
    candidates.append(group_resource)
    return list(dict.fromkeys(candidates))
