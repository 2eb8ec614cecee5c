"""REST mapping backed by the API server's discovery endpoints."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from kubectl_generate.resource_resolution.type_identifiers import (
    GroupVersionKind,
    ResourceRequest,
)
from kubectl_generate.schema_loading.load_errors import ConnectivityError, SchemaNotFoundError

_LOGGER = logging.getLogger(__name__)


class DiscoveryClient(Protocol):  # pylint: disable=too-few-public-methods
    """Subset of ClusterConnection used for discovery."""

    def get_json(self, path: str) -> Any: ...


@dataclass(frozen=True)
class APIResource:
    """One resource served by a group version."""

    group: str
    version: str
    name: str
    singular_name: str
    kind: str
    short_names: tuple[str, ...] = ()

    @property
    def gvk(self) -> GroupVersionKind:
        return GroupVersionKind(group=self.group, version=self.version, kind=self.kind)

    def matches(self, request: ResourceRequest) -> bool:
        if request.group and request.group != self.group:
            return False
        if request.version and request.version != self.version:
            return False
        names = {self.name, self.singular_name, self.kind.lower(), *self.short_names}
        return request.resource in names


@dataclass(frozen=True)
class _GroupVersions:
    group: str
    versions: tuple[str, ...]


class DiscoveryRESTMapper:
    """Resolve resource requests against `/api` and `/apis` discovery documents.

    Group versions are fetched lazily and cached for the lifetime of the mapper.
    Within a group the preferred version is searched first.
    """

    def __init__(self, discovery: DiscoveryClient) -> None:
        self._discovery = discovery
        self._groups: tuple[_GroupVersions, ...] | None = None
        self._resources: dict[tuple[str, str], tuple[APIResource, ...]] = {}

    def kind_for(self, request: ResourceRequest) -> GroupVersionKind:
        for resource in self._candidate_resources(request):
            if resource.matches(request):
                _LOGGER.debug("Discovery matched %s to %s", request, resource.gvk)
                return resource.gvk
        return GroupVersionKind.empty()

    def _candidate_resources(self, request: ResourceRequest) -> Iterator[APIResource]:
        for group_versions in self._group_versions():
            if request.group and request.group != group_versions.group:
                continue
            for version in group_versions.versions:
                if request.version and request.version != version:
                    continue
                yield from self._group_version_resources(group_versions.group, version)

    def _group_versions(self) -> tuple[_GroupVersions, ...]:
        if self._groups is None:
            core = self._discovery.get_json("/api")
            groups = self._discovery.get_json("/apis")
            self._groups = (
                _GroupVersions(group="", versions=_string_tuple(_mapping(core).get("versions"))),
                *(_parse_api_group(item) for item in _sequence(_mapping(groups).get("groups"))),
            )
        return self._groups

    def _group_version_resources(self, group: str, version: str) -> tuple[APIResource, ...]:
        key = (group, version)
        if key not in self._resources:
            path = f"/apis/{group}/{version}" if group else f"/api/{version}"
            try:
                payload = self._discovery.get_json(path)
            except (ConnectivityError, SchemaNotFoundError) as exc:
                _LOGGER.warning("Skipping unavailable group version %s: %s", path, exc)
                payload = {}
            self._resources[key] = tuple(
                _parse_api_resource(item, group, version)
                for item in _sequence(_mapping(payload).get("resources"))
                if isinstance(item, Mapping) and "/" not in str(item.get("name", ""))
            )
        return self._resources[key]


def _parse_api_group(item: Any) -> _GroupVersions:
    group = _mapping(item)
    versions = [
        str(entry.get("version"))
        for entry in _sequence(group.get("versions"))
        if isinstance(entry, Mapping) and entry.get("version")
    ]
    preferred = _mapping(group.get("preferredVersion")).get("version")
    if preferred in versions:
        versions.remove(preferred)
        versions.insert(0, preferred)
    return _GroupVersions(group=str(group.get("name", "")), versions=tuple(versions))


def _parse_api_resource(item: Mapping[str, Any], group: str, version: str) -> APIResource:
    return APIResource(
        group=group,
        version=version,
        name=str(item.get("name", "")),
        singular_name=str(item.get("singularName") or ""),
        kind=str(item.get("kind", "")),
        short_names=_string_tuple(item.get("shortNames")),
    )


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _sequence(value: Any) -> Sequence[Any]:
    return value if isinstance(value, list) else []


def _string_tuple(value: Any) -> tuple[str, ...]:
    return tuple(str(item) for item in _sequence(value) if isinstance(item, str) and item)
