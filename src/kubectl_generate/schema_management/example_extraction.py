"""Lookup and rendering of the example for one resource type."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import yaml

from kubectl_generate.resource_resolution.type_identifiers import GroupVersionKind

from .schema_models import Definition, SchemaDocument

GVK_EXTENSION = "x-kubernetes-group-version-kind"

_BUILTIN_GROUP_SUFFIX = ".k8s.io"
_GROUP_PACKAGES = {
    "apiextensions.k8s.io": "io.k8s.apiextensions-apiserver.pkg.apis.apiextensions",
    "apiregistration.k8s.io": "io.k8s.kube-aggregator.pkg.apis.apiregistration",
}


class ExtractionError(Exception):
    """Raised when the merged schema has no usable example for the target type."""


def schema_name_for(gvk: GroupVersionKind) -> str:
    """Return the OpenAPI definition name Kubernetes uses for `gvk`.

    >>> schema_name_for(GroupVersionKind("apps", "v1", "Deployment"))
    'io.k8s.api.apps.v1.Deployment'
    """
    return f"{_group_package(gvk.group)}.{gvk.version}.{gvk.kind}"


def _group_package(group: str) -> str:
    if not group:
        return "io.k8s.api.core"
    if group in _GROUP_PACKAGES:
        return _GROUP_PACKAGES[group]
    if "." not in group or group.endswith(_BUILTIN_GROUP_SUFFIX):
        return f"io.k8s.api.{group.split('.', 1)[0]}"
    return ".".join(reversed(group.split(".")))


def find_type_definition(document: SchemaDocument, gvk: GroupVersionKind) -> Definition | None:
    """Find the definition for `gvk` by name, then by its declared GVK extension."""
    definition = document.find(schema_name_for(gvk))
    if definition is not None:
        return definition
    for candidate in document.definitions:
        if _declares_gvk(candidate, gvk):
            return candidate
    return None


def _declares_gvk(definition: Definition, gvk: GroupVersionKind) -> bool:
    declared = definition.extensions.get(GVK_EXTENSION)
    if not isinstance(declared, Sequence) or isinstance(declared, str):
        return False
    for entry in declared:
        if not isinstance(entry, Mapping):
            continue
        if (
            entry.get("group", "") == gvk.group
            and entry.get("version") == gvk.version
            and entry.get("kind") == gvk.kind
        ):
            return True
    return False


def extract_example(document: SchemaDocument, gvk: GroupVersionKind) -> str:
    """Return the rendered example for `gvk` from `document`."""
    definition = find_type_definition(document, gvk)
    if definition is None:
        raise ExtractionError(
            f"No schema definition {schema_name_for(gvk)} found for {gvk} "
            f"in the {document.source} schema."
        )
    if not definition.has_example:
        raise ExtractionError(f"Schema definition {definition.name} has no example.")
    return render_example(definition.example)


def render_example(example: Any) -> str:
    """Serialize an example payload as manifest text."""
    if isinstance(example, str):
        return example.rstrip("\n")
    text = yaml.safe_dump(example, default_flow_style=False, sort_keys=False)
    # Plain scalars are followed by an explicit document end marker.
    return text.removesuffix("...\n").rstrip("\n")
