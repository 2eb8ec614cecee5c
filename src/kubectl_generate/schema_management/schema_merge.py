"""Overlay of curated examples onto upstream schema documents."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from .schema_models import SchemaDocument

LOCAL_EXAMPLE_PREFIX = "io.k8s.config.examples/"
# Only this part is removed, so the leading "io.k8s." of the prefix is kept.
OVERLAY_KEY_STRIP = "config.examples/"

_LOGGER = logging.getLogger(__name__)


def overlay_key_for(name: str) -> str:
    """Map a curated example name to the upstream definition name it overrides."""
    return name.replace(OVERLAY_KEY_STRIP, "", 1)


def build_example_overlay(local: SchemaDocument) -> dict[str, Any]:
    """Collect curated examples keyed by upstream definition name."""
    overlay: dict[str, Any] = {}
    for definition in local.definitions:
        if not definition.name.startswith(LOCAL_EXAMPLE_PREFIX):
            continue
        if not definition.has_example:
            _LOGGER.debug("Curated definition %s has no example, ignoring", definition.name)
            continue
        overlay[overlay_key_for(definition.name)] = definition.example
    return overlay


def merge_examples(local: SchemaDocument, upstream: SchemaDocument) -> SchemaDocument:
    """Return a copy of `upstream` whose examples are replaced by curated ones.

    Only the example of a matching definition changes. Neither input document is
    modified.
    """
    overlay = build_example_overlay(local)
    merged = []
    for definition in upstream.definitions:
        if definition.name in overlay:
            _LOGGER.debug("Overlaying example for %s from %s", definition.name, local.source)
            definition = replace(definition, example=overlay[definition.name])
        merged.append(definition)
    return SchemaDocument(source=upstream.source, definitions=tuple(merged))
