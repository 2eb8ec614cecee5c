"""Decoding of OpenAPI v2 payloads into schema documents."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import yaml

from kubectl_generate.schema_management.schema_models import Definition, SchemaDocument

from .load_errors import ParseError

_KNOWN_FIELDS = ("description", "type", "properties", "example")


def decode_schema_text(text: str | bytes, *, source: str) -> Any:
    """Decode JSON or YAML schema text into plain Python values."""
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"Schema from {source} is not UTF-8 text: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ParseError(f"Failed to parse schema from {source}: {exc}") from exc


def parse_schema_document(root: Any, *, source: str) -> SchemaDocument:
    """Build a SchemaDocument from a decoded OpenAPI v2 root object."""
    if not isinstance(root, Mapping):
        raise ParseError(f"Schema from {source} must be a mapping at the root.")
    definitions = root.get("definitions")
    if definitions is None:
        return SchemaDocument(source=source, definitions=())
    if not isinstance(definitions, Mapping):
        raise ParseError(f"Schema from {source} has a non-mapping 'definitions' section.")
    return SchemaDocument(
        source=source,
        definitions=tuple(
            _parse_definition(name, body, source) for name, body in definitions.items()
        ),
    )


def _parse_definition(name: Any, body: Any, source: str) -> Definition:
    if not isinstance(name, str) or not name:
        raise ParseError(f"Schema from {source} contains a definition without a name.")
    if not isinstance(body, Mapping):
        raise ParseError(f"Definition {name} in {source} must be a mapping.")
    properties = body.get("properties")
    if properties is None:
        properties = {}
    if not isinstance(properties, Mapping):
        raise ParseError(f"Definition {name} in {source} has non-mapping properties.")
    return Definition(
        name=name,
        description=_optional_text(body.get("description")),
        type=_optional_text(body.get("type")),
        properties=dict(properties),
        example=body.get("example"),
        extensions={key: value for key, value in body.items() if key not in _KNOWN_FIELDS},
    )


def _optional_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
