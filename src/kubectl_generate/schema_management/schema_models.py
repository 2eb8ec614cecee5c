"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Definition:
    """One named entry of an OpenAPI v2 `definitions` section."""

    name: str
    description: str = ""
    type: str = ""
    properties: Mapping[str, Any] = field(default_factory=dict)
    example: Any = None
    extensions: Mapping[str, Any] = field(default_factory=dict)

    @property
    def has_example(self) -> bool:
        return self.example is not None


@dataclass(frozen=True)
class SchemaDocument:
    """Ordered collection of definitions loaded from one source."""

    source: str
    definitions: tuple[Definition, ...]

    def find(self, name: str) -> Definition | None:
        """Return the first definition called `name`, if any."""
        for definition in self.definitions:
            if definition.name == name:
                return definition
        return None
