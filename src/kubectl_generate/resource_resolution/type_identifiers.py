"""Resource type identifier entities."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class GroupVersionKind:
    """Canonical (group, version, kind) identifier of a resource type."""

    group: str
    version: str
    kind: str

    @staticmethod
    def empty() -> GroupVersionKind:
        return GroupVersionKind(group="", version="", kind="")

    @property
    def is_empty(self) -> bool:
        return not self.kind

    @property
    def api_version(self) -> str:
        return f"{self.group}/{self.version}" if self.group else self.version

    def with_group_version(self, group: str, version: str) -> GroupVersionKind:
        return replace(self, group=group, version=version)

    def __str__(self) -> str:
        return f"{self.api_version}, Kind={self.kind}"


@dataclass(frozen=True)
class ResourceRequest:
    """Resource name as typed by the user, optionally qualified by group and version."""

    resource: str
    group: str = ""
    version: str = ""

    def without_version(self) -> ResourceRequest:
        return replace(self, version="")

    def __str__(self) -> str:
        return ".".join(part for part in (self.resource, self.version, self.group) if part)
