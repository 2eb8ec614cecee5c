"""Resource resolution exports."""

from .resolver import (
    ResolutionError,
    RESTMapper,
    parse_group_version,
    parse_resource_arg,
    resolve_type_identifier,
)
from .type_identifiers import GroupVersionKind, ResourceRequest

__all__ = [
    "GroupVersionKind",
    "ResourceRequest",
    "ResolutionError",
    "RESTMapper",
    "parse_group_version",
    "parse_resource_arg",
    "resolve_type_identifier",
]
