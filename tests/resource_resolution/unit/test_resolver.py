"""Resource resolver tests."""

from __future__ import annotations

import pytest
from kubectl_generate.resource_resolution.resolver import (
    ResolutionError,
    parse_group_version,
    parse_resource_arg,
    resolve_type_identifier,
)
from kubectl_generate.resource_resolution.type_identifiers import (
    GroupVersionKind,
    ResourceRequest,
)


class FakeRESTMapper:
    """Knows apps/v1 Deployment plus a CRD in a dotted group."""

    def __init__(self) -> None:
        self.requests: list[ResourceRequest] = []

    def kind_for(self, request: ResourceRequest) -> GroupVersionKind:
        self.requests.append(request)
        if request.resource in {"deployment", "deployments", "deploy"}:
            if request.group in ("", "apps") and request.version in ("", "v1"):
                return GroupVersionKind("apps", "v1", "Deployment")
        if request.resource == "crontabs" and request.group == "stable.example.com":
            return GroupVersionKind("stable.example.com", "v1", "CronTab")
        return GroupVersionKind.empty()


def test_resolves_deployment_without_override() -> None:
    gvk = resolve_type_identifier("deployment", FakeRESTMapper())

    assert gvk == GroupVersionKind("apps", "v1", "Deployment")


def test_api_version_override_replaces_group_and_version_only() -> None:
    gvk = resolve_type_identifier(
        "deployment", FakeRESTMapper(), api_version="extensions/v1beta1"
    )

    assert gvk == GroupVersionKind("extensions", "v1beta1", "Deployment")


def test_core_api_version_override_clears_group() -> None:
    gvk = resolve_type_identifier("deployment", FakeRESTMapper(), api_version="v1")

    assert gvk == GroupVersionKind("", "v1", "Deployment")


def test_retries_without_version_when_fully_specified_lookup_is_empty() -> None:
    mapper = FakeRESTMapper()

    gvk = resolve_type_identifier("deployments.v1beta1.apps", mapper)

    assert gvk == GroupVersionKind("apps", "v1", "Deployment")
    assert mapper.requests == [
        ResourceRequest(resource="deployments", version="v1beta1", group="apps"),
        ResourceRequest(resource="deployments", group="apps"),
    ]


def test_dotted_group_resolves_through_group_resource_reading() -> None:
    gvk = resolve_type_identifier("crontabs.stable.example.com", FakeRESTMapper())

    assert gvk == GroupVersionKind("stable.example.com", "v1", "CronTab")


def test_unknown_resource_raises_resolution_error() -> None:
    with pytest.raises(ResolutionError, match="doesn't have a resource type"):
        resolve_type_identifier("widgets", FakeRESTMapper())


@pytest.mark.parametrize("token", ["", "deployments..apps", ".apps", "deploy ment", "deploy_x"])
def test_unparsable_token_raises_before_mapping(token: str) -> None:
    mapper = FakeRESTMapper()

    with pytest.raises(ResolutionError, match="Invalid resource name"):
        resolve_type_identifier(token, mapper)
    assert mapper.requests == []


def test_parse_resource_arg_readings() -> None:
    assert parse_resource_arg("deployment") == (None, ResourceRequest("deployment"))
    assert parse_resource_arg("deployments.apps") == (
        None,
        ResourceRequest("deployments", group="apps"),
    )
    assert parse_resource_arg("deployments.v1.apps") == (
        ResourceRequest("deployments", group="apps", version="v1"),
        ResourceRequest("deployments", group="v1.apps"),
    )


@pytest.mark.parametrize("value", ["", "/", "apps/", "/v1", "a/b/c"])
def test_parse_group_version_rejects_malformed_values(value: str) -> None:
    with pytest.raises(ResolutionError, match="Unexpected API version"):
        parse_group_version(value)


def test_invalid_api_version_override_raises_resolution_error() -> None:
    with pytest.raises(ResolutionError):
        resolve_type_identifier("deployment", FakeRESTMapper(), api_version="apps/v1/extra")
