"""Example extraction tests."""

from __future__ import annotations

import pytest
from kubectl_generate.resource_resolution.type_identifiers import GroupVersionKind
from kubectl_generate.schema_management.example_extraction import (
    ExtractionError,
    extract_example,
    render_example,
    schema_name_for,
)
from kubectl_generate.schema_management.schema_models import Definition, SchemaDocument


@pytest.mark.parametrize(
    ("gvk", "expected"),
    [
        (GroupVersionKind("apps", "v1", "Deployment"), "io.k8s.api.apps.v1.Deployment"),
        (
            GroupVersionKind("extensions", "v1beta1", "Deployment"),
            "io.k8s.api.extensions.v1beta1.Deployment",
        ),
        (GroupVersionKind("", "v1", "Pod"), "io.k8s.api.core.v1.Pod"),
        (
            GroupVersionKind("networking.k8s.io", "v1", "Ingress"),
            "io.k8s.api.networking.v1.Ingress",
        ),
        (
            GroupVersionKind("apiextensions.k8s.io", "v1", "CustomResourceDefinition"),
            "io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1.CustomResourceDefinition",
        ),
        (
            GroupVersionKind("stable.example.com", "v1", "CronTab"),
            "com.example.stable.v1.CronTab",
        ),
    ],
)
def test_schema_name_for_follows_kubernetes_definition_names(
    gvk: GroupVersionKind, expected: str
) -> None:
    assert schema_name_for(gvk) == expected


def test_extracts_raw_text_example_for_resolved_type() -> None:
    document = SchemaDocument(
        source="upstream",
        definitions=(
            Definition(name="io.k8s.api.apps.v1.DeploymentSpec", example="spec"),
            Definition(name="io.k8s.api.apps.v1.Deployment", example="kind: Deployment\n"),
        ),
    )

    example = extract_example(document, GroupVersionKind("apps", "v1", "Deployment"))

    assert example == "kind: Deployment"


def test_falls_back_to_declared_group_version_kind() -> None:
    document = SchemaDocument(
        source="upstream",
        definitions=(
            Definition(
                name="com.acme.widgets.v1.Widget",
                example="kind: Widget",
                extensions={
                    "x-kubernetes-group-version-kind": [
                        {"group": "custom.example.io", "version": "v1", "kind": "Widget"}
                    ]
                },
            ),
        ),
    )

    example = extract_example(document, GroupVersionKind("custom.example.io", "v1", "Widget"))

    assert example == "kind: Widget"


def test_missing_definition_raises_extraction_error() -> None:
    document = SchemaDocument(source="upstream", definitions=())

    with pytest.raises(ExtractionError, match="io.k8s.api.apps.v1.Deployment"):
        extract_example(document, GroupVersionKind("apps", "v1", "Deployment"))


def test_definition_without_example_raises_extraction_error() -> None:
    document = SchemaDocument(
        source="upstream",
        definitions=(Definition(name="io.k8s.api.apps.v1.Deployment"),),
    )

    with pytest.raises(ExtractionError, match="has no example"):
        extract_example(document, GroupVersionKind("apps", "v1", "Deployment"))


def test_structured_examples_render_as_block_yaml() -> None:
    rendered = render_example({"apiVersion": "v1", "kind": "Pod", "spec": {"containers": []}})

    assert rendered == "apiVersion: v1\nkind: Pod\nspec:\n  containers: []"


@pytest.mark.parametrize(("example", "expected"), [(True, "true"), (3, "3"), (1.5, "1.5")])
def test_scalar_examples_render_as_yaml_scalars(example: object, expected: str) -> None:
    assert render_example(example) == expected
