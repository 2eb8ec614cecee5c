"""Connection settings tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from kubectl_generate.configuration.loader import (
    ConfigurationError,
    build_connection_settings,
    parse_request_timeout,
)


def test_defaults_leave_everything_to_kubeconfig() -> None:
    settings = build_connection_settings()

    assert settings.kubeconfig is None
    assert settings.context is None
    assert settings.server is None
    assert settings.token is None
    assert settings.insecure_skip_tls_verify is False
    assert settings.request_timeout_seconds is None


def test_normalizes_flag_values(tmp_path: Path) -> None:
    kubeconfig = tmp_path / "kubeconfig"
    kubeconfig.write_text("apiVersion: v1\n", encoding="utf-8")

    settings = build_connection_settings(
        kubeconfig=str(kubeconfig),
        context=" staging ",
        server="kube.example.com:6443",
        token="  ",
        insecure_skip_tls_verify=True,
        request_timeout="2m",
    )

    assert settings.kubeconfig == kubeconfig
    assert settings.context == "staging"
    assert settings.server == "https://kube.example.com:6443"
    assert settings.token is None
    assert settings.insecure_skip_tls_verify is True
    assert settings.request_timeout_seconds == 120.0


def test_missing_kubeconfig_file_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="kubeconfig file not found"):
        build_connection_settings(kubeconfig=str(tmp_path / "missing"))


def test_missing_certificate_authority_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="certificate-authority file not found"):
        build_connection_settings(certificate_authority=str(tmp_path / "ca.crt"))


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, None),
        ("0", None),
        ("0s", None),
        ("30", 30.0),
        ("1.5s", 1.5),
        ("500ms", 0.5),
        ("1h", 3600.0),
    ],
)
def test_parse_request_timeout(value: str | None, expected: float | None) -> None:
    assert parse_request_timeout(value) == expected


@pytest.mark.parametrize("value", ["soon", "-1s", "10d", "1m30s"])
def test_parse_request_timeout_rejects_invalid_durations(value: str) -> None:
    with pytest.raises(ConfigurationError, match="request-timeout"):
        parse_request_timeout(value)
