"""Connection settings normalization service."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from .runtime_settings import ConnectionSettings

_DURATION = re.compile(r"^(?P<amount>\d+(?:\.\d+)?)(?P<unit>ms|s|m|h)?$")
_UNIT_SECONDS = {"ms": 0.001, "s": 1.0, "m": 60.0, "h": 3600.0}


class ConfigurationError(Exception):
    """Raised when connection settings are invalid."""


def build_connection_settings(
    *,
    kubeconfig: str | None = None,
    context: str | None = None,
    server: str | None = None,
    token: str | None = None,
    certificate_authority: str | None = None,
    insecure_skip_tls_verify: bool = False,
    request_timeout: str | None = None,
) -> ConnectionSettings:
    """Validate raw connection flag values and return normalized settings."""
    server_value = _optional_string(server, "server")
    if server_value is not None and not server_value.startswith(("http://", "https://")):
        server_value = f"https://{server_value}"
    return ConnectionSettings(
        kubeconfig=_optional_existing_path(kubeconfig, "kubeconfig"),
        context=_optional_string(context, "context"),
        server=server_value,
        token=_optional_string(token, "token"),
        certificate_authority=_optional_existing_path(
            certificate_authority, "certificate-authority"
        ),
        insecure_skip_tls_verify=bool(insecure_skip_tls_verify),
        request_timeout_seconds=parse_request_timeout(request_timeout),
    )


def parse_request_timeout(value: str | None) -> float | None:
    """Parse a kubectl-style duration such as `30s`, `1m` or `0`.

    A bare number is read as seconds. Zero means no timeout and yields None.
    """
    text = _optional_string(value, "request-timeout")
    if text is None:
        return None
    match = _DURATION.match(text)
    if match is None:
        raise ConfigurationError(
            f"request-timeout must be a duration like 30s, 1m or 0, got {text!r}."
        )
    seconds = float(match.group("amount")) * _UNIT_SECONDS[match.group("unit") or "s"]
    return seconds or None


def _optional_existing_path(value: Any, field_name: str) -> Path | None:
    text = _optional_string(value, field_name)
    if text is None:
        return None
    path = Path(text).expanduser()
    if not path.is_file():
        raise ConfigurationError(f"{field_name} file not found: {path}")
    return path


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
