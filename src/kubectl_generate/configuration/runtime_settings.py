"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConnectionSettings:  # pylint: disable=too-many-instance-attributes
    """Cluster connection configuration, mirroring kubectl's connection flags."""

    kubeconfig: Path | None = None
    context: str | None = None
    server: str | None = None
    token: str | None = None
    certificate_authority: Path | None = None
    insecure_skip_tls_verify: bool = False
    request_timeout_seconds: float | None = None
