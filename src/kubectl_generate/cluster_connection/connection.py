"""Kubernetes API connection built from kubeconfig and connection flags."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import urllib3
from kubernetes import client, config
from kubernetes.client.exceptions import ApiException

from kubectl_generate.configuration.runtime_settings import ConnectionSettings
from kubectl_generate.schema_loading.load_errors import (
    ConnectivityError,
    ParseError,
    SchemaNotFoundError,
)

OPENAPI_V2_PATH = "/openapi/v2"

_LOGGER = logging.getLogger(__name__)

# The REST client logs whole response bodies at debug level.
_KUBERNETES_REST_LOGGER = logging.getLogger("kubernetes.client.rest")
_KUBERNETES_REST_LOGGER.addHandler(logging.NullHandler())
_KUBERNETES_REST_LOGGER.propagate = False


class ClusterConnection:
    """Thin JSON GET client over a configured kubernetes ApiClient."""

    def __init__(self, api_client: client.ApiClient, *, request_timeout: float | None = None):
        self._api_client = api_client
        self._request_timeout = request_timeout

    @property
    def host(self) -> str:
        return self._api_client.configuration.host

    def get_json(self, path: str) -> Any:
        """GET `path` from the API server and decode the JSON body."""
        _LOGGER.debug("GET %s%s", self.host, path)
        try:
            response = self._api_client.call_api(
                path,
                "GET",
                header_params={"Accept": "application/json"},
                auth_settings=["BearerToken"],
                _preload_content=False,
                _return_http_data_only=True,
                _request_timeout=self._request_timeout,
            )
        except ApiException as exc:
            if exc.status == 404:
                raise SchemaNotFoundError(f"{path} not found on {self.host}.") from exc
            raise ConnectivityError(
                f"Request to {self.host}{path} failed: {exc.status} {exc.reason}"
            ) from exc
        except urllib3.exceptions.HTTPError as exc:
            raise ConnectivityError(f"Unable to connect to the server {self.host}: {exc}") from exc

        try:
            return json.loads(response.data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ParseError(f"Malformed JSON from {self.host}{path}: {exc}") from exc

    def openapi_schema(self) -> Mapping[str, Any]:
        """Return the cluster's OpenAPI v2 document."""
        return self.get_json(OPENAPI_V2_PATH)

    def close(self) -> None:
        self._api_client.close()

    def __enter__(self) -> ClusterConnection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_cluster_connection(settings: ConnectionSettings) -> ClusterConnection:
    """Build a ClusterConnection from kubeconfig plus explicit flag overrides.

    The kubeconfig may be missing when `settings.server` is given.

    Raises:
      ConnectivityError: If no usable cluster configuration can be built.
    """
    configuration = client.Configuration()
    try:
        config.load_kube_config(
            config_file=str(settings.kubeconfig) if settings.kubeconfig else None,
            context=settings.context,
            client_configuration=configuration,
            persist_config=False,
        )
    except (config.ConfigException, OSError) as exc:
        if settings.server is None:
            raise ConnectivityError(f"Unable to load kubeconfig: {exc}") from exc
        _LOGGER.debug("Ignoring kubeconfig (%s); using --server %s", exc, settings.server)

    if settings.server:
        configuration.host = settings.server
    if settings.token:
        # The kubeconfig refresh hook would rewrite the token on every request.
        configuration.refresh_api_key_hook = None
        configuration.api_key = {"authorization": settings.token}
        configuration.api_key_prefix = {"authorization": "Bearer"}
    if settings.certificate_authority:
        configuration.ssl_ca_cert = str(settings.certificate_authority)
    if settings.insecure_skip_tls_verify:
        configuration.verify_ssl = False

    _LOGGER.debug("Connecting to %s", configuration.host)
    return ClusterConnection(
        client.ApiClient(configuration=configuration),
        request_timeout=settings.request_timeout_seconds,
    )
