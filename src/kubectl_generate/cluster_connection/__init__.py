"""Cluster connection exports."""

from .connection import OPENAPI_V2_PATH, ClusterConnection, open_cluster_connection
from .discovery_mapper import APIResource, DiscoveryClient, DiscoveryRESTMapper

__all__ = [
    "OPENAPI_V2_PATH",
    "APIResource",
    "ClusterConnection",
    "DiscoveryClient",
    "DiscoveryRESTMapper",
    "open_cluster_connection",
]
