"""
Cluster Module - Black Box Interface

Purpose: Read workloads and secrets from one Kubernetes namespace
Interface: fetch_pod(), fetch_deployment(), fetch_secret_value()
Hidden: kubeconfig/in-cluster loading, API client, error translation

Can be replaced with any object satisfying the ClusterAccessor protocol.
"""

from .accessor import KubernetesClusterAccessor, load_api_client
from .interfaces import ClusterAccessor

__all__ = ["ClusterAccessor", "KubernetesClusterAccessor", "load_api_client"]
