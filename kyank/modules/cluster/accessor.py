"""
Kubernetes cluster accessor.

Reads pods, deployments and secrets from a single namespace through the
official kubernetes client. The API client is built once from an explicit
ClusterConfig and never touches the library's global configuration.
"""

import base64
import binascii
import logging
from typing import Any, Dict, List, Optional

import urllib3
import yaml
from kubernetes import client as k8s_client
from kubernetes import config as k8s_config
from kubernetes.client.rest import ApiException
from kubernetes.config.config_exception import ConfigException

from kyank.config.provider import ClusterConfig
from kyank.errors import AccessError, NotFoundError
from kyank.modules.api.models import ContainerSpec, containers_from_pod_spec

logger = logging.getLogger("kyank.cluster")


def load_api_client(cluster: ClusterConfig) -> k8s_client.ApiClient:
    """
    Create an isolated API client for the configured kubeconfig context.

    Falls back to the in-cluster service account when no kubeconfig is
    available and neither a context nor a kubeconfig path was requested.

    Raises:
        AccessError: If no usable cluster configuration can be loaded
    """
    try:
        api_client = k8s_config.new_client_from_config(
            config_file=cluster.kubeconfig, context=cluster.context
        )
        logger.debug(f"Loaded kubeconfig (context={cluster.context or 'current'})")
        return api_client
    except (yaml.YAMLError, TypeError, ValueError) as e:
        raise AccessError(
            f"failed to load Kubernetes config: invalid kubeconfig: {e}",
            detail={"context": cluster.context, "kubeconfig": cluster.kubeconfig},
            cause=e,
        ) from e
    except ConfigException as e:
        if cluster.context or cluster.kubeconfig:
            raise AccessError(
                f"failed to load Kubernetes config: {e}",
                detail={"context": cluster.context, "kubeconfig": cluster.kubeconfig},
                cause=e,
            ) from e
        kubeconfig_error = e

    configuration = k8s_client.Configuration()
    try:
        k8s_config.load_incluster_config(client_configuration=configuration)
    except ConfigException as e:
        raise AccessError(
            f"failed to load Kubernetes config: {kubeconfig_error}",
            detail={"in_cluster_error": str(e)},
            cause=kubeconfig_error,
        ) from kubeconfig_error

    logger.debug("Loaded in-cluster Kubernetes configuration")
    return k8s_client.ApiClient(configuration)


class KubernetesClusterAccessor:
    """Read-only access to one namespace of a Kubernetes cluster."""

    def __init__(self, cluster: ClusterConfig, api_client: Optional[k8s_client.ApiClient] = None):
        """
        Initialize the accessor.

        Args:
            cluster: Namespace, context and timeout to use for every call
            api_client: Pre-built API client; loaded from ``cluster`` when omitted
        """
        self.cluster = cluster
        self.namespace = cluster.namespace
        self.api_client = api_client or load_api_client(cluster)
        self.core_v1 = k8s_client.CoreV1Api(self.api_client)
        self.apps_v1 = k8s_client.AppsV1Api(self.api_client)

    def fetch_pod(self, pod_id: str) -> List[ContainerSpec]:
        """Fetch the containers of a running pod."""
        detail = {"namespace": self.namespace, "pod": pod_id}
        logger.debug(f"Reading pod {pod_id} in namespace {self.namespace}")
        pod = self._call(
            self.core_v1.read_namespaced_pod,
            pod_id,
            failure=f"failed to get pod {pod_id} in namespace {self.namespace}",
            detail=detail,
        )
        return containers_from_pod_spec(pod.spec)

    def fetch_deployment(self, name: str) -> List[ContainerSpec]:
        """Fetch the containers of a deployment's pod template."""
        detail = {"namespace": self.namespace, "deployment": name}
        logger.debug(f"Reading deployment {name} in namespace {self.namespace}")
        deployment = self._call(
            self.apps_v1.read_namespaced_deployment,
            name,
            failure=f"failed to get deployment {name} in namespace {self.namespace}",
            detail=detail,
        )
        template = deployment.spec.template if deployment.spec else None
        return containers_from_pod_spec(template.spec if template else None)

    def fetch_secret_value(self, secret_name: str, key: str) -> str:
        """Fetch and decode one key of a secret."""
        detail = {"namespace": self.namespace, "secret": secret_name, "key": key}
        logger.debug(f"Reading key {key} of secret {secret_name}")
        secret = self._call(
            self.core_v1.read_namespaced_secret,
            secret_name,
            failure=f"failed to fetch secret {secret_name}",
            detail=detail,
        )

        data = secret.data or {}
        if key not in data:
            raise NotFoundError(f"key {key} not found in secret {secret_name}", detail=detail)

        try:
            raw = base64.b64decode(data[key] or "", validate=True)
        except (binascii.Error, ValueError) as e:
            raise AccessError(
                f"key {key} of secret {secret_name} is not valid base64", detail=detail, cause=e
            ) from e

        # Non UTF-8 bytes survive as surrogates and are written back out unchanged
        return raw.decode("utf-8", errors="surrogateescape")

    def _call(self, method, name: str, *, failure: str, detail: Dict[str, Any]):
        """Invoke a read_namespaced_* method and translate client failures."""
        try:
            return method(name, self.namespace, _request_timeout=self.cluster.request_timeout)
        except ApiException as e:
            error_class = NotFoundError if e.status == 404 else AccessError
            raise error_class(
                f"{failure}: {e.status} {e.reason}",
                detail={**detail, "status": e.status},
                cause=e,
            ) from e
        except urllib3.exceptions.HTTPError as e:
            raise AccessError(f"{failure}: {e}", detail=detail, cause=e) from e
