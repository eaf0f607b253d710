"""Cluster access interfaces following Black Box Design principles."""
from typing import List, Protocol

from kyank.modules.api.models import ContainerSpec


class ClusterAccessor(Protocol):
    """Protocol for read-only cluster access - allows swappable implementations."""

    def fetch_pod(self, pod_id: str) -> List[ContainerSpec]:
        """
        Fetch the containers of a pod.

        Raises:
            NotFoundError: If no such pod exists in the namespace
            AccessError: On transport or authorization failures
        """
        ...

    def fetch_deployment(self, name: str) -> List[ContainerSpec]:
        """
        Fetch the containers of a deployment's pod template.

        Raises:
            NotFoundError: If no such deployment exists in the namespace
            AccessError: On transport or authorization failures
        """
        ...

    def fetch_secret_value(self, secret_name: str, key: str) -> str:
        """
        Fetch a single decoded value from a secret.

        Raises:
            NotFoundError: If the secret or the key does not exist
            AccessError: On transport or authorization failures
        """
        ...
