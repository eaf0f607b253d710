"""
Shared pytest fixtures for kyank tests.

This module provides common fixtures including:
- FakeClusterAccessor: In-memory pods, deployments and secrets with call history
- Builders for kubernetes client objects (V1EnvVar, V1Pod, V1Deployment, V1Secret)
"""

import base64
from typing import Dict, List, Optional, Tuple

import pytest
from kubernetes import client as k8s_client

from kyank.config.provider import ClusterConfig, OutputConfig, RunConfig
from kyank.errors import NotFoundError
from kyank.modules.api.models import ContainerSpec, DeclaredVariable, SecretKeyRef


# =============================================================================
# Fake cluster
# =============================================================================

class FakeClusterAccessor:
    """
    In-memory ClusterAccessor with recorded calls.

    Usage:
        def test_secret_lookup(fake_cluster):
            fake_cluster.add_secret("creds", "api-key", "s3cr3t")
            fake_cluster.add_pod("web-0", [container("app", ("API_KEY", secret("creds", "api-key")))])
    """

    def __init__(self):
        self.pods: Dict[str, List[ContainerSpec]] = {}
        self.deployments: Dict[str, List[ContainerSpec]] = {}
        self.secrets: Dict[Tuple[str, str], str] = {}
        self.calls: List[Tuple[str, ...]] = []
        self.secret_errors: Dict[Tuple[str, str], Exception] = {}

    def add_pod(self, name: str, containers: List[ContainerSpec]) -> "FakeClusterAccessor":
        self.pods[name] = containers
        return self

    def add_deployment(self, name: str, containers: List[ContainerSpec]) -> "FakeClusterAccessor":
        self.deployments[name] = containers
        return self

    def add_secret(self, name: str, key: str, value: str) -> "FakeClusterAccessor":
        self.secrets[(name, key)] = value
        return self

    def fail_secret(self, name: str, key: str, error: Exception) -> "FakeClusterAccessor":
        self.secret_errors[(name, key)] = error
        return self

    def fetch_pod(self, pod_id: str) -> List[ContainerSpec]:
        self.calls.append(("pod", pod_id))
        if pod_id not in self.pods:
            raise NotFoundError(f"failed to get pod {pod_id} in namespace default")
        return self.pods[pod_id]

    def fetch_deployment(self, name: str) -> List[ContainerSpec]:
        self.calls.append(("deployment", name))
        if name not in self.deployments:
            raise NotFoundError(f"failed to get deployment {name} in namespace default")
        return self.deployments[name]

    def fetch_secret_value(self, secret_name: str, key: str) -> str:
        self.calls.append(("secret", secret_name, key))
        if (secret_name, key) in self.secret_errors:
            raise self.secret_errors[(secret_name, key)]
        if (secret_name, key) not in self.secrets:
            raise NotFoundError(f"key {key} not found in secret {secret_name}")
        return self.secrets[(secret_name, key)]

    def secret_calls(self) -> List[Tuple[str, ...]]:
        return [call for call in self.calls if call[0] == "secret"]


@pytest.fixture
def fake_cluster():
    """Provide an empty fake cluster."""
    return FakeClusterAccessor()


# =============================================================================
# Model builders
# =============================================================================

def secret(name: str, key: str) -> SecretKeyRef:
    return SecretKeyRef(name=name, key=key)


def container(name: str, *env: Tuple[str, object]) -> ContainerSpec:
    """
    Build a ContainerSpec from (name, value) pairs.

    A str value is a literal, a SecretKeyRef is a secret reference and None
    declares the variable with no value at all.
    """
    declared = []
    for var_name, source in env:
        if isinstance(source, SecretKeyRef):
            declared.append(DeclaredVariable(name=var_name, secret_key_ref=source))
        else:
            declared.append(DeclaredVariable(name=var_name, value=source))
    return ContainerSpec(name=name, env=tuple(declared))


@pytest.fixture
def run_config():
    """Factory for RunConfig with sensible defaults."""

    def _make(env_names=("DB_HOST",), prefix="", suffix="", separator="=", strict=False):
        return RunConfig(
            cluster=ClusterConfig(namespace="default"),
            output=OutputConfig(prefix=prefix, suffix=suffix, separator=separator),
            env_names=list(env_names),
            strict=strict,
        )

    return _make


# =============================================================================
# Kubernetes client object builders
# =============================================================================

def k8s_env(
    name: str, value: Optional[str] = None, secret_name: Optional[str] = None, secret_key: Optional[str] = None
) -> k8s_client.V1EnvVar:
    value_from = None
    if secret_name is not None:
        value_from = k8s_client.V1EnvVarSource(
            secret_key_ref=k8s_client.V1SecretKeySelector(name=secret_name, key=secret_key)
        )
    return k8s_client.V1EnvVar(name=name, value=value, value_from=value_from)


def k8s_pod_spec(*containers: Tuple[str, List[k8s_client.V1EnvVar]]) -> k8s_client.V1PodSpec:
    return k8s_client.V1PodSpec(
        containers=[k8s_client.V1Container(name=name, env=env) for name, env in containers]
    )


def k8s_pod(name: str, *containers) -> k8s_client.V1Pod:
    return k8s_client.V1Pod(
        metadata=k8s_client.V1ObjectMeta(name=name, namespace="default"),
        spec=k8s_pod_spec(*containers),
    )


def k8s_deployment(name: str, *containers) -> k8s_client.V1Deployment:
    return k8s_client.V1Deployment(
        metadata=k8s_client.V1ObjectMeta(name=name, namespace="default"),
        spec=k8s_client.V1DeploymentSpec(
            selector=k8s_client.V1LabelSelector(match_labels={"app": name}),
            template=k8s_client.V1PodTemplateSpec(
                metadata=k8s_client.V1ObjectMeta(labels={"app": name}),
                spec=k8s_pod_spec(*containers),
            ),
        ),
    )


def k8s_secret(name: str, data: Dict[str, str]) -> k8s_client.V1Secret:
    """Build a V1Secret whose data is base64 encoded like the API returns it."""
    return k8s_client.V1Secret(
        metadata=k8s_client.V1ObjectMeta(name=name, namespace="default"),
        data={key: base64.b64encode(value.encode("utf-8")).decode("ascii") for key, value in data.items()},
    )
