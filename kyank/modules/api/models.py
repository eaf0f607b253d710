"""
Kyank shared data models.

These models define the structure of the data passed between the cluster
accessor, the resolver and the output formatter. They are immutable and
built once per invocation.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from kyank.errors import ConfigurationError


class TargetKind(str, Enum):
    """Kinds of workload a variable can be yanked from."""

    POD = "pod"
    DEPLOYMENT = "deployment"


class TargetSelector(BaseModel):
    """Exactly one of a pod identifier or a deployment name."""

    model_config = ConfigDict(frozen=True)

    pod_id: Optional[str] = Field(None, description="Pod name in the target namespace", min_length=1)
    deployment_name: Optional[str] = Field(
        None, description="Deployment name in the target namespace", min_length=1
    )

    @model_validator(mode="after")
    def check_exactly_one(self):
        """Reject selectors naming both or neither target."""
        if self.pod_id and self.deployment_name:
            raise ValueError("specify either a pod id or a deployment name, not both")
        if not self.pod_id and not self.deployment_name:
            raise ValueError("either a pod id or a deployment name is required")
        return self

    @classmethod
    def from_options(
        cls, pod_id: Optional[str] = None, deployment_name: Optional[str] = None
    ) -> "TargetSelector":
        """
        Build a selector from raw command line values.

        Empty strings count as absent.

        Raises:
            ConfigurationError: If both or neither target is given
        """
        try:
            return cls(pod_id=pod_id or None, deployment_name=deployment_name or None)
        except ValidationError as e:
            messages = "; ".join(err["msg"].removeprefix("Value error, ") for err in e.errors())
            raise ConfigurationError(
                messages,
                detail={"pod_id": pod_id, "deployment_name": deployment_name},
                cause=e,
            ) from e

    @property
    def kind(self) -> TargetKind:
        return TargetKind.POD if self.pod_id else TargetKind.DEPLOYMENT

    @property
    def name(self) -> str:
        return self.pod_id or self.deployment_name

    def __str__(self) -> str:
        return f"{self.kind.value} {self.name}"


class SecretKeyRef(BaseModel):
    """Pointer to a single key of a secret in the target namespace."""

    model_config = ConfigDict(frozen=True)

    name: str
    key: str

    def __str__(self) -> str:
        return f"{self.name}/{self.key}"


class DeclaredVariable(BaseModel):
    """An environment variable as declared in a container spec."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: Optional[str] = None
    secret_key_ref: Optional[SecretKeyRef] = None

    @property
    def has_literal(self) -> bool:
        # Kubernetes treats an empty literal the same as an unset one
        return bool(self.value)

    @classmethod
    def from_k8s(cls, env_var) -> "DeclaredVariable":
        """Build from a kubernetes.client.V1EnvVar."""
        secret_key_ref = None
        value_from = env_var.value_from
        if value_from is not None and value_from.secret_key_ref is not None:
            ref = value_from.secret_key_ref
            secret_key_ref = SecretKeyRef(name=ref.name or "", key=ref.key)
        return cls(name=env_var.name, value=env_var.value, secret_key_ref=secret_key_ref)


class ContainerSpec(BaseModel):
    """A container definition with its ordered environment declarations."""

    model_config = ConfigDict(frozen=True)

    name: str
    env: Tuple[DeclaredVariable, ...] = ()

    @classmethod
    def from_k8s(cls, container) -> "ContainerSpec":
        """Build from a kubernetes.client.V1Container."""
        return cls(
            name=container.name,
            env=tuple(DeclaredVariable.from_k8s(env_var) for env_var in container.env or []),
        )


class ResolvedContainer(BaseModel):
    """Resolved variables of one container, in declaration order."""

    model_config = ConfigDict(frozen=True)

    container_name: str
    variables: Dict[str, str] = Field(default_factory=dict)


def containers_from_pod_spec(pod_spec) -> List[ContainerSpec]:
    """Convert the containers of a kubernetes.client.V1PodSpec."""
    if pod_spec is None:
        return []
    return [ContainerSpec.from_k8s(container) for container in pod_spec.containers or []]
