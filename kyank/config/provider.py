"""Configuration provider following Black Box Design principles."""
from dataclasses import dataclass, field
from typing import List, Optional

from kyank.errors import ConfigurationError

# Environment variables read by the command surface
ENV_NAMESPACE = "KYANK_K8S_NAMESPACE"
ENV_CONTEXT = "KYANK_K8S_CONTEXT"
ENV_PREFIX = "KYANK_PREFIX"
ENV_SUFFIX = "KYANK_SUFFIX"
ENV_SEPARATOR = "KYANK_SEPARATOR"
ENV_REQUEST_TIMEOUT = "KYANK_REQUEST_TIMEOUT"
ENV_LOG_LEVEL = "KYANK_LOG_LEVEL"
ENV_STRICT = "KYANK_STRICT"

DEFAULT_SEPARATOR = "="
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class ClusterConfig:
    """Where and how to reach the cluster."""
    namespace: str
    context: Optional[str] = None
    kubeconfig: Optional[str] = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT


@dataclass(frozen=True)
class OutputConfig:
    """How resolved variables are printed."""
    prefix: str = ""
    suffix: str = ""
    separator: str = DEFAULT_SEPARATOR


@dataclass(frozen=True)
class RunConfig:
    """Everything a single invocation needs."""
    cluster: ClusterConfig
    output: OutputConfig
    env_names: List[str] = field(default_factory=list)
    strict: bool = False

    def validate(self) -> "RunConfig":
        """
        Check required settings.

        Raises:
            ConfigurationError: If a required setting is missing or invalid
        """
        problems = []
        if not self.cluster.namespace:
            problems.append("a namespace is required")
        if not [name for name in self.env_names if name]:
            problems.append("at least one environment variable name is required")
        if self.cluster.request_timeout <= 0:
            problems.append("the request timeout must be greater than zero")

        if problems:
            raise ConfigurationError(
                "; ".join(problems),
                detail={
                    "namespace": self.cluster.namespace,
                    "env_names": list(self.env_names),
                    "request_timeout": self.cluster.request_timeout,
                },
            )
        return self
