import logging
from typing import Iterable, List, Optional

from kyank.config.provider import RunConfig
from kyank.errors import KyankError, UnresolvableVariableError
from kyank.modules.api.models import ContainerSpec, ResolvedContainer, TargetKind, TargetSelector
from kyank.modules.cluster.interfaces import ClusterAccessor
from kyank.modules.output.formatter import LineFormatter
from kyank.modules.resolver.resolver import VariableResolver

logger = logging.getLogger("kyank.extract")


class Extractor:
    """Fetches a target's containers, resolves the requested variables and formats them."""

    def __init__(
        self,
        accessor: ClusterAccessor,
        formatter: LineFormatter,
        resolver: Optional[VariableResolver] = None,
    ):
        self.accessor = accessor
        self.formatter = formatter
        self.resolver = resolver or VariableResolver(accessor)

    @classmethod
    def from_config(cls, accessor: ClusterAccessor, config: RunConfig) -> "Extractor":
        return cls(accessor, LineFormatter.from_config(config.output))

    def fetch_containers(self, target: TargetSelector) -> List[ContainerSpec]:
        """Dispatch to the pod or deployment read."""
        if target.kind == TargetKind.POD:
            return self.accessor.fetch_pod(target.pod_id)
        return self.accessor.fetch_deployment(target.deployment_name)

    def resolve(
        self, target: TargetSelector, wanted: Iterable[str], strict: bool = False
    ) -> List[ResolvedContainer]:
        """
        Resolve the requested variables of every container of the target.

        Args:
            target: Pod or deployment to read
            wanted: Requested variable names
            strict: Fail when a requested name is declared by no container

        Raises:
            NotFoundError, AccessError: From the cluster accessor
            UnresolvableVariableError: For declared variables without a value,
                or undeclared ones in strict mode
        """
        wanted = list(dict.fromkeys(wanted))
        containers = self.fetch_containers(target)
        logger.info(f"Found {len(containers)} containers in {target}")

        try:
            resolved = self.resolver.resolve_containers(containers, wanted)
        except KyankError as e:
            e.detail.setdefault("target", str(target))
            raise

        if strict:
            found = {name for container in resolved for name in container.variables}
            missing = [name for name in wanted if name not in found]
            if missing:
                raise UnresolvableVariableError(
                    missing[0],
                    f"environment variable {missing[0]} is not declared by any container of {target}",
                    detail={"target": str(target), "missing": missing},
                )

        return resolved

    def extract(self, target: TargetSelector, wanted: Iterable[str], strict: bool = False) -> List[str]:
        """Resolve and format; every line is computed before any is returned."""
        return self.formatter.render(self.resolve(target, wanted, strict=strict))
