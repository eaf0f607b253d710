import logging
from typing import Dict, Iterable, List, Sequence

from kyank.errors import KyankError, UnresolvableVariableError
from kyank.modules.api.models import ContainerSpec, DeclaredVariable, ResolvedContainer
from kyank.modules.cluster.interfaces import ClusterAccessor

logger = logging.getLogger("kyank.resolver")


class VariableResolver:
    def __init__(self, accessor: ClusterAccessor):
        """
        Initialize resolver.

        Args:
            accessor: Cluster accessor used for secret-backed values
        """
        self.accessor = accessor

    def resolve(
        self, container_env: Sequence[DeclaredVariable], wanted: Iterable[str]
    ) -> Dict[str, str]:
        """
        Resolve the requested variables declared in one container.

        Args:
            container_env: Declared variables in container order
            wanted: Requested variable names (exact, case-sensitive)

        Returns:
            Mapping of variable name to value, in declaration order

        Logic:
        1. Non-empty literal value is used as is
        2. Otherwise a secret key reference is read from the cluster
        3. Otherwise the variable is unresolvable

        A name declared twice keeps the value of the later declaration.
        Requested names that are not declared are left out.
        """
        wanted_names = set(wanted)
        resolved: Dict[str, str] = {}

        for declared in container_env:
            if declared.name not in wanted_names:
                continue
            resolved[declared.name] = self._value_of(declared)

        return resolved

    def resolve_containers(
        self, containers: Sequence[ContainerSpec], wanted: Iterable[str]
    ) -> List[ResolvedContainer]:
        """
        Resolve the requested variables for every container, in order.

        The first failure aborts the whole run; no partial result is returned.
        """
        wanted = list(wanted)
        results = []

        for container in containers:
            try:
                variables = self.resolve(container.env, wanted)
            except KyankError as e:
                e.detail.setdefault("container", container.name)
                raise

            logger.debug(
                f"Resolved {len(variables)} of {len(set(wanted))} variables in container {container.name}"
            )
            results.append(ResolvedContainer(container_name=container.name, variables=variables))

        return results

    def _value_of(self, declared: DeclaredVariable) -> str:
        if declared.has_literal:
            return declared.value

        if declared.secret_key_ref is not None:
            ref = declared.secret_key_ref
            logger.debug(f"Variable {declared.name} is backed by secret {ref}")
            return self.accessor.fetch_secret_value(ref.name, ref.key)

        raise UnresolvableVariableError(declared.name)
