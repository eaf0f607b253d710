from dataclasses import dataclass
from typing import Iterable, List, Optional

from kyank.config.provider import DEFAULT_SEPARATOR, OutputConfig
from kyank.modules.api.models import ResolvedContainer


def format_line(
    key: str,
    value: str,
    prefix: str = "",
    suffix: str = "",
    separator: Optional[str] = DEFAULT_SEPARATOR,
) -> str:
    """Render one variable as prefix + key + separator + value + suffix."""
    if separator is None:
        separator = DEFAULT_SEPARATOR
    return f"{prefix or ''}{key}{separator}{value}{suffix or ''}"


@dataclass(frozen=True)
class LineFormatter:
    """Renders resolved variables as output lines."""

    prefix: str = ""
    suffix: str = ""
    separator: str = DEFAULT_SEPARATOR

    @classmethod
    def from_config(cls, output: OutputConfig) -> "LineFormatter":
        return cls(prefix=output.prefix, suffix=output.suffix, separator=output.separator)

    def format(self, key: str, value: str) -> str:
        return format_line(key, value, self.prefix, self.suffix, self.separator)

    def render(self, containers: Iterable[ResolvedContainer]) -> List[str]:
        """One line per (container, variable), containers first, then declaration order."""
        return [
            self.format(key, value)
            for container in containers
            for key, value in container.variables.items()
        ]
