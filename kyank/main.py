#!/usr/bin/env python3
"""
Kyank - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration from flags, KYANK_* environment variables and .env
2. Initializes modules
3. Prints the formatted lines, or a single error message

All business logic is in the modules, following black box principles.
"""

import logging
import sys
from typing import List, Optional, Tuple

import click
from dotenv import find_dotenv, load_dotenv
from rich.console import Console

from kyank import __version__
from kyank.config.provider import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SEPARATOR,
    ENV_CONTEXT,
    ENV_LOG_LEVEL,
    ENV_NAMESPACE,
    ENV_PREFIX,
    ENV_REQUEST_TIMEOUT,
    ENV_SEPARATOR,
    ENV_STRICT,
    ENV_SUFFIX,
    ClusterConfig,
    OutputConfig,
    RunConfig,
)
from kyank.errors import KyankError
from kyank.logging_config import configure_logging
from kyank.modules.api import TargetSelector
from kyank.modules.cluster import KubernetesClusterAccessor
from kyank.modules.extract import Extractor

logger = logging.getLogger("kyank.main")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def split_env_names(values: Tuple[str, ...]) -> List[str]:
    """Accept both repeated --env flags and comma separated lists."""
    names = []
    for value in values:
        names.extend(name.strip() for name in value.split(",") if name.strip())
    return names


def run(
    config: RunConfig,
    target: TargetSelector,
    accessor=None,
) -> List[str]:
    """Resolve and format the requested variables of one target."""
    config.validate()
    if accessor is None:
        accessor = KubernetesClusterAccessor(config.cluster)
    extractor = Extractor.from_config(accessor, config)
    return extractor.extract(target, config.env_names, strict=config.strict)


@click.command(
    name="kyank",
    help=(
        "Yank things from Kubernetes. Invoke with the Kubernetes namespace, a Pod ID "
        "or Deployment name and at least one environment variable to read."
    ),
)
@click.option("--namespace", envvar=ENV_NAMESPACE, required=True, help="Kubernetes namespace")
@click.option(
    "--context",
    envvar=ENV_CONTEXT,
    default=None,
    help="Kubernetes context name. The current context is used when omitted.",
)
@click.option(
    "--kubeconfig",
    default=None,
    help="Path to a kubeconfig file. KUBECONFIG and ~/.kube/config are used when omitted.",
)
@click.option("--pod-id", default=None, help="Kubernetes Pod ID")
@click.option("--deployment", default=None, help="Kubernetes Deployment name")
@click.option(
    "--env",
    "env_values",
    multiple=True,
    required=True,
    help="Environment variable to read. Repeat the flag or pass a comma separated list.",
)
@click.option(
    "--prefix",
    envvar=ENV_PREFIX,
    default="",
    help="Text prepended to each output line. Useful for adding 'export ' before each line.",
)
@click.option(
    "--suffix",
    envvar=ENV_SUFFIX,
    default="",
    help="Text appended to each output line.",
)
@click.option(
    "--separator",
    envvar=ENV_SEPARATOR,
    default=DEFAULT_SEPARATOR,
    show_default=True,
    help="Text between a variable's key and value, for example ': ' for 'KEY: VALUE'.",
)
@click.option(
    "--timeout",
    envvar=ENV_REQUEST_TIMEOUT,
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_REQUEST_TIMEOUT,
    show_default=True,
    help="Request timeout in seconds applied to every Kubernetes API call.",
)
@click.option(
    "--log-level",
    envvar=ENV_LOG_LEVEL,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    help="Diagnostic log level. Logs are written to stderr.",
)
@click.option(
    "--strict",
    envvar=ENV_STRICT,
    is_flag=True,
    default=False,
    help="Fail when a requested variable is not declared by any container.",
)
@click.version_option(__version__, prog_name="kyank")
def main(
    namespace: str,
    context: Optional[str],
    kubeconfig: Optional[str],
    pod_id: Optional[str],
    deployment: Optional[str],
    env_values: Tuple[str, ...],
    prefix: str,
    suffix: str,
    separator: str,
    timeout: float,
    log_level: str,
    strict: bool,
):
    configure_logging(log_level)

    config = RunConfig(
        cluster=ClusterConfig(
            namespace=namespace,
            context=context or None,
            kubeconfig=kubeconfig or None,
            request_timeout=timeout,
        ),
        output=OutputConfig(prefix=prefix, suffix=suffix, separator=separator),
        env_names=split_env_names(env_values),
        strict=strict,
    )

    try:
        target = TargetSelector.from_options(pod_id=pod_id, deployment_name=deployment)
        lines = run(config, target)
    except KyankError as e:
        logger.debug(f"Run failed: {e!r}", exc_info=True)
        Console(stderr=True, highlight=False, emoji=False, soft_wrap=True).print(
            f"kyank failed: {e}", style="bold red", markup=False
        )
        sys.exit(1)

    for line in lines:
        click.echo(line.encode("utf-8", "surrogateescape"))


def cli():
    """Console script entry point."""
    load_dotenv(find_dotenv(usecwd=True))
    main()


if __name__ == "__main__":
    cli()
