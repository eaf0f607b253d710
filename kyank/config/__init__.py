"""Invocation configuration: cluster, output and run settings."""

from .provider import ClusterConfig, OutputConfig, RunConfig

__all__ = ["ClusterConfig", "OutputConfig", "RunConfig"]
