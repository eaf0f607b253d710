"""
API Module - Black Box Interface

Purpose: Data shapes shared between modules
Interface: TargetSelector, ContainerSpec, DeclaredVariable, SecretKeyRef, ResolvedContainer
Hidden: Conversion from kubernetes client objects

No module passes raw kubernetes client objects to another; everything
crossing a module boundary is one of these models.
"""

from .models import (
    ContainerSpec,
    DeclaredVariable,
    ResolvedContainer,
    SecretKeyRef,
    TargetKind,
    TargetSelector,
    containers_from_pod_spec,
)

__all__ = [
    "ContainerSpec",
    "DeclaredVariable",
    "ResolvedContainer",
    "SecretKeyRef",
    "TargetKind",
    "TargetSelector",
    "containers_from_pod_spec",
]
