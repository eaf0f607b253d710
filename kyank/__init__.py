"""
Kyank - Yank things from Kubernetes

Prints the resolved values of environment variables declared in a pod's or
deployment's containers, reading secret-backed values from the cluster.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- No module knows the internals of another

Modules:
- api: Shared data models
- cluster: Read-only Kubernetes access
- resolver: Environment variable resolution rules
- output: Line formatting
- extract: Target dispatch and orchestration
"""

__version__ = "1.0.0"
