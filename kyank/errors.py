"""
Kyank error hierarchy.

    KyankError
    ├── ConfigurationError         invalid or missing settings, bad target selector
    ├── NotFoundError              pod, deployment, secret or secret key absent
    ├── AccessError                config loading, authn/authz, transport failures
    └── UnresolvableVariableError  requested variable has no usable value

Every error is terminal for the run. The command surface prints the message
once and exits non-zero.
"""

from typing import Any, Dict, Optional


class KyankError(Exception):
    """Root of the kyank error hierarchy.

    Args:
        message: Human-readable description.
        detail: Context about where the failure happened (namespace, target,
            secret, variable...).
        cause: Original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        detail: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.detail: Dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, detail={self.detail!r})"


class ConfigurationError(KyankError):
    """Invocation settings are missing or contradictory."""


class NotFoundError(KyankError):
    """A pod, deployment, secret or secret key does not exist."""


class AccessError(KyankError):
    """The cluster could not be reached or refused the request."""


class UnresolvableVariableError(KyankError):
    """A requested environment variable has neither a literal nor a secret value."""

    def __init__(self, variable: str, message: Optional[str] = None, **kwargs):
        super().__init__(
            message or f"unable to resolve environment variable value for {variable}",
            **kwargs,
        )
        self.variable = variable
        self.detail.setdefault("variable", variable)


__all__ = [
    "AccessError",
    "ConfigurationError",
    "KyankError",
    "NotFoundError",
    "UnresolvableVariableError",
]
