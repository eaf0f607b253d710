"""
Resolver Module - Black Box Interface

Purpose: Determine the effective value of requested environment variables
Interface: resolve(), resolve_containers()
Hidden: Literal vs. secret reference rules, duplicate declaration handling

Only literal values and secret key references are understood; anything
else declared under a requested name is unresolvable.
"""

from .resolver import VariableResolver

__all__ = ["VariableResolver"]
