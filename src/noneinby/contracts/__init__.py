"""Shared contracts: error kind, capability checks and type aliases.

This package is a LEAF MODULE with no outbound dependencies to core/.

Import patterns:
    from noneinby.contracts import InvalidArgumentError, is_object_like
"""

from noneinby.contracts.checks import is_invocable, is_object_like
from noneinby.contracts.errors import InvalidArgumentError
from noneinby.contracts.types import EntryPredicate, PlainMapping

__all__ = [
    "EntryPredicate",
    "InvalidArgumentError",
    "PlainMapping",
    "is_invocable",
    "is_object_like",
]
