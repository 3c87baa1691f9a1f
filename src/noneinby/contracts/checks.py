"""Capability checks used to validate none_in_by arguments."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeGuard


def is_object_like(value: Any) -> TypeGuard[Mapping[Any, Any]]:
    """Return True if value is a plain key-value mapping.

    Accepts any Mapping (dict, MappingProxyType, ...). Everything else is
    rejected: None, strings, bytes, numbers, booleans, sequences, sets,
    compiled regular expressions and dates are not Mappings. Callable
    mappings are rejected as well, matching the rule that functions are
    never object-like.
    """
    return isinstance(value, Mapping) and not callable(value)


def is_invocable(value: Any) -> bool:
    """Return True if value can be called."""
    return callable(value)
