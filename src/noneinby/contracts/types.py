"""Semantic type aliases shared by the core and its callers."""

from collections.abc import Callable, Mapping
from typing import Any

PlainMapping = Mapping[str, Any]
"""Plain key-value association whose own keys are walked by none_in_by."""

EntryPredicate = Callable[..., object]
"""Test called as predicate(value, key, mapping[, context]).

Only the result's truthiness matters. Predicates may declare fewer
positional parameters; surplus arguments are not passed.
"""
