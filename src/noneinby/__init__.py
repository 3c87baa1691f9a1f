"""
noneinby: test whether no entry of a plain mapping satisfies a predicate.

A leaf-level helper for data processing pipelines. Validates its inputs
strictly, walks the mapping's own keys in order and stops at the first
entry the predicate accepts.
"""

from noneinby.contracts import InvalidArgumentError
from noneinby.core.none_in_by import none_in_by

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "__version__",
    "none_in_by",
]
