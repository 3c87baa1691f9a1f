# src/noneinby/core/none_in_by.py
"""none_in_by: True when no entry of a mapping satisfies a predicate.

Flow:
    Validating -> Iterating -> (ShortCircuited | Exhausted)

Both arguments are validated before the first predicate call, so a bad
call never produces side effects. Iteration follows the mapping's own
iteration order (insertion order for dict) and stops at the first truthy
predicate result.

The execution context is threaded explicitly as a trailing positional
argument rather than bound as a receiver:

    def accumulate(value, key, mapping, ctx):
        ctx["sum"] += value
        return False

    none_in_by({"a": 1.0}, accumulate, {"sum": 0.0})
"""

from __future__ import annotations

import inspect
import logging
from typing import Any

from noneinby.contracts.checks import is_invocable, is_object_like
from noneinby.contracts.errors import InvalidArgumentError
from noneinby.contracts.types import EntryPredicate, PlainMapping

logger = logging.getLogger(__name__)

# Sentinel distinguishing "no context" from an explicit None context
_NO_CONTEXT: Any = object()

_MAX_ARGS = 4

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _positional_arity(predicate: EntryPredicate, variadic: int) -> int:
    """Return how many of (value, key, mapping, context) to pass.

    Predicates with *args get `variadic` arguments. Predicates whose
    signature can't be introspected (some builtins) get the value only.
    """
    try:
        signature = inspect.signature(predicate)
    except (TypeError, ValueError):
        return 1

    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return variadic
        if parameter.kind in _POSITIONAL_KINDS:
            count += 1
    return min(count, _MAX_ARGS)


def none_in_by(
    mapping: PlainMapping,
    predicate: EntryPredicate,
    context: Any = _NO_CONTEXT,
) -> bool:
    """Test whether no own entry of a mapping passes a predicate.

    The predicate is called as predicate(value, key, mapping, context).
    Predicates declaring a context parameter get None when it is omitted;
    *args predicates only get it when one is supplied. Surplus arguments
    are dropped for predicates that declare fewer positional parameters.

    Args:
        mapping: Plain key-value mapping to walk. Never mutated.
        predicate: Test applied to each entry; only truthiness matters.
        context: Optional caller state passed to every predicate call.

    Returns:
        True if the mapping is empty or every predicate result is falsy,
        False at the first truthy result.

    Raises:
        InvalidArgumentError: If mapping is not a plain mapping or predicate
            is not callable. Raised before any predicate call.
    """
    if not is_object_like(mapping):
        raise InvalidArgumentError("mapping", "a plain mapping (object-like, not a sequence or callable)", mapping)
    if not is_invocable(predicate):
        raise InvalidArgumentError("predicate", "a callable", predicate)

    # An omitted context reaches predicates that declare it as None
    if context is _NO_CONTEXT:
        arity = _positional_arity(predicate, variadic=3)
        context = None
    else:
        arity = _positional_arity(predicate, variadic=_MAX_ARGS)

    visited = 0
    for key, value in mapping.items():
        visited += 1
        args = (value, key, mapping, context)[:arity]
        if predicate(*args):
            logger.debug("none_in_by short-circuited at key %r after %d visit(s)", key, visited)
            return False

    logger.debug("none_in_by exhausted after %d visit(s)", visited)
    return True
