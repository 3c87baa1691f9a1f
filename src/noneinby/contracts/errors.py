# src/noneinby/contracts/errors.py
"""Error contract for argument validation.

There is a single error kind. Anything the caller's predicate raises is
propagated unchanged and never wrapped in it.
"""

from typing import Any


class InvalidArgumentError(TypeError):
    """Raised when an argument fails validation before iteration begins.

    Subclasses TypeError so callers guarding against wrong argument types
    with ``except TypeError`` keep working.

    Attributes:
        argument: Name of the offending parameter ("mapping" or "predicate")
        expected: Human-readable description of what was required
        value: The rejected value, kept as-is for inspection
    """

    def __init__(self, argument: str, expected: str, value: Any) -> None:
        """Initialize InvalidArgumentError.

        Args:
            argument: Name of the offending parameter
            expected: What the parameter must be (e.g., "a mapping")
            value: The value that was rejected
        """
        self.argument = argument
        self.expected = expected
        self.value = value
        super().__init__(
            f"invalid argument. `{argument}` must be {expected}. "
            f"Value: `{value!r}` (type {type(value).__name__})."
        )
