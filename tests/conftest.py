# tests/conftest.py
"""Shared test fixtures and helpers.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

import logging
import os
from collections.abc import Iterator
from typing import Any

import pytest
import structlog
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# Hypothesis Profiles
# =============================================================================

# CI profile: Fast tests for continuous integration
settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

# Nightly profile: Thorough testing for scheduled runs
settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Debug profile: Minimal examples with verbose output for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Load profile from environment, default to "ci"
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


# =============================================================================
# Shared Fixtures
# =============================================================================


class CallRecorder:
    """Predicate double that records every call and returns a fixed answer.

    Use ``hits`` to make the predicate return truthy for specific keys.
    """

    def __init__(self, hits: frozenset[str] = frozenset()) -> None:
        self.hits = hits
        self.calls: list[tuple[Any, Any]] = []

    def __call__(self, value: Any, key: Any, mapping: Any) -> bool:
        self.calls.append((key, value))
        return key in self.hits

    @property
    def visited_keys(self) -> list[Any]:
        return [key for key, _ in self.calls]


@pytest.fixture
def recorder() -> CallRecorder:
    """Predicate double that never matches."""
    return CallRecorder()


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Restore root logging and structlog defaults after each test.

    configure_logging() replaces root handlers; without this, one test's
    configuration leaks into the next.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()
