"""Core infrastructure: the none_in_by predicate and logging.

Configuration (pydantic, Dynaconf) is NOT re-exported here so that importing
none_in_by stays free of those dependencies. Import it from
noneinby.core.config.
"""

from noneinby.core.logging import (
    configure_logging,
    get_logger,
)
from noneinby.core.none_in_by import none_in_by

__all__ = [
    "configure_logging",
    "get_logger",
    "none_in_by",
]
