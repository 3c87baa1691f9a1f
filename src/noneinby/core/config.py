"""Configuration for noneinby's ambient logging.

Settings are validated with Pydantic and loaded through Dynaconf so
environment variables (NONEINBY_*) override an optional YAML file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from noneinby.core.logging import configure_logging, get_logger

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseModel):
    """Logging configuration.

    Example YAML:
        level: DEBUG
        json_output: true
    """

    model_config = {"frozen": True}

    level: LogLevel = Field(default="INFO", description="Root log level")
    json_output: bool = Field(default=False, description="Render JSON lines instead of console output")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


def load_settings(config_path: Path | None = None) -> LoggingSettings:
    """Load settings from an optional YAML file with environment overrides.

    Precedence:
    1. Environment variables (NONEINBY_LEVEL, NONEINBY_JSON_OUTPUT) - highest
    2. Config file, when given
    3. Defaults from the Pydantic schema - lowest

    Args:
        config_path: Path to YAML configuration file, or None for env-only

    Returns:
        Validated LoggingSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config_path is given but doesn't exist
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="NONEINBY",
        settings_files=[str(config_path)] if config_path is not None else [],
        environments=False,
        load_dotenv=False,
    )

    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    return LoggingSettings(**raw_config)


def configure_logging_from_settings(settings: LoggingSettings) -> None:
    """Apply validated LoggingSettings to structlog and stdlib logging."""
    configure_logging(json_output=settings.json_output, level=settings.level)
    get_logger(__name__).debug("logging_configured", level=settings.level, json_output=settings.json_output)
