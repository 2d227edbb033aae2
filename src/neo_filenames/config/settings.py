"""Settings for neo-filenames.

Environment-driven configuration loaded through pydantic-settings and cached
for the lifetime of the process (or until ``reload_settings`` is called).
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import EnvironmentVariables, SystemIdentifier
from ..core.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


class FilenameSettings(BaseSettings):
    """Library settings read from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
        frozen=True,
    )

    # Filename rules
    default_system: Optional[SystemIdentifier] = Field(
        default=None,
        validation_alias=AliasChoices(EnvironmentVariables.DEFAULT_SYSTEM, "default_system"),
        description="System used by default_validator(); pass-through when unset",
    )


@lru_cache(maxsize=1)
def get_settings() -> FilenameSettings:
    """Get settings from environment variables.

    Raises:
        ConfigurationError: If an environment value is invalid
    """
    try:
        settings = FilenameSettings()
    except ValidationError as e:
        raise ConfigurationError(
            f"Failed to load neo-filenames configuration: {e}",
            details={"errors": e.errors(include_url=False)},
        ) from e
    logger.debug(f"Settings loaded: default_system={settings.default_system}")
    return settings


def reload_settings() -> FilenameSettings:
    """Drop the cached settings and read the environment again."""
    get_settings.cache_clear()
    return get_settings()
