"""Configuration module for neo-filenames.

Constants, environment settings and logging configuration.
"""

from .constants import (
    SystemIdentifier,
    WINDOWS_FAMILY,
    CharacterClasses,
    ReservedNames,
    RuleMessages,
    EnvironmentVariables,
)

from .logging_config import (
    setup_logging,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

from .settings import (
    FilenameSettings,
    get_settings,
    reload_settings,
)

__all__ = [
    # Constants
    "SystemIdentifier",
    "WINDOWS_FAMILY",
    "CharacterClasses",
    "ReservedNames",
    "RuleMessages",
    "EnvironmentVariables",
    
    # Logging
    "setup_logging",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
    
    # Settings
    "FilenameSettings",
    "get_settings",
    "reload_settings",
]
