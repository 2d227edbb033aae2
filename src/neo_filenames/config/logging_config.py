"""Centralized logging configuration for neo-filenames.

Provides consistent, environment-controlled logging for the library. Only the
``neo_filenames`` logger hierarchy is configured; the host application's root
logger and handlers are left alone.
"""

import logging
import os
import sys
from enum import Enum

from .constants import EnvironmentVariables


PACKAGE_LOGGER = "neo_filenames"
HANDLER_MARKER = "_neo_filenames_handler"


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level, falling back to WARNING."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


class LoggingConfig:
    """Logging configuration manager for the neo_filenames logger tree."""

    @classmethod
    def configure(cls) -> None:
        """Configure logging based on environment variables.

        ``LOG_LEVEL`` wins when it names a valid level; otherwise the level is
        derived from ``LOG_VERBOSITY``.
        """
        log_level = os.getenv(EnvironmentVariables.LOG_LEVEL, "").upper()
        log_verbosity = os.getenv(EnvironmentVariables.LOG_VERBOSITY, LogVerbosity.NORMAL.value)
        log_format = os.getenv(EnvironmentVariables.LOG_FORMAT, LogFormat.SIMPLE.value).lower()

        if log_level in LogLevel.__members__:
            effective_log_level = log_level
        else:
            effective_log_level = get_log_level_from_verbosity(log_verbosity)

        try:
            format_string = FORMAT_STRINGS[LogFormat(log_format)]
        except ValueError:
            format_string = FORMAT_STRINGS[LogFormat.SIMPLE]

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        # Replace only the handler installed by an earlier configure() call
        for handler in list(package_logger.handlers):
            if getattr(handler, HANDLER_MARKER, False):
                package_logger.removeHandler(handler)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(effective_log_level)
        handler.setFormatter(logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        setattr(handler, HANDLER_MARKER, True)

        package_logger.addHandler(handler)
        package_logger.setLevel(effective_log_level)
        package_logger.propagate = False

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={effective_log_level}, format={log_format}")

    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module.

        Args:
            module_name: Name of the module
            level: Log level to set
        """
        logger = logging.getLogger(module_name)
        logger.setLevel(getattr(logging, level.upper()))

    @classmethod
    def silence_module(cls, module_name: str) -> None:
        """Silence all logging from a module."""
        cls.set_module_level(module_name, LogLevel.CRITICAL.value)


def setup_logging() -> None:
    """Setup logging configuration from environment variables.

    Called once when the package is imported. Call again after changing the
    logging environment variables to apply them.
    """
    LoggingConfig.configure()

