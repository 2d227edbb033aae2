"""Exceptions module for neo-filenames."""

from .base import (
    NeoFilenamesError,
    create_error_response,
)

from .domain import (
    # Configuration Errors
    ConfigurationError,
    UnsupportedSystemError,
)

__all__ = [
    "NeoFilenamesError",
    "create_error_response",
    "ConfigurationError",
    "UnsupportedSystemError",
]
