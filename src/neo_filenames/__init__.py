"""Neo-Filenames - filename validation rules for filesystem and OS targets.

Checks single filename components against the naming restrictions of a
target system (universal, macOS, Linux, the Windows family) and exposes each
restriction as a reusable validator or a pydantic string type.
"""

from .__version__ import __version__

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .config import (
    SystemIdentifier,
    WINDOWS_FAMILY,
    FilenameSettings,
    get_settings,
    reload_settings,
)

from .core.exceptions import (
    NeoFilenamesError,
    ConfigurationError,
    UnsupportedSystemError,
    create_error_response,
)

from .core.value_objects import (
    ValidationRule,
    CheckResult,
)

from .features.filenames import (
    FilenameValidator,
    build_validator,
    default_validator,
    get_rule,
    is_supported,
    supported_systems,
    filename,
    zfn,
)

__all__ = [
    "__version__",
    "setup_logging",
    
    # Configuration
    "SystemIdentifier",
    "WINDOWS_FAMILY",
    "FilenameSettings",
    "get_settings",
    "reload_settings",
    
    # Exceptions
    "NeoFilenamesError",
    "ConfigurationError",
    "UnsupportedSystemError",
    "create_error_response",
    
    # Value Objects
    "ValidationRule",
    "CheckResult",
    
    # Filename validation
    "FilenameValidator",
    "build_validator",
    "default_validator",
    "get_rule",
    "is_supported",
    "supported_systems",
    "filename",
    "zfn",
]
