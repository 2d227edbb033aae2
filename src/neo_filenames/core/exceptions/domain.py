"""Domain-specific exceptions for neo-filenames.

Only configuration problems are raised as exceptions. A filename that fails
a rule is an ordinary check outcome and is never raised.
"""

from typing import Any

from .base import NeoFilenamesError


# Configuration Errors
class ConfigurationError(NeoFilenamesError):
    """Raised when configuration is invalid or missing."""
    pass


class UnsupportedSystemError(ConfigurationError):
    """Raised when a validator is requested for a system with no filename rule."""
    
    def __init__(self, system: Any):
        # Enum members render as their value, not ClassName.MEMBER
        name = getattr(system, "value", system)
        super().__init__(
            f"Unsupported system type: {name}",
            details={"system": name},
        )
        self.system = system
