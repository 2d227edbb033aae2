"""Core module for neo-filenames.

Clean Core - Only exports exceptions and value objects.
Rules and validators are accessed through features/.
"""

from .exceptions import *
from .value_objects import *

__all__ = [
    # Exceptions
    "NeoFilenamesError",
    "create_error_response",
    "ConfigurationError",
    "UnsupportedSystemError",
    
    # Value Objects
    "ValidationRule",
    "CheckResult",
]
