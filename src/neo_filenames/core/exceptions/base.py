"""Base exceptions for neo-filenames.

This module defines the base exception hierarchy for the neo-filenames library.
All exceptions inherit from NeoFilenamesError and carry an error code and
structured details for callers that need to report them.
"""

from typing import Any, Dict, Optional


class NeoFilenamesError(Exception):
    """Base exception for all neo-filenames errors.
    
    All exceptions in the neo-filenames library inherit from this base class
    and include structured error information for better debugging.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: NeoFilenamesError) -> Dict[str, Any]:
    """Create standardized error response from exception.
    
    Args:
        exception: The neo-filenames exception
        
    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
