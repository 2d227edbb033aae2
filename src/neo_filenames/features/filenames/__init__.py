"""Filename rules feature: predicates, registry, matcher and pydantic types."""

from .predicates import (
    is_windows_reserved,
    has_windows_illegal_characters,
    has_linux_illegal_characters,
    has_macos_illegal_characters,
    has_illegal_trailing_character,
    is_valid_windows_filename,
    is_valid_linux_filename,
    is_valid_macos_filename,
    is_valid_universal_filename,
)

from .registry import (
    REGISTRY,
    get_rule,
    is_supported,
    supported_systems,
)

from .matcher import (
    FilenameValidator,
    build_validator,
    default_validator,
)

from .schema import (
    filename,
    zfn,
)

__all__ = [
    # Predicates
    "is_windows_reserved",
    "has_windows_illegal_characters",
    "has_linux_illegal_characters",
    "has_macos_illegal_characters",
    "has_illegal_trailing_character",
    "is_valid_windows_filename",
    "is_valid_linux_filename",
    "is_valid_macos_filename",
    "is_valid_universal_filename",
    
    # Registry
    "REGISTRY",
    "get_rule",
    "is_supported",
    "supported_systems",
    
    # Matcher
    "FilenameValidator",
    "build_validator",
    "default_validator",
    
    # Pydantic types
    "filename",
    "zfn",
]
