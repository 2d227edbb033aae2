"""Value objects module for neo-filenames."""

from .rules import (
    ValidationRule,
    CheckResult,
)

__all__ = [
    "ValidationRule",
    "CheckResult",
]
