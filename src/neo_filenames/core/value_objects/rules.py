"""Value objects for filename rules and check outcomes.

A rule is a pure predicate over a filename plus the fixed message reported
whenever the predicate rejects. Rules are built once at import time and are
never mutated afterwards.
"""

from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class ValidationRule:
    """Represents a single filename rule.
    
    Attributes:
        name: Rule identifier
        validator: Function that returns True if the filename is acceptable
        error_message: Message reported for every rejection under this rule
    """
    name: str
    validator: Callable[[str], bool]
    error_message: str
    
    def validate(self, value: str) -> Optional[str]:
        """Validate value against this rule.
        
        Args:
            value: Filename to validate
            
        Returns:
            Error message if validation fails, None if valid
        """
        if not self.validator(value):
            return self.error_message
        return None
    
    def __repr__(self) -> str:
        """Detailed representation."""
        return f"ValidationRule(name={self.name!r})"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of checking one filename."""
    accepted: bool
    message: Optional[str] = None
    
    @classmethod
    def accept(cls) -> 'CheckResult':
        """Successful check."""
        return cls(accepted=True)
    
    @classmethod
    def reject(cls, message: str) -> 'CheckResult':
        """Failed check carrying the rule's message."""
        return cls(accepted=False, message=message)
    
    def __bool__(self) -> bool:
        return self.accepted
