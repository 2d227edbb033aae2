"""Matcher turning an optional system identifier into a filename validator.

Construction is where configuration problems surface: asking for a system
with no registered rule raises UnsupportedSystemError immediately. Checking a
filename never raises; rejections come back as a CheckResult carrying the
rule's fixed message.
"""

import logging
from typing import Any, Callable, Optional, Tuple

from ...config.constants import RuleMessages, SystemIdentifier
from ...config.settings import get_settings
from ...core.exceptions import UnsupportedSystemError
from ...core.value_objects import CheckResult, ValidationRule
from .registry import REGISTRY


logger = logging.getLogger(__name__)


class FilenameValidator:
    """Reusable, stateless filename validator bound to zero or one rule.

    A validator without a rule is the pass-through mode: every string,
    including the empty string, is accepted.
    """

    __slots__ = ("_system", "_rule")

    def __init__(
        self,
        system: Optional[SystemIdentifier] = None,
        rule: Optional[ValidationRule] = None
    ):
        self._system = system
        self._rule = rule

    @property
    def system(self) -> Optional[SystemIdentifier]:
        """System the validator was built for, None for pass-through."""
        return self._system

    @property
    def rule(self) -> Optional[ValidationRule]:
        """Bound rule, None for pass-through."""
        return self._rule

    @property
    def message(self) -> Optional[str]:
        """Static failure message of the bound rule."""
        return self._rule.error_message if self._rule else None

    def is_valid(self, candidate: str) -> bool:
        """Bare predicate, suitable for registering as a refinement step."""
        if not isinstance(candidate, str):
            return False
        if self._rule is None:
            return True
        return self._rule.validator(candidate)

    def check(self, candidate: str) -> CheckResult:
        """Check one filename.

        Args:
            candidate: Filename component to check

        Returns:
            Accepted result, or rejected result with the rule's message
        """
        if not isinstance(candidate, str):
            return CheckResult.reject(self.message or RuleMessages.NOT_A_STRING)
        if self._rule is None:
            return CheckResult.accept()
        error = self._rule.validate(candidate)
        if error:
            return CheckResult.reject(error)
        return CheckResult.accept()

    def as_refinement(self) -> Tuple[Callable[[str], bool], str]:
        """Predicate and static message pair for host validation pipelines."""
        return self.is_valid, self.message or ""

    def __call__(self, candidate: str) -> CheckResult:
        return self.check(candidate)

    def __repr__(self) -> str:
        system = self._system.value if self._system else None
        return f"FilenameValidator(system={system!r})"


def build_validator(system: Any = None) -> FilenameValidator:
    """Build a validator for a target system.

    Args:
        system: SystemIdentifier member or its string value. When omitted
            the returned validator accepts every string.

    Returns:
        FilenameValidator bound to the system's rule

    Raises:
        UnsupportedSystemError: If the system is unknown or has no rule
    """
    if system is None:
        return FilenameValidator()

    try:
        identifier = SystemIdentifier.parse(system)
    except UnsupportedSystemError:
        logger.warning(f"Unsupported system requested: {system!r}")
        raise

    rule = REGISTRY.get(identifier)
    if rule is None:
        logger.warning(f"No filename rule registered for system: {identifier.value}")
        raise UnsupportedSystemError(identifier)

    logger.debug(f"Built filename validator for {identifier.value} using rule {rule.name}")
    return FilenameValidator(identifier, rule)


def default_validator() -> FilenameValidator:
    """Build a validator for the system configured in the environment.

    Falls back to the pass-through validator when no default system is set.
    """
    return build_validator(get_settings().default_system)
