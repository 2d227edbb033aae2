"""Process-wide registry of filename rules.

Maps each supported SystemIdentifier to its ValidationRule. The table is
built in a single pass at import time and exposed read-only; every Windows
family identifier points at the same rule object.

Identifiers without an entry (apfs, ext4, ios and the rest) are reported as
absent. Lookups never fall back to another system's rule.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from ...config.constants import RuleMessages, SystemIdentifier, WINDOWS_FAMILY
from ...core.exceptions import UnsupportedSystemError
from ...core.value_objects import ValidationRule
from .predicates import (
    is_valid_linux_filename,
    is_valid_macos_filename,
    is_valid_universal_filename,
    is_valid_windows_filename,
)


UNIVERSAL_RULE = ValidationRule(
    name=SystemIdentifier.UNIVERSAL.value,
    validator=is_valid_universal_filename,
    error_message=RuleMessages.UNIVERSAL,
)

MACOS_RULE = ValidationRule(
    name=SystemIdentifier.MACOS.value,
    validator=is_valid_macos_filename,
    error_message=RuleMessages.MACOS,
)

LINUX_RULE = ValidationRule(
    name=SystemIdentifier.LINUX.value,
    validator=is_valid_linux_filename,
    error_message=RuleMessages.LINUX,
)

WINDOWS_RULE = ValidationRule(
    name=SystemIdentifier.WINDOWS.value,
    validator=is_valid_windows_filename,
    error_message=RuleMessages.WINDOWS,
)


def _build_registry() -> Mapping[SystemIdentifier, ValidationRule]:
    rules = {
        SystemIdentifier.UNIVERSAL: UNIVERSAL_RULE,
        SystemIdentifier.MACOS: MACOS_RULE,
        SystemIdentifier.LINUX: LINUX_RULE,
    }
    # Enum order keeps supported_systems() stable
    rules.update(
        (system, WINDOWS_RULE)
        for system in SystemIdentifier
        if system in WINDOWS_FAMILY
    )
    return MappingProxyType(rules)


REGISTRY: Mapping[SystemIdentifier, ValidationRule] = _build_registry()


def get_rule(system: Any) -> Optional[ValidationRule]:
    """Look up the rule registered for a system.

    Args:
        system: SystemIdentifier member or its string value

    Returns:
        The registered rule, or None when the system is not in the closed set
        or has no rule of its own
    """
    try:
        identifier = SystemIdentifier.parse(system)
    except UnsupportedSystemError:
        return None
    return REGISTRY.get(identifier)


def is_supported(system: Any) -> bool:
    """Whether a validator can be built for the system."""
    return get_rule(system) is not None


def supported_systems() -> Tuple[SystemIdentifier, ...]:
    """Systems that have a registered rule, in registry order."""
    return tuple(REGISTRY)
