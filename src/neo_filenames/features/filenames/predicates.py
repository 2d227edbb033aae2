"""Filename predicates for each target system.

Every predicate is a pure ``str -> bool`` that returns True when the name is
acceptable. Composite predicates are plain ANDs of the single-concern checks
below rather than one regular expression, so the reserved-name stem handling
stays readable.
"""

from typing import FrozenSet

from ...config.constants import CharacterClasses, ReservedNames


def _contains_any(filename: str, characters: FrozenSet[str]) -> bool:
    return any(char in characters for char in filename)


def is_windows_reserved(filename: str) -> bool:
    """True when the stem (text before the first '.') is a Windows device name.

    The comparison is case-insensitive, so ``nul.txt`` and ``Com3.log`` are
    reserved while ``COM0`` and ``CONSOLE`` are not.
    """
    stem = filename.split(".", 1)[0]
    return stem.upper() in ReservedNames.WINDOWS


def has_windows_illegal_characters(filename: str) -> bool:
    """True when the name contains < > : " / \\ | ? * or a 0x00-0x1F control character."""
    return _contains_any(filename, CharacterClasses.WINDOWS_ILLEGAL)


def has_linux_illegal_characters(filename: str) -> bool:
    """True when the name contains NUL or '/'."""
    return _contains_any(filename, CharacterClasses.LINUX_ILLEGAL)


def has_macos_illegal_characters(filename: str) -> bool:
    """True when the name contains ':' or '/'."""
    return _contains_any(filename, CharacterClasses.MACOS_ILLEGAL)


def has_illegal_trailing_character(filename: str) -> bool:
    """True when the name ends with '.' or a space."""
    return filename[-1:] in CharacterClasses.TRAILING


def is_valid_windows_filename(filename: str) -> bool:
    """Shared predicate of the whole Windows family."""
    return (
        len(filename) > 0
        and not is_windows_reserved(filename)
        and not has_windows_illegal_characters(filename)
        and not has_illegal_trailing_character(filename)
    )


def is_valid_linux_filename(filename: str) -> bool:
    return len(filename) > 0 and not has_linux_illegal_characters(filename)


def is_valid_macos_filename(filename: str) -> bool:
    return len(filename) > 0 and not has_macos_illegal_characters(filename)


def is_valid_universal_filename(filename: str) -> bool:
    """Accept only names every supported target accepts."""
    return (
        is_valid_windows_filename(filename)
        and not has_linux_illegal_characters(filename)
        and not has_macos_illegal_characters(filename)
    )
