"""Constants and enums for neo-filenames.

This module defines the target system identifiers and the character classes,
reserved names and messages that the filename rules are assembled from.
"""

from enum import Enum
from typing import Any, Final, FrozenSet

from ..core.exceptions import UnsupportedSystemError


class SystemIdentifier(str, Enum):
    """Target filesystems and OS families a filename can be checked against."""

    UNIVERSAL = "universal"  # Common subset accepted everywhere

    # macOS
    MACOS = "macos"
    APFS = "apfs"
    HFS_PLUS = "hfs+"

    # Linux
    LINUX = "linux"
    EXT2 = "ext2"
    EXT3 = "ext3"
    EXT4 = "ext4"
    BTRFS = "btrfs"
    XFS = "xfs"
    ZFS = "zfs"
    JFS = "jfs"
    F2FS = "f2fs"

    # Windows
    WINDOWS = "windows"
    NTFS = "ntfs"
    FAT32 = "fat32"
    EXFAT = "exfat"
    REFS = "refs"

    # Cross-platform / optical / legacy
    UDF = "udf"
    ISO9660 = "iso9660"
    FAT16 = "fat16"
    FAT12 = "fat12"

    # Mobile
    IOS = "ios"
    ANDROID = "android"

    @classmethod
    def parse(cls, value: Any) -> "SystemIdentifier":
        """Resolve a member or its exact string value.

        Args:
            value: SystemIdentifier member or its string value

        Returns:
            The matching SystemIdentifier

        Raises:
            UnsupportedSystemError: If value is outside the closed set
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise UnsupportedSystemError(value)


# Every identifier in this family shares one predicate and one message
WINDOWS_FAMILY: Final[FrozenSet[SystemIdentifier]] = frozenset({
    SystemIdentifier.WINDOWS,
    SystemIdentifier.NTFS,
    SystemIdentifier.FAT32,
    SystemIdentifier.EXFAT,
    SystemIdentifier.REFS,
    SystemIdentifier.FAT16,
    SystemIdentifier.FAT12,
})


class CharacterClasses:
    """Characters each target refuses inside a filename."""

    WINDOWS_ILLEGAL: Final[FrozenSet[str]] = frozenset(
        '<>:"/\\|?*' + "".join(chr(code) for code in range(0x20))
    )
    LINUX_ILLEGAL: Final[FrozenSet[str]] = frozenset("\0/")
    MACOS_ILLEGAL: Final[FrozenSet[str]] = frozenset(":/")
    TRAILING: Final[FrozenSet[str]] = frozenset(". ")


class ReservedNames:
    """Device names Windows refuses as a filename stem, whatever the extension."""

    WINDOWS: Final[FrozenSet[str]] = frozenset(
        ["CON", "PRN", "AUX", "NUL"]
        + [f"COM{n}" for n in range(1, 10)]
        + [f"LPT{n}" for n in range(1, 10)]
    )


class RuleMessages:
    """Fixed rejection messages, one per rule."""

    UNIVERSAL: Final[str] = (
        "Invalid universal filename: contains illegal characters, "
        "is a reserved name, or ends with '.' or ' '."
    )
    MACOS: Final[str] = "Invalid macOS filename: cannot contain '/' or ':' characters."
    LINUX: Final[str] = "Invalid Linux filename: cannot contain null or '/' characters."
    WINDOWS: Final[str] = (
        "Invalid Windows filename: contains illegal characters "
        "(< > : \" / \\ | ? *), is a reserved name, or ends with '.' or ' '."
    )
    NOT_A_STRING: Final[str] = "Filename must be a string"


class EnvironmentVariables:
    """Environment variable names read by neo-filenames."""

    DEFAULT_SYSTEM: Final[str] = "NEO_FILENAMES_DEFAULT_SYSTEM"
    LOG_LEVEL: Final[str] = "LOG_LEVEL"
    LOG_VERBOSITY: Final[str] = "LOG_VERBOSITY"
    LOG_FORMAT: Final[str] = "LOG_FORMAT"
