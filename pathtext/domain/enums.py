"""Domain enums for root classification."""

from enum import Enum


class RootKind(str, Enum):
    """Root kind enum."""

    NONE = "none"
    UNIX = "unix"  # "/"
    WINDOWS_DRIVE = "windows_drive"  # "C:/"
