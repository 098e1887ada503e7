"""Separator, root and absoluteness predicates."""

import string

from pathtext.domain.entities import RootInfo
from pathtext.domain.enums import RootKind
from pathtext.domain.types import DRIVE_MARK, SEP, SEPARATORS


def is_separator(char: str) -> bool:
    """True for '/' or '\\'."""
    return char in SEPARATORS


def starts_with_sep(path: str) -> bool:
    """True if the path starts with '/' or '\\'."""
    return bool(path) and is_separator(path[0])


def ends_with_sep(path: str) -> bool:
    """True if the path ends with '/' or '\\'."""
    return bool(path) and is_separator(path[-1])


def has_windows_root(path: str) -> bool:
    """True if the path starts with a drive root like "X:".

    Only single-letter drive identifiers are recognized.
    """
    return len(path) > 1 and path[1] == DRIVE_MARK and path[0] in string.ascii_letters


def is_root(path: str) -> bool:
    """True for "/" or a 2-3 character drive root ("X:", "X:/", "X:\\")."""
    length = len(path)
    if length == 1:
        return path == SEP
    if length in (2, 3):
        return has_windows_root(path)
    return False


def is_absolute(path: str) -> bool:
    """True if the path starts with '/' or "X:"."""
    return path.startswith(SEP) or has_windows_root(path)


def is_relative(path: str) -> bool:
    """True if the path is not absolute."""
    return not is_absolute(path)


def classify_root(path: str) -> RootInfo:
    """Classify the root of a path.

    Args:
        path: Path text, any separator style

    Returns:
        RootInfo with the canonical root text ("/" or "C:/"), or an empty
        RootInfo of kind NONE for relative paths
    """
    if path.startswith(SEP):
        return RootInfo(kind=RootKind.UNIX, text=SEP)

    if has_windows_root(path):
        letter = path[0].upper()
        return RootInfo(kind=RootKind.WINDOWS_DRIVE, text=f"{letter}{DRIVE_MARK}{SEP}", letter=letter)

    return RootInfo(kind=RootKind.NONE)


def root(path: str) -> str:
    """Return the root of an absolute path ("/" or "C:/"), or an empty string."""
    return classify_root(path).text
