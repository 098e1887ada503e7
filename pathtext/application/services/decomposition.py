"""Decomposition of path text into entry name, base name and parent folder."""

from pathtext.application.services.classification import (
    classify_root,
    ends_with_sep,
    has_windows_root,
    is_root,
    is_separator,
)
from pathtext.domain.enums import RootKind
from pathtext.domain.types import BACKSLASH, DOT, DRIVE_LABEL_PREFIX, SEP, UNIX_ROOT_LABEL


def _last_sep_index(path: str, end: int | None = None) -> int:
    """Index of the last '/' or '\\' in path[:end], or -1."""
    if end is None:
        end = len(path)
    return max(path.rfind(SEP, 0, end), path.rfind(BACKSLASH, 0, end))


def entry_name(path: str) -> str:
    """Return the name of the file system entry (file or folder).

    A trailing separator does not matter:
        "/folder/entry_name/" -> "entry_name"

    Roots get a readable label: "Root" for "/", "Drive C" for "c:/".
    """
    if is_root(path):
        info = classify_root(path)
        if info.kind is RootKind.WINDOWS_DRIVE:
            return f"{DRIVE_LABEL_PREFIX} {info.letter}"
        return UNIX_ROOT_LABEL

    trimmed = path[:-1] if ends_with_sep(path) else path
    return trimmed[_last_sep_index(trimmed) + 1:]


def complete_suffix_start(name: str) -> int:
    """Index where the complete suffix of an entry name starts, or -1.

    Considers at most the last two dot-delimited components. A dot at index 0
    marks a hidden entry and never starts a suffix:
        "archive.tar.gz"   -> 8  ("tar.gz")
        ".hidden_file.txt" -> 13 ("txt")
        ".hidden_file"     -> -1
    """
    last_dot = name.rfind(DOT)
    if last_dot < 1:
        return -1

    prev_dot = name.rfind(DOT, 0, last_dot)
    if prev_dot >= 1:
        return prev_dot + 1
    return last_dot + 1


def base_name(path: str) -> str:
    """Return the entry name without its complete suffix.

    "/folder/archive.tar.gz" -> "archive", ".file.txt" -> ".file"
    """
    name = entry_name(path)
    start = complete_suffix_start(name)
    if start == -1 or start == len(name):
        return name
    return name[: start - 1]


def parent_folder(path: str) -> str:
    """Return the path to the parent folder.

    A trailing separator does not matter:
        "/folder/file_or_folder2/" -> "/folder"
        "C:/folder"                -> "C:/"
        "c:\\folder"               -> "C:/"
        "file"                     -> ""
    """
    index = _last_sep_index(path, len(path) - 1)

    if index == -1:
        return path if is_root(path) else ""

    if index == 0 and path[0] == SEP:
        return SEP

    if index == 2 and is_root(path[:index]):
        return classify_root(path).text

    return path[:index]


def relative_path(root_folder: str, full_path: str) -> str | None:
    """Return full_path relative to root_folder.

    relative_path("/rootFolder", "/rootFolder/folder2/file") -> "folder2/file"

    Returns:
        The relative path, full_path itself when root_folder is empty, or None
        when full_path is not inside root_folder (including full_path equal to
        root_folder)
    """
    if not root_folder:
        return full_path

    if not full_path.startswith(root_folder):
        return None

    cut = len(root_folder) - 1 if ends_with_sep(root_folder) else len(root_folder)

    # "/root" must not match "/root2/x"
    if cut < len(full_path) and is_separator(full_path[cut]):
        return full_path[cut + 1:] or None
    return None


def shorten_path(path: str) -> str:
    """Replace intermediate folders with "..".

    "/home"                    -> "/home"
    "/home/fooFolder/file.txt" -> "/../../file.txt"
    "C:/fooFolder/file.txt"    -> "C:/../file.txt"
    "fooFolder/barFolder/"     -> "../barFolder"
    """
    if is_root(path) or is_root(parent_folder(path)):
        return path

    parts = [part for part in path.replace(BACKSLASH, SEP).split(SEP) if part]
    if not parts:
        return path

    first = 1 if has_windows_root(parts[0]) else 0
    collapsed = max(len(parts) - 1 - first, 0)

    return classify_root(path).text + "../" * collapsed + parts[-1]
