"""Suffix (extension) handling."""

from collections.abc import Iterable

from pathtext.application.services.composition import chop_sep, compose_file_path, join_strings
from pathtext.application.services.decomposition import (
    complete_suffix_start,
    entry_name,
    parent_folder,
)
from pathtext.domain.types import DOT


def suffix_size(file_name: str) -> int:
    """Return the size of the simple suffix.

    A leading dot (hidden file) does not start a suffix:
        "/folder/file.txt" -> 3
        ".hidden_file"     -> 0
    """
    name = entry_name(file_name)
    dot_index = name.rfind(DOT)

    if dot_index < 1:
        return 0
    return len(name) - dot_index - 1


def suffix(file_name: str) -> str:
    """Return the lower-cased simple suffix, or an empty string.

    "file.TXT" -> "txt", "file.ver.json" -> "json", ".hidden_file" -> ""
    """
    size = suffix_size(file_name)
    if size == 0:
        return ""
    return entry_name(file_name)[-size:].lower()


def complete_suffix_size(file_name: str) -> int:
    """Return the size of the complete suffix (at most two dot components).

    "archive.tar.gz" -> 6, ".hidden_file.txt" -> 3, ".hidden_file" -> 0
    """
    name = entry_name(file_name)
    start = complete_suffix_start(name)
    if start == -1:
        return 0
    return len(name) - start


def complete_suffix(file_name: str) -> str | None:
    """Return the lower-cased complete suffix.

    Args:
        file_name: File name or path

    Returns:
        The complete suffix ("tar.gz"), or None when the entry name has no
        non-empty dot-based suffix (".hidden_file", "file", "file.")
    """
    size = complete_suffix_size(file_name)
    if size == 0:
        return None
    return entry_name(file_name)[-size:].lower()


def set_suffix(file_name: str, suf: str) -> str:
    """Set or change the simple suffix of a file name.

    set_suffix("file", "zip")     -> "file.zip"
    set_suffix("file.txt", "zip") -> "file.zip"
    set_suffix(".hidden", "txt")  -> ".hidden.txt"
    """
    trimmed = chop_sep(file_name)
    size = suffix_size(trimmed)

    if size == 0:
        return join_strings(trimmed, suf, DOT)
    return join_strings(trimmed[:-size], suf, DOT)


def has_extension(file_name: str, ext: str | Iterable[str]) -> bool:
    """True if the file name has the given extension (or any from a list).

    Comparison is case-insensitive and the leading dot of ext is optional.
    Multi-part extensions match verbatim, an empty ext matches names with no suffix:
        has_extension("file.txt", ".TXT")                 -> True
        has_extension("file.ver.json", "ver.json")        -> True
        has_extension(".file", "")                        -> True
        has_extension("file.cpp", ["txt", "h", "cpp"])    -> True

    Matching runs on the entry name, so one trailing separator is ignored:
        has_extension("dir.txt/", "txt")                  -> True
    """
    if not isinstance(ext, str):
        return any(has_extension(file_name, candidate) for candidate in ext)

    wanted = ext[1:] if ext.startswith(DOT) else ext
    if not wanted:
        return suffix_size(file_name) == 0

    name = entry_name(file_name).casefold()
    wanted = wanted.casefold()
    dot_index = len(name) - len(wanted) - 1

    # dot_index 0 is the hidden-file marker, not an extension boundary
    return dot_index >= 1 and name[dot_index] == DOT and name.endswith(wanted)


def rename_file(old_name: str, new_name: str) -> str:
    """Replace the stem of old_name, keeping its folder and complete suffix.

    rename_file("file.docx", "new_name")                       -> "new_name.docx"
    rename_file("/folder/archive.tar.gz", "new_name")          -> "/folder/new_name.tar.gz"
    rename_file("folder/archive.tar.gz", "new_name.tar.gz")    -> "folder/new_name.tar.gz"
    """
    name = entry_name(old_name)
    size = complete_suffix_size(old_name)
    ext = name[len(name) - size:] if size else ""

    new_base = new_name
    if ext and has_extension(new_name, ext):
        new_base = new_name[: -(len(ext) + 1)]

    return compose_file_path(parent_folder(old_name), new_base, ext)
