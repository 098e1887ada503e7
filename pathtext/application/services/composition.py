"""Separator-safe joining of path fragments."""

from pathtext.application.services.classification import ends_with_sep, starts_with_sep
from pathtext.domain.errors import InvalidSeparatorError
from pathtext.domain.types import DOT, SEP


def join_strings(first: str, second: str, sep: str) -> str:
    """Join two strings with a separator, never duplicating it.

    Args:
        first: Left fragment
        second: Right fragment
        sep: Single separator character

    Returns:
        Joined string:
            join_strings("string1", "string2", "/")   -> "string1/string2"
            join_strings("string1/", "/string2", "/") -> "string1/string2"
    """
    if len(sep) != 1:
        raise InvalidSeparatorError(f"Separator must be a single character, got {sep!r}")

    first_ends = first.endswith(sep)
    second_starts = second.startswith(sep)

    if first_ends and second_starts:
        return first[:-1] + second
    if first_ends or second_starts:
        return first + second
    return f"{first}{sep}{second}"


def join_path(absolute_path: str, add_path: str) -> str:
    """Join two path strings with '/'.

    A separator of either style already present at the seam is kept as is,
    so the caller's separator style survives:
        join_path("/absolutePath/", "/addPath")       -> "/absolutePath/addPath"
        join_path("C:\\folder\\", "\\folder2\\file")  -> "C:\\folder\\folder2\\file"
    """
    sep_count = int(ends_with_sep(absolute_path)) + int(starts_with_sep(add_path))

    if sep_count == 2:
        return absolute_path[:-1] + add_path
    if sep_count == 1:
        return absolute_path + add_path
    return f"{absolute_path}{SEP}{add_path}"


def compose_file_path(parent_folder: str, base_name: str, ext: str) -> str:
    """Build parent_folder/base_name.ext.

    An empty ext yields no trailing dot, an empty parent_folder yields the bare file name.
    """
    file_name = join_strings(base_name, ext, DOT) if ext else base_name
    if not parent_folder:
        return file_name
    return join_path(parent_folder, file_name)


def append_sep(path: str) -> str:
    """Append '/' unless the path already ends with a separator."""
    if ends_with_sep(path):
        return path
    return path + SEP


def chop_sep(path: str) -> str:
    """Remove exactly one trailing separator, if present."""
    if ends_with_sep(path):
        return path[:-1]
    return path
