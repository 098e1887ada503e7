"""Public API surface."""

from pathtext.application.services.classification import (
    classify_root,
    ends_with_sep,
    has_windows_root,
    is_absolute,
    is_relative,
    is_root,
    is_separator,
    root,
    starts_with_sep,
)
from pathtext.application.services.composition import (
    append_sep,
    chop_sep,
    compose_file_path,
    join_path,
    join_strings,
)
from pathtext.application.services.decomposition import (
    base_name,
    entry_name,
    parent_folder,
    relative_path,
    shorten_path,
)
from pathtext.application.services.suffixes import (
    complete_suffix,
    complete_suffix_size,
    has_extension,
    rename_file,
    set_suffix,
    suffix,
    suffix_size,
)
from pathtext.domain.entities import RootInfo
from pathtext.domain.enums import RootKind
from pathtext.domain.errors import InvalidSeparatorError, PathTextError

__all__ = [
    "InvalidSeparatorError",
    "PathTextError",
    "RootInfo",
    "RootKind",
    "append_sep",
    "base_name",
    "chop_sep",
    "classify_root",
    "complete_suffix",
    "complete_suffix_size",
    "compose_file_path",
    "ends_with_sep",
    "entry_name",
    "has_extension",
    "has_windows_root",
    "is_absolute",
    "is_relative",
    "is_root",
    "is_separator",
    "join_path",
    "join_strings",
    "parent_folder",
    "relative_path",
    "rename_file",
    "root",
    "set_suffix",
    "shorten_path",
    "starts_with_sep",
    "suffix",
    "suffix_size",
]
