"""Describe a path."""

import structlog

from pathtext.application.dto.description import PathDescription
from pathtext.application.services.classification import classify_root, is_root
from pathtext.application.services.decomposition import (
    base_name,
    entry_name,
    parent_folder,
    shorten_path,
)
from pathtext.application.services.suffixes import complete_suffix, suffix

logger = structlog.get_logger()


def run(path: str) -> PathDescription:
    """Build a PathDescription for one path."""
    root_info = classify_root(path)

    description = PathDescription(
        path=path,
        root=root_info.text,
        root_kind=root_info.kind,
        is_absolute=root_info.is_absolute,
        is_root=is_root(path),
        entry_name=entry_name(path),
        base_name=base_name(path),
        parent_folder=parent_folder(path),
        suffix=suffix(path),
        complete_suffix=complete_suffix(path),
        shortened=shorten_path(path),
    )

    logger.debug("path_described", path=path, root_kind=root_info.kind.value)
    return description
