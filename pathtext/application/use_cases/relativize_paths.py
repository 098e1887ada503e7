"""Map paths relative to a root folder."""

from collections.abc import Iterable

import structlog

from pathtext.application.dto.description import RelativizeResult
from pathtext.application.services.decomposition import relative_path

logger = structlog.get_logger()


def run(root_folder: str, paths: Iterable[str]) -> RelativizeResult:
    """Relativize paths against root_folder.

    Paths outside root_folder are collected in ``outside`` instead of failing the batch.
    """
    result = RelativizeResult(root_folder=root_folder)

    for path in paths:
        relative = relative_path(root_folder, path)
        if relative is None:
            logger.warning("path_outside_root", root_folder=root_folder, path=path)
            result.outside.append(path)
            continue
        result.relative[path] = relative

    logger.info(
        "paths_relativized",
        root_folder=root_folder,
        relative_count=len(result.relative),
        outside_count=len(result.outside),
    )
    return result
