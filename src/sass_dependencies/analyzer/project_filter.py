"""Filter resolved dependencies down to the project's own stylesheets."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = logging.getLogger(__name__)


def is_inside_project(path: str, project_root: Path | str) -> bool:
    """Check whether ``path`` lies under ``project_root``.

    The path is made relative to the root and rejected when the result
    starts with ``..``. This is a string test: symlinks are not followed.

    >>> is_inside_project("/project/assets/css/_a.scss", "/project/assets/css")
    True
    >>> is_inside_project("/usr/lib/stylesheets/grid.scss", "/project/assets/css")
    False
    """
    try:
        relative = os.path.relpath(os.path.abspath(path), os.path.abspath(project_root))
    except ValueError:
        # Different drives on Windows.
        return False
    return not relative.startswith("..")


def filter_project_dependencies(
    dependencies: Iterable[str],
    project_root: Path | str,
) -> list[str]:
    """Keep the dependencies located inside the project root.

    Args:
        dependencies: Dependency paths, in resolver order
        project_root: Directory boundary of the project

    Returns:
        The original path strings of the kept dependencies, in input order

    """
    kept = []
    for dependency in dependencies:
        if is_inside_project(dependency, project_root):
            kept.append(dependency)
        else:
            logger.debug(f"Ignoring dependency outside {project_root}: {dependency}")
    return kept
