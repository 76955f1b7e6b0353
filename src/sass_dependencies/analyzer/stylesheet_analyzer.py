"""Dependency analysis of a single stylesheet.

Ties the Sass engine and the project filter together: the stylesheet's
imports are resolved, then only those inside the project root are kept.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sass_dependencies.analyzer.project_filter import filter_project_dependencies
from sass_dependencies.resolver.engine import SassEngine

if TYPE_CHECKING:
    from sass_dependencies.config.parser import SassDepsConfig

logger = logging.getLogger(__name__)


def find_project_dependencies(source: str, config: SassDepsConfig) -> list[str]:
    """Find the project stylesheets a source stylesheet depends on.

    Args:
        source: Stylesheet path as given on the command line
        config: Project root and load paths

    Returns:
        Absolute paths of the imported files inside the project root, in
        the order the engine resolved them

    Raises:
        SassAnalysisError: If the stylesheet or one of its imports cannot
            be resolved

    """
    engine = SassEngine.for_file(source, config)
    resolved = [dependency.filename for dependency in engine.dependencies()]
    kept = filter_project_dependencies(resolved, config.project_root)
    logger.info(
        f"{source}: {len(resolved)} dependencies resolved, "
        f"{len(kept)} inside {config.project_root}",
    )
    return kept
