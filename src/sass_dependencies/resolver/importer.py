"""Import resolution for the Sass compiler.

libsass hands every ``@import`` it meets to the importers registered on the
compilation. ``SassImporter`` resolves the import target to a file the way
Sass looks files up, records the edge in the import graph, and returns the
file to libsass so that its own imports are followed in turn.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import TYPE_CHECKING

from sass_dependencies.error_handling import (
    DependencyResolutionError,
    FileAccessError,
    SassAnalysisError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sass_dependencies.graph.import_graph import ImportGraph

logger = logging.getLogger(__name__)

SASS_EXTENSIONS = (".scss", ".sass", ".css")

# Imports libsass keeps as plain CSS ``@import`` rules.
PLAIN_CSS_IMPORT = re.compile(r"^(https?:)?//|\.css$|^url\(", re.IGNORECASE)


def is_plain_css_import(target: str) -> bool:
    """Check whether an import target stays a CSS ``@import`` rule.

    >>> is_plain_css_import("http://fonts.example.com/font.css")
    True
    >>> is_plain_css_import("partials/buttons")
    False
    """
    return bool(PLAIN_CSS_IMPORT.search(target))


def candidate_paths(base_dir: Path, target: str) -> list[Path]:
    """List the files an import target may refer to inside ``base_dir``.

    Partials (``_name``) come before regular files for every extension,
    followed by directory index files.

    Args:
        base_dir: Directory the target is looked up in
        target: Import target as written in the stylesheet

    Returns:
        Candidate paths in lookup order

    """
    path = base_dir / target
    directory, name = path.parent, path.name

    if path.suffix in SASS_EXTENSIONS:
        return [directory / f"_{name}", path]

    candidates = []
    for extension in SASS_EXTENSIONS:
        candidates.append(directory / f"_{name}{extension}")
        candidates.append(directory / f"{name}{extension}")
    for extension in SASS_EXTENSIONS:
        candidates.append(path / f"_index{extension}")
        candidates.append(path / f"index{extension}")
    return candidates


class SassImporter:
    """libsass importer callback that records resolved imports.

    Attributes:
        graph: Import graph the resolved files are added to
        source: Absolute path of the compiled stylesheet
        load_paths: Directories searched after the importing file's own
        error: Error raised by the last failed lookup, if any

    """

    def __init__(
        self,
        graph: ImportGraph,
        source: str,
        load_paths: Sequence[Path] = (),
    ) -> None:
        """Initialize the importer.

        Args:
            graph: Import graph to record edges in
            source: Absolute path of the compiled stylesheet
            load_paths: Extra directories to search, in order

        """
        self.graph = graph
        self.source = source
        self.load_paths = [Path(p) for p in load_paths]
        self.error: SassAnalysisError | None = None

    def __call__(self, path: str, prev: str) -> tuple[tuple[str, str], ...] | None:
        """Resolve ``@import path`` found in the stylesheet ``prev``.

        Returns ``None`` for plain CSS imports so libsass keeps them as they
        are. Failures are stored on ``self.error`` as typed errors before being
        raised, since libsass reports importer exceptions as plain text.
        """
        if is_plain_css_import(path):
            logger.debug(f"Keeping plain CSS import: {path}")
            return None

        importer = self._importing_file(prev)
        try:
            resolved = self.resolve(path, importer)
            contents = self._read(resolved)
            self.graph.add_import(importer, resolved, path)
        except SassAnalysisError as e:
            self.error = e
            raise
        except Exception as e:
            error_msg = f"Failed to resolve import '{path}': {e}"
            self.error = DependencyResolutionError(
                error_msg,
                source_file=importer,
                target_dependency=path,
                context={
                    "original_error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            raise self.error from e

        return ((resolved, contents),)

    def resolve(self, target: str, importer: str) -> str:
        """Resolve an import target to an absolute file path.

        The importing file's directory is searched first, then each load
        path in order. Within a directory the first existing candidate wins;
        when several exist a warning is logged.

        Args:
            target: Import target as written in the stylesheet
            importer: Absolute path of the importing stylesheet

        Returns:
            Absolute path of the imported file

        Raises:
            DependencyResolutionError: If no candidate file exists

        """
        search_dirs = [Path(importer).parent, *self.load_paths]
        for directory in search_dirs:
            found = [c for c in candidate_paths(directory, target) if c.is_file()]
            if not found:
                continue
            if len(found) > 1:
                logger.warning(
                    f"It's not clear which file to import for '@import \"{target}\"' "
                    f"in {importer}. Candidates: {', '.join(str(f) for f in found)}. "
                    f"Using {found[0]}.",
                )
            return os.path.abspath(found[0])

        error_msg = f"File to import not found or unreadable: {target}"
        raise DependencyResolutionError(
            error_msg,
            source_file=importer,
            target_dependency=target,
            context={
                "searched": [str(d) for d in search_dirs],
            },
        )

    def _importing_file(self, prev: str) -> str:
        # Top-level imports report the entry file the way libsass spells it.
        prev_path = os.path.abspath(prev) if prev and prev != "stdin" else self.source
        if prev_path not in self.graph.graph:
            return self.source
        return prev_path

    @staticmethod
    def _read(file_path: str) -> str:
        try:
            with open(file_path, encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            error_msg = f"Failed to read imported stylesheet '{file_path}': {e}"
            raise FileAccessError(
                error_msg,
                file_path=file_path,
                operation="read",
                context={"original_error": str(e)},
            ) from e
