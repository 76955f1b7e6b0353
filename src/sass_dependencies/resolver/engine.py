"""Sass engine wrapper that lists the files a stylesheet imports.

The stylesheet is run through libsass with a ``SassImporter`` attached; the
compiled CSS is discarded and only the import graph built along the way is
kept.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import sass

from sass_dependencies.error_handling import FileAccessError, StylesheetParsingError
from sass_dependencies.graph.import_graph import ImportGraph
from sass_dependencies.resolver.importer import SassImporter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sass_dependencies.config.parser import SassDepsConfig

logger = logging.getLogger(__name__)

# libsass error location, e.g. "on line 3:8 of assets/css/main.scss"
ERROR_LOCATION = re.compile(r"on line (?P<line>\d+)(?::\d+)? of (?P<file>\S+)")


@dataclass(frozen=True)
class SassDependency:
    """A stylesheet file taking part in the compilation of the source.

    Attributes:
        filename: Absolute path of the imported file
        importer: Absolute path of the file that first imported it
        target: Import target as written in the importing file

    """

    filename: str
    importer: str
    target: str


class SassEngine:
    """Runs libsass on one stylesheet and reports its imports."""

    def __init__(self, filename: str, load_paths: Sequence[Path | str] = ()) -> None:
        """Initialize the engine.

        Args:
            filename: Stylesheet to analyse, as given by the caller
            load_paths: Extra directories searched for imports, in order

        """
        self.filename = filename
        self.load_paths = [Path(p) for p in load_paths]
        self.graph = ImportGraph()
        self._dependencies: list[SassDependency] | None = None

    @classmethod
    def for_file(cls, filename: str, config: SassDepsConfig) -> SassEngine:
        """Create an engine for ``filename`` using the configured load paths."""
        return cls(filename, load_paths=config.load_paths)

    def dependencies(self) -> list[SassDependency]:
        """Get every file the stylesheet imports, directly or transitively.

        Files are listed depth-first in the order their imports appear, each
        file once.

        Returns:
            Dependencies of the stylesheet

        Raises:
            FileAccessError: If the stylesheet cannot be read
            DependencyResolutionError: If an import cannot be found
            StylesheetParsingError: If libsass rejects a stylesheet

        """
        if self._dependencies is None:
            self._dependencies = self._resolve()
        return list(self._dependencies)

    def _resolve(self) -> list[SassDependency]:
        if not self.filename or not os.path.isfile(self.filename):
            error_msg = f"Stylesheet not found: '{self.filename}'"
            raise FileAccessError(error_msg, file_path=self.filename, operation="read")

        source = os.path.abspath(self.filename)
        self.graph.add_stylesheet(source, is_source=True)
        importer = SassImporter(self.graph, source, self.load_paths)

        logger.debug(f"Resolving imports of {self.filename}")
        try:
            sass.compile(
                filename=self.filename,
                include_paths=[str(p) for p in self.load_paths],
                importers=[(0, importer)],
                output_style="compressed",
            )
        except sass.CompileError as e:
            if importer.error is not None:
                raise importer.error from e
            raise self._parsing_error(e) from e
        except OSError as e:
            error_msg = f"Failed to read stylesheet '{self.filename}': {e}"
            raise FileAccessError(
                error_msg,
                file_path=self.filename,
                operation="read",
                context={"original_error": str(e)},
            ) from e

        dependencies = []
        for file_path in self.graph.get_dependencies(source):
            importer_path, target = self._first_import_of(file_path)
            dependencies.append(
                SassDependency(filename=file_path, importer=importer_path, target=target),
            )
        logger.debug(f"Resolved {len(dependencies)} dependencies of {self.filename}")
        return dependencies

    def _first_import_of(self, file_path: str) -> tuple[str, str]:
        # Predecessors keep insertion order, so the first is the first importer.
        for importer_path in self.graph.graph.predecessors(file_path):
            edge = self.graph.graph.edges[importer_path, file_path]
            return importer_path, edge["import_target"]
        return "", ""

    def _parsing_error(self, error: sass.CompileError) -> StylesheetParsingError:
        message = str(error).strip()
        first_line = message.splitlines()[0] if message else "Sass compilation failed"
        location = ERROR_LOCATION.search(message)
        return StylesheetParsingError(
            first_line,
            file_path=location.group("file") if location else self.filename,
            line_number=int(location.group("line")) if location else None,
            context={"compiler_output": message},
        )
