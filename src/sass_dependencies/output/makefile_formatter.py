"""Makefile formatter for stylesheet dependencies.

Produces a single dependency rule, ``target: prereq1 prereq2 ...``, that can
be included from a Makefile so the stylesheet is rebuilt when one of its
imports changes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class MakefileFormatter:
    """Formatter for Makefile dependency rules.

    Paths are written as they are: no quoting or escaping is applied, so a
    path containing a space is read by make as two prerequisites.

    Example:
        >>> formatter = MakefileFormatter("main.scss", ["/p/_a.scss", "/p/_b.scss"])
        >>> formatter.format()
        'main.scss: /p/_a.scss /p/_b.scss\\n'
        >>> MakefileFormatter("main.scss", []).format()
        'main.scss: \\n'
    """

    def __init__(self, target: str, dependencies: Sequence[str]) -> None:
        """Initialize the formatter.

        Args:
            target: Rule target, the source stylesheet path as given
            dependencies: Prerequisite paths, in order

        """
        self.target = target
        self.dependencies = list(dependencies)

    def format(self) -> str:
        """Format the dependency rule, newline-terminated."""
        return f"{self.target}: {' '.join(self.dependencies)}\n"

    def write(self, stream: TextIO) -> None:
        """Write the rule to ``stream`` in a single write call."""
        stream.write(self.format())
        stream.flush()

    def save_to_file(self, file_path: Path | str) -> None:
        """Save the rule to a dependency file.

        Args:
            file_path: Path of the file to write

        """
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.format(), encoding="utf-8")
        logger.debug(f"Dependency rule written to {path}")
