"""Import graph for Sass stylesheets.

Nodes are absolute stylesheet paths, edges are ``@import`` relationships
from the importing file to the imported one.
"""

from __future__ import annotations

import logging

import networkx as nx

from sass_dependencies.graph.base import GraphBase

logger = logging.getLogger(__name__)


class ImportGraph(GraphBase):
    """Dependency graph of one stylesheet compilation."""

    def add_node(self, node_id: str, node_type: str, **attributes: object) -> None:
        """Add a stylesheet node; re-adding an existing node keeps its position."""
        self.graph.add_node(node_id, type=node_type, **attributes)

    def add_edge(
        self,
        source: str,
        target: str,
        relationship: str,
        **attributes: object,
    ) -> None:
        """Add an edge between two stylesheet nodes."""
        self.graph.add_edge(source, target, relationship=relationship, **attributes)

    def add_stylesheet(self, file_path: str, is_source: bool = False) -> None:
        """Register a stylesheet file.

        Args:
            file_path: Absolute path of the stylesheet
            is_source: Whether this is the file the analysis started from

        """
        if file_path in self.graph:
            return
        self.add_node(file_path, "source" if is_source else "stylesheet")

    def add_import(self, importer: str, imported: str, target: str) -> None:
        """Record that ``importer`` pulls in ``imported`` through ``@import target``.

        Args:
            importer: Absolute path of the importing stylesheet
            imported: Absolute path the import resolved to
            target: Import target as written in the stylesheet

        """
        self.add_stylesheet(importer)
        self.add_stylesheet(imported)
        self.add_edge(importer, imported, "imports", import_target=target)
        logger.debug(f"{importer} imports {imported} (@import '{target}')")

    def get_dependencies(self, source: str) -> list[str]:
        """Get every file reachable from ``source``, depth-first pre-order.

        Each file is listed once, at its first discovery. The source itself
        is not part of its dependencies.

        Args:
            source: Absolute path of the analysed stylesheet

        Returns:
            Absolute paths of the direct and transitive imports

        """
        if source not in self.graph:
            return []
        return [node for node in nx.dfs_preorder_nodes(self.graph, source) if node != source]

    def get_direct_imports(self, file_path: str) -> list[str]:
        """Get the files imported directly by ``file_path``, in import order."""
        if file_path not in self.graph:
            return []
        return list(self.graph.successors(file_path))
