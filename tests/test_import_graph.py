"""Tests for the stylesheet import graph."""

from __future__ import annotations

import pytest

from sass_dependencies.graph.import_graph import ImportGraph


@pytest.fixture
def graph() -> ImportGraph:
    """Import graph of main.scss with a shared partial.

    main -> a -> c, main -> b -> c
    """
    graph = ImportGraph()
    graph.add_stylesheet("/css/main.scss", is_source=True)
    graph.add_import("/css/main.scss", "/css/_a.scss", "a")
    graph.add_import("/css/_a.scss", "/css/_c.scss", "c")
    graph.add_import("/css/main.scss", "/css/_b.scss", "b")
    graph.add_import("/css/_b.scss", "/css/_c.scss", "c")
    return graph


class TestImportGraph:
    """Test import graph construction and queries."""

    def test_dependencies_depth_first(self, graph: ImportGraph) -> None:
        """Dependencies are listed depth-first, each once."""
        assert graph.get_dependencies("/css/main.scss") == [
            "/css/_a.scss",
            "/css/_c.scss",
            "/css/_b.scss",
        ]

    def test_dependencies_of_partial(self, graph: ImportGraph) -> None:
        """Any node can be queried for its own imports."""
        assert graph.get_dependencies("/css/_b.scss") == ["/css/_c.scss"]

    def test_unknown_file(self, graph: ImportGraph) -> None:
        """Unknown files have no dependencies."""
        assert graph.get_dependencies("/css/other.scss") == []

    def test_direct_imports(self, graph: ImportGraph) -> None:
        """Direct imports keep import order."""
        assert graph.get_direct_imports("/css/main.scss") == [
            "/css/_a.scss",
            "/css/_b.scss",
        ]

    def test_node_types(self, graph: ImportGraph) -> None:
        """The analysed file is typed apart from the stylesheets it imports."""
        assert graph.graph.nodes["/css/main.scss"]["type"] == "source"
        assert graph.graph.nodes["/css/_c.scss"]["type"] == "stylesheet"

    def test_shared_partial_is_one_node(self, graph: ImportGraph) -> None:
        """Shared partials are one node with several incoming edges."""
        assert graph.graph.number_of_nodes() == 4
        assert graph.graph.in_degree("/css/_c.scss") == 2

    def test_edge_keeps_import_target(self, graph: ImportGraph) -> None:
        """Edges remember the target text of the import."""
        edge = graph.graph.edges["/css/_a.scss", "/css/_c.scss"]
        assert edge == {"relationship": "imports", "import_target": "c"}

    def test_readding_source_keeps_type(self, graph: ImportGraph) -> None:
        """Registering a known file again does not change it."""
        graph.add_stylesheet("/css/main.scss")
        assert graph.graph.nodes["/css/main.scss"]["type"] == "source"

    def test_first_import_is_recorded(self) -> None:
        """A single import adds both files and one edge."""
        graph = ImportGraph()
        graph.add_stylesheet("/css/main.scss", is_source=True)
        graph.add_import("/css/main.scss", "/css/_a.scss", "a")

        assert graph.get_dependencies("/css/main.scss") == ["/css/_a.scss"]
        assert graph.graph.number_of_edges() == 1
