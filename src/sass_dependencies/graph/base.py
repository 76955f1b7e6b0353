"""Abstract base class for dependency graph builders.

This module provides the foundation for building dependency graphs using
NetworkX. Subclasses decide what a node and an edge mean; the base class
keeps the graph itself.
"""

from abc import ABC, abstractmethod

import networkx as nx


class GraphBase(ABC):
    """Abstract base class for graph builders.

    The class maintains a NetworkX DiGraph internally. NetworkX keeps nodes
    in insertion order, which subclasses rely on to report files in the
    order they were discovered.

    Attributes:
        graph: The underlying NetworkX directed graph

    Example:
        >>> class MyGraph(GraphBase):
        ...     def add_node(self, node_id: str, node_type: str, **attributes):
        ...         self.graph.add_node(node_id, type=node_type, **attributes)
        ...
        ...     def add_edge(self, source: str, target: str, relationship: str, **attributes):
        ...         self.graph.add_edge(source, target, relationship=relationship, **attributes)
        >>> graph = MyGraph()
        >>> graph.add_node("main.scss", "stylesheet")
        >>> graph.add_node("_a.scss", "stylesheet")
        >>> graph.add_edge("main.scss", "_a.scss", "imports")
        >>> graph.graph.number_of_edges()
        1
    """

    def __init__(self) -> None:
        """Initialize graph builder with an empty directed graph."""
        self.graph: nx.DiGraph = nx.DiGraph()

    @abstractmethod
    def add_node(self, node_id: str, node_type: str, **attributes: object) -> None:
        """Add a node to graph.

        Args:
            node_id: Unique identifier for node
            node_type: Type/category of node
            **attributes: Additional attributes to store with node
        """

    @abstractmethod
    def add_edge(
        self,
        source: str,
        target: str,
        relationship: str,
        **attributes: object,
    ) -> None:
        """Add an edge to graph.

        Args:
            source: Source node identifier
            target: Target node identifier
            relationship: Type of relationship (e.g., 'imports')
            **attributes: Additional attributes to store with edge
        """

