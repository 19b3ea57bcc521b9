"""GraphNode - Vertex representation for the citation graph.

This module provides:
- NodeKind: Enum of vertex types
- GraphNode: A vertex wrapping one entity, with edge management
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from citegraph.graph.relations import Edge, EdgeKind


class NodeKind(Enum):
    """Types of vertices in the citation graph."""

    PAPER = "paper"
    AUTHOR = "author"
    VENUE = "venue"
    YEAR = "year"

    @classmethod
    def of(cls, entity: Any) -> NodeKind:
        """Return the kind for an entity, from its ``KIND`` attribute.

        Raises:
            TypeError: If the entity does not declare a known kind.
        """
        try:
            return cls(entity.KIND)
        except (AttributeError, ValueError):
            raise TypeError(f"Not a graph entity: {entity!r}") from None


@dataclass
class GraphNode:
    """A vertex in the citation graph.

    Attributes:
        id: Dense integer id, assigned in insertion order.
        kind: The type of vertex.
        entity: The entity this vertex stands for.
    """

    id: int
    kind: NodeKind
    entity: Any

    # Internal storage (prefixed)
    _outgoing_edges: list[Edge] = field(default_factory=list, repr=False)
    _incoming_edges: list[Edge] = field(default_factory=list, repr=False)

    @property
    def label(self) -> str:
        """Human-readable display label."""
        return getattr(self.entity, "label", str(self.entity))

    def iter_outgoing_edges(self) -> Iterator[Edge]:
        """Iterate over outgoing edges."""
        yield from self._outgoing_edges

    def iter_edges_by_kind(self, edge_kind: EdgeKind) -> Iterator[Edge]:
        """Iterate outgoing edges of a specific kind."""
        for e in self._outgoing_edges:
            if e.kind == edge_kind:
                yield e

    def iter_targets(self, edge_kind: EdgeKind | None = None) -> Iterator[GraphNode]:
        """Iterate nodes this node points to, optionally by edge kind."""
        for e in self._outgoing_edges:
            if edge_kind is None or e.kind == edge_kind:
                yield e.target

    def iter_sources(self, edge_kind: EdgeKind | None = None) -> Iterator[GraphNode]:
        """Iterate nodes pointing to this node, optionally by edge kind."""
        for e in self._incoming_edges:
            if edge_kind is None or e.kind == edge_kind:
                yield e.source

    def out_degree(self) -> int:
        """Return number of outgoing edges."""
        return len(self._outgoing_edges)

    def in_degree(self) -> int:
        """Return number of incoming edges."""
        return len(self._incoming_edges)

    def link(self, target: GraphNode, edge_kind: EdgeKind) -> Edge:
        """Create a typed edge from this node to target.

        Args:
            target: The node to point to.
            edge_kind: The type of relationship.

        Returns:
            The created Edge.
        """
        from citegraph.graph.relations import Edge

        edge = Edge(source=self, target=target, kind=edge_kind)
        self._outgoing_edges.append(edge)
        target._incoming_edges.append(edge)
        return edge
