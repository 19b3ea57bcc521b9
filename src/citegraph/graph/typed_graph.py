"""TypedGraph - In-memory container for the citation graph.

Receives vertices and edges from the loader and provides indexed,
iterator-only access to them. Every vertex wraps one entity; the kind
of each vertex and edge is derived from the entity types involved.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from citegraph.alphabet import NOT_FOUND, Alphabet
from citegraph.graph.GraphNode import GraphNode, NodeKind
from citegraph.graph.relations import Edge, EdgeKind


@dataclass
class TypedGraph:
    """A directed graph with typed vertices and edges.

    ``add_vertex`` is idempotent per entity object. Equal-valued entities
    are separate vertices unless ``merge_equal`` is set, in which case
    satellite entities (authors, venues, years) are interned by value and
    share a single vertex. Papers are never merged.

    Attributes:
        merge_equal: Share one vertex among equal satellite entities.
    """

    merge_equal: bool = False

    # Internal storage (prefixed) - excluded from constructor
    _nodes: list[GraphNode] = field(default_factory=list, init=False, repr=False)
    _by_entity: dict[int, GraphNode] = field(default_factory=dict, init=False, repr=False)
    _papers: dict[str, GraphNode] = field(default_factory=dict, init=False, repr=False)
    _interned: dict[NodeKind, Alphabet] = field(default_factory=dict, init=False, repr=False)
    _interned_nodes: dict[NodeKind, list[GraphNode]] = field(
        default_factory=dict, init=False, repr=False
    )
    _edge_count: int = field(default=0, init=False)

    # ─────────────────────────────────────────────────────────────────────────
    # Collaborator API used by the loader
    # ─────────────────────────────────────────────────────────────────────────

    def add_vertex(self, entity: Any) -> GraphNode:
        """Add a vertex for an entity, or return the existing one.

        Args:
            entity: A Paper, Author, Venue or Year.

        Returns:
            The GraphNode wrapping the entity.

        Raises:
            TypeError: If the entity is not a graph entity.
        """
        existing = self.node_for(entity)
        if existing is not None:
            return existing

        kind = NodeKind.of(entity)
        if self.merge_equal and kind != NodeKind.PAPER:
            node = self._intern(kind, entity)
        else:
            node = self._new_node(kind, entity)
        self._by_entity[id(entity)] = node

        if kind == NodeKind.PAPER and entity.index_key is not None:
            self._papers[entity.index_key] = node
        return node

    def add_edge(self, source: Any, target: Any) -> Edge:
        """Add a directed edge between two previously added entities.

        Args:
            source: Entity the edge starts at.
            target: Entity the edge points to.

        Returns:
            The created Edge, typed by the endpoint kinds.

        Raises:
            KeyError: If either entity was never added as a vertex.
        """
        source_node = self.node_for(source)
        target_node = self.node_for(target)
        if source_node is None or target_node is None:
            missing = source if source_node is None else target
            raise KeyError(f"Entity is not a vertex of this graph: {missing!r}")

        kind = EdgeKind.between(source_node.kind, target_node.kind)
        self._edge_count += 1
        return source_node.link(target_node, kind)

    # ─────────────────────────────────────────────────────────────────────────
    # Query API
    # ─────────────────────────────────────────────────────────────────────────

    def node_for(self, entity: Any) -> GraphNode | None:
        """Return the vertex for an entity, or None.

        Entities are matched by identity, or by value for merged satellites.
        """
        node = self._by_entity.get(id(entity))
        if node is not None and node.entity is entity:
            return node
        if not self.merge_equal:
            return None

        kind = next((k for k in self._interned if k.value == getattr(entity, "KIND", None)), None)
        if kind is None:
            return None
        index = self._interned[kind].lookup_index(entity, add_if_not_present=False)
        if index == NOT_FOUND:
            return None
        return self._interned_nodes[kind][index]

    def find_paper(self, index_key: str) -> GraphNode | None:
        """Find a paper vertex by its index key."""
        return self._papers.get(index_key)

    def nodes_by_kind(self, kind: NodeKind) -> Iterator[GraphNode]:
        """Iterate vertices of a specific kind."""
        for node in self._nodes:
            if node.kind == kind:
                yield node

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate all edges, grouped by source vertex."""
        for node in self._nodes:
            yield from node.iter_outgoing_edges()

    def edges_by_kind(self, kind: EdgeKind) -> Iterator[Edge]:
        """Iterate edges of a specific kind."""
        for node in self._nodes:
            yield from node.iter_edges_by_kind(kind)

    def node_count(self, kind: NodeKind | None = None) -> int:
        """Return the number of vertices, optionally of one kind."""
        if kind is None:
            return len(self._nodes)
        return sum(1 for _ in self.nodes_by_kind(kind))

    def edge_count(self, kind: EdgeKind | None = None) -> int:
        """Return the number of edges, optionally of one kind."""
        if kind is None:
            return self._edge_count
        return sum(1 for _ in self.edges_by_kind(kind))

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _new_node(self, kind: NodeKind, entity: Any) -> GraphNode:
        node = GraphNode(id=len(self._nodes), kind=kind, entity=entity)
        self._nodes.append(node)
        return node

    def _intern(self, kind: NodeKind, entity: Any) -> GraphNode:
        """Return the shared vertex for an equal-valued satellite."""
        alphabet = self._interned.setdefault(kind, Alphabet())
        nodes = self._interned_nodes.setdefault(kind, [])
        index = alphabet.lookup_index(entity)
        if index == len(nodes):
            nodes.append(self._new_node(kind, entity))
        return nodes[index]
