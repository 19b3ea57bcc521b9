"""Graph module - Citation graph data structures and loading.

Exports:
- NodeKind: Enum of vertex types
- GraphNode: Vertex wrapping one entity
- Edge: Typed edge between vertices
- EdgeKind: Enum of edge types
- TypedGraph: In-memory graph container
- MalformedLine, DuplicateIndex, UnresolvedCitation: Load diagnostics

Note: use graph.factory.load_citation_graph() to populate a TypedGraph
"""

from citegraph.graph.diagnostics import DuplicateIndex, MalformedLine, UnresolvedCitation
from citegraph.graph.GraphNode import GraphNode, NodeKind
from citegraph.graph.relations import Edge, EdgeKind
from citegraph.graph.typed_graph import TypedGraph

__all__ = [
    "NodeKind",
    "GraphNode",
    "Edge",
    "EdgeKind",
    "TypedGraph",
    "DuplicateIndex",
    "MalformedLine",
    "UnresolvedCitation",
]
