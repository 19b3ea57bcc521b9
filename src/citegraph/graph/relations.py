"""Relations - Edge types and relationship semantics.

This module defines the typed edges between graph nodes:
- EdgeKind: Enum of relationship types, derived from endpoint kinds
- Edge: A typed, directed edge between two nodes
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from citegraph.graph.GraphNode import NodeKind

if TYPE_CHECKING:
    from citegraph.graph.GraphNode import GraphNode


class EdgeKind(Enum):
    """Types of edges in the citation graph.

    - WRITTEN_BY: Paper -> Author
    - PUBLISHED_IN: Paper -> Venue
    - PUBLISHED_YEAR: Paper -> Year
    - CITES: Paper -> Paper (citing -> cited)
    - RELATED: Any other pairing
    """

    WRITTEN_BY = "written_by"
    PUBLISHED_IN = "published_in"
    PUBLISHED_YEAR = "published_year"
    CITES = "cites"
    RELATED = "related"

    @classmethod
    def between(cls, source: NodeKind, target: NodeKind) -> EdgeKind:
        """Return the edge kind implied by the endpoint kinds."""
        if source != NodeKind.PAPER:
            return cls.RELATED
        return _PAPER_EDGE_KINDS.get(target, cls.RELATED)


_PAPER_EDGE_KINDS = {
    NodeKind.AUTHOR: EdgeKind.WRITTEN_BY,
    NodeKind.VENUE: EdgeKind.PUBLISHED_IN,
    NodeKind.YEAR: EdgeKind.PUBLISHED_YEAR,
    NodeKind.PAPER: EdgeKind.CITES,
}


@dataclass(eq=False)
class Edge:
    """A directed, typed edge between two graph nodes.

    Attributes:
        source: The node the edge starts at.
        target: The node the edge points to.
        kind: The type of relationship.
    """

    source: GraphNode
    target: GraphNode
    kind: EdgeKind
