"""Reference Resolver - Second pass turning deferred citations into edges.

Runs once the whole input has been read, so a citation may point at a
record that appeared later in the stream. Citations whose endpoints were
never loaded are dropped and reported, not raised.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from citegraph.entities import Paper
from citegraph.graph.diagnostics import UnresolvedCitation


@dataclass
class ResolveResult:
    """Outcome of resolving deferred citations.

    Attributes:
        resolved: Number of citation edges added.
        unresolved: Citations dropped because an endpoint was unknown.
        self_citations: Citations dropped because both keys named the
            same record.
    """

    resolved: int = 0
    unresolved: list[UnresolvedCitation] = field(default_factory=list)
    self_citations: int = 0


class ReferenceResolver:
    """Adds citation edges for deferred (source key, target key) pairs.

    Lookups use exact index-key equality against the resolution table.
    Edges are added in the order the pairs are given.
    """

    def __init__(self, papers: Mapping[str, Paper]) -> None:
        """Initialize with the table of sealed papers.

        Args:
            papers: Sealed papers keyed by index key.
        """
        self.papers = papers

    def resolve(self, references: Iterable[tuple[str, str]], graph: Any) -> ResolveResult:
        """Resolve citations into graph edges.

        Args:
            references: (source key, target key) pairs in production order.
            graph: Graph holding the paper vertices; receives add_edge calls.

        Returns:
            ResolveResult with counts and dropped citations.
        """
        result = ResolveResult()
        for source_key, target_key in references:
            target = self.papers.get(target_key)
            source = self.papers.get(source_key)
            if target is None or source is None:
                result.unresolved.append(
                    UnresolvedCitation(source_key=source_key, target_key=target_key)
                )
                continue
            if source is target:
                result.self_citations += 1
                continue
            graph.add_edge(source, target)
            result.resolved += 1
        return result
