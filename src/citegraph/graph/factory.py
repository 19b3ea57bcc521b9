"""Graph Factory - Single entry point for loading a citation graph.

Drives CitationParser over an input line stream, then ReferenceResolver
over the deferred citations. Callers should use these functions rather
than wiring the parser and resolver themselves.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from citegraph.config import DEFAULT_CONFIG, ConfigLoader
from citegraph.graph.diagnostics import DuplicateIndex, MalformedLine, UnresolvedCitation
from citegraph.graph.parsers.citation import CitationParser
from citegraph.graph.resolver import ReferenceResolver
from citegraph.graph.typed_graph import TypedGraph


@dataclass
class LoadResult:
    """Outcome of loading a citation dataset.

    Attributes:
        graph: The populated graph.
        records_started: Records whose ``#*`` line was read.
        records_sealed: Records that reached their ``#index`` line.
        deferred_references: Citations queued for resolution.
        citations_resolved: Citation edges added.
        stopped_at_cap: True if reading stopped at max_records.
        malformed: Field lines skipped.
        duplicates: Index keys reused by a later record.
        unresolved: Citations dropped for an unknown endpoint.
    """

    graph: Any
    records_started: int = 0
    records_sealed: int = 0
    deferred_references: int = 0
    citations_resolved: int = 0
    stopped_at_cap: bool = False
    malformed: list[MalformedLine] = field(default_factory=list)
    duplicates: list[DuplicateIndex] = field(default_factory=list)
    unresolved: list[UnresolvedCitation] = field(default_factory=list)

    def summary(self) -> dict[str, Any]:
        """Return the counts as a JSON-serializable dict."""
        return {
            "records_started": self.records_started,
            "records_sealed": self.records_sealed,
            "deferred_references": self.deferred_references,
            "citations_resolved": self.citations_resolved,
            "unresolved_citations": len(self.unresolved),
            "malformed_lines": len(self.malformed),
            "duplicate_indexes": len(self.duplicates),
            "stopped_at_cap": self.stopped_at_cap,
        }


def _settings(config: dict[str, Any] | None) -> ConfigLoader:
    return ConfigLoader.from_dict(config if config is not None else DEFAULT_CONFIG)


def _int_setting(settings: ConfigLoader, key: str, default: int) -> int:
    value = settings.get(key, default)
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be an integer, got {value!r}") from None


def load_citation_graph(
    lines: Iterable[str],
    graph: Any | None = None,
    config: dict[str, Any] | None = None,
    max_records: int | None = None,
    on_malformed: str | None = None,
    progress: Callable[[int], None] | None = None,
) -> LoadResult:
    """Load a citation dataset from an iterable of lines.

    Explicit arguments take precedence over config values.

    Args:
        lines: Input lines, with or without terminators.
        graph: Graph to populate (defaults to a new TypedGraph).
        config: Configuration dict (defaults to DEFAULT_CONFIG).
        max_records: Stop after this many records (0 or None = no limit).
        on_malformed: "skip" or "raise".
        progress: Called with the running record count.

    Returns:
        LoadResult with the populated graph and load diagnostics.

    Raises:
        MalformedRecordError: Under the "raise" policy.
    """
    settings = _settings(config)
    if graph is None:
        graph = TypedGraph(merge_equal=bool(settings.get("graph.merge_equal_satellites", False)))
    if max_records is None:
        max_records = _int_setting(settings, "loader.max_records", 0)
    if on_malformed is None:
        on_malformed = settings.get("parser.on_malformed", "skip")

    parser = CitationParser(
        graph,
        on_malformed=on_malformed,
        max_records=max_records,
        progress=progress,
        progress_every=_int_setting(settings, "loader.progress_every", 10000),
    )
    parser.feed_lines(lines)
    parser.finish()

    references = parser.deferred_references
    resolved = ReferenceResolver(parser.resolution_table).resolve(references, graph)

    return LoadResult(
        graph=graph,
        records_started=parser.records_started,
        records_sealed=parser.records_sealed,
        deferred_references=len(references),
        citations_resolved=resolved.resolved,
        stopped_at_cap=parser.stopped,
        malformed=list(parser.malformed),
        duplicates=list(parser.duplicates),
        unresolved=resolved.unresolved,
    )


def load_citation_file(
    path: Path,
    graph: Any | None = None,
    config: dict[str, Any] | None = None,
    max_records: int | None = None,
    on_malformed: str | None = None,
    progress: Callable[[int], None] | None = None,
) -> LoadResult:
    """Load a UTF-8 citation dataset file.

    The file is closed on every exit path. Read and decode errors
    propagate; the graph keeps whatever was added before the failure.
    """
    with open(path, encoding="utf-8") as handle:
        return load_citation_graph(
            handle,
            graph=graph,
            config=config,
            max_records=max_records,
            on_malformed=on_malformed,
            progress=progress,
        )
