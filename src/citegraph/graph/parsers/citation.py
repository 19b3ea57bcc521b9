"""CitationParser - Line-driven state machine for citation datasets.

Parses the Arnetminer/DBLP citation format, one field per line:

    #*<title>
    #@<author1>,<author2>,...
    #year<year>
    #conf<venue>
    #citation<count>
    #index<index key>
    #%<cited index key>        (zero or more)
    <blank line>               (record separator)

A record is sealed, and written to the graph with its authors, year and
venue, as soon as its ``#index`` line is read. Citations are collected as
(source key, target key) pairs for resolution after the whole stream has
been read.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from citegraph.entities import Author, Paper, Venue, Year
from citegraph.graph.diagnostics import DuplicateIndex, MalformedLine

ON_MALFORMED_SKIP = "skip"
ON_MALFORMED_RAISE = "raise"


class MalformedRecordError(ValueError):
    """A record field line was read with no active record."""

    def __init__(self, diagnostic: MalformedLine) -> None:
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic


@dataclass
class RecordContext:
    """State of the record currently being accumulated.

    Attributes:
        paper: The paper under construction.
        authors: Authors buffered for this record.
        year: Year buffered for this record.
        venue: Venue buffered for this record.
        pending_citations: Cited keys read before the record was sealed.
    """

    paper: Paper
    authors: list[Author] = field(default_factory=list)
    year: Year | None = None
    venue: Venue | None = None
    pending_citations: list[str] = field(default_factory=list)

    def satellites(self) -> Iterator[Author | Year | Venue]:
        """Iterate buffered satellites: authors, then year, then venue."""
        yield from self.authors
        if self.year is not None:
            yield self.year
        if self.venue is not None:
            yield self.venue


class CitationParser:
    """Streaming parser feeding a graph one line at a time.

    The parser is either idle (no record) or accumulating one record held
    in a RecordContext. A blank line drops the context; a ``#*`` line
    replaces it. Any graph with ``add_vertex(entity)`` and
    ``add_edge(a, b)`` methods can receive the output.

    Attributes:
        graph: Receives sealed papers, their satellites and their edges.
        on_malformed: "skip" to record field lines read with no active
            record and go on, "raise" to abort with MalformedRecordError.
            Bad fields inside an active record are always recorded and
            skipped.
        max_records: Stop before starting record number max_records + 1.
            None or 0 means no limit.
        progress: Called with the running record count every
            progress_every records.
    """

    def __init__(
        self,
        graph: Any,
        on_malformed: str = ON_MALFORMED_SKIP,
        max_records: int | None = None,
        progress: Callable[[int], None] | None = None,
        progress_every: int = 10000,
    ) -> None:
        if on_malformed not in (ON_MALFORMED_SKIP, ON_MALFORMED_RAISE):
            raise ValueError(f"Unknown malformed-line policy: {on_malformed!r}")
        if progress_every < 1:
            raise ValueError(f"progress_every must be positive, got {progress_every}")
        if max_records is not None and max_records < 0:
            raise ValueError(f"max_records must not be negative, got {max_records}")

        self.graph = graph
        self.on_malformed = on_malformed
        self.max_records = max_records or None
        self.progress = progress
        self.progress_every = progress_every

        self._context: RecordContext | None = None
        self._papers: dict[str, Paper] = {}
        self._deferred: list[tuple[str, str]] = []
        self._line_number = 0
        self._stopped = False

        self.records_started = 0
        self.records_sealed = 0
        self.malformed: list[MalformedLine] = []
        self.duplicates: list[DuplicateIndex] = []

        self._handlers: tuple[tuple[str, Callable[[str, str], None]], ...] = (
            ("#*", self._start_record),
            ("#@", self._add_authors),
            ("#year", self._set_year),
            ("#conf", self._set_venue),
            ("#citation", self._set_citation_count),
            ("#index", self._seal_record),
            ("#%", self._add_citation),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Feeding
    # ─────────────────────────────────────────────────────────────────────────

    def feed(self, line: str) -> bool:
        """Process one input line.

        Args:
            line: The line, with or without its line terminator.

        Returns:
            False once the record cap has been reached and the line was not
            consumed; True otherwise.

        Raises:
            MalformedRecordError: Under the "raise" policy, for a
                ``#citation``, ``#index`` or ``#%`` line with no active record.
        """
        if self._stopped:
            return False
        self._line_number += 1
        line = line.rstrip("\r\n")

        if not line.strip():
            self._context = None
            return True

        for prefix, handler in self._handlers:
            if line.startswith(prefix):
                if prefix == "#*" and self._at_record_cap():
                    self._stopped = True
                    self._context = None
                    return False
                handler(line[len(prefix) :].strip(), line)
                break
        return True

    def feed_lines(self, lines: Iterable[str]) -> bool:
        """Process lines until they run out or the record cap is reached.

        Returns:
            False if reading stopped at the record cap.
        """
        for line in lines:
            if not self.feed(line):
                return False
        return True

    def finish(self) -> None:
        """End the stream, dropping any record that was never sealed."""
        self._context = None

    # ─────────────────────────────────────────────────────────────────────────
    # Results
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def resolution_table(self) -> Mapping[str, Paper]:
        """Sealed papers keyed by index key (read-only view)."""
        return MappingProxyType(self._papers)

    @property
    def deferred_references(self) -> list[tuple[str, str]]:
        """(source key, target key) citation pairs in the order read."""
        return list(self._deferred)

    @property
    def current_record(self) -> RecordContext | None:
        """The record being accumulated, or None when idle."""
        return self._context

    @property
    def stopped(self) -> bool:
        """True once reading stopped at the record cap."""
        return self._stopped

    # ─────────────────────────────────────────────────────────────────────────
    # Field handlers
    # ─────────────────────────────────────────────────────────────────────────

    def _start_record(self, rest: str, line: str) -> None:
        self._context = RecordContext(paper=Paper(title=rest))
        self.records_started += 1
        if self.progress and self.records_started % self.progress_every == 0:
            self.progress(self.records_started)

    def _add_authors(self, rest: str, line: str) -> None:
        if self._context is None:
            return
        for name in rest.split(","):
            name = name.strip()
            if name:
                self._context.authors.append(Author(name))

    def _set_year(self, rest: str, line: str) -> None:
        if self._context is not None:
            self._context.year = Year(rest)

    def _set_venue(self, rest: str, line: str) -> None:
        if self._context is not None:
            self._context.venue = Venue(rest)

    def _set_citation_count(self, rest: str, line: str) -> None:
        if self._context is None:
            self._malformed(line, "citation count outside a record")
            return
        try:
            self._context.paper.citation_count = int(rest)
        except ValueError:
            self._skip(line, "citation count is not an integer")

    def _seal_record(self, rest: str, line: str) -> None:
        ctx = self._context
        if ctx is None:
            self._malformed(line, "index outside a record")
            return
        if ctx.paper.is_sealed:
            self._skip(line, "record already has an index")
            return
        if not rest:
            self._skip(line, "empty index")
            return

        paper = ctx.paper
        paper.index_key = rest
        self.graph.add_vertex(paper)
        for satellite in ctx.satellites():
            self.graph.add_vertex(satellite)
            self.graph.add_edge(paper, satellite)

        if rest in self._papers:
            self.duplicates.append(DuplicateIndex(index_key=rest, line_number=self._line_number))
        self._papers[rest] = paper
        self.records_sealed += 1

        for target_key in ctx.pending_citations:
            self._defer(paper, target_key)
        ctx.pending_citations.clear()

    def _add_citation(self, rest: str, line: str) -> None:
        ctx = self._context
        if ctx is None:
            self._malformed(line, "reference outside a record")
            return
        if not rest:
            self._skip(line, "empty reference")
            return
        if ctx.paper.is_sealed:
            self._defer(ctx.paper, rest)
        else:
            ctx.pending_citations.append(rest)

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _defer(self, paper: Paper, target_key: str) -> None:
        # no self citations
        if target_key == paper.index_key:
            return
        self._deferred.append((paper.index_key, target_key))

    def _malformed(self, line: str, reason: str) -> None:
        diagnostic = MalformedLine(line_number=self._line_number, line=line, reason=reason)
        if self.on_malformed == ON_MALFORMED_RAISE:
            raise MalformedRecordError(diagnostic)
        self.malformed.append(diagnostic)

    def _skip(self, line: str, reason: str) -> None:
        # Bad field inside an active record: recorded under either policy.
        self.malformed.append(
            MalformedLine(line_number=self._line_number, line=line, reason=reason)
        )

    def _at_record_cap(self) -> bool:
        return self.max_records is not None and self.records_started >= self.max_records
