"""Parsers - Line-oriented input formats that feed a TypedGraph.

Exports:
- CitationParser: State machine for the Arnetminer/DBLP citation format
- RecordContext: The record being accumulated by CitationParser
- MalformedRecordError: Raised for unusable field lines under the "raise" policy
"""

from citegraph.graph.parsers.citation import (
    ON_MALFORMED_RAISE,
    ON_MALFORMED_SKIP,
    CitationParser,
    MalformedRecordError,
    RecordContext,
)

__all__ = [
    "ON_MALFORMED_RAISE",
    "ON_MALFORMED_SKIP",
    "CitationParser",
    "MalformedRecordError",
    "RecordContext",
]
