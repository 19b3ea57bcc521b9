"""
citegraph - Citation graph loading and identity interning

citegraph reads line-oriented bibliographic datasets (the Arnetminer/DBLP
citation format) into a typed graph of papers, authors, venues and years,
resolving citations between records in a second pass. It also provides
Alphabet, a dense append-only value <-> integer id mapping.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("citegraph")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from citegraph.alphabet import (
    Alphabet,
    AlphabetError,
    IndexOutOfRangeError,
    InvalidEntryError,
    NullEntryError,
)
from citegraph.entities import Author, Paper, Venue, Year
from citegraph.graph.factory import LoadResult, load_citation_file, load_citation_graph
from citegraph.graph.parsers import CitationParser, MalformedRecordError
from citegraph.graph.resolver import ReferenceResolver
from citegraph.graph.typed_graph import TypedGraph

__all__ = [
    "__version__",
    "Alphabet",
    "AlphabetError",
    "IndexOutOfRangeError",
    "InvalidEntryError",
    "NullEntryError",
    "Author",
    "Paper",
    "Venue",
    "Year",
    "CitationParser",
    "MalformedRecordError",
    "ReferenceResolver",
    "TypedGraph",
    "LoadResult",
    "load_citation_file",
    "load_citation_graph",
]
