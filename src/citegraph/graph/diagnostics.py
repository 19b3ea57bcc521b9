"""Diagnostics recorded while loading a citation graph.

Nothing here is an error: these records describe input the loader
skipped or references it could not resolve, so callers can report them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MalformedLine:
    """A field line that could not be applied and was skipped.

    Attributes:
        line_number: 1-based line number in the input.
        line: The offending line, without its line terminator.
        reason: Why the line was skipped.
    """

    line_number: int
    line: str
    reason: str

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"line {self.line_number}: {self.reason}: {self.line!r}"


@dataclass(frozen=True)
class DuplicateIndex:
    """A record reused an index key already taken by an earlier record.

    The later record replaces the earlier one for citation resolution.
    """

    index_key: str
    line_number: int

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"line {self.line_number}: duplicate index {self.index_key!r} replaces earlier record"


@dataclass(frozen=True)
class UnresolvedCitation:
    """A citation whose target (or source) record was never loaded.

    Attributes:
        source_key: Index key of the citing record.
        target_key: Index key that was cited.
    """

    source_key: str
    target_key: str

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"{self.source_key} --[cites]--> {self.target_key} (missing)"


__all__ = ["DuplicateIndex", "MalformedLine", "UnresolvedCitation"]
