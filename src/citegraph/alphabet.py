"""Alphabet - Dense integer ids for hashable values.

This module provides the identity-assignment primitive used to intern
repeated values into compact integer handles:
- Alphabet: Bidirectional, append-only value <-> id mapping
- AlphabetError and its subclasses for rejected lookups
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import IO, Any
from uuid import uuid4

NOT_FOUND = -1


class AlphabetError(Exception):
    """Base class for errors raised by Alphabet lookups."""


class InvalidEntryError(AlphabetError, TypeError):
    """Entry type does not match the alphabet's established entry type."""


class NullEntryError(AlphabetError, ValueError):
    """None was passed where an entry is required."""


class IndexOutOfRangeError(AlphabetError, IndexError):
    """An id outside [0, size) was resolved."""


class Alphabet:
    """A mapping between integers and values, efficient in both directions.

    Ids are assigned consecutively, starting at zero, as values are added.
    Values cannot be deleted, so ids are never reused. All entries must
    share one runtime type, fixed by the first value added (or by the
    ``entry_type`` argument).

    Example:
        >>> alphabet = Alphabet()
        >>> alphabet.lookup_index("graph")
        0
        >>> alphabet.lookup_index("vertex")
        1
        >>> alphabet.lookup_index("graph")
        0
        >>> alphabet.lookup_object(1)
        'vertex'
    """

    def __init__(
        self,
        entries: Iterable[Any] | None = None,
        entry_type: type | None = None,
    ) -> None:
        """Initialize the alphabet.

        Args:
            entries: Optional initial values, assigned ids in order.
            entry_type: Optional type every entry must have.
        """
        self._index: dict[Any, int] = {}
        self._entries: list[Any] = []
        self._entry_type = entry_type
        self._growth_stopped = False
        self.instance_id = uuid4().hex

        for entry in entries or ():
            self.lookup_index(entry)

    def lookup_index(self, entry: Any, add_if_not_present: bool = True) -> int:
        """Return the id of an entry, assigning one if needed.

        Args:
            entry: The value to look up.
            add_if_not_present: Assign the next id to unknown values unless
                growth is stopped.

        Returns:
            The entry's id, or NOT_FOUND (-1) when the entry is absent and
            no id was assigned.

        Raises:
            NullEntryError: If entry is None.
            InvalidEntryError: If entry's type differs from the entry type.
        """
        if entry is None:
            raise NullEntryError("Can't look up None in an Alphabet")
        if self._entry_type is not None and type(entry) is not self._entry_type:
            raise InvalidEntryError(
                f"Non-matching entry type {type(entry).__name__}, "
                f"expected {self._entry_type.__name__}"
            )

        found = self._index.get(entry)
        if found is not None:
            return found
        if self._growth_stopped or not add_if_not_present:
            return NOT_FOUND

        if self._entry_type is None:
            self._entry_type = type(entry)
        new_id = len(self._entries)
        self._entries.append(entry)
        self._index[entry] = new_id
        return new_id

    def lookup_object(self, index: int) -> Any:
        """Return the value assigned to an id.

        Raises:
            IndexOutOfRangeError: If index is negative or >= size().
        """
        if index < 0 or index >= len(self._entries):
            raise IndexOutOfRangeError(
                f"Alphabet id {index} out of range [0, {len(self._entries)})"
            )
        return self._entries[index]

    def lookup_indices(
        self, entries: Iterable[Any], add_if_not_present: bool = True
    ) -> list[int]:
        """Look up several entries at once."""
        return [self.lookup_index(e, add_if_not_present) for e in entries]

    def lookup_objects(self, indices: Iterable[int]) -> list[Any]:
        """Resolve several ids at once."""
        return [self.lookup_object(i) for i in indices]

    def contains(self, entry: Any) -> bool:
        """Check if an entry has an id, without type checking."""
        return entry in self._index

    def __contains__(self, entry: object) -> bool:
        return self.contains(entry)

    def size(self) -> int:
        """Return the number of distinct entries."""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        yield from self._entries

    def to_list(self) -> list[Any]:
        """Return a copy of the entries in id order."""
        return list(self._entries)

    @property
    def entry_type(self) -> type | None:
        """The type all entries share, or None while empty and untyped."""
        return self._entry_type

    # Growth control

    def stop_growth(self) -> None:
        """Stop assigning ids to unknown entries."""
        self._growth_stopped = True

    def start_growth(self) -> None:
        """Resume assigning ids to unknown entries."""
        self._growth_stopped = False

    @property
    def growth_stopped(self) -> bool:
        """True if unknown entries are currently rejected."""
        return self._growth_stopped

    # Display

    def __str__(self) -> str:
        return "".join(f"{entry}\n" for entry in self._entries)

    def __repr__(self) -> str:
        type_name = self._entry_type.__name__ if self._entry_type else None
        return f"Alphabet(size={len(self._entries)}, entry_type={type_name})"

    def dump(self, out: IO[str]) -> None:
        """Write one ``id => entry`` line per entry."""
        for i, entry in enumerate(self._entries):
            out.write(f"{i} => {entry}\n")


def alphabets_match(
    first: Sequence[Alphabet | None], second: Sequence[Alphabet | None]
) -> bool:
    """Check if two sequences of alphabets match position by position.

    Alphabets match if they are the same object or both are non-None and
    hold equal entries in the same order.
    """
    if len(first) != len(second):
        return False
    for a, b in zip(first, second):
        if a is b:
            continue
        if a is None or b is None:
            return False
        if a.to_list() != b.to_list():
            return False
    return True


__all__ = [
    "NOT_FOUND",
    "Alphabet",
    "AlphabetError",
    "IndexOutOfRangeError",
    "InvalidEntryError",
    "NullEntryError",
    "alphabets_match",
]
