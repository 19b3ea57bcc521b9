"""Entities - Value objects loaded from a citation dataset.

- Paper: One record of the dataset, identified by its index key
- Author, Venue, Year: Satellite values attached to a paper

Each entity is constructed from a single string field. Satellites compare
by value; papers compare by identity, since two records may share a title.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(eq=False)
class Paper:
    """A paper record.

    Attributes:
        title: Title from the record-start line.
        index_key: Stable identity key from the ``#index`` line, used to
            resolve citations. None until the record is sealed.
        citation_count: Citation count from the ``#citation`` line.
    """

    KIND: ClassVar[str] = "paper"

    title: str
    index_key: str | None = None
    citation_count: int | None = None

    @property
    def label(self) -> str:
        return self.title

    @property
    def is_sealed(self) -> bool:
        """True once the record's index key has been read."""
        return self.index_key is not None

    def __str__(self) -> str:
        if self.index_key is not None:
            return f"[{self.index_key}] {self.title}"
        return self.title


@dataclass(frozen=True)
class Author:
    """An author name."""

    KIND: ClassVar[str] = "author"

    name: str

    @property
    def label(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Venue:
    """A publication venue (conference or journal)."""

    KIND: ClassVar[str] = "venue"

    name: str

    @property
    def label(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Year:
    """A publication year, kept as the text it was read from."""

    KIND: ClassVar[str] = "year"

    value: str

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


Entity = Paper | Author | Venue | Year


__all__ = ["Author", "Entity", "Paper", "Venue", "Year"]
