"""Immutable value objects describing a classical PDF cross-reference table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

__all__ = ["XRefEntry", "XRefSubsection", "XRefTable", "MAX_OFFSET", "MAX_GENERATION"]

# Upper bounds implied by the fixed 10 and 5 digit record fields.
MAX_OFFSET = 9_999_999_999
MAX_GENERATION = 99_999


@dataclass(frozen=True, slots=True)
class XRefEntry:
    """Location record for a single object."""

    offset: int
    generation_number: int
    in_use: bool

    def __post_init__(self) -> None:
        if not 0 <= self.offset <= MAX_OFFSET:
            raise ValueError(f"Offset out of range: {self.offset}")
        if not 0 <= self.generation_number <= MAX_GENERATION:
            raise ValueError(f"Generation number out of range: {self.generation_number}")

    @classmethod
    def create(cls, offset: int, generation_number: int, in_use: bool) -> "XRefEntry":
        return cls(offset=offset, generation_number=generation_number, in_use=bool(in_use))

    @property
    def flag(self) -> str:
        return "n" if self.in_use else "f"

    def to_string(self) -> str:
        """Render the canonical 20 byte record, including its two byte EOL."""

        return f"{self.offset:010d} {self.generation_number:05d} {self.flag} \n"


@dataclass(frozen=True, slots=True)
class XRefSubsection:
    """Contiguous run of entries starting at ``first_object_number``."""

    first_object_number: int
    entries: tuple[XRefEntry, ...] = ()

    def __post_init__(self) -> None:
        if self.first_object_number < 0:
            raise ValueError(f"First object number must be non-negative: {self.first_object_number}")

    @classmethod
    def from_entries(
        cls, entries: Iterable[XRefEntry], *, first_object_number: int = 0
    ) -> "XRefSubsection":
        return cls(first_object_number=first_object_number, entries=tuple(entries))

    def __len__(self) -> int:
        return len(self.entries)

    def object_numbers(self) -> range:
        return range(self.first_object_number, self.first_object_number + len(self.entries))

    def to_string(self) -> str:
        header = f"{self.first_object_number} {len(self.entries)}\n"
        return header + "".join(entry.to_string() for entry in self.entries)


@dataclass(frozen=True, slots=True)
class XRefTable:
    """Cross-reference table for one document revision."""

    subsections: tuple[XRefSubsection, ...] = ()

    @classmethod
    def from_subsections(cls, subsections: Iterable[XRefSubsection]) -> "XRefTable":
        return cls(subsections=tuple(subsections))

    @property
    def entry_count(self) -> int:
        return sum(len(subsection) for subsection in self.subsections)

    def iter_entries(self) -> Iterator[tuple[int, XRefEntry]]:
        """Yield ``(object_number, entry)`` pairs in table order."""

        for subsection in self.subsections:
            yield from zip(subsection.object_numbers(), subsection.entries)

    def object_offsets(self) -> dict[tuple[int, int], int]:
        """Map ``(object_number, generation)`` to byte offset for in-use entries."""

        offsets: dict[tuple[int, int], int] = {}
        for object_number, entry in self.iter_entries():
            if not entry.in_use:
                continue
            offsets.setdefault((object_number, entry.generation_number), entry.offset)
        return offsets

    def to_string(self) -> str:
        return "xref\n" + "".join(subsection.to_string() for subsection in self.subsections)

    def to_bytes(self) -> bytes:
        return self.to_string().encode("latin-1")

    def bytes_size(self) -> int:
        return len(self.to_bytes())
