"""Candidate groups: fonts sharing a family name."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from fontmatch.descriptor import Descriptor
from fontmatch.exceptions import NotFoundError
from fontmatch.handle import Handle
from fontmatch.matching import find_best_match
from fontmatch.properties import Properties


@dataclass(frozen=True, slots=True)
class FontRecord:
    """A handle paired with the descriptor read from it."""

    handle: Handle
    descriptor: Descriptor

    @property
    def family_name(self) -> str:
        return self.descriptor.family_name

    @property
    def properties(self) -> Properties:
        return self.descriptor.properties


@dataclass(frozen=True, slots=True)
class Family:
    """Ordered members of one font family."""

    name: str
    records: tuple[FontRecord, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[FontRecord]:
        return iter(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)

    @property
    def handles(self) -> list[Handle]:
        return [record.handle for record in self.records]

    @property
    def descriptors(self) -> list[Descriptor]:
        return [record.descriptor for record in self.records]

    def properties(self) -> list[Properties]:
        return [record.properties for record in self.records]

    def best_match(self, query: Properties) -> FontRecord:
        """Return the member closest to ``query``; raises ``NotFoundError`` when empty."""
        if not self.records:
            raise NotFoundError(f"Font family '{self.name}' has no members.")
        return self.records[find_best_match(self.properties(), query)]


def group_by_family(
    records: Iterable[FontRecord], *, sort: bool = False
) -> dict[str, list[FontRecord]]:
    """Group ``records`` by family name, keeping their relative input order.

    With ``sort=True`` the families are keyed in alphabetical order, which is
    what sources enumerating a sorted database expect.
    """
    groups: dict[str, list[FontRecord]] = {}
    for record in records:
        groups.setdefault(record.family_name, []).append(record)
    if sort:
        return {name: groups[name] for name in sorted(groups)}
    return groups


@dataclass(frozen=True, slots=True)
class FontSet:
    """A collection of families, typically the result of a listing query."""

    families: tuple[Family, ...] = field(default_factory=tuple)

    @classmethod
    def from_records(cls, records: Iterable[FontRecord], *, sort: bool = True) -> FontSet:
        grouped = group_by_family(records, sort=sort)
        return cls(tuple(Family(name, tuple(items)) for name, items in grouped.items()))

    def __iter__(self) -> Iterator[Family]:
        return iter(self.families)

    def __len__(self) -> int:
        return len(self.families)

    @property
    def family_names(self) -> list[str]:
        return [family.name for family in self.families]

    def records(self) -> Sequence[FontRecord]:
        return [record for family in self.families for record in family]


__all__ = ["Family", "FontRecord", "FontSet", "group_by_family"]
