"""A source over fonts held in memory or already described."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable

from fontmatch.config import GenericFamilies
from fontmatch.diagnostics import DiagnosticEmitter
from fontmatch.exceptions import NotFoundError
from fontmatch.family import Family, FontRecord
from fontmatch.family_name import normalize_family
from fontmatch.handle import Handle
from fontmatch.loader import FontLoader
from fontmatch.sources.base import Source


class MemSource(Source):
    """Records kept sorted by family name and looked up by binary search.

    Family lookups ignore case and repeated whitespace. Faces of the same
    family keep the order in which they were added.
    """

    def __init__(
        self,
        records: Iterable[FontRecord] = (),
        *,
        loader: FontLoader | None = None,
        generic_families: GenericFamilies | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        super().__init__(generic_families=generic_families, emitter=emitter)
        self.loader = loader or FontLoader()
        self._records: list[FontRecord] = []
        self._keys: list[str] = []
        self._extend(records)

    @classmethod
    def from_fonts(
        cls,
        handles: Iterable[Handle],
        *,
        loader: FontLoader | None = None,
        generic_families: GenericFamilies | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> MemSource:
        """Describe every handle with ``loader``; loading errors propagate."""
        source = cls(loader=loader, generic_families=generic_families, emitter=emitter)
        source.add_fonts(handles)
        return source

    def _extend(self, records: Iterable[FontRecord]) -> None:
        self._records.extend(records)
        self._records.sort(key=lambda record: normalize_family(record.family_name))
        self._keys = [normalize_family(record.family_name) for record in self._records]

    def add_record(self, record: FontRecord) -> FontRecord:
        self._extend([record])
        return record

    def add_font(self, handle: Handle) -> FontRecord:
        """Describe ``handle`` and add it; returns the new record."""
        return self.add_record(FontRecord(handle, self.loader.describe(handle)))

    def add_fonts(self, handles: Iterable[Handle]) -> list[FontRecord]:
        records = [FontRecord(handle, self.loader.describe(handle)) for handle in handles]
        self._extend(records)
        return records

    def __len__(self) -> int:
        return len(self._records)

    def all_records(self) -> list[FontRecord]:
        return list(self._records)

    def all_fonts(self) -> list[Handle]:
        return [record.handle for record in self._records]

    def all_families(self) -> list[str]:
        families: list[str] = []
        previous: str | None = None
        for key, record in zip(self._keys, self._records, strict=True):
            if key == previous:
                continue
            previous = key
            families.append(record.family_name)
        return families

    def select_family_by_name(self, family_name: str) -> Family:
        key = normalize_family(family_name)
        start = bisect_left(self._keys, key)
        end = bisect_right(self._keys, key, lo=start)
        if start == end:
            raise NotFoundError(f"Unknown font family '{family_name}'.")
        members = tuple(self._records[start:end])
        return Family(members[0].family_name, members)

    def select_by_postscript_name(self, postscript_name: str) -> Handle:
        """Scan the flat record list rather than rebuilding every family."""
        for record in self._records:
            if record.descriptor.postscript_name == postscript_name:
                return record.handle
        raise NotFoundError(f"No font with PostScript name '{postscript_name}'.")


__all__ = ["MemSource"]
