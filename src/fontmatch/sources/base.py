"""Abstract font source and the best-match search over family preferences."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
import logging

from fontmatch.config import GenericFamilies
from fontmatch.descriptor import Query
from fontmatch.diagnostics import DiagnosticEmitter, NullEmitter
from fontmatch.exceptions import NotFoundError
from fontmatch.family import Family, FontRecord, FontSet
from fontmatch.family_name import FamilyName, GenericFamily, parse_family_name
from fontmatch.handle import Handle
from fontmatch.matching import find_best_match
from fontmatch.properties import Properties


logger = logging.getLogger(__name__)


class Source(ABC):
    """A provider of font records, searchable by family and PostScript name.

    Subclasses implement the three enumeration primitives; the selection
    helpers are shared. Lookups that find nothing raise ``NotFoundError``;
    a source that cannot be queried at all raises ``CannotAccessSourceError``,
    which is never swallowed by the helpers below.
    """

    def __init__(
        self,
        *,
        generic_families: GenericFamilies | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.generic_families = generic_families or GenericFamilies.for_platform()
        self.emitter: DiagnosticEmitter = emitter or NullEmitter()

    @abstractmethod
    def all_fonts(self) -> list[Handle]:
        """Return a handle for every face known to the source."""

    @abstractmethod
    def all_families(self) -> list[str]:
        """Return the distinct family names known to the source."""

    @abstractmethod
    def select_family_by_name(self, family_name: str) -> Family:
        """Return the members of ``family_name``; raises ``NotFoundError`` if unknown."""

    def all_records(self) -> list[FontRecord]:
        records: list[FontRecord] = []
        for family_name in self.all_families():
            records.extend(self.select_family_by_name(family_name))
        return records

    def font_set(self) -> FontSet:
        return FontSet.from_records(self.all_records())

    def select(self, query: Query) -> list[FontRecord]:
        """Return every record matching the constrained fields of ``query``."""
        if query.family_name is not None:
            try:
                candidates = list(self.select_family_by_name(query.family_name))
            except NotFoundError:
                return []
        else:
            candidates = self.all_records()
        if query.is_universal:
            return candidates
        return [record for record in candidates if query.matches(record.descriptor)]

    def select_by_postscript_name(self, postscript_name: str) -> Handle:
        """Scan every family for a face with the given PostScript name."""
        for family_name in self.all_families():
            try:
                family = self.select_family_by_name(family_name)
            except NotFoundError:
                continue
            for record in family:
                if record.descriptor.postscript_name == postscript_name:
                    return record.handle
        raise NotFoundError(f"No font with PostScript name '{postscript_name}'.")

    def select_family_by_generic_name(self, family_name: FamilyName) -> Family:
        """Resolve a title directly and a generic family through ``generic_families``."""
        if isinstance(family_name, GenericFamily):
            resolved = self.generic_families.resolve(family_name)
            logger.debug("Generic family %s resolves to '%s'", family_name, resolved)
            return self.select_family_by_name(resolved)
        return self.select_family_by_name(family_name.name)

    def select_descriptions_in_family(self, family: Family) -> list[Properties]:
        return family.properties()

    def select_best_record(
        self,
        family_names: Iterable[FamilyName | str],
        properties: Properties | None = None,
    ) -> FontRecord:
        """Return the record of the first family preference that yields a match."""
        properties = properties or Properties()
        preferences = [parse_family_name(item) for item in family_names]
        for preference in preferences:
            try:
                family = self.select_family_by_generic_name(preference)
                candidates = self.select_descriptions_in_family(family)
                index = find_best_match(candidates, properties)
            except NotFoundError as exc:
                self.emitter.event("family_skipped", {"family": str(preference), "reason": str(exc)})
                continue
            record = family.records[index]
            self.emitter.event(
                "font_matched",
                {"family": family.name, "postscript_name": record.descriptor.postscript_name},
            )
            return record
        wanted = ", ".join(str(item) for item in preferences) or "<none>"
        raise NotFoundError(f"No font matched {properties.describe()} in families: {wanted}.")

    def select_best_match(
        self,
        family_names: Iterable[FamilyName | str],
        properties: Properties | None = None,
    ) -> Handle:
        """Return the handle of the best face among the first family that matches.

        Families are tried in order; a family that is unknown or empty is
        skipped. ``NotFoundError`` is raised once every preference failed.
        """
        return self.select_best_record(family_names, properties).handle


__all__ = ["Source"]
