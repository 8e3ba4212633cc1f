"""A source chaining several other sources."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from fontmatch.config import GenericFamilies
from fontmatch.diagnostics import DiagnosticEmitter
from fontmatch.exceptions import NotFoundError
from fontmatch.family import Family, FontRecord
from fontmatch.handle import Handle
from fontmatch.sources.base import Source


_T = TypeVar("_T")


class MultiSource(Source):
    """Query subsources in order.

    A subsource raising ``NotFoundError`` hands over to the next one; any other
    error stops the search.
    """

    def __init__(
        self,
        subsources: Iterable[Source],
        *,
        generic_families: GenericFamilies | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        super().__init__(generic_families=generic_families, emitter=emitter)
        self.subsources: list[Source] = list(subsources)

    def _first(self, lookup: Callable[[Source], _T], what: str) -> _T:
        for subsource in self.subsources:
            try:
                return lookup(subsource)
            except NotFoundError:
                continue
        raise NotFoundError(f"{what} was not found in any source.")

    def all_fonts(self) -> list[Handle]:
        return [handle for subsource in self.subsources for handle in subsource.all_fonts()]

    def all_families(self) -> list[str]:
        return [name for subsource in self.subsources for name in subsource.all_families()]

    def all_records(self) -> list[FontRecord]:
        return [record for subsource in self.subsources for record in subsource.all_records()]

    def select_family_by_name(self, family_name: str) -> Family:
        return self._first(
            lambda source: source.select_family_by_name(family_name),
            f"Font family '{family_name}'",
        )

    def select_by_postscript_name(self, postscript_name: str) -> Handle:
        return self._first(
            lambda source: source.select_by_postscript_name(postscript_name),
            f"PostScript name '{postscript_name}'",
        )


__all__ = ["MultiSource"]
