"""Family names as requested by callers: a concrete title or a CSS generic class."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class GenericFamily(str, Enum):
    """The five CSS generic font families."""

    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    MONOSPACE = "monospace"
    CURSIVE = "cursive"
    FANTASY = "fantasy"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Title:
    """A concrete family name such as ``"Times New Roman"``."""

    name: str

    def __str__(self) -> str:
        return self.name


FamilyName = Title | GenericFamily

_GENERIC_ALIASES: dict[str, GenericFamily] = {
    "serif": GenericFamily.SERIF,
    "sans-serif": GenericFamily.SANS_SERIF,
    "sans": GenericFamily.SANS_SERIF,
    "sansserif": GenericFamily.SANS_SERIF,
    "monospace": GenericFamily.MONOSPACE,
    "mono": GenericFamily.MONOSPACE,
    "cursive": GenericFamily.CURSIVE,
    "fantasy": GenericFamily.FANTASY,
}


def parse_family_name(value: str | FamilyName) -> FamilyName:
    """Return the generic family for CSS keywords, a ``Title`` otherwise.

    Quoted names are always titles, so ``"'serif'"`` names a family literally
    called *serif*.
    """
    if isinstance(value, (Title, GenericFamily)):
        return value
    text = value.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in {"'", '"'}:
        return Title(text[1:-1].strip())
    generic = _GENERIC_ALIASES.get(text.casefold())
    if generic is not None:
        return generic
    return Title(text)


def parse_family_list(value: str | Iterable[str]) -> list[FamilyName]:
    """Split a CSS ``font-family`` list into ordered preferences."""
    items = value.split(",") if isinstance(value, str) else list(value)
    families: list[FamilyName] = []
    for item in items:
        if not item.strip():
            continue
        family = parse_family_name(item)
        if isinstance(family, Title) and not family.name:
            continue
        families.append(family)
    return families


def normalize_family(name: str) -> str:
    """Return a normalised font family key suitable for lookups."""
    return " ".join(name.casefold().split())


__all__ = [
    "FamilyName",
    "GenericFamily",
    "Title",
    "normalize_family",
    "parse_family_list",
    "parse_family_name",
]
