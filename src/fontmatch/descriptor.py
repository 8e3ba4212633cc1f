"""Font descriptors and partial descriptors used as queries."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Flag, auto

from fontmatch.family_name import normalize_family
from fontmatch.properties import Properties, Stretch, Style, Weight


class FontFlags(Flag):
    """Boolean traits of a font face."""

    NONE = 0
    ITALIC = auto()
    MONOSPACE = auto()
    VERTICAL = auto()


@dataclass(frozen=True, slots=True)
class Descriptor:
    """Names, style attributes and flags describing one font face."""

    postscript_name: str = ""
    display_name: str = ""
    family_name: str = ""
    style_name: str = ""
    properties: Properties = field(default_factory=Properties)
    flags: FontFlags = FontFlags.NONE

    @classmethod
    def build(
        cls,
        *,
        postscript_name: str = "",
        display_name: str = "",
        family_name: str = "",
        style_name: str = "",
        properties: Properties | None = None,
        monospace: bool = False,
        vertical: bool = False,
    ) -> Descriptor:
        """Create a descriptor whose ``ITALIC`` flag follows ``properties.style``."""
        properties = properties or Properties()
        flags = FontFlags.NONE
        if properties.style is not Style.NORMAL:
            flags |= FontFlags.ITALIC
        if monospace:
            flags |= FontFlags.MONOSPACE
        if vertical:
            flags |= FontFlags.VERTICAL
        return cls(
            postscript_name=postscript_name,
            display_name=display_name or postscript_name,
            family_name=family_name,
            style_name=style_name,
            properties=properties,
            flags=flags,
        )

    @property
    def style(self) -> Style:
        return self.properties.style

    @property
    def weight(self) -> Weight:
        return self.properties.weight

    @property
    def stretch(self) -> Stretch:
        return self.properties.stretch

    @property
    def is_italic(self) -> bool:
        return FontFlags.ITALIC in self.flags

    @property
    def is_monospace(self) -> bool:
        return FontFlags.MONOSPACE in self.flags

    @property
    def is_vertical(self) -> bool:
        return FontFlags.VERTICAL in self.flags


@dataclass(slots=True)
class Query:
    """A partial descriptor: only the fields that are set constrain a lookup.

    ``None`` means "not constrained", which keeps an explicitly requested
    default (``weight=Weight.NORMAL``) distinct from an absent one.
    """

    postscript_name: str | None = None
    display_name: str | None = None
    family_name: str | None = None
    style_name: str | None = None
    style: Style | None = None
    weight: Weight | None = None
    stretch: Stretch | None = None
    flags: FontFlags | None = None

    @property
    def is_universal(self) -> bool:
        """Return True when no field is constrained."""
        return all(getattr(self, item.name) is None for item in fields(self))

    def properties(self) -> Properties:
        """Return the style attributes to match against, defaults filling gaps."""
        defaults = Properties()
        return Properties(
            style=self.style if self.style is not None else defaults.style,
            weight=self.weight if self.weight is not None else defaults.weight,
            stretch=self.stretch if self.stretch is not None else defaults.stretch,
        )

    def matches(self, descriptor: Descriptor) -> bool:
        """Return True when every constrained field agrees with ``descriptor``.

        Names compare case-insensitively; ``flags`` requires the listed flags
        to be present.
        """
        names = (
            (self.postscript_name, descriptor.postscript_name),
            (self.display_name, descriptor.display_name),
            (self.family_name, descriptor.family_name),
            (self.style_name, descriptor.style_name),
        )
        for wanted, actual in names:
            if wanted is not None and normalize_family(wanted) != normalize_family(actual):
                return False
        if self.style is not None and descriptor.style is not self.style:
            return False
        if self.weight is not None and descriptor.weight != self.weight:
            return False
        if self.stretch is not None and descriptor.stretch != self.stretch:
            return False
        if self.flags is not None and (descriptor.flags & self.flags) != self.flags:
            return False
        return True


__all__ = ["Descriptor", "FontFlags", "Query"]
