"""Style attributes describing a font face on the CSS scales.

``Weight`` and ``Stretch`` are thin ordered wrappers around a float so that
they can carry named constants (``Weight.BOLD``, ``Stretch.CONDENSED``) while
still comparing numerically. ``Properties`` bundles the three axes that the
matching engine compares.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
import math
from typing import ClassVar

from fontmatch.exceptions import InvalidPropertiesError


class Style(Enum):
    """CSS ``font-style`` axis."""

    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"

    @classmethod
    def parse(cls, value: str | Style) -> Style:
        """Return the style named by ``value`` (case-insensitive)."""
        if isinstance(value, Style):
            return value
        key = value.strip().casefold()
        if key in {"regular", "roman", "upright"}:
            return cls.NORMAL
        try:
            return cls(key)
        except ValueError as exc:
            raise ValueError(f"Unknown font style '{value}'.") from exc

    def __str__(self) -> str:
        return self.value


def _ordered(value: float, axis: str) -> float:
    number = float(value)
    if math.isnan(number):
        raise InvalidPropertiesError(f"{axis} must be an orderable number, got NaN.")
    return number


@dataclass(frozen=True, slots=True, order=True)
class Weight:
    """CSS ``font-weight`` value, conventionally between 100 and 900."""

    value: float = 400.0

    THIN: ClassVar[Weight]
    EXTRA_LIGHT: ClassVar[Weight]
    LIGHT: ClassVar[Weight]
    NORMAL: ClassVar[Weight]
    MEDIUM: ClassVar[Weight]
    SEMIBOLD: ClassVar[Weight]
    BOLD: ClassVar[Weight]
    EXTRA_BOLD: ClassVar[Weight]
    BLACK: ClassVar[Weight]

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _ordered(self.value, "Weight"))

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:g}"


Weight.THIN = Weight(100.0)
Weight.EXTRA_LIGHT = Weight(200.0)
Weight.LIGHT = Weight(300.0)
Weight.NORMAL = Weight(400.0)
Weight.MEDIUM = Weight(500.0)
Weight.SEMIBOLD = Weight(600.0)
Weight.BOLD = Weight(700.0)
Weight.EXTRA_BOLD = Weight(800.0)
Weight.BLACK = Weight(900.0)


@dataclass(frozen=True, slots=True, order=True)
class Stretch:
    """CSS ``font-stretch`` value as a width ratio, ``1.0`` being normal."""

    value: float = 1.0

    ULTRA_CONDENSED: ClassVar[Stretch]
    EXTRA_CONDENSED: ClassVar[Stretch]
    CONDENSED: ClassVar[Stretch]
    SEMI_CONDENSED: ClassVar[Stretch]
    NORMAL: ClassVar[Stretch]
    SEMI_EXPANDED: ClassVar[Stretch]
    EXPANDED: ClassVar[Stretch]
    EXTRA_EXPANDED: ClassVar[Stretch]
    ULTRA_EXPANDED: ClassVar[Stretch]

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _ordered(self.value, "Stretch"))

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:g}"

    @classmethod
    def from_width_class(cls, width_class: int) -> Stretch:
        """Map an OpenType ``usWidthClass`` (1-9) onto the CSS scale.

        Values outside the defined range fall back to ``Stretch.NORMAL``.
        """
        if 1 <= width_class <= len(WIDTH_CLASS_STRETCHES):
            return WIDTH_CLASS_STRETCHES[width_class - 1]
        return cls.NORMAL


Stretch.ULTRA_CONDENSED = Stretch(0.5)
Stretch.EXTRA_CONDENSED = Stretch(0.625)
Stretch.CONDENSED = Stretch(0.75)
Stretch.SEMI_CONDENSED = Stretch(0.875)
Stretch.NORMAL = Stretch(1.0)
Stretch.SEMI_EXPANDED = Stretch(1.125)
Stretch.EXPANDED = Stretch(1.25)
Stretch.EXTRA_EXPANDED = Stretch(1.5)
Stretch.ULTRA_EXPANDED = Stretch(2.0)

WIDTH_CLASS_STRETCHES: tuple[Stretch, ...] = (
    Stretch.ULTRA_CONDENSED,
    Stretch.EXTRA_CONDENSED,
    Stretch.CONDENSED,
    Stretch.SEMI_CONDENSED,
    Stretch.NORMAL,
    Stretch.SEMI_EXPANDED,
    Stretch.EXPANDED,
    Stretch.EXTRA_EXPANDED,
    Stretch.ULTRA_EXPANDED,
)

_WEIGHT_NAMES: dict[str, Weight] = {
    "thin": Weight.THIN,
    "extralight": Weight.EXTRA_LIGHT,
    "light": Weight.LIGHT,
    "normal": Weight.NORMAL,
    "regular": Weight.NORMAL,
    "medium": Weight.MEDIUM,
    "semibold": Weight.SEMIBOLD,
    "bold": Weight.BOLD,
    "extrabold": Weight.EXTRA_BOLD,
    "black": Weight.BLACK,
}

_STRETCH_NAMES: dict[str, Stretch] = {
    "ultracondensed": Stretch.ULTRA_CONDENSED,
    "extracondensed": Stretch.EXTRA_CONDENSED,
    "condensed": Stretch.CONDENSED,
    "semicondensed": Stretch.SEMI_CONDENSED,
    "normal": Stretch.NORMAL,
    "semiexpanded": Stretch.SEMI_EXPANDED,
    "expanded": Stretch.EXPANDED,
    "extraexpanded": Stretch.EXTRA_EXPANDED,
    "ultraexpanded": Stretch.ULTRA_EXPANDED,
}


def _keyword(value: str) -> str:
    return "".join(ch for ch in value.casefold() if ch not in {" ", "-", "_"})


def parse_weight(value: str | float | Weight) -> Weight:
    """Accept a number or a CSS keyword such as ``"semi-bold"``."""
    if isinstance(value, Weight):
        return value
    if isinstance(value, str):
        named = _WEIGHT_NAMES.get(_keyword(value))
        if named is not None:
            return named
        try:
            return Weight(float(value))
        except ValueError as exc:
            raise ValueError(f"Unknown font weight '{value}'.") from exc
    return Weight(value)


def parse_stretch(value: str | float | Stretch) -> Stretch:
    """Accept a ratio, a percentage (``"75%"``) or a CSS keyword."""
    if isinstance(value, Stretch):
        return value
    if isinstance(value, str):
        text = value.strip()
        named = _STRETCH_NAMES.get(_keyword(text))
        if named is not None:
            return named
        try:
            if text.endswith("%"):
                return Stretch(float(text[:-1]) / 100.0)
            return Stretch(float(text))
        except ValueError as exc:
            raise ValueError(f"Unknown font stretch '{value}'.") from exc
    return Stretch(value)


@dataclass(frozen=True, slots=True)
class Properties:
    """Style, weight and stretch of one font face."""

    style: Style = Style.NORMAL
    weight: Weight = field(default_factory=lambda: Weight.NORMAL)
    stretch: Stretch = field(default_factory=lambda: Stretch.NORMAL)

    def with_style(self, style: Style) -> Properties:
        return replace(self, style=style)

    def with_weight(self, weight: Weight | float) -> Properties:
        if not isinstance(weight, Weight):
            weight = Weight(weight)
        return replace(self, weight=weight)

    def with_stretch(self, stretch: Stretch | float) -> Properties:
        if not isinstance(stretch, Stretch):
            stretch = Stretch(stretch)
        return replace(self, stretch=stretch)

    def describe(self) -> str:
        """Return a compact ``style weight stretch`` summary."""
        return f"{self.style} {self.weight} {self.stretch}"


__all__ = [
    "WIDTH_CLASS_STRETCHES",
    "Properties",
    "Stretch",
    "Style",
    "Weight",
    "parse_stretch",
    "parse_weight",
]
