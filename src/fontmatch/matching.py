"""CSS Fonts Level 3 font style matching.

``find_best_match`` narrows a list of candidate ``Properties`` in three fixed
stages (stretch, then style, then weight). Each stage computes a winning value
for its axis and keeps only the candidates carrying it; the first survivor in
input order is returned. The input sequence is never modified.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
import math
from typing import Protocol, TypeVar, runtime_checkable

from fontmatch.exceptions import InvalidPropertiesError, NotFoundError
from fontmatch.properties import Properties, Style


_NORMAL_STRETCH = 1.0
_NORMAL_WEIGHT = 400.0
_MEDIUM_WEIGHT = 500.0
_WEIGHT_MIDPOINT = 450.0

STYLE_PREFERENCES: dict[Style, tuple[Style, Style, Style]] = {
    Style.ITALIC: (Style.ITALIC, Style.OBLIQUE, Style.NORMAL),
    Style.OBLIQUE: (Style.OBLIQUE, Style.ITALIC, Style.NORMAL),
    Style.NORMAL: (Style.NORMAL, Style.OBLIQUE, Style.ITALIC),
}


@runtime_checkable
class StyledFont(Protocol):
    """Anything that can be matched: a family name plus style attributes."""

    @property
    def family_name(self) -> str: ...

    @property
    def properties(self) -> Properties: ...


_FontT = TypeVar("_FontT", bound=StyledFont)


def _scalar(value: object, axis: str) -> float:
    number = float(value)  # type: ignore[arg-type]
    if math.isnan(number):
        raise InvalidPropertiesError(f"{axis} must be an orderable number, got NaN.")
    return number


def _closest(values: Sequence[float], distance: Callable[[float], float]) -> float:
    return min(values, key=distance)


def match_stretch(values: Sequence[float], query: float) -> float:
    """Return the winning stretch among ``values`` (non-empty)."""
    if query in values:
        return query
    if query <= _NORMAL_STRETCH:
        narrower = [value for value in values if value < query]
        if narrower:
            return _closest(narrower, lambda value: query - value)
        return _closest(values, lambda value: value - query)
    wider = [value for value in values if value > query]
    if wider:
        return _closest(wider, lambda value: value - query)
    return _closest(values, lambda value: query - value)


def match_style(styles: Sequence[Style], query: Style) -> Style:
    """Return the first style of the query's preference list present in ``styles``."""
    present = set(styles)
    for style in STYLE_PREFERENCES[query]:
        if style in present:
            return style
    raise NotFoundError("No candidate style to match against.")


def match_weight(values: Sequence[float], query: float) -> float:
    """Return the winning weight among ``values`` (non-empty)."""
    if query in values:
        return query
    if _NORMAL_WEIGHT <= query < _WEIGHT_MIDPOINT and _MEDIUM_WEIGHT in values:
        return _MEDIUM_WEIGHT
    if _WEIGHT_MIDPOINT <= query <= _MEDIUM_WEIGHT and _NORMAL_WEIGHT in values:
        return _NORMAL_WEIGHT
    if query <= _MEDIUM_WEIGHT:
        lighter = [value for value in values if value <= query]
        if lighter:
            return _closest(lighter, lambda value: query - value)
        return _closest(values, lambda value: value - query)
    heavier = [value for value in values if value >= query]
    if heavier:
        return _closest(heavier, lambda value: value - query)
    return _closest(values, lambda value: query - value)


def find_best_match(candidates: Sequence[Properties], query: Properties) -> int:
    """Return the index of the candidate that best matches ``query``.

    Raises ``NotFoundError`` when ``candidates`` is empty and
    ``InvalidPropertiesError`` when a weight or stretch is NaN. When several
    candidates are indistinguishable the lowest index wins.
    """
    if not candidates:
        raise NotFoundError("No candidates to match against.")

    stretches = [_scalar(item.stretch, "Stretch") for item in candidates]
    weights = [_scalar(item.weight, "Weight") for item in candidates]
    query_stretch = _scalar(query.stretch, "Stretch")
    query_weight = _scalar(query.weight, "Weight")

    survivors = list(range(len(candidates)))

    best_stretch = match_stretch([stretches[index] for index in survivors], query_stretch)
    survivors = [index for index in survivors if stretches[index] == best_stretch]

    best_style = match_style([candidates[index].style for index in survivors], query.style)
    survivors = [index for index in survivors if candidates[index].style is best_style]

    best_weight = match_weight([weights[index] for index in survivors], query_weight)
    survivors = [index for index in survivors if weights[index] == best_weight]

    return survivors[0]


def select_best(fonts: Sequence[_FontT], query: Properties) -> _FontT:
    """Return the font from ``fonts`` whose properties best match ``query``."""
    index = find_best_match([font.properties for font in fonts], query)
    return fonts[index]


__all__ = [
    "STYLE_PREFERENCES",
    "StyledFont",
    "find_best_match",
    "match_stretch",
    "match_style",
    "match_weight",
    "select_best",
]
