"""A source backed by fontconfig's ``fc-list`` and ``fc-match`` tools."""

from __future__ import annotations

import logging
import os
from pathlib import Path
import shutil
import subprocess

from fontmatch.config import GenericFamilies
from fontmatch.descriptor import Descriptor
from fontmatch.diagnostics import DiagnosticEmitter
from fontmatch.exceptions import CannotAccessSourceError, NotFoundError
from fontmatch.family import Family, FontRecord, group_by_family
from fontmatch.family_name import GenericFamily, normalize_family
from fontmatch.handle import Handle, PathHandle
from fontmatch.properties import Properties, Stretch, Style, Weight
from fontmatch.sources.base import Source


logger = logging.getLogger(__name__)

SKIP_ENV_VAR = "FONTMATCH_SKIP_FONTCONFIG"

LIST_FIELDS = (
    "file",
    "index",
    "family",
    "postscriptname",
    "fullname",
    "style",
    "weight",
    "width",
    "slant",
    "spacing",
)
LIST_FORMAT = "|".join(f"%{{{name}}}" for name in LIST_FIELDS) + "\n"

FC_SLANT_ITALIC = 100
FC_SLANT_OBLIQUE = 110
FC_WIDTH_NORMAL = 100
FC_WEIGHT_REGULAR = 80
FC_SPACING_MONO = 100
FC_SPACING_CHARCELL = 110

# (fontconfig weight, CSS weight) pairs from fontconfig's weight table.
_WEIGHT_MAP: tuple[tuple[float, float], ...] = (
    (0, 100),
    (40, 200),
    (50, 300),
    (55, 350),
    (75, 380),
    (80, 400),
    (100, 500),
    (180, 600),
    (200, 700),
    (205, 800),
    (210, 900),
    (215, 1000),
)


# (fontconfig width, CSS stretch) pairs for fontconfig's width keywords.
_WIDTH_MAP: tuple[tuple[float, float], ...] = (
    (50, 0.5),
    (63, 0.625),
    (75, 0.75),
    (87, 0.875),
    (100, 1.0),
    (113, 1.125),
    (125, 1.25),
    (150, 1.5),
    (200, 2.0),
)


def _interpolate(table: tuple[tuple[float, float], ...], value: float) -> float:
    if value <= table[0][0]:
        return table[0][1]
    for (fc_low, css_low), (fc_high, css_high) in zip(table, table[1:]):
        if value <= fc_high:
            ratio = (value - fc_low) / (fc_high - fc_low)
            return css_low + ratio * (css_high - css_low)
    return table[-1][1]


def fc_weight_to_css(value: float) -> Weight:
    """Interpolate a fontconfig weight onto the CSS 100-1000 scale."""
    return Weight(_interpolate(_WEIGHT_MAP, value))


def fc_width_to_stretch(value: float) -> Stretch:
    """Map a fontconfig width onto the CSS stretch keywords, interpolating between them."""
    return Stretch(_interpolate(_WIDTH_MAP, value))


def fc_slant_to_style(value: float) -> Style:
    if value >= FC_SLANT_OBLIQUE:
        return Style.OBLIQUE
    if value >= FC_SLANT_ITALIC:
        return Style.ITALIC
    return Style.NORMAL


def fontconfig_available() -> bool:
    """Return True when ``fc-list`` is installed and not disabled by the environment."""
    if os.environ.get(SKIP_ENV_VAR):
        return False
    return shutil.which("fc-list") is not None


def _first_value(raw: str) -> str:
    """Return the first entry of a fontconfig value list (``a,b`` or ``[a b]``)."""
    text = raw.strip()
    if text.startswith("[") and text.endswith("]"):
        items = text[1:-1].split()
        text = items[0] if items else ""
    return text.split(",")[0].strip()


def _number(raw: str, default: float) -> float:
    value = _first_value(raw)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def parse_fc_list_line(line: str) -> FontRecord | None:
    """Convert one ``fc-list`` output line into a record; ``None`` when unusable."""
    parts = line.split("|")
    if len(parts) != len(LIST_FIELDS):
        return None
    fields = dict(zip(LIST_FIELDS, parts, strict=True))
    file_part = fields["file"].strip()
    family = _first_value(fields["family"])
    if not file_part or not family:
        return None
    index = int(_number(fields["index"], 0))
    if index >> 16:
        # Named instances of variable fonts share the face of their base index.
        return None

    properties = Properties(
        style=fc_slant_to_style(_number(fields["slant"], 0)),
        weight=fc_weight_to_css(_number(fields["weight"], FC_WEIGHT_REGULAR)),
        stretch=fc_width_to_stretch(_number(fields["width"], FC_WIDTH_NORMAL)),
    )
    spacing = _number(fields["spacing"], 0)
    descriptor = Descriptor.build(
        postscript_name=_first_value(fields["postscriptname"]),
        display_name=_first_value(fields["fullname"]),
        family_name=family,
        style_name=_first_value(fields["style"]),
        properties=properties,
        monospace=spacing in (FC_SPACING_MONO, FC_SPACING_CHARCELL),
    )
    return FontRecord(PathHandle(Path(file_part), index), descriptor)


class FontconfigSource(Source):
    """Fonts enumerated through fontconfig.

    The listing is read once, on first use, and kept until ``refresh``.
    Generic family keywords that are not family names themselves are resolved
    with ``fc-match``.
    """

    def __init__(
        self,
        *,
        generic_families: GenericFamilies | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        super().__init__(generic_families=generic_families, emitter=emitter)
        self._families: dict[str, list[FontRecord]] | None = None

    def _run(self, *args: str) -> str:
        command = args[0]
        if shutil.which(command) is None:
            raise CannotAccessSourceError(f"'{command}' is not installed")
        try:
            proc = subprocess.run(
                list(args),
                check=True,
                capture_output=True,
                text=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise CannotAccessSourceError(f"'{command}' failed: {exc}") from exc
        return proc.stdout

    def refresh(self) -> None:
        """Drop the cached listing."""
        self._families = None

    def _index(self) -> dict[str, list[FontRecord]]:
        if self._families is None:
            output = self._run("fc-list", "-f", LIST_FORMAT)
            records: list[FontRecord] = []
            seen: set[tuple[Path, int]] = set()
            for line in output.splitlines():
                record = parse_fc_list_line(line)
                if record is None:
                    continue
                key = (record.handle.path, record.handle.font_index)
                if key in seen:
                    continue
                seen.add(key)
                records.append(record)
            logger.debug("fontconfig listed %d face(s)", len(records))
            grouped = group_by_family(records, sort=True)
            self._families = {}
            for members in grouped.values():
                key = normalize_family(members[0].family_name)
                self._families.setdefault(key, []).extend(members)
        return self._families

    def all_fonts(self) -> list[Handle]:
        return [record.handle for members in self._index().values() for record in members]

    def all_families(self) -> list[str]:
        return [members[0].family_name for members in self._index().values()]

    def all_records(self) -> list[FontRecord]:
        return [record for members in self._index().values() for record in members]

    def match_family(self, pattern: str) -> str | None:
        """Return the family fontconfig substitutes for ``pattern``."""
        output = self._run("fc-match", "-f", "%{family}", pattern)
        family = _first_value(output)
        return family or None

    def select_family_by_name(self, family_name: str) -> Family:
        index = self._index()
        members = index.get(normalize_family(family_name))
        if not members and family_name.strip().casefold() in {item.value for item in GenericFamily}:
            substitute = self.match_family(family_name)
            logger.debug("fc-match resolved '%s' to '%s'", family_name, substitute)
            if substitute:
                members = index.get(normalize_family(substitute))
        if not members:
            raise NotFoundError(f"Unknown font family '{family_name}'.")
        return Family(members[0].family_name, tuple(members))


__all__ = [
    "LIST_FORMAT",
    "SKIP_ENV_VAR",
    "FontconfigSource",
    "fc_slant_to_style",
    "fc_weight_to_css",
    "fc_width_to_stretch",
    "fontconfig_available",
    "parse_fc_list_line",
]
