"""Open font files with fontTools and describe them.

The ``FontLoader`` is an explicitly constructed object handed to the sources
that need to read font data; it keeps no global state.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import io
import logging
from pathlib import Path
import struct
from typing import Any

from fontTools.ttLib import TTFont, TTLibError

from fontmatch.descriptor import Descriptor
from fontmatch.exceptions import (
    FontLoadingError,
    FontParseError,
    GlyphLoadingError,
    NoFilesystemError,
    NoSuchFontInCollectionError,
    UnknownFormatError,
)
from fontmatch.handle import Handle, MemoryHandle, PathHandle
from fontmatch.properties import Properties, Stretch, Style, Weight


logger = logging.getLogger(__name__)

FONT_SUFFIXES = frozenset({".ttf", ".otf", ".ttc", ".otc", ".woff", ".woff2"})

_COLLECTION_TAG = b"ttcf"
_SINGLE_TAGS = frozenset({b"\x00\x01\x00\x00", b"OTTO", b"true", b"typ1", b"wOFF", b"wOF2"})

_NAME_FAMILY = 1
_NAME_SUBFAMILY = 2
_NAME_FULL = 4
_NAME_POSTSCRIPT = 6
_NAME_TYPOGRAPHIC_FAMILY = 16
_NAME_TYPOGRAPHIC_SUBFAMILY = 17

_FS_SELECTION_ITALIC = 1 << 0
_FS_SELECTION_OBLIQUE = 1 << 9
_MAC_STYLE_ITALIC = 1 << 1
_PANOSE_MONOSPACED = 9

_PARSE_ERRORS = (TTLibError, struct.error, EOFError, AssertionError, KeyError, IndexError)


@dataclass(frozen=True, slots=True)
class FileType:
    """Whether a file holds one face or a collection of ``font_count`` faces."""

    font_count: int = 1
    is_collection: bool = False

    @classmethod
    def single(cls) -> FileType:
        return cls()

    @classmethod
    def collection(cls, font_count: int) -> FileType:
        return cls(font_count=font_count, is_collection=True)


def analyze_bytes(data: bytes) -> FileType:
    """Sniff the sfnt header of ``data``."""
    tag = data[:4]
    if tag == _COLLECTION_TAG:
        if len(data) < 12:
            raise UnknownFormatError("Truncated font collection header.")
        (count,) = struct.unpack(">I", data[8:12])
        return FileType.collection(count)
    if tag in _SINGLE_TAGS:
        return FileType.single()
    raise UnknownFormatError(f"Unrecognised font signature {tag!r}.")


def analyze_path(path: Path) -> FileType:
    """Sniff the sfnt header of the file at ``path``."""
    try:
        with Path(path).open("rb") as handle:
            header = handle.read(12)
    except OSError as exc:
        raise FontLoadingError(f"Unable to read font file '{path}'.") from exc
    return analyze_bytes(header)


def _debug_name(name_table: Any, *name_ids: int) -> str:
    if name_table is None:
        return ""
    for name_id in name_ids:
        value = name_table.getDebugName(name_id)
        if value:
            return str(value).strip()
    return ""


def _style_from_tables(os2: Any, head: Any) -> Style:
    fs_selection = getattr(os2, "fsSelection", 0) if os2 is not None else 0
    if fs_selection & _FS_SELECTION_OBLIQUE:
        return Style.OBLIQUE
    if fs_selection & _FS_SELECTION_ITALIC:
        return Style.ITALIC
    if head is not None and getattr(head, "macStyle", 0) & _MAC_STYLE_ITALIC:
        return Style.ITALIC
    return Style.NORMAL


def _is_monospace(ttfont: Any, os2: Any) -> bool:
    if "post" in ttfont and getattr(ttfont["post"], "isFixedPitch", 0):
        return True
    panose = getattr(os2, "panose", None) if os2 is not None else None
    return getattr(panose, "bProportion", 0) == _PANOSE_MONOSPACED


def descriptor_from_ttfont(ttfont: Any) -> Descriptor:
    """Read names, style attributes and flags from a fontTools ``TTFont``."""
    name_table = ttfont["name"] if "name" in ttfont else None
    os2 = ttfont["OS/2"] if "OS/2" in ttfont else None
    head = ttfont["head"] if "head" in ttfont else None

    if os2 is not None and getattr(os2, "usWeightClass", 0) > 0:
        weight = Weight(float(os2.usWeightClass))
    else:
        weight = Weight.NORMAL
    width_class = getattr(os2, "usWidthClass", 0) if os2 is not None else 0
    properties = Properties(
        style=_style_from_tables(os2, head),
        weight=weight,
        stretch=Stretch.from_width_class(width_class),
    )

    postscript_name = _debug_name(name_table, _NAME_POSTSCRIPT)
    return Descriptor.build(
        postscript_name=postscript_name,
        display_name=_debug_name(name_table, _NAME_FULL) or postscript_name,
        family_name=_debug_name(name_table, _NAME_TYPOGRAPHIC_FAMILY, _NAME_FAMILY),
        style_name=_debug_name(name_table, _NAME_TYPOGRAPHIC_SUBFAMILY, _NAME_SUBFAMILY),
        properties=properties,
        monospace=_is_monospace(ttfont, os2),
        vertical="vhea" in ttfont,
    )


class Font:
    """A loaded face: its descriptor plus best-effort glyph lookup."""

    def __init__(self, ttfont: TTFont, handle: Handle) -> None:
        self._ttfont = ttfont
        self.handle = handle
        self.descriptor = descriptor_from_ttfont(ttfont)

    def __enter__(self) -> Font:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Font({self.postscript_name!r}, handle={self.handle!s})"

    @property
    def ttfont(self) -> TTFont:
        return self._ttfont

    @property
    def properties(self) -> Properties:
        return self.descriptor.properties

    @property
    def family_name(self) -> str:
        return self.descriptor.family_name

    @property
    def postscript_name(self) -> str:
        return self.descriptor.postscript_name

    @property
    def full_name(self) -> str:
        return self.descriptor.display_name

    @property
    def is_monospace(self) -> bool:
        return self.descriptor.is_monospace

    @property
    def glyph_count(self) -> int:
        return len(self._ttfont.getGlyphOrder())

    def glyph_for_char(self, character: str) -> int | None:
        """Return the glyph id mapped to ``character`` by the best cmap subtable.

        This is a single-codepoint lookup, not text shaping.
        """
        if len(character) != 1:
            raise ValueError("glyph_for_char expects a single character.")
        cmap = self._ttfont.getBestCmap() or {}
        glyph_name = cmap.get(ord(character))
        if glyph_name is None:
            return None
        return self._ttfont.getGlyphID(glyph_name)

    def glyph_by_name(self, name: str) -> int:
        """Return the glyph id for a glyph name; raises ``GlyphLoadingError`` if absent."""
        if name not in set(self._ttfont.getGlyphOrder()):
            raise GlyphLoadingError(f"Font '{self.postscript_name}' has no glyph named '{name}'.")
        return self._ttfont.getGlyphID(name)

    def close(self) -> None:
        self._ttfont.close()


class FontLoader:
    """Open handles with fontTools.

    ``lazy`` is forwarded to ``TTFont`` so that only the tables actually read
    are decompiled, which keeps directory scans cheap. A loader built with
    ``filesystem=False`` only accepts in-memory handles.
    """

    def __init__(self, *, lazy: bool = True, filesystem: bool = True) -> None:
        self.lazy = lazy
        self.filesystem = filesystem

    def _require_filesystem(self, path: Path) -> None:
        if not self.filesystem:
            raise NoFilesystemError(f"Cannot read '{path}': filesystem access is disabled.")

    def file_type(self, handle: Handle) -> FileType:
        if isinstance(handle, MemoryHandle):
            return analyze_bytes(handle.data)
        self._require_filesystem(handle.path)
        return analyze_path(handle.path)

    def handles_for_path(self, path: Path) -> list[PathHandle]:
        """Return one handle per face stored in ``path``."""
        self._require_filesystem(path)
        file_type = analyze_path(path)
        return [PathHandle(Path(path), index) for index in range(file_type.font_count)]

    def handles_for_bytes(self, data: bytes) -> list[MemoryHandle]:
        """Return one handle per face stored in ``data``."""
        file_type = analyze_bytes(data)
        return [MemoryHandle(data, index) for index in range(file_type.font_count)]

    def open(self, handle: Handle) -> TTFont:
        """Return the raw fontTools object for ``handle``."""
        file_type = self.file_type(handle)
        if handle.font_index < 0 or handle.font_index >= file_type.font_count:
            raise NoSuchFontInCollectionError(handle.font_index, file_type.font_count)
        options: dict[str, Any] = {"lazy": self.lazy}
        if file_type.is_collection:
            options["fontNumber"] = handle.font_index
        source: Any = (
            io.BytesIO(handle.data) if isinstance(handle, MemoryHandle) else str(handle.path)
        )
        try:
            return TTFont(source, **options)
        except OSError as exc:
            raise FontLoadingError(f"Unable to read font '{handle}'.") from exc
        except ImportError as exc:
            # WOFF2 decoding needs the optional brotli module.
            raise FontLoadingError(f"Unable to decode font '{handle}': {exc}") from exc
        except _PARSE_ERRORS as exc:
            raise FontParseError(f"Unable to parse font '{handle}': {exc}") from exc

    def load(self, handle: Handle) -> Font:
        """Open ``handle`` and wrap it in a ``Font``."""
        ttfont = self.open(handle)
        try:
            return Font(ttfont, handle)
        except _PARSE_ERRORS as exc:
            ttfont.close()
            raise FontParseError(f"Unable to parse font '{handle}': {exc}") from exc

    def describe(self, handle: Handle) -> Descriptor:
        """Return the descriptor of ``handle`` without keeping the font open."""
        with self.load(handle) as font:
            logger.debug("Described %s as %s", handle, font.descriptor.postscript_name)
            return font.descriptor

    def iter_directory(self, directory: Path) -> Iterator[Path]:
        """Yield font files below ``directory`` in a stable order."""
        if not directory.is_dir():
            return
        for path in sorted(directory.rglob("*")):
            if path.suffix.lower() in FONT_SUFFIXES and path.is_file():
                yield path


__all__ = [
    "FONT_SUFFIXES",
    "FileType",
    "Font",
    "FontLoader",
    "analyze_bytes",
    "analyze_path",
    "descriptor_from_ttfont",
]
