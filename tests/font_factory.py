"""Build small TrueType fonts on disk for tests."""

from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen


FS_SELECTION_ITALIC = 1 << 0
FS_SELECTION_BOLD = 1 << 5
FS_SELECTION_REGULAR = 1 << 6
FS_SELECTION_OBLIQUE = 1 << 9


def _box_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    return pen.glyph()


def build_font(
    path: Path,
    *,
    family: str,
    style: str = "Regular",
    postscript_name: str | None = None,
    weight: int = 400,
    width: int = 5,
    fs_selection: int = FS_SELECTION_REGULAR,
    monospace: bool = False,
) -> Path:
    """Write a minimal TrueType font with the given naming and OS/2 values."""
    glyph_order = [".notdef", "A", "B"]
    postscript_name = postscript_name or f"{family.replace(' ', '')}-{style.replace(' ', '')}"

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord("A"): "A", ord("B"): "B"})
    fb.setupGlyf({name: _box_glyph() for name in glyph_order})
    fb.setupHorizontalMetrics({name: (600, 100) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(
        {
            "familyName": family,
            "styleName": style,
            "uniqueFontIdentifier": f"{postscript_name};test",
            "fullName": f"{family} {style}",
            "psName": postscript_name,
            "version": "Version 1.000",
        }
    )
    fb.setupOS2(
        sTypoAscender=800,
        usWinAscent=800,
        usWinDescent=200,
        usWeightClass=weight,
        usWidthClass=width,
        fsSelection=fs_selection,
    )
    fb.setupPost(isFixedPitch=1 if monospace else 0)
    path.parent.mkdir(parents=True, exist_ok=True)
    fb.save(str(path))
    return path

