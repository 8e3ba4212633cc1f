from pathlib import Path

import pytest

from font_factory import FS_SELECTION_BOLD, FS_SELECTION_ITALIC, build_font


@pytest.fixture
def demo_fonts(tmp_path: Path) -> Path:
    """A directory holding a four-face 'Demo Sans' family."""
    font_dir = tmp_path / "fonts"
    build_font(font_dir / "DemoSans-Regular.ttf", family="Demo Sans")
    build_font(
        font_dir / "DemoSans-Bold.ttf",
        family="Demo Sans",
        style="Bold",
        weight=700,
        fs_selection=FS_SELECTION_BOLD,
    )
    build_font(
        font_dir / "DemoSans-Italic.ttf",
        family="Demo Sans",
        style="Italic",
        fs_selection=FS_SELECTION_ITALIC,
    )
    build_font(
        font_dir / "condensed" / "DemoSans-Condensed.ttf",
        family="Demo Sans",
        style="Condensed",
        width=3,
    )
    return font_dir
