"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


STYLE_PANEL = "Style"
SOURCE_PANEL = "Font Sources"
DIAGNOSTICS_PANEL = "Diagnostics"

FamiliesArgument = Annotated[
    str,
    typer.Argument(
        metavar="FAMILIES",
        help="Comma separated family preferences, e.g. \"'Helvetica Neue', Arial, sans-serif\".",
    ),
]

WeightOption = Annotated[
    str,
    typer.Option(
        "--weight",
        "-w",
        help="Requested weight: a number (100-900) or a keyword such as 'bold'.",
        rich_help_panel=STYLE_PANEL,
    ),
]

StyleOption = Annotated[
    str,
    typer.Option(
        "--style",
        "-s",
        help="Requested style: normal, italic or oblique.",
        rich_help_panel=STYLE_PANEL,
    ),
]

StretchOption = Annotated[
    str,
    typer.Option(
        "--stretch",
        help="Requested stretch: a ratio (1.0), a percentage (75%) or a keyword.",
        rich_help_panel=STYLE_PANEL,
    ),
]

FamilyFilterOption = Annotated[
    str | None,
    typer.Option(
        "--family",
        "-f",
        help="Only list faces of this family.",
    ),
]

FontDirOption = Annotated[
    list[Path] | None,
    typer.Option(
        "--font-dir",
        "-d",
        help="Additional directory to scan for font files (repeatable).",
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        rich_help_panel=SOURCE_PANEL,
    ),
]

NoSystemFontsOption = Annotated[
    bool,
    typer.Option(
        "--no-system-fonts",
        help="Only use fonts from --font-dir directories.",
        rich_help_panel=SOURCE_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML configuration file (defaults to $FONTMATCH_CONFIG).",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        rich_help_panel=SOURCE_PANEL,
    ),
]

VerbosityOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase diagnostic verbosity (repeatable).",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks on unexpected errors.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "ConfigOption",
    "DebugOption",
    "FamiliesArgument",
    "FamilyFilterOption",
    "FontDirOption",
    "NoSystemFontsOption",
    "StretchOption",
    "StyleOption",
    "VerbosityOption",
    "WeightOption",
]
