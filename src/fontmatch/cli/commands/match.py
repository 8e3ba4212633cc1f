"""``fontmatch match``: pick the best face for a family list and style."""

from __future__ import annotations

import typer

from fontmatch.exceptions import CannotAccessSourceError, NotFoundError
from fontmatch.family_name import parse_family_list
from fontmatch.properties import Properties, Style, parse_stretch, parse_weight

from .._options import (
    ConfigOption,
    FamiliesArgument,
    FontDirOption,
    NoSystemFontsOption,
    StretchOption,
    StyleOption,
    WeightOption,
)
from ..state import emit_error
from ..utils import format_handle, open_source, resolve_settings


def _parse_properties(style: str, weight: str, stretch: str) -> Properties:
    try:
        return Properties(
            style=Style.parse(style),
            weight=parse_weight(weight),
            stretch=parse_stretch(stretch),
        )
    except ValueError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=2) from exc


def match(
    families: FamiliesArgument,
    weight: WeightOption = "normal",
    style: StyleOption = "normal",
    stretch: StretchOption = "normal",
    font_dir: FontDirOption = None,
    no_system_fonts: NoSystemFontsOption = False,
    config: ConfigOption = None,
) -> None:
    """Print the font that best matches FAMILIES and the requested style."""
    properties = _parse_properties(style, weight, stretch)
    preferences = parse_family_list(families)
    if not preferences:
        emit_error("No font family given.")
        raise typer.Exit(code=2)

    settings = resolve_settings(config, font_dir, no_system_fonts=no_system_fonts)
    source = open_source(settings)
    try:
        record = source.select_best_record(preferences, properties)
    except (NotFoundError, CannotAccessSourceError) as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    descriptor = record.descriptor
    typer.echo(f"path: {format_handle(record.handle)}")
    typer.echo(f"index: {record.handle.font_index}")
    typer.echo(f"family: {descriptor.family_name}")
    typer.echo(f"postscript: {descriptor.postscript_name}")
    typer.echo(f"style: {descriptor.style}")
    typer.echo(f"weight: {descriptor.weight}")
    typer.echo(f"stretch: {descriptor.stretch}")


__all__ = ["match"]
