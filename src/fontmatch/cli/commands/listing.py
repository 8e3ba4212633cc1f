"""Commands enumerating the fonts known to a source."""

from __future__ import annotations

from typing import Annotated

from rich import box
from rich.table import Table
import typer

from fontmatch.descriptor import Query
from fontmatch.exceptions import CannotAccessSourceError, NotFoundError

from .._options import ConfigOption, FamilyFilterOption, FontDirOption, NoSystemFontsOption
from ..state import emit_error, emit_warning, get_cli_state
from ..utils import format_handle, open_source, resolve_settings


def list_fonts(
    family: FamilyFilterOption = None,
    font_dir: FontDirOption = None,
    no_system_fonts: NoSystemFontsOption = False,
    config: ConfigOption = None,
) -> None:
    """List the font faces available, optionally restricted to one family."""
    settings = resolve_settings(config, font_dir, no_system_fonts=no_system_fonts)
    source = open_source(settings)
    try:
        records = source.select(Query(family_name=family))
    except CannotAccessSourceError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    if not records:
        emit_warning(f"No fonts found for family '{family}'." if family else "No fonts found.")
        return

    table = Table(box=box.SIMPLE, show_lines=False)
    table.add_column("PostScript name", overflow="fold")
    table.add_column("Name", overflow="fold")
    table.add_column("Family", overflow="fold")
    table.add_column("Style")
    table.add_column("Weight", justify="right")
    table.add_column("Stretch", justify="right")
    for record in records:
        descriptor = record.descriptor
        table.add_row(
            descriptor.postscript_name or "-",
            descriptor.display_name or "-",
            descriptor.family_name,
            str(descriptor.style),
            str(descriptor.weight),
            str(descriptor.stretch),
        )
    get_cli_state().console.print(table)


def families(
    font_dir: FontDirOption = None,
    no_system_fonts: NoSystemFontsOption = False,
    config: ConfigOption = None,
) -> None:
    """Print every known family name, one per line."""
    settings = resolve_settings(config, font_dir, no_system_fonts=no_system_fonts)
    source = open_source(settings)
    try:
        names = source.all_families()
    except CannotAccessSourceError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    for name in dict.fromkeys(names):
        typer.echo(name)


def find(
    postscript_name: Annotated[str, typer.Argument(help="PostScript name of the face.")],
    font_dir: FontDirOption = None,
    no_system_fonts: NoSystemFontsOption = False,
    config: ConfigOption = None,
) -> None:
    """Print the location of the face with the given PostScript name."""
    settings = resolve_settings(config, font_dir, no_system_fonts=no_system_fonts)
    source = open_source(settings)
    try:
        handle = source.select_by_postscript_name(postscript_name)
    except (NotFoundError, CannotAccessSourceError) as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    typer.echo(f"path: {format_handle(handle)}")
    typer.echo(f"index: {handle.font_index}")


__all__ = ["families", "find", "list_fonts"]
