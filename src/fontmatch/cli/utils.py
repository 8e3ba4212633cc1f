"""Helpers shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer

from fontmatch.config import FontMatchSettings, load_settings
from fontmatch.diagnostics import LoggingEmitter
from fontmatch.exceptions import ConfigurationError
from fontmatch.handle import Handle, PathHandle
from fontmatch.logging import ScanLogger
from fontmatch.sources import Source, create_source

from .state import emit_error, get_cli_state


def resolve_settings(
    config: Path | None,
    font_dirs: list[Path] | None,
    *,
    no_system_fonts: bool = False,
) -> FontMatchSettings:
    """Load the configuration and apply command-line overrides; exits on errors."""
    try:
        settings = load_settings(config)
    except ConfigurationError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=2) from exc
    settings = settings.with_font_dirs(list(font_dirs or []))
    if no_system_fonts:
        settings = settings.model_copy(update={"system_dirs": False, "source": "filesystem"})
    return settings


def open_source(settings: FontMatchSettings) -> Source:
    """Build the configured source, reporting scan progress on the console."""
    state = get_cli_state()
    emitter = LoggingEmitter(debug_enabled=state.show_tracebacks)
    scan_logger = ScanLogger(verbose=state.verbosity > 0)
    return create_source(settings, emitter=emitter, scan_logger=scan_logger)


def format_handle(handle: Handle) -> str:
    if isinstance(handle, PathHandle):
        return str(handle.path)
    return str(handle)


__all__ = ["format_handle", "open_source", "resolve_settings"]
