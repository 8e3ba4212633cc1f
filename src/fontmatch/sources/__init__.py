"""Font sources and the factory selecting one from settings."""

from __future__ import annotations

import logging

from fontmatch.config import FontMatchSettings
from fontmatch.diagnostics import DiagnosticEmitter
from fontmatch.loader import FontLoader
from fontmatch.logging import ScanLogger

from .base import Source
from .fontconfig import FontconfigSource, fontconfig_available
from .fs import FsSource, default_font_directories
from .mem import MemSource
from .multi import MultiSource


logger = logging.getLogger(__name__)


def _scan(source: FsSource, scan_logger: ScanLogger | None) -> None:
    if scan_logger is None:
        source.scan()
        return
    files = source.font_files()
    scan_logger.debug("Scanning %d font file(s)", len(files))
    with scan_logger.progress("Scanning fonts", total=len(files)) as advance:
        source.scan(advance)


def create_source(
    settings: FontMatchSettings | None = None,
    *,
    loader: FontLoader | None = None,
    emitter: DiagnosticEmitter | None = None,
    scan_logger: ScanLogger | None = None,
) -> Source:
    """Build the source described by ``settings``.

    Extra ``font_dirs`` are always scanned and take precedence over the
    system database when both are used.
    """
    settings = settings or FontMatchSettings()
    loader = loader or FontLoader()
    generics = settings.generic_families
    kind = settings.source
    if kind == "auto":
        kind = "fontconfig" if settings.system_dirs and fontconfig_available() else "filesystem"
    logger.debug("Using %s font source", kind)

    if kind == "memory":
        return MemSource(loader=loader, generic_families=generics, emitter=emitter)

    if kind == "filesystem":
        source = FsSource(
            settings.font_dirs,
            system_dirs=settings.system_dirs,
            loader=loader,
            generic_families=generics,
            emitter=emitter,
            scan=False,
        )
        _scan(source, scan_logger)
        return source

    system = FontconfigSource(generic_families=generics, emitter=emitter)
    if not settings.font_dirs:
        return system
    local = FsSource(
        settings.font_dirs,
        system_dirs=False,
        loader=loader,
        generic_families=generics,
        emitter=emitter,
        scan=False,
    )
    _scan(local, scan_logger)
    return MultiSource([local, system], generic_families=generics, emitter=emitter)


__all__ = [
    "FontconfigSource",
    "FsSource",
    "MemSource",
    "MultiSource",
    "Source",
    "create_source",
    "default_font_directories",
    "fontconfig_available",
]
