"""A source built by scanning font directories."""

from __future__ import annotations

from collections.abc import Callable, Iterable
import os
from pathlib import Path
import platform

from fontmatch.config import GenericFamilies
from fontmatch.diagnostics import DiagnosticEmitter
from fontmatch.exceptions import FontLoadingError, exception_messages
from fontmatch.family import FontRecord
from fontmatch.loader import FontLoader
from fontmatch.sources.mem import MemSource


def default_font_directories(system: str | None = None) -> list[Path]:
    """Return the conventional font directories for ``system``."""
    system = system if system is not None else platform.system()
    home = Path.home()
    if system == "Windows":
        windir = os.environ.get("WINDIR") or os.environ.get("SystemRoot") or r"C:\Windows"
        return [Path(windir) / "Fonts"]
    if system == "Darwin":
        return [
            Path("/System/Library/Fonts"),
            Path("/Library/Fonts"),
            Path("/Network/Library/Fonts"),
            home / "Library" / "Fonts",
        ]
    data_home = os.environ.get("XDG_DATA_HOME")
    user_dir = Path(data_home) / "fonts" if data_home else home / ".local" / "share" / "fonts"
    return [
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
        home / ".fonts",
        user_dir,
    ]


class FsSource(MemSource):
    """Fonts found below a set of directories.

    Every face of every font file is described once when ``scan`` runs;
    files that cannot be read are reported to the emitter and skipped.
    """

    def __init__(
        self,
        directories: Iterable[Path] = (),
        *,
        system_dirs: bool = True,
        loader: FontLoader | None = None,
        generic_families: GenericFamilies | None = None,
        emitter: DiagnosticEmitter | None = None,
        scan: bool = True,
    ) -> None:
        super().__init__(loader=loader, generic_families=generic_families, emitter=emitter)
        dirs = [Path(entry).expanduser() for entry in directories]
        if system_dirs:
            dirs.extend(default_font_directories())
        self.directories: list[Path] = list(dict.fromkeys(dirs))
        if scan:
            self.scan()

    def font_files(self) -> list[Path]:
        files: list[Path] = []
        for directory in self.directories:
            files.extend(self.loader.iter_directory(directory))
        return list(dict.fromkeys(files))

    def scan(self, advance: Callable[[int], None] | None = None) -> int:
        """Rebuild the index from the font files; returns the number of faces found."""
        records: list[FontRecord] = []
        for path in self.font_files():
            records.extend(self._describe_file(path))
            if advance is not None:
                advance(1)
        self._records = []
        self._extend(records)
        self.emitter.event(
            "scan_complete", {"fonts": len(records), "directories": len(self.directories)}
        )
        return len(records)

    def _describe_file(self, path: Path) -> list[FontRecord]:
        try:
            handles = self.loader.handles_for_path(path)
        except FontLoadingError as exc:
            reason = "; ".join(exception_messages(exc))
            self.emitter.warning(f"Skipping unreadable font file '{path}': {reason}", exc)
            return []
        records: list[FontRecord] = []
        for handle in handles:
            try:
                records.append(FontRecord(handle, self.loader.describe(handle)))
            except FontLoadingError as exc:
                reason = "; ".join(exception_messages(exc))
                self.emitter.warning(f"Skipping unreadable font '{handle}': {reason}", exc)
        return records


__all__ = ["FsSource", "default_font_directories"]
