"""Opaque tokens locating a single font face."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class PathHandle:
    """A face stored in a file, ``font_index`` selecting it inside a collection."""

    path: Path
    font_index: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    def __str__(self) -> str:
        if self.font_index:
            return f"{self.path}#{self.font_index}"
        return str(self.path)


@dataclass(frozen=True, slots=True)
class MemoryHandle:
    """A face held in memory."""

    data: bytes = field(repr=False)
    font_index: int = 0

    def __str__(self) -> str:
        return f"<memory font, {len(self.data)} bytes, index {self.font_index}>"


Handle = PathHandle | MemoryHandle


__all__ = ["Handle", "MemoryHandle", "PathHandle"]
