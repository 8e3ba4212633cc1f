"""Exception hierarchy shared by the matching engine, sources and loaders."""

from __future__ import annotations


class FontMatchError(Exception):
    """Base class for every error raised by fontmatch."""


class SelectionError(FontMatchError, LookupError):
    """Base exception for failures while selecting a font."""


class NotFoundError(SelectionError):
    """Raised when no font satisfies a request."""

    def __init__(self, message: str = "No font matched the request.") -> None:
        super().__init__(message)


class CannotAccessSourceError(SelectionError):
    """Raised when a font source cannot be queried at all."""

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        message = "Unable to access the font source"
        super().__init__(f"{message}: {reason}" if reason else f"{message}.")


class InvalidPropertiesError(FontMatchError, ValueError):
    """Raised when a style attribute cannot be ordered (NaN weights or stretches)."""


class FontLoadingError(FontMatchError, RuntimeError):
    """Base exception for failures while opening or parsing a font."""


class UnknownFormatError(FontLoadingError):
    """Raised when the data does not start with a recognised sfnt signature."""


class NoSuchFontInCollectionError(FontLoadingError):
    """Raised when a face index points past the end of a font collection."""

    def __init__(self, font_index: int, count: int) -> None:
        self.font_index = font_index
        self.count = count
        super().__init__(f"Font index {font_index} is out of range (collection holds {count}).")


class FontParseError(FontLoadingError):
    """Raised when the font tables cannot be decoded."""


class NoFilesystemError(FontLoadingError):
    """Raised when a path handle is used by a loader that cannot read files."""


class GlyphLoadingError(FontMatchError, RuntimeError):
    """Raised when a glyph cannot be looked up."""


class ConfigurationError(FontMatchError, ValueError):
    """Raised when a configuration file is malformed."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            messages.append(text.splitlines()[0].strip())
        current = current.__cause__ or current.__context__
    return messages


__all__ = [
    "CannotAccessSourceError",
    "ConfigurationError",
    "FontLoadingError",
    "FontMatchError",
    "FontParseError",
    "GlyphLoadingError",
    "InvalidPropertiesError",
    "NoFilesystemError",
    "NoSuchFontInCollectionError",
    "NotFoundError",
    "SelectionError",
    "UnknownFormatError",
    "exception_messages",
]
