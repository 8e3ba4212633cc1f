"""CLI command implementations exposed via ``fontmatch.cli``."""

from __future__ import annotations

from .listing import families, find, list_fonts
from .match import match


__all__ = ["families", "find", "list_fonts", "match"]
