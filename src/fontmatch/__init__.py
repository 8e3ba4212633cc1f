"""fontmatch: CSS font style matching over installed and in-memory fonts.

The matching engine lives in :mod:`fontmatch.matching`; sources in
:mod:`fontmatch.sources` resolve family names to candidate faces and run the
engine over them::

    from fontmatch import GenericFamily, Properties, Weight, create_source

    source = create_source()
    handle = source.select_best_match(
        ["Helvetica Neue", GenericFamily.SANS_SERIF],
        Properties(weight=Weight.BOLD),
    )
"""

from __future__ import annotations

from fontmatch.config import FontMatchSettings, GenericFamilies, load_settings
from fontmatch.descriptor import Descriptor, FontFlags, Query
from fontmatch.exceptions import (
    CannotAccessSourceError,
    FontLoadingError,
    FontMatchError,
    GlyphLoadingError,
    InvalidPropertiesError,
    NotFoundError,
    SelectionError,
)
from fontmatch.family import Family, FontRecord, FontSet, group_by_family
from fontmatch.family_name import (
    FamilyName,
    GenericFamily,
    Title,
    parse_family_list,
    parse_family_name,
)
from fontmatch.handle import Handle, MemoryHandle, PathHandle
from fontmatch.loader import FileType, Font, FontLoader
from fontmatch.matching import find_best_match, select_best
from fontmatch.properties import Properties, Stretch, Style, Weight
from fontmatch.sources import (
    FontconfigSource,
    FsSource,
    MemSource,
    MultiSource,
    Source,
    create_source,
)


__version__ = "0.1.0"

__all__ = [
    "CannotAccessSourceError",
    "Descriptor",
    "Family",
    "FamilyName",
    "FileType",
    "Font",
    "FontFlags",
    "FontLoader",
    "FontLoadingError",
    "FontMatchError",
    "FontMatchSettings",
    "FontRecord",
    "FontSet",
    "FontconfigSource",
    "FsSource",
    "GenericFamilies",
    "GenericFamily",
    "GlyphLoadingError",
    "Handle",
    "InvalidPropertiesError",
    "MemSource",
    "MemoryHandle",
    "MultiSource",
    "NotFoundError",
    "PathHandle",
    "Properties",
    "Query",
    "SelectionError",
    "Source",
    "Stretch",
    "Style",
    "Title",
    "Weight",
    "__version__",
    "create_source",
    "find_best_match",
    "group_by_family",
    "load_settings",
    "parse_family_list",
    "parse_family_name",
    "select_best",
]
