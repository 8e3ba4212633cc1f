"""Configuration models for font discovery and generic family resolution.

GenericFamilies

`serif`, `sans-serif`, `monospace`, `cursive`, `fantasy` (`str`)
: Concrete family substituted for each CSS generic family. Defaults depend on
  the platform; on systems using fontconfig the generic keywords are kept as-is
  and resolved by ``fc-match``.

FontMatchSettings

`source` (`"auto" | "fontconfig" | "filesystem" | "memory"`)
: Which font source to build. ``auto`` prefers fontconfig when ``fc-list`` is
  available and falls back to scanning directories.

`font_dirs` (`list[Path]`)
: Additional directories scanned by the filesystem source.

`system_dirs` (`bool`)
: Whether the platform font directories are scanned as well.

`generic_families` (`GenericFamilies`)
: Overrides for the generic family table.
"""

from __future__ import annotations

from collections.abc import Mapping
import os
from pathlib import Path
import platform
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError
import yaml

from fontmatch.exceptions import ConfigurationError
from fontmatch.family_name import GenericFamily


CONFIG_ENV_VAR = "FONTMATCH_CONFIG"

_PLATFORM_GENERICS: dict[str, dict[str, str]] = {
    "Windows": {
        "serif": "Times New Roman",
        "sans-serif": "Arial",
        "monospace": "Courier New",
        "cursive": "Comic Sans MS",
        "fantasy": "Impact",
    },
    "Darwin": {
        "serif": "Times New Roman",
        "sans-serif": "Arial",
        "monospace": "Courier New",
        "cursive": "Comic Sans MS",
        "fantasy": "Papyrus",
    },
}


class GenericFamilies(BaseModel):
    """Concrete family names standing in for the CSS generic families."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    serif: str = "serif"
    sans_serif: str = Field(default="sans-serif", alias="sans-serif")
    monospace: str = "monospace"
    cursive: str = "cursive"
    fantasy: str = "fantasy"

    @classmethod
    def for_platform(cls, system: str | None = None) -> GenericFamilies:
        """Return the defaults for ``system`` (``platform.system()`` when omitted)."""
        system = system if system is not None else platform.system()
        return cls.model_validate(_PLATFORM_GENERICS.get(system, {}))

    def resolve(self, generic: GenericFamily) -> str:
        """Return the family name substituted for ``generic``."""
        mapping = {
            GenericFamily.SERIF: self.serif,
            GenericFamily.SANS_SERIF: self.sans_serif,
            GenericFamily.MONOSPACE: self.monospace,
            GenericFamily.CURSIVE: self.cursive,
            GenericFamily.FANTASY: self.fantasy,
        }
        return mapping[generic]


class FontMatchSettings(BaseModel):
    """Top-level configuration payload parsed from YAML."""

    model_config = ConfigDict(extra="forbid")

    source: Literal["auto", "fontconfig", "filesystem", "memory"] = "auto"
    font_dirs: list[Path] = Field(default_factory=list)
    system_dirs: bool = True
    generic_families: GenericFamilies = Field(default_factory=GenericFamilies.for_platform)

    def with_font_dirs(self, directories: list[Path]) -> FontMatchSettings:
        """Return a copy with ``directories`` appended to ``font_dirs``."""
        if not directories:
            return self
        return self.model_copy(update={"font_dirs": [*self.font_dirs, *directories]})


def _merge_generics(payload: Mapping[str, Any]) -> dict[str, Any]:
    data = dict(payload)
    generics = data.get("generic_families")
    if isinstance(generics, Mapping):
        defaults = GenericFamilies.for_platform().model_dump(by_alias=True)
        defaults.update({str(key).replace("_", "-"): value for key, value in generics.items()})
        data["generic_families"] = defaults
    return data


def settings_from_mapping(payload: Mapping[str, Any] | None) -> FontMatchSettings:
    """Validate a raw mapping; partial ``generic_families`` keep platform defaults."""
    try:
        return FontMatchSettings.model_validate(_merge_generics(payload or {}))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid fontmatch configuration: {exc}") from exc


def load_settings(path: Path | None = None) -> FontMatchSettings:
    """Load settings from ``path`` or ``$FONTMATCH_CONFIG``; defaults when neither is set."""
    if path is None:
        env_value = os.environ.get(CONFIG_ENV_VAR)
        if not env_value:
            return FontMatchSettings()
        path = Path(env_value)

    path = Path(path).expanduser()
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Unable to read configuration file '{path}'.") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Configuration file '{path}' is not valid YAML.") from exc

    if raw is None:
        return FontMatchSettings()
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"Configuration file '{path}' must contain a mapping.")

    settings = settings_from_mapping(raw)
    base_dir = path.parent
    resolved = [entry if entry.is_absolute() else base_dir / entry for entry in settings.font_dirs]
    return settings.model_copy(update={"font_dirs": resolved})


__all__ = [
    "CONFIG_ENV_VAR",
    "FontMatchSettings",
    "GenericFamilies",
    "load_settings",
    "settings_from_mapping",
]
