from pathlib import Path

from pydantic import ValidationError
import pytest

from fontmatch.config import (
    CONFIG_ENV_VAR,
    FontMatchSettings,
    GenericFamilies,
    load_settings,
    settings_from_mapping,
)
from fontmatch.exceptions import ConfigurationError
from fontmatch.family_name import GenericFamily


def test_platform_defaults() -> None:
    windows = GenericFamilies.for_platform("Windows")
    assert windows.resolve(GenericFamily.SANS_SERIF) == "Arial"
    assert windows.resolve(GenericFamily.FANTASY) == "Impact"
    assert GenericFamilies.for_platform("Darwin").fantasy == "Papyrus"

    linux = GenericFamilies.for_platform("Linux")
    assert linux.resolve(GenericFamily.SANS_SERIF) == "sans-serif"
    assert linux.resolve(GenericFamily.MONOSPACE) == "monospace"


def test_generic_families_accept_alias_and_reject_unknown_keys() -> None:
    assert GenericFamilies.model_validate({"sans-serif": "Inter"}).sans_serif == "Inter"
    with pytest.raises(ValidationError):
        GenericFamilies.model_validate({"handwriting": "Comic Neue"})


def test_load_settings_without_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    settings = load_settings()
    assert settings == FontMatchSettings()
    assert settings.source == "auto"
    assert settings.system_dirs


def test_load_settings_from_yaml(tmp_path: Path) -> None:
    config = tmp_path / "fontmatch.yml"
    config.write_text(
        "source: filesystem\n"
        "system_dirs: false\n"
        "font_dirs:\n"
        "  - fonts\n"
        "  - /opt/fonts\n"
        "generic_families:\n"
        "  sans_serif: Demo Sans\n",
        encoding="utf-8",
    )
    settings = load_settings(config)
    assert settings.source == "filesystem"
    assert not settings.system_dirs
    assert settings.font_dirs == [tmp_path / "fonts", Path("/opt/fonts")]
    assert settings.generic_families.sans_serif == "Demo Sans"
    assert settings.generic_families.serif == GenericFamilies.for_platform().serif


def test_load_settings_reads_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config = tmp_path / "env.yml"
    config.write_text("generic_families:\n  monospace: Demo Mono\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config))
    assert load_settings().generic_families.monospace == "Demo Mono"


def test_empty_config_file_gives_defaults(tmp_path: Path) -> None:
    config = tmp_path / "empty.yml"
    config.write_text("", encoding="utf-8")
    assert load_settings(config) == FontMatchSettings()


@pytest.mark.parametrize(
    "content",
    [
        "source: [",
        "- just\n- a list\n",
        "colour: red\n",
        "source: cloud\n",
        "generic_families:\n  handwriting: Comic Neue\n",
    ],
)
def test_invalid_configuration_is_rejected(tmp_path: Path, content: str) -> None:
    config = tmp_path / "bad.yml"
    config.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_settings(config)


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Unable to read"):
        load_settings(tmp_path / "absent.yml")


def test_settings_from_mapping_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        settings_from_mapping({"system_dirs": "sometimes"})


def test_with_font_dirs_appends() -> None:
    settings = FontMatchSettings(font_dirs=[Path("/a")])
    assert settings.with_font_dirs([]) is settings
    assert settings.with_font_dirs([Path("/b")]).font_dirs == [Path("/a"), Path("/b")]
