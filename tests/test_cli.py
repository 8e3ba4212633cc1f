from collections.abc import Iterator
import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler
from typer.testing import CliRunner

from fontmatch.cli import app
from fontmatch.config import CONFIG_ENV_VAR


runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    package_logger = logging.getLogger("fontmatch")
    level = package_logger.level
    yield
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    package_logger.setLevel(level)


def _local(demo_fonts: Path) -> list[str]:
    return ["--no-system-fonts", "--font-dir", str(demo_fonts)]


def test_match_prints_the_selected_face(demo_fonts: Path) -> None:
    result = runner.invoke(app, ["match", "Demo Sans", "--weight", "bold", *_local(demo_fonts)])
    assert result.exit_code == 0, result.output
    assert f"path: {demo_fonts / 'DemoSans-Bold.ttf'}" in result.stdout
    assert "postscript: DemoSans-Bold" in result.stdout
    assert "weight: 700" in result.stdout
    assert "index: 0" in result.stdout


def test_match_walks_the_family_list(demo_fonts: Path) -> None:
    result = runner.invoke(
        app,
        ["match", "'Missing Face', Demo Sans", "-s", "oblique", *_local(demo_fonts)],
    )
    assert result.exit_code == 0, result.output
    assert "postscript: DemoSans-Italic" in result.stdout
    assert "style: italic" in result.stdout


def test_match_with_condensed_stretch(demo_fonts: Path) -> None:
    result = runner.invoke(app, ["match", "Demo Sans", "--stretch", "60%", *_local(demo_fonts)])
    assert result.exit_code == 0, result.output
    assert "postscript: DemoSans-Condensed" in result.stdout
    assert "stretch: 0.75" in result.stdout


def test_match_reports_missing_families(demo_fonts: Path) -> None:
    result = runner.invoke(app, ["match", "Nothing Here", *_local(demo_fonts)])
    assert result.exit_code == 1


def test_match_rejects_invalid_properties(demo_fonts: Path) -> None:
    result = runner.invoke(app, ["match", "Demo Sans", "-w", "heavyish", *_local(demo_fonts)])
    assert result.exit_code == 2
    result = runner.invoke(app, ["match", "Demo Sans", "-s", "slanted", *_local(demo_fonts)])
    assert result.exit_code == 2


def test_match_resolves_generic_family_from_config(demo_fonts: Path, tmp_path: Path) -> None:
    config = tmp_path / "fontmatch.yml"
    config.write_text(
        "source: filesystem\n"
        "system_dirs: false\n"
        "font_dirs: [fonts]\n"
        "generic_families:\n"
        "  sans-serif: Demo Sans\n",
        encoding="utf-8",
    )
    result = runner.invoke(app, ["match", "sans-serif", "-w", "600", "--config", str(config)])
    assert result.exit_code == 0, result.output
    assert "postscript: DemoSans-Bold" in result.stdout


def test_invalid_config_exits_with_usage_code(demo_fonts: Path, tmp_path: Path) -> None:
    config = tmp_path / "broken.yml"
    config.write_text("source: cloud\n", encoding="utf-8")
    result = runner.invoke(app, ["match", "Demo Sans", "-c", str(config), *_local(demo_fonts)])
    assert result.exit_code == 2


def test_families_lists_each_family_once(demo_fonts: Path) -> None:
    result = runner.invoke(app, ["families", *_local(demo_fonts)])
    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines().count("Demo Sans") == 1


def test_list_shows_a_table(demo_fonts: Path) -> None:
    result = runner.invoke(
        app,
        ["list", "--family", "demo sans", *_local(demo_fonts)],
        env={"COLUMNS": "200"},
    )
    assert result.exit_code == 0, result.output
    for name in ("DemoSans-Regular", "DemoSans-Bold", "DemoSans-Italic", "DemoSans-Condensed"):
        assert name in result.stdout
    assert "Name" in result.stdout
    assert "Demo Sans Condensed" in result.stdout


def test_find_by_postscript_name(demo_fonts: Path) -> None:
    result = runner.invoke(app, ["find", "DemoSans-Italic", *_local(demo_fonts)])
    assert result.exit_code == 0, result.output
    assert f"path: {demo_fonts / 'DemoSans-Italic.ttf'}" in result.stdout

    result = runner.invoke(app, ["find", "Nope-Regular", *_local(demo_fonts)])
    assert result.exit_code == 1


def test_verbose_flag_is_accepted(demo_fonts: Path) -> None:
    result = runner.invoke(app, ["-vv", "families", *_local(demo_fonts)])
    assert result.exit_code == 0, result.output
    assert logging.getLogger("fontmatch").level == logging.DEBUG
