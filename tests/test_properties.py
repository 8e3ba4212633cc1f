import pytest

from fontmatch.exceptions import InvalidPropertiesError
from fontmatch.properties import (
    WIDTH_CLASS_STRETCHES,
    Properties,
    Stretch,
    Style,
    Weight,
    parse_stretch,
    parse_weight,
)


def test_default_properties() -> None:
    props = Properties()
    assert props.style is Style.NORMAL
    assert props.weight == Weight.NORMAL == Weight(400)
    assert props.stretch == Stretch.NORMAL == Stretch(1.0)


def test_named_constants() -> None:
    assert [Weight.THIN.value, Weight.BOLD.value, Weight.BLACK.value] == [100.0, 700.0, 900.0]
    assert Stretch.ULTRA_CONDENSED.value == 0.5
    assert Stretch.SEMI_EXPANDED.value == 1.125
    assert Stretch.ULTRA_EXPANDED.value == 2.0


def test_weights_and_stretches_are_ordered_and_hashable() -> None:
    assert Weight.LIGHT < Weight.NORMAL < Weight.BOLD
    assert Stretch.CONDENSED < Stretch.NORMAL
    assert len({Weight(700), Weight.BOLD, Weight(700.0)}) == 1


def test_any_finite_weight_is_legal() -> None:
    assert Weight(1.0).value == 1.0
    assert Weight(1000).value == 1000.0
    assert float(Weight(350.5)) == 350.5


def test_nan_is_rejected() -> None:
    with pytest.raises(InvalidPropertiesError):
        Stretch(float("nan"))
    with pytest.raises(ValueError):
        Weight(float("nan"))


def test_width_class_mapping() -> None:
    assert Stretch.from_width_class(1) == Stretch.ULTRA_CONDENSED
    assert Stretch.from_width_class(5) == Stretch.NORMAL
    assert Stretch.from_width_class(9) == Stretch.ULTRA_EXPANDED
    assert Stretch.from_width_class(0) == Stretch.NORMAL
    assert Stretch.from_width_class(12) == Stretch.NORMAL
    assert len(WIDTH_CLASS_STRETCHES) == 9


def test_with_helpers_return_new_instances() -> None:
    base = Properties()
    bold = base.with_weight(Weight.BOLD)
    assert bold.weight == Weight.BOLD
    assert base.weight == Weight.NORMAL
    assert base.with_style(Style.ITALIC).style is Style.ITALIC
    assert base.with_stretch(0.75).stretch == Stretch.CONDENSED


def test_style_parse() -> None:
    assert Style.parse("Italic") is Style.ITALIC
    assert Style.parse("regular") is Style.NORMAL
    assert Style.parse(Style.OBLIQUE) is Style.OBLIQUE
    with pytest.raises(ValueError):
        Style.parse("slanted")


def test_parse_weight_keywords_and_numbers() -> None:
    assert parse_weight("bold") == Weight.BOLD
    assert parse_weight("Semi-Bold") == Weight.SEMIBOLD
    assert parse_weight("350") == Weight(350)
    assert parse_weight(600) == Weight.SEMIBOLD
    with pytest.raises(ValueError):
        parse_weight("heavyish")


def test_parse_stretch_keywords_percentages_and_ratios() -> None:
    assert parse_stretch("condensed") == Stretch.CONDENSED
    assert parse_stretch("semi-expanded") == Stretch.SEMI_EXPANDED
    assert parse_stretch("75%") == Stretch.CONDENSED
    assert parse_stretch("1.5") == Stretch.EXTRA_EXPANDED
    with pytest.raises(ValueError):
        parse_stretch("wide")


def test_describe() -> None:
    assert Properties(Style.ITALIC, Weight.BOLD, Stretch.CONDENSED).describe() == "italic 700 0.75"
