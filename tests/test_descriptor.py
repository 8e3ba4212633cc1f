from fontmatch.descriptor import Descriptor, FontFlags, Query
from fontmatch.properties import Properties, Stretch, Style, Weight


def _descriptor(**overrides: object) -> Descriptor:
    values: dict[str, object] = {
        "postscript_name": "DemoSans-BoldItalic",
        "display_name": "Demo Sans Bold Italic",
        "family_name": "Demo Sans",
        "style_name": "Bold Italic",
        "properties": Properties(Style.ITALIC, Weight.BOLD, Stretch.NORMAL),
    }
    values.update(overrides)
    return Descriptor.build(**values)  # type: ignore[arg-type]


def test_build_keeps_italic_flag_consistent_with_style() -> None:
    italic = _descriptor()
    assert italic.is_italic
    assert FontFlags.ITALIC in italic.flags

    oblique = _descriptor(properties=Properties(style=Style.OBLIQUE))
    assert oblique.is_italic

    upright = _descriptor(properties=Properties())
    assert not upright.is_italic
    assert upright.flags == FontFlags.NONE


def test_build_sets_monospace_and_vertical_flags() -> None:
    descriptor = _descriptor(monospace=True, vertical=True)
    assert descriptor.is_monospace
    assert descriptor.is_vertical


def test_display_name_defaults_to_postscript_name() -> None:
    descriptor = Descriptor.build(postscript_name="Demo-Regular", family_name="Demo")
    assert descriptor.display_name == "Demo-Regular"
    assert descriptor.properties == Properties()


def test_empty_query_is_universal() -> None:
    query = Query()
    assert query.is_universal
    assert query.matches(_descriptor())
    assert query.properties() == Properties()


def test_setting_a_default_value_is_still_a_constraint() -> None:
    query = Query(weight=Weight.NORMAL)
    assert not query.is_universal
    assert not query.matches(_descriptor())
    assert query.matches(_descriptor(properties=Properties()))


def test_query_properties_fill_unset_fields_with_defaults() -> None:
    query = Query(style=Style.ITALIC, stretch=Stretch.CONDENSED)
    assert query.properties() == Properties(Style.ITALIC, Weight.NORMAL, Stretch.CONDENSED)


def test_query_matches_names_case_insensitively() -> None:
    assert Query(family_name="demo sans").matches(_descriptor())
    assert Query(postscript_name="DemoSans-BoldItalic", style=Style.ITALIC).matches(_descriptor())
    assert not Query(family_name="Other").matches(_descriptor())
    assert not Query(style=Style.NORMAL).matches(_descriptor())


def test_query_flags_require_all_listed_flags() -> None:
    mono = _descriptor(monospace=True)
    assert Query(flags=FontFlags.MONOSPACE).matches(mono)
    assert Query(flags=FontFlags.MONOSPACE | FontFlags.ITALIC).matches(mono)
    assert not Query(flags=FontFlags.VERTICAL).matches(mono)
