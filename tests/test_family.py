from pathlib import Path

import pytest

from fontmatch.descriptor import Descriptor
from fontmatch.exceptions import NotFoundError
from fontmatch.family import Family, FontRecord, FontSet, group_by_family
from fontmatch.handle import PathHandle
from fontmatch.properties import Properties, Style, Weight


def _record(
    family: str, name: str, weight: float = 400.0, style: Style = Style.NORMAL
) -> FontRecord:
    descriptor = Descriptor.build(
        postscript_name=name,
        family_name=family,
        properties=Properties(style=style, weight=Weight(weight)),
    )
    return FontRecord(PathHandle(Path(f"/fonts/{name}.ttf")), descriptor)


def test_group_by_family_preserves_member_order() -> None:
    records = [
        _record("Zeta", "Zeta-Bold", 700),
        _record("Alpha", "Alpha-Regular"),
        _record("Zeta", "Zeta-Regular"),
        _record("Alpha", "Alpha-Light", 300),
    ]
    groups = group_by_family(records)
    assert list(groups) == ["Zeta", "Alpha"]
    assert [item.descriptor.postscript_name for item in groups["Zeta"]] == [
        "Zeta-Bold",
        "Zeta-Regular",
    ]
    assert [item.descriptor.postscript_name for item in groups["Alpha"]] == [
        "Alpha-Regular",
        "Alpha-Light",
    ]


def test_group_by_family_can_sort_families() -> None:
    records = [_record("Zeta", "Z"), _record("Alpha", "A"), _record("Mu", "M")]
    assert list(group_by_family(records, sort=True)) == ["Alpha", "Mu", "Zeta"]


def test_family_best_match_indexes_its_own_records() -> None:
    family = Family(
        "Demo",
        (
            _record("Demo", "Demo-Regular"),
            _record("Demo", "Demo-Bold", 700),
            _record("Demo", "Demo-Italic", style=Style.ITALIC),
        ),
    )
    bold = family.best_match(Properties(weight=Weight.BOLD))
    assert bold.descriptor.postscript_name == "Demo-Bold"
    assert family.best_match(Properties(style=Style.OBLIQUE)).descriptor.postscript_name == (
        "Demo-Italic"
    )
    assert family.handles == [record.handle for record in family]
    assert [d.postscript_name for d in family.descriptors] == [
        "Demo-Regular",
        "Demo-Bold",
        "Demo-Italic",
    ]
    assert len(family.properties()) == 3


def test_empty_family_has_no_match() -> None:
    family = Family("Empty")
    assert not family
    with pytest.raises(NotFoundError):
        family.best_match(Properties())


def test_font_set_groups_sorted_families() -> None:
    font_set = FontSet.from_records(
        [_record("Beta", "B1"), _record("Alpha", "A1"), _record("Beta", "B2")]
    )
    assert font_set.family_names == ["Alpha", "Beta"]
    assert len(font_set) == 2
    assert [record.descriptor.postscript_name for record in font_set.records()] == [
        "A1",
        "B1",
        "B2",
    ]
