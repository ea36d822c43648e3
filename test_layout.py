"""gravity 배치 계산 테스트."""

import pytest

from renderer.layout import GRAVITIES, extent_offset, place


@pytest.mark.parametrize(
    "gravity, expected",
    [
        ("northwest", (0, 0)),
        ("north", (3, 0)),
        ("northeast", (6, 0)),
        ("west", (0, 2)),
        ("center", (3, 2)),
        ("east", (6, 2)),
        ("southwest", (0, 4)),
        ("south", (3, 4)),
        ("southeast", (6, 4)),
    ],
)
def test_place_all_gravities(gravity, expected):
    assert place(gravity, (4, 2), (10, 6)) == expected


def test_gravity_table_is_complete():
    assert len(GRAVITIES) == 9


@pytest.mark.parametrize("name", ["Center", "CENTRE", "south_east", "South-East"])
def test_gravity_names_are_forgiving(name):
    assert place(name, (0, 0), (2, 2)) in {(1, 1), (2, 2)}


def test_inner_larger_than_outer_goes_negative():
    assert place("center", (10, 10), (4, 4)) == (-3, -3)
    assert place("southeast", (10, 10), (4, 4)) == (-6, -6)


def test_extent_offset_is_negated_placement():
    assert extent_offset("center", (2, 2), (6, 4)) == (-2, -1)
    assert extent_offset("northwest", (2, 2), (6, 4)) == (0, 0)


def test_unknown_gravity():
    with pytest.raises(ValueError):
        place("middle", (1, 1), (2, 2))
