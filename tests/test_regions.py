"""Tests for region expansion."""

import pytest

from ninepatch.chunk.base import Div, NinePatchChunk, create_colors_array, NO_COLOR
from ninepatch.chunk.regions import Region, build_regions


def test_single_div_in_the_middle():
    assert build_regions([Div(2, 4)], 6) == [
        Region(0, 2),
        Region(2, 4, is_stretch=True),
        Region(4, 6),
    ]


def test_div_covering_whole_axis():
    assert build_regions([Div(0, 5)], 5) == [Region(0, 5, is_stretch=True)]


def test_gap_between_divs():
    regions = build_regions([Div(1, 2), Div(4, 5)], 7)
    assert regions == [
        Region(0, 1),
        Region(1, 2, is_stretch=True),
        Region(2, 4),
        Region(4, 5, is_stretch=True),
        Region(5, 7),
    ]


def test_adjacent_divs_keep_empty_gap():
    regions = build_regions([Div(0, 2), Div(2, 4)], 4)
    assert regions == [
        Region(0, 2, is_stretch=True),
        Region(2, 2),
        Region(2, 4, is_stretch=True),
    ]
    assert regions[1].is_empty


def test_no_divs():
    assert build_regions([], 10) == []


@pytest.mark.parametrize(
    "divs,max_length",
    [
        ([Div(0, 1)], 1),
        ([Div(3, 7)], 10),
        ([Div(0, 3), Div(5, 10)], 10),
        ([Div(1, 2), Div(3, 4), Div(6, 8)], 9),
    ],
)
def test_regions_cover_axis(divs, max_length):
    regions = build_regions(divs, max_length)

    assert regions[0].start == 0
    assert regions[-1].stop == max_length
    for previous, current in zip(regions, regions[1:]):
        assert previous.stop == current.start

    expected = 2 * len(divs) + 1
    if divs[0].start == 0:
        expected -= 1
    if divs[-1].stop >= max_length:
        expected -= 1
    assert len(regions) == expected
    assert sum(r.is_stretch for r in regions) == len(divs)


def test_colors_array_matches_region_grid():
    chunk = NinePatchChunk(x_divs=[Div(2, 4)], y_divs=[Div(0, 3)])
    colors = create_colors_array(chunk, 6, 5)
    assert colors == [NO_COLOR] * 6
    assert chunk.expected_color_count(6, 5) == 6
    assert chunk.region_grid_shape(6, 5) == (2, 3)


def test_colors_array_for_missing_chunk():
    assert create_colors_array(None, 4, 4) == []


def test_with_no_colors_does_not_alias():
    chunk = NinePatchChunk(x_divs=[Div(1, 2)], y_divs=[Div(1, 2)])
    filled = chunk.with_no_colors(3, 3)
    assert filled.colors == [NO_COLOR] * 9
    assert chunk.colors == []
    assert filled.x_divs is not chunk.x_divs
