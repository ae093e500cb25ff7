"""Tests for marker border scanning."""

from ninepatch.chunk.base import Div
from ninepatch.raw.bitmap import BLACK, pack_argb
from ninepatch.raw.scanner import Axis, discard_unclosed_div, scan_axis, scan_column, scan_line, scan_row

from tests.conftest import RED_RGBA, make_raw_bitmap, solid

T = 0
B = BLACK
RED = pack_argb(255, 0, 0)


def test_single_run():
    assert scan_line([T, B, B, T, T]) == [Div(0, 2)]


def test_two_runs_closed_by_far_corner():
    assert scan_line([T, T, B, T, B, B, T]) == [Div(1, 2), Div(3, 5)]


def test_near_corner_is_skipped():
    assert scan_line([B, T, B, T]) == [Div(1, 2)]


def test_invalid_pixel_invalidates_line():
    assert scan_line([T, B, RED, T]) == []


def test_unclosed_run_is_discarded():
    assert scan_line([T, T, B, B]) == []


def test_colored_far_corner_does_not_close():
    assert scan_line([T, B, RED]) == []


def test_transparent_with_color_closes_run():
    clear_white = pack_argb(255, 255, 255, 0)
    assert scan_line([T, B, clear_white, T]) == [Div(0, 1)]


def test_semi_transparent_black_is_invalid():
    assert scan_line([T, pack_argb(0, 0, 0, 128), T]) == []


def test_short_lines():
    assert scan_line([]) == []
    assert scan_line([T]) == []


def test_discard_unclosed_div_keeps_closed_divs():
    divs = [Div(0, 1)]
    assert discard_unclosed_div(divs, 4) == [Div(0, 1)]
    assert discard_unclosed_div(divs, None) == [Div(0, 1)]


def test_scan_rows_and_columns():
    bitmap = make_raw_bitmap(
        solid(6, 4, RED_RGBA),
        top=[(1, 3)],
        left=[(0, 2)],
        bottom=[(2, 6)],
        right=[(3, 4)],
    )
    assert scan_row(bitmap, 0) == [Div(1, 3)]
    assert scan_column(bitmap, 0) == [Div(0, 2)]
    assert scan_row(bitmap, bitmap.height - 1) == [Div(2, 6)]
    assert scan_axis(bitmap, Axis.VERTICAL, bitmap.width - 1) == [Div(3, 4)]


def test_content_row_is_invalid_border():
    bitmap = make_raw_bitmap(solid(4, 4, RED_RGBA), top=[(0, 1)], left=[(0, 1)])
    assert scan_row(bitmap, 2) == []
