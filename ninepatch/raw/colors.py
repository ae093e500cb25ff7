"""
Per-region fill color detection.
"""

from typing import Sequence

import numpy as np

from ..chunk.base import NO_COLOR, TRANSPARENT_COLOR, Div
from ..chunk.regions import Region, build_regions
from .bitmap import is_transparent, pack_pixels


def sample_color(
    pixels: np.ndarray,
    x_region: Region,
    y_region: Region,
    border_offset: int = 0,
) -> int:
    """
    Find the single color filling a rectangle, if there is one.

    Args:
        pixels: RGBA pixel array, shape (height, width, 4).
        x_region: Horizontal span of the rectangle (content coordinates).
        y_region: Vertical span of the rectangle (content coordinates).
        border_offset: Added to both coordinates to skip a marker border.

    Returns:
        The packed ARGB color when every pixel matches, TRANSPARENT_COLOR when
        that color has zero alpha, NO_COLOR otherwise. Empty rectangles have
        no fill and return NO_COLOR.
    """
    x0 = x_region.start + border_offset
    x1 = x_region.stop + border_offset
    y0 = y_region.start + border_offset
    y1 = y_region.stop + border_offset

    if x1 <= x0 or y1 <= y0:
        return NO_COLOR

    area = pack_pixels(pixels[y0:y1, x0:x1])
    color = int(area[0, 0])
    if not np.all(area == color):
        return NO_COLOR

    if is_transparent(color):
        return TRANSPARENT_COLOR
    return color


def build_color_grid(
    pixels: np.ndarray,
    x_divs: Sequence[Div],
    y_divs: Sequence[Div],
    content_width: int,
    content_height: int,
    border_offset: int = 0,
) -> list[int]:
    """
    Sample one color per region, y regions outer and x regions inner.

    Args:
        pixels: RGBA pixel array.
        x_divs: Horizontal stretch divs.
        y_divs: Vertical stretch divs.
        content_width: Width the x regions cover.
        content_height: Height the y regions cover.
        border_offset: Offset of the content inside pixels (1 for a raw bitmap).

    Returns:
        Colors in row-major region order.
    """
    x_regions = build_regions(x_divs, content_width)
    y_regions = build_regions(y_divs, content_height)

    return [
        sample_color(pixels, x_region, y_region, border_offset)
        for y_region in y_regions
        for x_region in x_regions
    ]
