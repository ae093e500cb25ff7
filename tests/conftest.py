"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from ninepatch.raw.bitmap import Bitmap

TRANSPARENT_RGBA = (0, 0, 0, 0)
BLACK_RGBA = (0, 0, 0, 255)
RED_RGBA = (255, 0, 0, 255)
GREEN_RGBA = (0, 255, 0, 255)
BLUE_RGBA = (0, 0, 255, 255)


def solid(width: int, height: int, rgba=RED_RGBA) -> np.ndarray:
    """A (height, width, 4) array filled with one color."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[:, :] = rgba
    return pixels


def make_raw_bitmap(
    content: np.ndarray,
    top=(),
    left=(),
    bottom=(),
    right=(),
    density: int = 160,
) -> Bitmap:
    """
    Wrap content in a transparent marker border.

    Marker runs are given as (start, stop) pairs in content coordinates.
    """
    height, width = content.shape[:2]
    pixels = np.zeros((height + 2, width + 2, 4), dtype=np.uint8)
    pixels[1:-1, 1:-1] = content

    for start, stop in top:
        pixels[0, start + 1:stop + 1] = BLACK_RGBA
    for start, stop in bottom:
        pixels[-1, start + 1:stop + 1] = BLACK_RGBA
    for start, stop in left:
        pixels[start + 1:stop + 1, 0] = BLACK_RGBA
    for start, stop in right:
        pixels[start + 1:stop + 1, -1] = BLACK_RGBA

    return Bitmap(pixels=pixels, density=density)


@pytest.fixture
def tiny_raw_bitmap() -> Bitmap:
    """3x3 raw image: one stretch marker per axis, no padding markers."""
    return make_raw_bitmap(solid(1, 1, RED_RGBA), top=[(0, 1)], left=[(0, 1)])


@pytest.fixture
def button_bitmap() -> Bitmap:
    """7x6 content with stretch and padding markers on every edge."""
    content = solid(7, 6, BLUE_RGBA)
    content[:, 0] = GREEN_RGBA
    return make_raw_bitmap(
        content,
        top=[(2, 5)],
        left=[(1, 4)],
        bottom=[(1, 6)],
        right=[(2, 5)],
    )
