"""
Marker border scanning.

Walks one border line of a raw nine-patch bitmap and turns runs of black
marker pixels into divs. Positions are reported in content coordinates:
border pixel i maps to content position i - 1.
"""

import logging
from enum import Enum
from typing import Optional, Sequence

import numpy as np

from ..chunk.base import Div
from .bitmap import Bitmap, is_black, is_border_pixel, is_transparent

logger = logging.getLogger(__name__)


class Axis(str, Enum):
    """Direction a border line runs in."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def discard_unclosed_div(divs: list[Div], open_start: Optional[int]) -> list[Div]:
    """
    End-of-line policy: a run still open at the far edge is dropped.

    Every marker run has to be closed by a transparent pixel, so an open
    start left over after the last pixel never becomes a div.
    """
    if open_start is not None:
        logger.debug(f"Discarding marker run opened at {open_start} and never closed")
    return divs


def scan_line(line: Sequence[int]) -> list[Div]:
    """
    Scan one border line of packed ARGB pixels for marker runs.

    Position 0 is the near corner and is skipped. Positions 1 .. len-2 must
    be black or transparent, otherwise the line is invalid and yields no
    divs. The far corner at len-1 can only close an open run.

    Args:
        line: Packed pixels along the border, corners included.

    Returns:
        Divs ordered by start.
    """
    divs: list[Div] = []
    open_start: Optional[int] = None
    last = len(line) - 1

    for position in range(1, len(line)):
        pixel = int(line[position])

        if position < last and not is_border_pixel(pixel):
            logger.debug(f"Invalid marker pixel {pixel & 0xFFFFFFFF:#010x} at {position}")
            return []

        if is_black(pixel):
            if open_start is None:
                open_start = position - 1
        elif is_transparent(pixel):
            if open_start is not None:
                divs.append(Div(open_start, position - 1))
                open_start = None

    return discard_unclosed_div(divs, open_start)


def border_line(packed: np.ndarray, axis: Axis, fixed: int) -> np.ndarray:
    """Select a row (horizontal) or column (vertical) of a packed pixel array."""
    if axis is Axis.HORIZONTAL:
        return packed[fixed, :]
    return packed[:, fixed]


def scan_axis(bitmap: Bitmap, axis: Axis, fixed: int) -> list[Div]:
    """
    Scan the border line of a bitmap at a fixed coordinate.

    Args:
        bitmap: Raw nine-patch bitmap.
        axis: HORIZONTAL scans row `fixed`, VERTICAL scans column `fixed`.
        fixed: Row or column index.

    Returns:
        Divs found along the line.
    """
    return scan_line(border_line(bitmap.packed, axis, fixed))


def scan_row(bitmap: Bitmap, y: int) -> list[Div]:
    """Scan row y for horizontal divs."""
    return scan_axis(bitmap, Axis.HORIZONTAL, y)


def scan_column(bitmap: Bitmap, x: int) -> list[Div]:
    """Scan column x for vertical divs."""
    return scan_axis(bitmap, Axis.VERTICAL, x)
