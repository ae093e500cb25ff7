"""
Chunk extraction from raw nine-patch bitmaps.

A raw nine-patch bitmap carries a 1-pixel marker border around its content:
black runs on the top row and left column mark stretchable areas, a single
black run on the bottom row and right column marks the content padding.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from ..chunk.base import Div, NinePatchChunk, Padding, create_empty_chunk
from ..errors import DivLengthError, NinePatchError, PaddingAmbiguityError, WrongPaddingError
from .bitmap import BLACK, Bitmap
from .colors import build_color_grid
from .scanner import Axis, border_line, scan_line

logger = logging.getLogger(__name__)

BORDER_WIDTH = 1


def _valid_border_pixels(line: np.ndarray) -> bool:
    alpha = (line >> 24) & 0xFF
    return bool(np.all((alpha == 0) | (line == BLACK)))


def _corners_transparent(packed: np.ndarray) -> bool:
    corners = np.array(
        [packed[0, 0], packed[0, -1], packed[-1, 0], packed[-1, -1]],
        dtype=np.int32,
    )
    return bool(np.all(((corners >> 24) & 0xFF) == 0))


def classify_raw_border(bitmap: Optional[Bitmap]) -> bool:
    """
    Check whether a bitmap is a raw (not compiled) nine-patch image.

    Args:
        bitmap: Candidate bitmap.

    Returns:
        True if the bitmap is at least 3x3, has transparent corners, a border
        made only of transparent and opaque black pixels, at least one
        stretch run on the top row and left column, and at most one padding
        run on the bottom row and right column.
    """
    if bitmap is None:
        return False
    if bitmap.width < 3 or bitmap.height < 3:
        return False

    packed = bitmap.packed
    if not _corners_transparent(packed):
        return False

    edges = (packed[0, 1:-1], packed[-1, 1:-1], packed[1:-1, 0], packed[1:-1, -1])
    if not all(_valid_border_pixels(edge) for edge in edges):
        return False

    last_x = bitmap.width - 1
    last_y = bitmap.height - 1

    if not scan_line(border_line(packed, Axis.HORIZONTAL, 0)):
        return False
    if len(scan_line(border_line(packed, Axis.HORIZONTAL, last_y))) > 1:
        return False
    if not scan_line(border_line(packed, Axis.VERTICAL, 0)):
        return False
    if len(scan_line(border_line(packed, Axis.VERTICAL, last_x))) > 1:
        return False

    return True


def resolve_padding_div(padding_divs: Sequence[Div], stretch_divs: Sequence[Div], axis: Axis) -> Div:
    """
    Padding marker policy for one axis.

    One marker run is the padding. No marker means the padding follows the
    first stretch div. More than one marker is ambiguous.

    Raises:
        PaddingAmbiguityError: If more than one marker run was found.
    """
    if len(padding_divs) > 1:
        raise PaddingAmbiguityError(
            f"Padding is wrong. Should be only one {axis.value} padding region, found {len(padding_divs)}"
        )
    if not padding_divs:
        return stretch_divs[0]
    return padding_divs[0]


def derive_padding(x_padding: Div, y_padding: Div, content_width: int, content_height: int) -> Padding:
    """
    Turn the padding divs of both axes into a content padding.

    Raises:
        WrongPaddingError: If a side comes out negative.
    """
    padding = Padding(
        left=x_padding.start,
        top=y_padding.start,
        right=content_width - x_padding.stop,
        bottom=content_height - y_padding.stop,
    )
    if padding.is_negative:
        raise WrongPaddingError(f"Padding markers fall outside the content: {padding}")
    return padding


def extract(bitmap: Bitmap) -> NinePatchChunk:
    """
    Build a chunk from the marker border of a raw nine-patch bitmap.

    Args:
        bitmap: Raw nine-patch bitmap (marker border included).

    Returns:
        Chunk describing the content, in content coordinates.

    Raises:
        DivLengthError: If the top row or left column has no stretch run.
        PaddingAmbiguityError: If the bottom row or right column has more
            than one padding run.
    """
    packed = bitmap.packed
    content_width = bitmap.width - 2 * BORDER_WIDTH
    content_height = bitmap.height - 2 * BORDER_WIDTH

    x_divs = scan_line(border_line(packed, Axis.HORIZONTAL, 0))
    if not x_divs:
        raise DivLengthError("Must be at least one horizontal stretchable region")
    y_divs = scan_line(border_line(packed, Axis.VERTICAL, 0))
    if not y_divs:
        raise DivLengthError("Must be at least one vertical stretchable region")

    x_padding = resolve_padding_div(
        scan_line(border_line(packed, Axis.HORIZONTAL, bitmap.height - 1)),
        x_divs,
        Axis.HORIZONTAL,
    )
    y_padding = resolve_padding_div(
        scan_line(border_line(packed, Axis.VERTICAL, bitmap.width - 1)),
        y_divs,
        Axis.VERTICAL,
    )
    padding = derive_padding(x_padding, y_padding, content_width, content_height)

    colors = build_color_grid(
        bitmap.pixels,
        x_divs,
        y_divs,
        content_width,
        content_height,
        border_offset=BORDER_WIDTH,
    )

    logger.debug(
        f"Extracted chunk from {bitmap.width}x{bitmap.height} bitmap: "
        f"{len(x_divs)} x divs, {len(y_divs)} y divs, {len(colors)} colors, padding {padding}"
    )

    return NinePatchChunk(
        was_serialized=True,
        x_divs=x_divs,
        y_divs=y_divs,
        padding=padding,
        colors=colors,
    )


def strip_border(bitmap: Bitmap) -> Bitmap:
    """Crop the 1-pixel marker border from every edge."""
    return bitmap.crop(
        BORDER_WIDTH,
        BORDER_WIDTH,
        bitmap.width - 2 * BORDER_WIDTH,
        bitmap.height - 2 * BORDER_WIDTH,
    )


def create_chunk_from_raw_bitmap(bitmap: Optional[Bitmap], check: bool = True) -> NinePatchChunk:
    """
    Extract a chunk, falling back to the empty chunk when that is impossible.

    Args:
        bitmap: Raw nine-patch bitmap.
        check: Run classify_raw_border() first and skip scanning on failure.

    Returns:
        The extracted chunk or the empty chunk.
    """
    if bitmap is None:
        return create_empty_chunk()
    if check and not classify_raw_border(bitmap):
        logger.debug("Bitmap has no valid marker border, using empty chunk")
        return create_empty_chunk()

    try:
        return extract(bitmap)
    except NinePatchError as e:
        logger.warning(f"Chunk extraction failed, using empty chunk: {e}")
        return create_empty_chunk()
