"""
Density rescaling of extracted chunks and their content pixels.
"""

import logging
import math
from dataclasses import replace

import cv2
import numpy as np

from ..chunk.base import NinePatchChunk
from .bitmap import Bitmap

logger = logging.getLogger(__name__)

INTERPOLATIONS = {
    "nearest": cv2.INTER_NEAREST,
    "linear": cv2.INTER_LINEAR,
    "cubic": cv2.INTER_CUBIC,
    "area": cv2.INTER_AREA,
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def density_scale_factor(source_density: int, target_density: int) -> float:
    """Scale factor that takes a bitmap from its density to a target density."""
    if source_density <= 0:
        raise ValueError(f"Source density must be positive, got {source_density}")
    return target_density / source_density


def resolve_interpolation(interpolation: str, factor: float) -> int:
    """
    Map an interpolation name to an OpenCV flag.

    'auto' uses INTER_CUBIC for upscaling and INTER_AREA for downscaling.
    """
    if interpolation == "auto":
        return cv2.INTER_CUBIC if factor > 1 else cv2.INTER_AREA
    try:
        return INTERPOLATIONS[interpolation]
    except KeyError:
        raise ValueError(
            f"Unknown interpolation: {interpolation}. "
            f"Available: {['auto', *INTERPOLATIONS]}"
        ) from None


def scale_bitmap(bitmap: Bitmap, factor: float, interpolation: str = "auto") -> Bitmap:
    """
    Resize a bitmap by a factor.

    Args:
        bitmap: Input bitmap.
        factor: Scale factor (>1 = upscale, <1 = downscale).
        interpolation: 'auto', 'nearest', 'linear', 'cubic' or 'area'.

    Returns:
        Resized bitmap of round_half_up(width * factor) x
        round_half_up(height * factor), at least 1x1, with its density
        scaled by the same factor.
    """
    if factor == 1.0:
        return bitmap

    new_width = max(1, round_half_up(bitmap.width * factor))
    new_height = max(1, round_half_up(bitmap.height * factor))

    pixels = cv2.resize(
        np.ascontiguousarray(bitmap.pixels),
        (new_width, new_height),
        interpolation=resolve_interpolation(interpolation, factor),
    )

    return replace(
        bitmap,
        pixels=pixels,
        density=max(1, round_half_up(bitmap.density * factor)),
    )


def rescale(
    chunk: NinePatchChunk,
    content: Bitmap,
    factor: float,
    interpolation: str = "auto",
) -> tuple[NinePatchChunk, Bitmap]:
    """
    Rescale a chunk and its content pixels together.

    Every padding side and every div bound is scaled and rounded on its own,
    so rounding error never exceeds one pixel per value. Neither input is
    modified.

    Args:
        chunk: Chunk extracted from the raw bitmap.
        content: Content pixels (marker border already stripped).
        factor: Scale factor, usually target density / source density.
        interpolation: Resampling filter name.

    Returns:
        Tuple of (scaled chunk, scaled content). With factor 1 the chunk is an
        equal copy and the content is returned as is.
    """
    if factor <= 0:
        raise ValueError(f"Scale factor must be positive, got {factor}")

    if factor == 1.0:
        return chunk.copy(), content

    logger.debug(
        f"Rescaling {content.width}x{content.height} content by {factor:.4f}"
    )

    scaled_chunk = replace(
        chunk,
        x_divs=[div.scaled(factor, round_half_up) for div in chunk.x_divs],
        y_divs=[div.scaled(factor, round_half_up) for div in chunk.y_divs],
        padding=chunk.padding.scaled(factor, round_half_up),
        colors=list(chunk.colors),
    )

    return scaled_chunk, scale_bitmap(content, factor, interpolation)
