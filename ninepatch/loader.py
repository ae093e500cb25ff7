"""
High-level chunk loading.

Classifies a bitmap, builds its chunk, turns it into content pixels, and
packages everything a renderer needs.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .bitmap_type import BitmapType, create_chunk, determine_bitmap_type, modify_bitmap
from .chunk.base import NinePatchChunk, Padding
from .chunk.codec import serialize
from .config import settings
from .raw.bitmap import Bitmap
from .raw.scaling import density_scale_factor

logger = logging.getLogger(__name__)


@dataclass
class ImageLoadingResult:
    """Chunk plus the bitmap it applies to."""

    bitmap: Optional[Bitmap]
    """Content bitmap. Differs from the source for raw nine-patch images."""

    chunk: NinePatchChunk
    """Chunk for the content bitmap. Empty when none could be built."""

    kind: BitmapType
    """How the source bitmap was classified."""


@dataclass
class NinePatchDrawableSpec:
    """Inputs a renderer needs to draw a nine-patch."""

    content: Bitmap
    """Content pixels, marker border removed."""

    chunk_bytes: bytes
    """Serialized chunk."""

    padding: Padding
    """Content padding, extra padding included."""

    src_name: Optional[str] = None
    """Label of the source, for diagnostics."""


def load_chunk(
    bitmap: Optional[Bitmap],
    target_density: Optional[int] = None,
    byte_order: Optional[str] = None,
    interpolation: Optional[str] = None,
) -> ImageLoadingResult:
    """
    Build the chunk for a bitmap and the content bitmap it describes.

    Args:
        bitmap: Decoded source bitmap, or None.
        target_density: Density to rescale raw bitmaps to. Defaults to
            settings.target_density (None = no rescale).
        byte_order: Byte order of embedded chunks. Defaults to settings.
        interpolation: Resampling filter. Defaults to settings.

    Returns:
        ImageLoadingResult. Note the bitmap can differ from the source.
    """
    byte_order = byte_order or settings.byte_order
    interpolation = interpolation or settings.interpolation
    target_density = target_density or settings.target_density

    kind = determine_bitmap_type(bitmap, byte_order)
    chunk = create_chunk(kind, bitmap, byte_order)

    factor = 1.0
    if bitmap is not None and target_density is not None:
        factor = density_scale_factor(bitmap.density, target_density)

    chunk, content = modify_bitmap(kind, bitmap, chunk, factor, interpolation)

    if chunk.is_empty:
        logger.debug(f"Loaded {kind.value} bitmap with empty chunk")
    else:
        logger.debug(
            f"Loaded {kind.value} bitmap: {len(chunk.x_divs)} x divs, "
            f"{len(chunk.y_divs)} y divs, scale {factor:.4f}"
        )
    return ImageLoadingResult(bitmap=content, chunk=chunk, kind=kind)


def create_drawable_spec(
    bitmap: Optional[Bitmap],
    src_name: Optional[str] = None,
    extra_padding: int = 0,
    target_density: Optional[int] = None,
    byte_order: Optional[str] = None,
) -> Optional[NinePatchDrawableSpec]:
    """
    Package a bitmap for a nine-patch renderer.

    Args:
        bitmap: Decoded source bitmap, or None.
        src_name: Label of the source. Might be None.
        extra_padding: Pixels added to every padding side.
        target_density: Density to rescale raw bitmaps to.
        byte_order: Byte order of the produced (and embedded) chunk bytes.

    Returns:
        Drawable inputs, or None when there is no bitmap.
    """
    byte_order = byte_order or settings.byte_order
    result = load_chunk(bitmap, target_density=target_density, byte_order=byte_order)
    if result.kind is BitmapType.ABSENT or result.bitmap is None:
        return None

    return NinePatchDrawableSpec(
        content=result.bitmap,
        chunk_bytes=serialize(result.chunk, byte_order),
        padding=result.chunk.padding.expanded(extra_padding),
        src_name=src_name,
    )
