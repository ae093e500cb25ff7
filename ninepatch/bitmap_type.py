"""
Source classification and per-kind chunk handling.

Each kind of source bitmap gets a chunk factory and a bitmap transform,
looked up from tables keyed by BitmapType.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from .chunk.base import NinePatchChunk, create_empty_chunk
from .chunk.codec import is_ninepatch_chunk, parse
from .errors import NinePatchError
from .raw.bitmap import Bitmap
from .raw.extractor import classify_raw_border, create_chunk_from_raw_bitmap, strip_border
from .raw.scaling import rescale

logger = logging.getLogger(__name__)


class BitmapType(str, Enum):
    """Kinds of source bitmaps."""

    COMPILED = "compiled"
    """Carries pre-compiled chunk bytes."""

    RAW_BORDERED = "raw_bordered"
    """Carries a marker border to extract the chunk from."""

    PLAIN = "plain"
    """An ordinary image without chunk information."""

    ABSENT = "absent"
    """No bitmap at all."""


def classify(
    embedded_chunk: Optional[bytes],
    bitmap: Optional[Bitmap],
    byte_order: str = "little",
) -> BitmapType:
    """
    Decide how a chunk should be obtained for a bitmap.

    Args:
        embedded_chunk: Compiled chunk bytes shipped with the bitmap, if any.
        bitmap: Decoded bitmap, or None.
        byte_order: Byte order of embedded_chunk.

    Returns:
        The detected BitmapType.
    """
    if bitmap is None:
        return BitmapType.ABSENT
    if embedded_chunk is not None and is_ninepatch_chunk(embedded_chunk, byte_order):
        return BitmapType.COMPILED
    if classify_raw_border(bitmap):
        return BitmapType.RAW_BORDERED
    return BitmapType.PLAIN


def determine_bitmap_type(bitmap: Optional[Bitmap], byte_order: str = "little") -> BitmapType:
    """Classify a bitmap using its own embedded chunk bytes."""
    embedded = bitmap.ninepatch_chunk if bitmap is not None else None
    return classify(embedded, bitmap, byte_order)


# ─── Chunk factories ──────────────────────────────────────────


def _compiled_chunk(bitmap: Optional[Bitmap], embedded_chunk: Optional[bytes], byte_order: str) -> NinePatchChunk:
    if embedded_chunk is None:
        return create_empty_chunk()
    try:
        return parse(embedded_chunk, byte_order)
    except NinePatchError as e:
        logger.warning(f"Embedded chunk could not be parsed, using empty chunk: {e}")
        return create_empty_chunk()


def _raw_chunk(bitmap: Optional[Bitmap], embedded_chunk: Optional[bytes], byte_order: str) -> NinePatchChunk:
    return create_chunk_from_raw_bitmap(bitmap, check=False)


def _empty_chunk(bitmap: Optional[Bitmap], embedded_chunk: Optional[bytes], byte_order: str) -> NinePatchChunk:
    return create_empty_chunk()


ChunkFactory = Callable[[Optional[Bitmap], Optional[bytes], str], NinePatchChunk]

CHUNK_FACTORIES: dict[BitmapType, ChunkFactory] = {
    BitmapType.COMPILED: _compiled_chunk,
    BitmapType.RAW_BORDERED: _raw_chunk,
    BitmapType.PLAIN: _empty_chunk,
    BitmapType.ABSENT: _empty_chunk,
}


# ─── Bitmap transforms ────────────────────────────────────────


def _keep_bitmap(
    bitmap: Optional[Bitmap],
    chunk: NinePatchChunk,
    factor: float,
    interpolation: str,
) -> tuple[NinePatchChunk, Optional[Bitmap]]:
    return chunk, bitmap


def _strip_and_rescale(
    bitmap: Optional[Bitmap],
    chunk: NinePatchChunk,
    factor: float,
    interpolation: str,
) -> tuple[NinePatchChunk, Optional[Bitmap]]:
    content = strip_border(bitmap)
    return rescale(chunk, content, factor, interpolation)


BitmapTransform = Callable[
    [Optional[Bitmap], NinePatchChunk, float, str],
    tuple[NinePatchChunk, Optional[Bitmap]],
]

BITMAP_TRANSFORMS: dict[BitmapType, BitmapTransform] = {
    BitmapType.COMPILED: _keep_bitmap,
    BitmapType.RAW_BORDERED: _strip_and_rescale,
    BitmapType.PLAIN: _keep_bitmap,
    BitmapType.ABSENT: _keep_bitmap,
}


def create_chunk(
    kind: BitmapType,
    bitmap: Optional[Bitmap],
    byte_order: str = "little",
    embedded_chunk: Optional[bytes] = None,
) -> NinePatchChunk:
    """
    Create the chunk for a bitmap of a known kind.

    Never raises NinePatchError: failures give the empty chunk.

    Args:
        kind: Result of classify() for the same inputs.
        bitmap: Decoded bitmap, or None.
        byte_order: Byte order of the compiled chunk bytes.
        embedded_chunk: Compiled chunk bytes passed to classify(). Defaults
            to the bytes embedded in the bitmap.
    """
    if embedded_chunk is None and bitmap is not None:
        embedded_chunk = bitmap.ninepatch_chunk
    return CHUNK_FACTORIES[kind](bitmap, embedded_chunk, byte_order)


def modify_bitmap(
    kind: BitmapType,
    bitmap: Optional[Bitmap],
    chunk: NinePatchChunk,
    factor: float = 1.0,
    interpolation: str = "auto",
) -> tuple[NinePatchChunk, Optional[Bitmap]]:
    """
    Turn a source bitmap into the content bitmap a renderer draws.

    Raw bitmaps lose their marker border and are rescaled together with
    their chunk. Other kinds are returned unchanged.

    Returns:
        Tuple of (chunk, content bitmap).
    """
    return BITMAP_TRANSFORMS[kind](bitmap, chunk, factor, interpolation)
