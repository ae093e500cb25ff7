"""
Nine-patch chunk toolkit.

Decodes and encodes the binary nine-patch chunk and derives it from raw
images carrying a 1-pixel marker border.
"""

from .chunk import (
    NO_COLOR,
    TRANSPARENT_COLOR,
    Div,
    NinePatchChunk,
    Padding,
    Region,
    build_regions,
    create_colors_array,
    create_empty_chunk,
    is_ninepatch_chunk,
    parse,
    serialize,
)
from .errors import (
    ChunkEncodingError,
    DivCountError,
    DivLengthError,
    NinePatchError,
    NotSerializedError,
    PaddingAmbiguityError,
    TruncatedInputError,
    WrongPaddingError,
)
from .raw import Bitmap, classify_raw_border, extract, rescale, strip_border
from .bitmap_type import BitmapType, classify, determine_bitmap_type
from .loader import ImageLoadingResult, NinePatchDrawableSpec, create_drawable_spec, load_chunk

__version__ = "1.0.0"
__all__ = [
    "NO_COLOR",
    "TRANSPARENT_COLOR",
    "Div",
    "NinePatchChunk",
    "Padding",
    "Region",
    "build_regions",
    "create_colors_array",
    "create_empty_chunk",
    "is_ninepatch_chunk",
    "parse",
    "serialize",
    "ChunkEncodingError",
    "DivCountError",
    "DivLengthError",
    "NinePatchError",
    "NotSerializedError",
    "PaddingAmbiguityError",
    "TruncatedInputError",
    "WrongPaddingError",
    "Bitmap",
    "classify_raw_border",
    "extract",
    "rescale",
    "strip_border",
    "BitmapType",
    "classify",
    "determine_bitmap_type",
    "ImageLoadingResult",
    "NinePatchDrawableSpec",
    "create_drawable_spec",
    "load_chunk",
]
