"""
Nine-patch chunk model and binary codec.
"""

from .base import (
    DEFAULT_DENSITY,
    NO_COLOR,
    TRANSPARENT_COLOR,
    Div,
    NinePatchChunk,
    Padding,
    create_colors_array,
    create_empty_chunk,
)
from .regions import Region, build_regions
from .codec import HEADER_SIZE, is_ninepatch_chunk, parse, serialize, serialized_size

__all__ = [
    "DEFAULT_DENSITY",
    "NO_COLOR",
    "TRANSPARENT_COLOR",
    "Div",
    "NinePatchChunk",
    "Padding",
    "create_colors_array",
    "create_empty_chunk",
    "Region",
    "build_regions",
    "HEADER_SIZE",
    "is_ninepatch_chunk",
    "parse",
    "serialize",
    "serialized_size",
]
