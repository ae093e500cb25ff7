"""
Raw nine-patch bitmaps: marker border scanning, color sampling, extraction
and density rescaling.
"""

from .bitmap import BLACK, Bitmap, pack_argb, pack_pixels
from .scanner import Axis, discard_unclosed_div, scan_axis, scan_column, scan_line, scan_row
from .colors import build_color_grid, sample_color
from .extractor import (
    classify_raw_border,
    create_chunk_from_raw_bitmap,
    derive_padding,
    extract,
    resolve_padding_div,
    strip_border,
)
from .scaling import density_scale_factor, rescale, round_half_up, scale_bitmap

__all__ = [
    "BLACK",
    "Bitmap",
    "pack_argb",
    "pack_pixels",
    "Axis",
    "discard_unclosed_div",
    "scan_axis",
    "scan_column",
    "scan_line",
    "scan_row",
    "build_color_grid",
    "sample_color",
    "classify_raw_border",
    "create_chunk_from_raw_bitmap",
    "derive_padding",
    "extract",
    "resolve_padding_div",
    "strip_border",
    "density_scale_factor",
    "rescale",
    "round_half_up",
    "scale_bitmap",
]
