"""
In-memory pixel buffer and ARGB pixel helpers.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

import cv2
import numpy as np
from PIL import Image

from ..chunk.base import DEFAULT_DENSITY
from ..config import settings

BLACK = -16777216
"""Opaque black packed as signed ARGB (0xFF000000)."""


def pack_argb(r: int, g: int, b: int, a: int = 255) -> int:
    """Pack channel values into a signed 32-bit ARGB integer."""
    value = (a << 24) | (r << 16) | (g << 8) | b
    return value - 0x100000000 if value & 0x80000000 else value


def alpha(pixel: int) -> int:
    """Alpha channel of a packed pixel."""
    return (pixel >> 24) & 0xFF


def is_transparent(pixel: int) -> bool:
    """A pixel is transparent when its alpha is zero, whatever its color."""
    return alpha(pixel) == 0


def is_black(pixel: int) -> bool:
    """Only exact opaque black counts as a marker pixel."""
    return pixel == BLACK


def is_border_pixel(pixel: int) -> bool:
    """Marker border pixels are either transparent or opaque black."""
    return is_transparent(pixel) or is_black(pixel)


def pack_pixels(pixels: np.ndarray) -> np.ndarray:
    """
    Pack an RGBA uint8 array into signed ARGB int32 values.

    Args:
        pixels: Array of shape (..., 4).

    Returns:
        Array of shape (...) with dtype int32.
    """
    channels = pixels.astype(np.uint32)
    packed = (
        (channels[..., 3] << 24)
        | (channels[..., 0] << 16)
        | (channels[..., 1] << 8)
        | channels[..., 2]
    )
    return np.ascontiguousarray(packed, dtype=np.uint32).view(np.int32)


@dataclass(eq=False)
class Bitmap:
    """A decoded RGBA image plus the metadata chunk loading needs."""

    pixels: np.ndarray
    """Pixel data, shape (height, width, 4), dtype uint8, RGBA order."""

    density: int = DEFAULT_DENSITY
    """Pixel density the image was authored for."""

    ninepatch_chunk: Optional[bytes] = None
    """Pre-compiled chunk bytes embedded with the image, if any."""

    def __post_init__(self):
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(f"Expected an RGBA array of shape (h, w, 4), got {self.pixels.shape}")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {self.pixels.dtype}")

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        """Return (width, height)."""
        return (self.width, self.height)

    @property
    def packed(self) -> np.ndarray:
        """Pixels as signed ARGB int32, shape (height, width)."""
        return pack_pixels(self.pixels)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y) as a signed ARGB integer."""
        r, g, b, a = (int(c) for c in self.pixels[y, x])
        return pack_argb(r, g, b, a)

    def crop(self, x: int, y: int, width: int, height: int) -> "Bitmap":
        """Return a copy of a rectangle. Embedded chunk bytes are not carried over."""
        return replace(
            self,
            pixels=self.pixels[y:y + height, x:x + width].copy(),
            ninepatch_chunk=None,
        )

    def to_pil(self) -> Image.Image:
        """Convert to a PIL RGBA image."""
        return Image.fromarray(self.pixels)

    @classmethod
    def from_array(
        cls,
        image: np.ndarray,
        density: Optional[int] = None,
        ninepatch_chunk: Optional[bytes] = None,
    ) -> "Bitmap":
        """
        Build a bitmap from a grayscale, RGB or RGBA uint8 array.

        Args:
            image: Image as numpy array.
            density: Pixel density of the image. Defaults to
                settings.default_density.
            ninepatch_chunk: Embedded compiled chunk, if any.

        Returns:
            Bitmap holding an RGBA copy of the image.
        """
        if image.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {image.dtype}")

        if image.ndim == 2:
            rgba = cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)
        elif image.ndim == 3 and image.shape[2] == 3:
            rgba = cv2.cvtColor(image, cv2.COLOR_RGB2RGBA)
        elif image.ndim == 3 and image.shape[2] == 4:
            rgba = image.copy()
        else:
            raise ValueError(f"Unsupported image shape: {image.shape}")

        if density is None:
            density = settings.default_density
        return cls(pixels=rgba, density=density, ninepatch_chunk=ninepatch_chunk)

    @classmethod
    def from_pil(
        cls,
        image: Image.Image,
        density: Optional[int] = None,
        ninepatch_chunk: Optional[bytes] = None,
    ) -> "Bitmap":
        """Build a bitmap from a PIL image."""
        if density is None:
            density = settings.default_density
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls(pixels=np.array(image), density=density, ninepatch_chunk=ninepatch_chunk)

    @classmethod
    def open(
        cls,
        path: Union[str, Path],
        density: Optional[int] = None,
        ninepatch_chunk: Optional[bytes] = None,
    ) -> "Bitmap":
        """Decode an image file with Pillow."""
        with Image.open(path) as image:
            image.load()
            return cls.from_pil(image, density=density, ninepatch_chunk=ninepatch_chunk)
