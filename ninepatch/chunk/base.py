"""
Core chunk data types.
"""

from dataclasses import dataclass, field, replace

NO_COLOR = 0x00000001
"""The region is not filled with a single color."""

TRANSPARENT_COLOR = 0x00000000
"""The region is completely transparent."""

DEFAULT_DENSITY = 160
"""Density assumed for images decoded without density information."""


@dataclass(frozen=True)
class Div:
    """A half-open pixel interval [start, stop) along one axis."""

    start: int
    """First pixel of the interval (content coordinates)."""

    stop: int
    """One past the last pixel of the interval."""

    def scaled(self, factor: float, rounding) -> "Div":
        """Return this div with both bounds scaled and rounded independently."""
        return Div(rounding(self.start * factor), rounding(self.stop * factor))


@dataclass(frozen=True)
class Padding:
    """Content padding, in pixels, measured from each edge."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def is_negative(self) -> bool:
        """Whether any side is below zero."""
        return min(self.left, self.top, self.right, self.bottom) < 0

    def expanded(self, amount: int) -> "Padding":
        """Return the padding with amount added to every side."""
        if amount == 0:
            return self
        return Padding(
            self.left + amount,
            self.top + amount,
            self.right + amount,
            self.bottom + amount,
        )

    def scaled(self, factor: float, rounding) -> "Padding":
        """Return the padding with every side scaled and rounded independently."""
        return Padding(
            rounding(self.left * factor),
            rounding(self.top * factor),
            rounding(self.right * factor),
            rounding(self.bottom * factor),
        )


@dataclass
class NinePatchChunk:
    """
    Describes how a bitmap is split into fixed and stretchable regions.

    Colors are stored one per (y region, x region) pair, y outer and x inner.
    """

    was_serialized: bool = True
    """Header flag. Always written as true."""

    x_divs: list[Div] = field(default_factory=list)
    """Horizontal stretchable areas."""

    y_divs: list[Div] = field(default_factory=list)
    """Vertical stretchable areas."""

    padding: Padding = field(default_factory=Padding)
    """Content padding."""

    colors: list[int] = field(default_factory=list)
    """Fill color per region, or NO_COLOR / TRANSPARENT_COLOR."""

    @property
    def is_empty(self) -> bool:
        """True for the empty chunk used when extraction is impossible."""
        return not self.x_divs and not self.y_divs and not self.colors

    def region_grid_shape(self, width: int, height: int) -> tuple[int, int]:
        """Return (rows, cols) of the region grid for a content size."""
        from .regions import build_regions

        return (
            len(build_regions(self.y_divs, height)),
            len(build_regions(self.x_divs, width)),
        )

    def expected_color_count(self, width: int, height: int) -> int:
        """Number of colors this chunk needs for a content size."""
        rows, cols = self.region_grid_shape(width, height)
        return rows * cols

    def with_no_colors(self, width: int, height: int) -> "NinePatchChunk":
        """Return a copy whose colors are all NO_COLOR, sized to the region grid."""
        return replace(
            self,
            x_divs=list(self.x_divs),
            y_divs=list(self.y_divs),
            colors=create_colors_array(self, width, height),
        )

    def copy(self) -> "NinePatchChunk":
        """Return a copy that shares no lists with this chunk."""
        return replace(
            self,
            x_divs=list(self.x_divs),
            y_divs=list(self.y_divs),
            colors=list(self.colors),
        )


def create_empty_chunk() -> NinePatchChunk:
    """Create the empty chunk: no divs, no colors, zero padding."""
    return NinePatchChunk(
        was_serialized=True,
        x_divs=[],
        y_divs=[],
        padding=Padding(),
        colors=[],
    )


def create_colors_array(chunk: NinePatchChunk | None, width: int, height: int) -> list[int]:
    """
    Create a NO_COLOR-filled colors list matching a chunk's region grid.

    Args:
        chunk: Chunk holding the divs. None yields an empty list.
        width: Content width (bitmap width without the marker border).
        height: Content height (bitmap height without the marker border).

    Returns:
        List of NO_COLOR values, one per region.
    """
    if chunk is None:
        return []
    return [NO_COLOR] * chunk.expected_color_count(width, height)
