"""
Expansion of stretch divs into the full sequence of axis regions.
"""

from dataclasses import dataclass
from typing import Sequence

from .base import Div


@dataclass(frozen=True)
class Region:
    """A fixed or stretchable span [start, stop) of one axis."""

    start: int
    stop: int
    is_stretch: bool = False

    @property
    def is_empty(self) -> bool:
        return self.stop <= self.start


def build_regions(divs: Sequence[Div], max_length: int) -> list[Region]:
    """
    Expand divs into fixed and stretch regions covering [0, max_length).

    A leading fixed region is emitted only when the first div does not start
    at 0, a trailing one only when the last div stops before max_length.
    Gaps between consecutive divs are always emitted, even when empty.

    Args:
        divs: Stretch divs sorted by start.
        max_length: Length of the axis in content pixels.

    Returns:
        Ordered regions. Empty when there are no divs.
    """
    regions: list[Region] = []
    if not divs:
        return regions

    last = len(divs) - 1
    for index, div in enumerate(divs):
        if index == 0 and div.start != 0:
            regions.append(Region(0, div.start))
        if index > 0:
            regions.append(Region(divs[index - 1].stop, div.start))

        regions.append(Region(div.start, div.stop, is_stretch=True))

        if index == last and div.stop < max_length:
            regions.append(Region(div.stop, max_length))

    return regions
