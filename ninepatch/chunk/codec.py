"""
Binary codec for nine-patch chunks.

Wire format (all integers 32-bit signed, one byte order for the whole buffer):
    was_serialized : uint8  (always 1 when written)
    x_div_count    : uint8  (number of x div bounds = len(x_divs) * 2)
    y_div_count    : uint8  (number of y div bounds = len(y_divs) * 2)
    color_count    : uint8
    reserved       : int32 x 2
    padding        : int32 x 4  (left, right, top, bottom)
    reserved       : int32
    x_divs         : int32 pairs (start, stop)
    y_divs         : int32 pairs (start, stop)
    colors         : int32 x color_count
"""

import logging
import struct
from typing import Iterable

from ..errors import (
    ChunkEncodingError,
    DivCountError,
    NinePatchError,
    NotSerializedError,
    TruncatedInputError,
)
from .base import Div, NinePatchChunk, Padding

logger = logging.getLogger(__name__)

BYTE_ORDER_PREFIXES = {
    "little": "<",
    "big": ">",
    "native": "=",
}

HEADER_SIZE = 4 + 7 * 4  # 32 bytes
MAX_COUNT = 0xFF


def _prefix(byte_order: str) -> str:
    try:
        return BYTE_ORDER_PREFIXES[byte_order]
    except KeyError:
        raise ValueError(
            f"Unknown byte order: {byte_order}. "
            f"Available: {list(BYTE_ORDER_PREFIXES)}"
        ) from None


def _header_format(byte_order: str) -> str:
    return f"{_prefix(byte_order)}4B7i"


def to_int32(value: int) -> int:
    """Reinterpret an integer as a signed 32-bit value (0xFF000000 -> -16777216)."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def serialized_size(x_div_count: int, y_div_count: int, color_count: int) -> int:
    """Size in bytes of a chunk with the given number of divs and colors."""
    return HEADER_SIZE + x_div_count * 2 * 4 + y_div_count * 2 * 4 + color_count * 4


def _flatten(divs: Iterable[Div]) -> list[int]:
    bounds = []
    for div in divs:
        bounds.append(div.start)
        bounds.append(div.stop)
    return bounds


def serialize(chunk: NinePatchChunk, byte_order: str = "little") -> bytes:
    """
    Serialize a chunk to its binary form.

    Args:
        chunk: Chunk to encode. The empty chunk is encoded too, although
            parse() will reject the result.
        byte_order: 'little', 'big' or 'native'.

    Returns:
        Encoded bytes of length serialized_size(...).

    Raises:
        ChunkEncodingError: If a count does not fit in its header byte or a
            value does not fit in 32 bits.
    """
    prefix = _prefix(byte_order)
    x_bounds = len(chunk.x_divs) * 2
    y_bounds = len(chunk.y_divs) * 2
    color_count = len(chunk.colors)

    for label, count in (("x div", x_bounds), ("y div", y_bounds), ("color", color_count)):
        if count > MAX_COUNT:
            raise ChunkEncodingError(f"Too many {label} values for the header: {count} > {MAX_COUNT}")

    padding = chunk.padding
    values = _flatten(chunk.x_divs) + _flatten(chunk.y_divs) + [to_int32(c) for c in chunk.colors]

    try:
        header = struct.pack(
            _header_format(byte_order),
            1,
            x_bounds,
            y_bounds,
            color_count,
            0,
            0,
            padding.left,
            padding.right,
            padding.top,
            padding.bottom,
            0,
        )
        body = struct.pack(f"{prefix}{len(values)}i", *values)
    except struct.error as e:
        raise ChunkEncodingError(f"Chunk value out of 32-bit range: {e}") from e

    return header + body


def check_div_count(count: int, axis: str) -> None:
    """Raise DivCountError unless count is a positive even number."""
    if count == 0 or count & 1:
        raise DivCountError(
            f"{axis} div count should be even and greater than 0, but was: {count}"
        )


def _read_divs(values: tuple, offset: int, count: int) -> list[Div]:
    return [Div(values[offset + i * 2], values[offset + i * 2 + 1]) for i in range(count)]


def parse(data: bytes, byte_order: str = "little") -> NinePatchChunk:
    """
    Parse a chunk from its binary form.

    Args:
        data: Serialized chunk.
        byte_order: Byte order the chunk was written with.

    Returns:
        A new NinePatchChunk.

    Raises:
        NotSerializedError: If the first byte is zero.
        DivCountError: If either div count is zero or odd.
        TruncatedInputError: If data is shorter than its header implies.
    """
    data = bytes(data)
    prefix = _prefix(byte_order)

    if len(data) < 1:
        raise TruncatedInputError("Chunk is empty")
    if data[0] == 0:
        raise NotSerializedError("Chunk header says it was not serialized")
    if len(data) < 3:
        raise TruncatedInputError(f"Chunk needs at least 3 bytes for div counts, got {len(data)}")

    check_div_count(data[1], "x")
    check_div_count(data[2], "y")

    if len(data) < HEADER_SIZE:
        raise TruncatedInputError(f"Chunk header needs {HEADER_SIZE} bytes, got {len(data)}")

    (
        _,
        x_bounds,
        y_bounds,
        color_count,
        _,
        _,
        left,
        right,
        top,
        bottom,
        _,
    ) = struct.unpack_from(_header_format(byte_order), data, 0)

    x_count = x_bounds >> 1
    y_count = y_bounds >> 1
    expected = serialized_size(x_count, y_count, color_count)
    if len(data) < expected:
        raise TruncatedInputError(f"Chunk needs {expected} bytes, got {len(data)}")

    values = struct.unpack_from(f"{prefix}{x_bounds + y_bounds + color_count}i", data, HEADER_SIZE)

    chunk = NinePatchChunk(
        was_serialized=True,
        x_divs=_read_divs(values, 0, x_count),
        y_divs=_read_divs(values, x_bounds, y_count),
        padding=Padding(left=left, top=top, right=right, bottom=bottom),
        colors=list(values[x_bounds + y_bounds:]),
    )

    logger.debug(
        f"Parsed chunk: {x_count} x divs, {y_count} y divs, {color_count} colors"
    )
    return chunk


def is_ninepatch_chunk(data: bytes | None, byte_order: str = "little") -> bool:
    """Check whether data holds a chunk that parse() accepts."""
    if not data:
        return False
    try:
        parse(data, byte_order)
    except NinePatchError:
        return False
    return True
