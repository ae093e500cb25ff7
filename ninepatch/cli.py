"""
Command line entry point.

    ninepatch inspect button.9.png --target-density 320 --out button.chunk --json
    ninepatch decode button.chunk --byte-order little
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .chunk.codec import BYTE_ORDER_PREFIXES, parse, serialize
from .config import settings
from .errors import NinePatchError
from .loader import load_chunk
from .raw.bitmap import Bitmap
from .schemas.chunk import ChunkSchema

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ninepatch",
        description="Inspect raw nine-patch images and compiled nine-patch chunks.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--byte-order",
        choices=sorted(BYTE_ORDER_PREFIXES),
        default=settings.byte_order,
        help="Byte order of chunk bytes (default: %(default)s)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    inspect = sub.add_parser("inspect", parents=[common], help="Extract the chunk from an image")
    inspect.add_argument("image", help="Image file (raw .9.png or plain image)")
    inspect.add_argument("--density", type=int, default=settings.default_density, help="Source image density")
    inspect.add_argument(
        "--target-density",
        type=int,
        default=settings.target_density,
        help="Rescale raw images to this density",
    )
    inspect.add_argument("--chunk", default="", help="File holding compiled chunk bytes for the image")
    inspect.add_argument("--out", default="", help="Write the serialized chunk to this file")
    inspect.add_argument("--content-out", default="", help="Write the content bitmap to this image file")
    inspect.add_argument("--json", action="store_true", help="Print the chunk as JSON")

    decode = sub.add_parser("decode", parents=[common], help="Parse a serialized chunk file")
    decode.add_argument("chunk_file", help="File holding serialized chunk bytes")

    return parser.parse_args(argv)


def _summary(schema: ChunkSchema) -> str:
    def divs(items) -> str:
        return ", ".join(f"[{d.start}, {d.stop})" for d in items) or "-"

    p = schema.padding
    lines = [
        f"kind:    {schema.kind}",
        f"content: {schema.width}x{schema.height}",
        f"x divs:  {divs(schema.x_divs)}",
        f"y divs:  {divs(schema.y_divs)}",
        f"padding: left={p.left} top={p.top} right={p.right} bottom={p.bottom}",
        f"colors:  {' '.join(schema.colors) or '-'}",
    ]
    return "\n".join(lines)


def _inspect(a: argparse.Namespace) -> int:
    embedded = Path(a.chunk).read_bytes() if a.chunk.strip() else None
    bitmap = Bitmap.open(a.image, density=a.density, ninepatch_chunk=embedded)
    logger.info(f"Loaded {a.image}: {bitmap.width}x{bitmap.height} at density {bitmap.density}")

    result = load_chunk(bitmap, target_density=a.target_density, byte_order=a.byte_order)
    content = result.bitmap

    schema = ChunkSchema.from_chunk(
        result.chunk,
        kind=result.kind.value,
        width=content.width if content is not None else None,
        height=content.height if content is not None else None,
    )
    print(schema.model_dump_json(indent=2) if a.json else _summary(schema))

    if a.out.strip():
        Path(a.out).write_bytes(serialize(result.chunk, a.byte_order))
        logger.info(f"Wrote chunk to {a.out}")

    if a.content_out.strip() and content is not None:
        content.to_pil().save(a.content_out)
        logger.info(f"Wrote content bitmap to {a.content_out}")

    return 0


def _decode(a: argparse.Namespace) -> int:
    data = Path(a.chunk_file).read_bytes()
    chunk = parse(data, a.byte_order)
    print(ChunkSchema.from_chunk(chunk).model_dump_json(indent=2))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    a = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if (settings.debug or a.verbose) else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    handlers = {"inspect": _inspect, "decode": _decode}
    try:
        return handlers[a.command](a)
    except NinePatchError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
