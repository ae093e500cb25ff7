"""Tests for high-level loading and renderer inputs."""

from ninepatch.bitmap_type import BitmapType
from ninepatch.chunk.base import Div, NinePatchChunk, Padding
from ninepatch.chunk.codec import parse, serialize
from ninepatch.loader import create_drawable_spec, load_chunk
from ninepatch.raw.bitmap import Bitmap
from ninepatch.raw.extractor import extract

from tests.conftest import RED_RGBA, make_raw_bitmap, solid


def test_load_raw_bitmap_without_rescale(button_bitmap):
    result = load_chunk(button_bitmap)
    assert result.kind is BitmapType.RAW_BORDERED
    assert result.bitmap.size == (7, 6)
    assert result.chunk == extract(button_bitmap)


def test_load_raw_bitmap_with_rescale(button_bitmap):
    result = load_chunk(button_bitmap, target_density=320)
    assert result.bitmap.size == (14, 12)
    assert result.bitmap.density == 320
    assert result.chunk.x_divs == [Div(4, 10)]
    assert result.chunk.y_divs == [Div(2, 8)]
    assert result.chunk.padding == Padding(left=2, top=4, right=2, bottom=2)


def test_load_ambiguous_raw_bitmap_gives_empty_chunk():
    bitmap = make_raw_bitmap(solid(8, 6), top=[(2, 4)], left=[(1, 3)], bottom=[(0, 2), (4, 6)])
    result = load_chunk(bitmap)
    assert result.kind is BitmapType.PLAIN
    assert result.chunk.is_empty
    assert result.bitmap is bitmap


def test_load_plain_bitmap():
    bitmap = Bitmap(solid(4, 4, RED_RGBA))
    result = load_chunk(bitmap, target_density=320)
    assert result.kind is BitmapType.PLAIN
    assert result.chunk.is_empty
    assert result.bitmap is bitmap


def test_load_compiled_bitmap():
    chunk = NinePatchChunk(x_divs=[Div(0, 2)], y_divs=[Div(1, 3)], colors=[1] * 6)
    bitmap = Bitmap(solid(4, 4, RED_RGBA), ninepatch_chunk=serialize(chunk))
    result = load_chunk(bitmap)
    assert result.kind is BitmapType.COMPILED
    assert result.chunk == chunk
    assert result.bitmap is bitmap


def test_load_absent():
    result = load_chunk(None)
    assert result.kind is BitmapType.ABSENT
    assert result.bitmap is None
    assert result.chunk.is_empty


def test_drawable_spec(button_bitmap):
    spec = create_drawable_spec(button_bitmap, src_name="button", extra_padding=3)
    assert spec.src_name == "button"
    assert spec.content.size == (7, 6)
    assert spec.padding == Padding(left=4, top=5, right=4, bottom=4)
    assert parse(spec.chunk_bytes) == extract(button_bitmap)


def test_drawable_spec_for_plain_and_absent():
    assert create_drawable_spec(None) is None

    spec = create_drawable_spec(Bitmap(solid(2, 2, RED_RGBA)))
    assert spec.padding == Padding()
    assert len(spec.chunk_bytes) == 32
