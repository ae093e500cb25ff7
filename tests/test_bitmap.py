"""Tests for the pixel buffer and ARGB helpers."""

import numpy as np
import pytest

from ninepatch.config import settings
from ninepatch.raw.bitmap import BLACK, Bitmap, alpha, is_black, is_border_pixel, is_transparent, pack_argb, pack_pixels

from tests.conftest import RED_RGBA, solid


def test_pack_argb():
    assert pack_argb(0, 0, 0) == BLACK == -16777216
    assert pack_argb(255, 0, 0) == -65536
    assert pack_argb(0, 0, 0, 0) == 0
    assert pack_argb(1, 2, 3, 0x7F) == 0x7F010203


def test_pixel_predicates():
    assert is_black(BLACK)
    assert not is_black(pack_argb(0, 0, 0, 254))
    assert is_transparent(pack_argb(200, 10, 10, 0))
    assert alpha(BLACK) == 255
    assert is_border_pixel(0)
    assert not is_border_pixel(pack_argb(255, 0, 0))


def test_pack_pixels_matches_pack_argb():
    pixels = np.array([[[1, 2, 3, 4], [255, 255, 255, 255]]], dtype=np.uint8)
    packed = pack_pixels(pixels)
    assert packed.dtype == np.int32
    assert packed.tolist() == [[pack_argb(1, 2, 3, 4), pack_argb(255, 255, 255, 255)]]


def test_get_pixel_uses_x_then_y():
    pixels = solid(3, 2, (0, 0, 0, 0))
    pixels[1, 2] = RED_RGBA
    bitmap = Bitmap(pixels)
    assert bitmap.get_pixel(2, 1) == pack_argb(255, 0, 0)
    assert bitmap.get_pixel(0, 0) == 0
    assert bitmap.size == (3, 2)


def test_from_array_adds_alpha():
    rgb = np.full((2, 3, 3), 9, dtype=np.uint8)
    bitmap = Bitmap.from_array(rgb, density=240)
    assert bitmap.pixels.shape == (2, 3, 4)
    assert np.all(bitmap.pixels[..., 3] == 255)
    assert bitmap.density == 240

    gray = np.zeros((2, 2), dtype=np.uint8)
    assert Bitmap.from_array(gray).pixels.shape == (2, 2, 4)


def test_invalid_arrays_are_rejected():
    with pytest.raises(ValueError):
        Bitmap(np.zeros((2, 2, 3), dtype=np.uint8))
    with pytest.raises(ValueError):
        Bitmap(np.zeros((2, 2, 4), dtype=np.float32))
    with pytest.raises(ValueError):
        Bitmap.from_array(np.zeros((2, 2, 2), dtype=np.uint8))


def test_pil_round_trip(tmp_path):
    bitmap = Bitmap(solid(3, 2, (5, 6, 7, 0)))
    path = tmp_path / "image.png"
    bitmap.to_pil().save(path)

    loaded = Bitmap.open(path, density=320)
    assert np.array_equal(loaded.pixels, bitmap.pixels)
    assert loaded.density == 320
    assert Bitmap.open(path).density == 160


def test_default_density_follows_settings(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "default_density", 240)
    path = tmp_path / "image.png"
    Bitmap(solid(2, 2, RED_RGBA)).to_pil().save(path)

    assert Bitmap.open(path).density == 240
    assert Bitmap.from_array(np.zeros((2, 2), dtype=np.uint8)).density == 240
    assert Bitmap.open(path, density=120).density == 120
