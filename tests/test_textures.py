"""Unit tests for solid, checker and image textures."""

import logging

import numpy as np
from PIL import Image

from openray.core.vector import Vector3
from openray.materials.textures import (MISSING_TEXTURE_COLOR, CheckerTexture, ImageTexture,
                                        SolidColor, as_texture)

ORIGIN = Vector3(0, 0, 0)


def grid_pixels():
    """3x3 image whose red channel encodes the row and green the column."""
    pixels = np.zeros((3, 3, 3), dtype=np.uint8)
    for row in range(3):
        for col in range(3):
            pixels[row, col] = (row * 40, col * 40, 0)
    return pixels


def texel(row, col):
    return Vector3(row * 40 / 255.0, col * 40 / 255.0, 0.0)


class TestSolidColor:

    def test_ignores_inputs(self):
        tex = SolidColor(Vector3(0.2, 0.4, 0.6))
        assert tex.value(0.1, 0.9, Vector3(5, 6, 7)) == Vector3(0.2, 0.4, 0.6)
        assert tex.value(0.7, 0.3, ORIGIN) == Vector3(0.2, 0.4, 0.6)

    def test_as_texture(self):
        tex = SolidColor(Vector3(1, 1, 1))
        assert as_texture(tex) is tex
        assert isinstance(as_texture(Vector3(1, 0, 0)), SolidColor)


class TestCheckerTexture:

    def setup_method(self):
        self.tex = CheckerTexture(Vector3(1, 1, 1), Vector3(0, 0, 0), scale=2.0)

    def test_uses_world_point_not_uv(self):
        p = Vector3(0.5, 0.5, 0.5)
        assert self.tex.value(0.0, 0.0, p) == self.tex.value(0.9, 0.9, p)

    def test_sign_selects_texture(self):
        assert self.tex.value(0, 0, Vector3(0.5, 0.5, 0.5)) == Vector3(1, 1, 1)
        assert self.tex.value(0, 0, Vector3(-0.5, 0.5, 0.5)) == Vector3(0, 0, 0)
        assert self.tex.value(0, 0, Vector3(-0.5, -0.5, 0.5)) == Vector3(1, 1, 1)

    def test_nested_textures(self):
        inner = CheckerTexture(Vector3(0.3, 0.3, 0.3), Vector3(0.6, 0.6, 0.6), scale=2.0)
        tex = CheckerTexture(inner, Vector3(0, 0, 0), scale=2.0)
        assert tex.value(0, 0, Vector3(0.5, 0.5, 0.5)) == Vector3(0.3, 0.3, 0.3)


class TestImageTexture:

    def test_v_flip(self):
        tex = ImageTexture.from_array(grid_pixels())
        # v = 0 is the bottom row of the image.
        assert tex.value(0.0, 0.0, ORIGIN) == texel(2, 0)
        assert tex.value(0.0, 0.99, ORIGIN) == texel(0, 0)
        assert tex.value(0.0, 0.5, ORIGIN) == texel(1, 0)

    def test_u_selects_column(self):
        tex = ImageTexture.from_array(grid_pixels())
        assert tex.value(0.5, 0.0, ORIGIN) == texel(2, 1)
        assert tex.value(0.99, 0.0, ORIGIN) == texel(2, 1)

    def test_tiling_wraps_coordinates(self):
        tex = ImageTexture.from_array(grid_pixels())
        assert tex.value(1.0, 1.0, ORIGIN) == texel(2, 0)
        assert tex.value(-1.0, 2.0, ORIGIN) == texel(2, 0)
        assert tex.value(-0.5, 0.0, ORIGIN) == tex.value(0.5, 0.0, ORIGIN)

    def test_scale_repeats_image(self):
        tex = ImageTexture.from_array(grid_pixels(), scale=2.0)
        assert tex.value(0.5, 0.0, ORIGIN) == texel(2, 0)
        assert tex.value(0.25, 0.0, ORIGIN) == texel(2, 1)

    def test_float_array(self):
        tex = ImageTexture.from_array(np.full((3, 3, 3), 0.25))
        assert tex.value(0.5, 0.5, ORIGIN) == Vector3(0.25, 0.25, 0.25)

    def test_loads_image_file(self, tmp_path):
        path = tmp_path / "grid.png"
        Image.fromarray(grid_pixels()).save(path)
        tex = ImageTexture(str(path))
        assert (tex.width, tex.height) == (3, 3)
        assert tex.value(0.0, 0.0, ORIGIN) == texel(2, 0)
        assert tex.value(0.5, 0.99, ORIGIN) == texel(0, 1)

    def test_missing_file_returns_sentinel(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            tex = ImageTexture(str(tmp_path / "nope.png"))
        assert tex.value(0.3, 0.4, ORIGIN) == MISSING_TEXTURE_COLOR
        assert MISSING_TEXTURE_COLOR == Vector3(1.0, 0.0, 1.0)
        assert "nope.png" in caplog.text

    def test_unreadable_file_returns_sentinel(self, tmp_path):
        path = tmp_path / "broken.png"
        path.write_bytes(b"not an image")
        tex = ImageTexture(str(path))
        assert tex.value(0.5, 0.5, ORIGIN) == MISSING_TEXTURE_COLOR
