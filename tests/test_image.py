# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""Tests for the image acquisition boundary."""

import io

import numpy as np
import pytest
from PIL import Image

from pixelhue.measure.image import is_image_mime, load_image


def _png_bytes(mode="RGB", size=(4, 3), color=(10, 20, 30)):
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format="PNG")
    return buf.getvalue()


class TestLoadImage:

    def test_png_bytes(self):
        pixels, height, width = load_image(_png_bytes())
        assert (height, width) == (3, 4)
        assert pixels.shape == (3, 4, 3)
        assert pixels.dtype == np.uint8
        assert tuple(pixels[0, 0]) == (10, 20, 30)

    def test_path(self, tmp_path):
        path = tmp_path / "swatch.png"
        path.write_bytes(_png_bytes(color=(200, 100, 50)))
        pixels, _, _ = load_image(path)
        assert tuple(pixels[2, 3]) == (200, 100, 50)

    def test_string_path(self, tmp_path):
        path = tmp_path / "swatch.png"
        path.write_bytes(_png_bytes())
        _, height, width = load_image(str(path))
        assert (height, width) == (3, 4)

    def test_file_object(self):
        pixels, _, _ = load_image(io.BytesIO(_png_bytes(color=(1, 2, 3))))
        assert tuple(pixels[1, 1]) == (1, 2, 3)

    def test_rgba_png_drops_alpha(self):
        pixels, _, _ = load_image(_png_bytes(mode="RGBA", color=(9, 8, 7, 128)))
        assert pixels.shape[2] == 3
        assert tuple(pixels[0, 0]) == (9, 8, 7)

    def test_grayscale_pil_image(self):
        pixels, _, _ = load_image(Image.new("L", (2, 2), 77))
        assert tuple(pixels[0, 0]) == (77, 77, 77)

    def test_rgb_array_passthrough(self):
        arr = np.full((5, 6, 3), 42, dtype=np.uint8)
        pixels, height, width = load_image(arr)
        assert (height, width) == (5, 6)
        np.testing.assert_array_equal(pixels, arr)

    def test_array_is_copied(self):
        arr = np.zeros((3, 3, 3), dtype=np.uint8)
        pixels, _, _ = load_image(arr)
        arr[:] = 200
        assert not np.shares_memory(pixels, arr)
        assert tuple(pixels[1, 1]) == (0, 0, 0)
        assert arr.flags.writeable
        assert not pixels.flags.writeable

    def test_rgba_array(self):
        arr = np.zeros((2, 2, 4), dtype=np.uint8)
        arr[..., 3] = 255
        pixels, _, _ = load_image(arr)
        assert pixels.shape == (2, 2, 3)

    def test_undecodable_bytes(self):
        with pytest.raises(ValueError, match="decode"):
            load_image(b"definitely not an image")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_image(tmp_path / "missing.png")

    def test_wrong_dtype(self):
        with pytest.raises(ValueError, match="uint8"):
            load_image(np.zeros((2, 2, 3), dtype=np.float32))

    def test_wrong_shape(self):
        with pytest.raises(ValueError, match="shape"):
            load_image(np.zeros((2, 2), dtype=np.uint8))

    def test_empty_array(self):
        with pytest.raises(ValueError, match="no pixels"):
            load_image(np.zeros((0, 4, 3), dtype=np.uint8))

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="Expected"):
            load_image(12345)


class TestIsImageMime:

    @pytest.mark.parametrize("mime", ["image/png", "image/jpeg", "IMAGE/WEBP", " image/gif"])
    def test_accepts_images(self, mime):
        assert is_image_mime(mime)

    @pytest.mark.parametrize("mime", ["text/plain", "application/pdf", "", None])
    def test_rejects_everything_else(self, mime):
        assert not is_image_mime(mime)
