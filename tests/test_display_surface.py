"""
Presentation Surface Tests
==========================

Tests for DisplayImage and the Pillow-backed ImageSurface.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import io

import pytest
from PIL import Image

from gba_display.display import DisplayImage, ImageSurface, LCD_HEIGHT, LCD_WIDTH
from gba_display.display.surface import ERROR_BACKGROUND


def checker_image() -> DisplayImage:
    """2x2 image: red, green / blue, white."""
    pixels = bytes([
        255, 0, 0, 0, 255, 0,
        0, 0, 255, 255, 255, 255,
    ])
    return DisplayImage(2, 2, pixels)


class TestDisplayImage:
    """Test the converted-frame container."""

    def test_size(self):
        image = checker_image()
        assert image.size == (2, 2)
        assert image.mode == "RGB"

    def test_rejects_wrong_length(self):
        with pytest.raises(ValueError, match="expected 12 bytes"):
            DisplayImage(2, 2, bytes(11))


class TestImageSurface:
    """Test presenting, scaling, and exporting."""

    def test_present_unscaled(self):
        surface = ImageSurface()
        surface.present(checker_image(), 1)
        assert surface.image.size == (2, 2)
        assert surface.image.getpixel((1, 1)) == (255, 255, 255)

    def test_present_nearest_neighbour(self):
        surface = ImageSurface()
        surface.present(checker_image(), 4)
        img = surface.image
        assert img.size == (8, 8)
        # Every pixel of each 4x4 block keeps the source color
        for y in range(4):
            for x in range(4):
                assert img.getpixel((x, y)) == (255, 0, 0)
                assert img.getpixel((x + 4, y)) == (0, 255, 0)
                assert img.getpixel((x, y + 4)) == (0, 0, 255)

    def test_invalid_scale(self):
        with pytest.raises(ValueError):
            ImageSurface().present(checker_image(), 0)

    def test_to_png(self):
        surface = ImageSurface()
        surface.present(checker_image(), 2)
        data = surface.to_png()
        assert data.startswith(b"\x89PNG")
        assert Image.open(io.BytesIO(data)).size == (4, 4)

    def test_to_png_before_present(self):
        with pytest.raises(RuntimeError):
            ImageSurface().to_png()

    def test_save_creates_directories(self, tmp_path):
        surface = ImageSurface()
        surface.present(checker_image(), 1)
        path = surface.save(tmp_path / "shots" / "frame.png")
        assert path.exists()
        with Image.open(path) as img:
            assert img.size == (2, 2)

    def test_error_placeholder(self):
        surface = ImageSurface()
        surface.present(checker_image(), 4)
        surface.show_error("frame store is poisoned")
        assert surface.error == "frame store is poisoned"
        assert surface.image.size == (8, 8)
        assert surface.image.getpixel((0, 0)) == ERROR_BACKGROUND

    def test_error_placeholder_default_size(self):
        surface = ImageSurface()
        surface.show_error("boom")
        assert surface.image.size == (LCD_WIDTH, LCD_HEIGHT)

    def test_present_clears_error(self):
        surface = ImageSurface()
        surface.show_error("boom")
        surface.present(checker_image(), 1)
        assert surface.error is None
