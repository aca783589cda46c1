"""
Color Codec Unit Tests
======================

Tests for BGR555 packed colors and the 5-bit to 8-bit channel expansion.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import pytest

from gba_display.display import Color, expand_channel, pixels_to_rgb, RGB888_TABLE
from gba_display.display.color import BLACK, WHITE


# =============================================================================
# Channel Expansion Tests
# =============================================================================

class TestExpandChannel:
    """Test 5-bit to 8-bit channel expansion."""

    def test_zero(self):
        assert expand_channel(0) == 0

    def test_max(self):
        assert expand_channel(31) == 255

    def test_mid_value(self):
        """16 -> 128 | 4 = 132, not the 128 a plain shift would give."""
        assert expand_channel(16) == 132

    @pytest.mark.parametrize("value", range(32))
    def test_bit_replication(self, value):
        assert expand_channel(value) == (value << 3) | (value >> 2)

    def test_monotonic(self):
        expanded = [expand_channel(v) for v in range(32)]
        assert expanded == sorted(expanded)
        assert len(set(expanded)) == 32

    @pytest.mark.parametrize("value", [-1, 32, 255])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError):
            expand_channel(value)


# =============================================================================
# Packed Color Tests
# =============================================================================

class TestColor:
    """Test the BGR555 bit layout."""

    def test_default_is_black(self):
        assert Color().value == 0
        assert Color() == BLACK

    def test_red_in_low_bits(self):
        color = Color(0x001F)
        assert (color.red, color.green, color.blue) == (31, 0, 0)

    def test_green_in_middle_bits(self):
        color = Color(0x03E0)
        assert (color.red, color.green, color.blue) == (0, 31, 0)

    def test_blue_in_high_bits(self):
        color = Color(0x7C00)
        assert (color.red, color.green, color.blue) == (0, 0, 31)

    def test_bit_15_ignored(self):
        color = Color(0x8000)
        assert (color.red, color.green, color.blue) == (0, 0, 0)
        assert Color(0xFFFF).to_rgb888() == (255, 255, 255)

    def test_from_rgb(self):
        color = Color.from_rgb(1, 2, 3)
        assert color.value == (3 << 10) | (2 << 5) | 1
        assert (color.red, color.green, color.blue) == (1, 2, 3)

    def test_mid_gray(self):
        gray = Color.from_rgb(16, 16, 16)
        assert gray.value == 0x4210
        assert gray.to_rgb888() == (132, 132, 132)

    def test_white(self):
        assert WHITE.value == 0x7FFF
        assert WHITE.to_rgb888() == (255, 255, 255)

    def test_int_conversion(self):
        assert int(Color(0x1234)) == 0x1234

    @pytest.mark.parametrize("channels", [(32, 0, 0), (0, -1, 0), (0, 0, 40)])
    def test_from_rgb_rejects_wide_channels(self, channels):
        with pytest.raises(ValueError):
            Color.from_rgb(*channels)

    @pytest.mark.parametrize("value", [-1, 0x10000])
    def test_rejects_out_of_range_value(self, value):
        with pytest.raises(ValueError):
            Color(value)


# =============================================================================
# Bulk Conversion Tests
# =============================================================================

class TestPixelsToRgb:
    """Test frame-sized conversion via the lookup table."""

    def test_table_matches_codec(self):
        for packed in (0x0000, 0x001F, 0x03E0, 0x7C00, 0x4210, 0x1234, 0x7FFF):
            assert RGB888_TABLE[packed] == bytes(Color(packed).to_rgb888())

    def test_table_size(self):
        assert len(RGB888_TABLE) == 0x8000

    def test_order_preserved(self):
        pixels = [0x001F, 0x03E0, 0x7C00]
        assert pixels_to_rgb(pixels) == bytes([255, 0, 0, 0, 255, 0, 0, 0, 255])

    def test_high_bit_masked(self):
        assert pixels_to_rgb([0xFFFF]) == bytes([255, 255, 255])

    def test_empty(self):
        assert pixels_to_rgb([]) == b""
