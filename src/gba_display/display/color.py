"""
Packed Color Codec
==================

The GBA stores pixels as 16-bit BGR555 words:

    bit  15  14 ... 10  9 ... 5  4 ... 0
         --  blue       green    red

Bit 15 is unused and ignored by the channel accessors.

Display surfaces want 8 bits per channel. Each 5-bit channel is expanded by
bit replication: the value moves to the high 5 bits and its own top 3 bits
fill the low 3 bits, so 0 maps to 0 and 31 maps to 255 exactly.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from dataclasses import dataclass
from typing import Tuple

# =============================================================================
# CHANNEL LAYOUT
# =============================================================================

CHANNEL_BITS = 5
CHANNEL_MAX = (1 << CHANNEL_BITS) - 1  # 31

RED_SHIFT = 0
GREEN_SHIFT = 5
BLUE_SHIFT = 10

COLOR_MASK = 0x7FFF  # the 15 bits carrying channel data
PACKED_MAX = 0xFFFF


def expand_channel(value: int) -> int:
    """
    Expand a 5-bit channel value to 8 bits.

    Args:
        value: Channel value (0-31)

    Returns:
        8-bit channel value: (value << 3) | (value >> 2)

    Raises:
        ValueError: If value is outside 0-31
    """
    if not 0 <= value <= CHANNEL_MAX:
        raise ValueError(f"channel value must be 0-{CHANNEL_MAX}, got {value}")
    return (value << 3) | (value >> 2)


@dataclass(frozen=True)
class Color:
    """
    A packed BGR555 color.

    Example:
        >>> gray = Color.from_rgb(16, 16, 16)
        >>> hex(gray.value)
        '0x4210'
        >>> gray.to_rgb888()
        (132, 132, 132)
    """
    value: int = 0

    def __post_init__(self):
        if not 0 <= self.value <= PACKED_MAX:
            raise ValueError(f"packed color must be 0-0x{PACKED_MAX:04X}, got {self.value}")

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> "Color":
        """
        Build a color from three 5-bit channels.

        Raises:
            ValueError: If any channel is outside 0-31
        """
        for name, channel in (("red", red), ("green", green), ("blue", blue)):
            if not 0 <= channel <= CHANNEL_MAX:
                raise ValueError(f"{name} must be 0-{CHANNEL_MAX}, got {channel}")
        return cls((blue << BLUE_SHIFT) | (green << GREEN_SHIFT) | (red << RED_SHIFT))

    @property
    def red(self) -> int:
        return (self.value >> RED_SHIFT) & CHANNEL_MAX

    @property
    def green(self) -> int:
        return (self.value >> GREEN_SHIFT) & CHANNEL_MAX

    @property
    def blue(self) -> int:
        return (self.value >> BLUE_SHIFT) & CHANNEL_MAX

    def to_rgb888(self) -> Tuple[int, int, int]:
        """Return the expanded (red, green, blue) triple."""
        return (
            expand_channel(self.red),
            expand_channel(self.green),
            expand_channel(self.blue),
        )

    def __int__(self) -> int:
        return self.value


BLACK = Color(0)
WHITE = Color(COLOR_MASK)


# =============================================================================
# CONVERSION TABLE
# =============================================================================
# One 3-byte entry per 15-bit color, indexed by the packed value with bit 15
# masked off.

def _build_rgb_table() -> Tuple[bytes, ...]:
    table = []
    for packed in range(COLOR_MASK + 1):
        table.append(bytes((
            expand_channel((packed >> RED_SHIFT) & CHANNEL_MAX),
            expand_channel((packed >> GREEN_SHIFT) & CHANNEL_MAX),
            expand_channel((packed >> BLUE_SHIFT) & CHANNEL_MAX),
        )))
    return tuple(table)


RGB888_TABLE = _build_rgb_table()


def pixels_to_rgb(pixels) -> bytes:
    """
    Convert packed pixels to a flat RGB byte string.

    Args:
        pixels: Iterable of packed color values (ints), row-major

    Returns:
        Three bytes (R, G, B) per input pixel, in input order
    """
    table = RGB888_TABLE
    return b"".join([table[p & COLOR_MASK] for p in pixels])
