"""
Test Pattern Cores
==================

Small EmulationCore implementations that draw fixed patterns. They stand in
for a real machine when exercising the display pipeline from the command
line or from tests.

Patterns:
- solid:    every pixel one color
- bars:     eight vertical bars (white, yellow, cyan, green, magenta, red,
            blue, black)
- gradient: red ramps left to right, blue ramps top to bottom

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from typing import List, Sequence

from gba_display.display.color import CHANNEL_MAX, Color, BLACK, WHITE
from gba_display.display.frame_store import Frame
from gba_display.emulator.core import EmulationCore

# 5-bit channel values for the classic eight-bar pattern
COLOR_BARS: List[Color] = [
    WHITE,
    Color.from_rgb(31, 31, 0),   # yellow
    Color.from_rgb(0, 31, 31),   # cyan
    Color.from_rgb(0, 31, 0),    # green
    Color.from_rgb(31, 0, 31),   # magenta
    Color.from_rgb(31, 0, 0),    # red
    Color.from_rgb(0, 0, 31),    # blue
    BLACK,
]

PATTERNS = ("solid", "bars", "gradient")


def draw_bars(frame: Frame) -> None:
    """Draw vertical color bars across the full frame."""
    bar_width = max(frame.width // len(COLOR_BARS), 1)
    row = [
        COLOR_BARS[min(x // bar_width, len(COLOR_BARS) - 1)].value
        for x in range(frame.width)
    ]
    for y in range(frame.height):
        for x, value in enumerate(row):
            frame.set(x, y, value)


def draw_gradient(frame: Frame) -> None:
    """Draw a red ramp along x combined with a blue ramp along y."""
    for y in range(frame.height):
        blue = (y * CHANNEL_MAX) // max(frame.height - 1, 1)
        for x in range(frame.width):
            red = (x * CHANNEL_MAX) // max(frame.width - 1, 1)
            frame.set(x, y, Color.from_rgb(red, 0, blue))


class SolidColorCore(EmulationCore):
    """Fills the frame with one color on every render."""

    def __init__(self, color: Color = BLACK):
        super().__init__()
        self.color = color

    def draw(self, frame: Frame) -> None:
        frame.fill(self.color)


class CyclingCore(EmulationCore):
    """
    Fills the frame with the next color of a cycle on every render.

    The fill goes row by row, so a reader that is not synchronized with
    render() can observe a frame mixing two colors.
    """

    def __init__(self, colors: Sequence[Color]):
        super().__init__()
        if not colors:
            raise ValueError("CyclingCore needs at least one color")
        self.colors = list(colors)
        self._next = 0

    def draw(self, frame: Frame) -> None:
        color = self.colors[self._next]
        self._next = (self._next + 1) % len(self.colors)
        for y in range(frame.height):
            frame.fill_row(y, color)


class TestPatternCore(EmulationCore):
    """
    Draws one of the named PATTERNS.

    Args:
        pattern: "solid", "bars" or "gradient"
        color: Fill color for the "solid" pattern
    """

    # not a pytest test class despite the name
    __test__ = False

    def __init__(self, pattern: str = "bars", color: Color = WHITE):
        super().__init__()
        if pattern not in PATTERNS:
            raise ValueError(f"unknown pattern {pattern!r} (expected one of {', '.join(PATTERNS)})")
        self.pattern = pattern
        self.color = color

    def draw(self, frame: Frame) -> None:
        if self.pattern == "solid":
            frame.fill(self.color)
        elif self.pattern == "bars":
            draw_bars(frame)
        else:
            draw_gradient(frame)
