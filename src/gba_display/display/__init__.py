"""
Display side of the pipeline.

- `color.py`: BGR555 packed colors and RGB888 expansion
- `frame_store.py`: the lock-protected shared frame
- `scale.py`: presentation scale selection
- `surface.py`: presentation surfaces (Pillow-backed ImageSurface)
- `tool.py`: UI tool interface
- `adapter.py`: GbaDisplay, frame acquisition and conversion

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

# Order matters: adapter depends on the modules above it
from .color import (
    Color,
    BLACK,
    WHITE,
    CHANNEL_MAX,
    RGB888_TABLE,
    expand_channel,
    pixels_to_rgb,
)
from .frame_store import Frame, FrameStore, LCD_WIDTH, LCD_HEIGHT
from .scale import ScaleFactor, ScaleSelector, SUPPORTED_SCALES, parse_scale
from .surface import DisplayImage, ImageSurface, PresentationSurface
from .tool import UiTool, WindowOptions
from .adapter import GbaDisplay

__all__ = [
    # Color
    "Color",
    "BLACK",
    "WHITE",
    "CHANNEL_MAX",
    "RGB888_TABLE",
    "expand_channel",
    "pixels_to_rgb",

    # Frame
    "Frame",
    "FrameStore",
    "LCD_WIDTH",
    "LCD_HEIGHT",

    # Scale
    "ScaleFactor",
    "ScaleSelector",
    "SUPPORTED_SCALES",
    "parse_scale",

    # Presentation
    "DisplayImage",
    "ImageSurface",
    "PresentationSurface",
    "UiTool",
    "WindowOptions",

    # Adapter
    "GbaDisplay",
]
