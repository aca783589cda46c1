"""
GBA Display - Framebuffer Presentation for a GBA Emulator
=========================================================

This package bridges an emulation core's framebuffer to a presentation
surface. The GBA renders 240x160 pixels of BGR555 color; the display
adapter reads complete frames from the core without tearing, expands them
to 24-bit RGB, and presents them at 1x, 2x or 4x.

Main Components
---------------
- **display**: packed colors, the shared frame store, scale selection,
  presentation surfaces and the GbaDisplay adapter
- **emulator**: the EmulationCore contract, test-pattern cores and a
  background render thread
- **cli**: the `gbasnap` screenshot tool

Quick Start
-----------
    >>> from gba_display import GbaDisplay, ImageSurface
    >>> from gba_display.emulator import TestPatternCore
    >>> display = GbaDisplay(TestPatternCore("bars"))
    >>> display.select_scale(2)
    >>> surface = ImageSurface()
    >>> display.show(surface)
    True
    >>> surface.save("bars.png")

Or from the command line:
    $ gbasnap --pattern bars --scale 2 -o bars.png

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

__version__ = "1.0.0"
__author__ = "Hugo José Pinto & Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from gba_display.errors import (
    DisplayError,
    FrameAccessError,
    LockPoisonedError,
    LockTimeoutError,
    RenderError,
    InvalidScaleFactorError,
)
from gba_display.display import (
    Color,
    expand_channel,
    Frame,
    FrameStore,
    LCD_WIDTH,
    LCD_HEIGHT,
    ScaleFactor,
    ScaleSelector,
    DisplayImage,
    ImageSurface,
    PresentationSurface,
    UiTool,
    WindowOptions,
    GbaDisplay,
)
from gba_display.config import DisplayConfig, get_default_config, set_default_config
from gba_display.emulator import EmulationCore, EmulationThread

__all__ = [
    "__version__",
    # Errors
    "DisplayError",
    "FrameAccessError",
    "LockPoisonedError",
    "LockTimeoutError",
    "RenderError",
    "InvalidScaleFactorError",
    # Display
    "Color",
    "expand_channel",
    "Frame",
    "FrameStore",
    "LCD_WIDTH",
    "LCD_HEIGHT",
    "ScaleFactor",
    "ScaleSelector",
    "DisplayImage",
    "ImageSurface",
    "PresentationSurface",
    "UiTool",
    "WindowOptions",
    "GbaDisplay",
    # Config
    "DisplayConfig",
    "get_default_config",
    "set_default_config",
    # Emulation
    "EmulationCore",
    "EmulationThread",
]
