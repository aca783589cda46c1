"""
GBA Display Adapter
===================

Bridges the emulation core's framebuffer to a presentation surface.

Each presentation cycle:

1. lock the frame store
2. ask the core to render (same critical section, so no second render
   can start between rendering and reading)
3. copy every packed pixel out, row-major
4. unlock
5. expand each pixel to three RGB bytes, outside the lock

Step 5 runs outside the lock to keep the emulation thread's wait short.
The copy in step 3 is what makes that safe: conversion only ever sees one
completed render pass.

Example:
    >>> from gba_display.emulator import TestPatternCore
    >>> display = GbaDisplay(TestPatternCore("bars"))
    >>> rgb = display.acquire_and_convert()
    >>> len(rgb) == 3 * LCD_WIDTH * LCD_HEIGHT
    True

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
from typing import TYPE_CHECKING, Optional, Tuple, Union

from gba_display.config import DisplayConfig, get_default_config
from gba_display.display.color import pixels_to_rgb
from gba_display.display.frame_store import FrameStore, LCD_HEIGHT, LCD_WIDTH
from gba_display.display.scale import ScaleFactor, ScaleSelector
from gba_display.display.surface import DisplayImage, PresentationSurface
from gba_display.display.tool import UiTool, WindowOptions
from gba_display.errors import DisplayError

if TYPE_CHECKING:
    from gba_display.emulator.core import EmulationCore

logger = logging.getLogger(__name__)


class GbaDisplay(UiTool):
    """
    Display adapter for one emulation core.

    Creating the adapter allocates the frame store (zero-filled,
    LCD_WIDTH x LCD_HEIGHT) and attaches it to the core.

    Attributes:
        core: The emulation core being displayed
        config: Adapter configuration
        scale: The presentation scale selector
        last_error: The error shown by the last show() call, if any
    """

    def __init__(self, core: "EmulationCore", config: Optional[DisplayConfig] = None):
        self.config = config or get_default_config()
        self.core = core
        self._frame_store = FrameStore(LCD_WIDTH, LCD_HEIGHT)
        core.attach_frame_store(self._frame_store)
        self.scale = ScaleSelector(self.config.default_scale)
        self.last_error: Optional[DisplayError] = None

    @property
    def name(self) -> str:
        return "Gba Display"

    @property
    def frame_store(self) -> FrameStore:
        return self._frame_store

    # =========================================================================
    # Frame Acquisition
    # =========================================================================

    def acquire_and_convert(self) -> bytes:
        """
        Render one frame and convert it to RGB.

        Triggers exactly one render of the core per call.

        Returns:
            Row-major RGB bytes, 3 * LCD_WIDTH * LCD_HEIGHT long

        Raises:
            RenderError: If the core failed to render
            LockPoisonedError: If the frame store is poisoned
            LockTimeoutError: If the frame lock was not acquired in time
        """
        timeout = self.config.lock_timeout
        with self._frame_store.locked(timeout) as frame:
            self.core.render(timeout)
            pixels = frame.pixels()
        return pixels_to_rgb(pixels)

    def capture(self) -> DisplayImage:
        """Acquire one frame as a DisplayImage."""
        return DisplayImage(LCD_WIDTH, LCD_HEIGHT, self.acquire_and_convert())

    # =========================================================================
    # Scale
    # =========================================================================

    def select_scale(self, factor: Union[ScaleFactor, int]) -> None:
        """Select the presentation scale (1, 2 or 4)."""
        self.scale.select(factor)

    def presentation_size(self) -> Tuple[int, int]:
        """On-screen size of the frame at the selected scale."""
        return self.scale.size_for(LCD_WIDTH, LCD_HEIGHT)

    # =========================================================================
    # UiTool
    # =========================================================================

    def window_options(self) -> WindowOptions:
        return WindowOptions(
            title=self.name,
            min_width=LCD_WIDTH,
            min_height=LCD_HEIGHT,
            default_width=LCD_WIDTH,
            default_height=LCD_HEIGHT,
            resizable=False,
        )

    def show(self, surface: PresentationSurface) -> bool:
        """
        Present the latest frame at the selected scale.

        On a display failure the surface is switched to its error
        placeholder instead of keeping the last good frame.

        Returns:
            True if a frame was presented, False if the error state was shown
        """
        try:
            image = self.capture()
        except DisplayError as e:
            self.last_error = e
            logger.error(f"{self.name}: {e}")
            surface.show_error(str(e))
            return False

        self.last_error = None
        surface.present(image, int(self.scale.factor))
        return True
