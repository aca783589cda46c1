"""
Presentation Surfaces
=====================

A presentation surface turns converted frames into something visible.
The display adapter's only obligations to a surface are a correctly sized
RGB byte string and an integer scale factor.

`ImageSurface` is the Pillow-backed surface used for screenshots and the
`gbasnap` tool. Scaling uses nearest-neighbour sampling so each LCD pixel
becomes a crisp `scale x scale` block.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import io
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image, ImageDraw

from gba_display.display.frame_store import LCD_HEIGHT, LCD_WIDTH

logger = logging.getLogger(__name__)

# Placeholder colors for the error state
ERROR_BACKGROUND = (96, 0, 0)
ERROR_TEXT = (255, 255, 255)


@dataclass(frozen=True)
class DisplayImage:
    """
    One converted frame, ready for presentation.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        pixels: Row-major RGB bytes, 3 per pixel
        mode: Pixel format tag (always "RGB", no alpha)
    """
    width: int
    height: int
    pixels: bytes
    mode: str = "RGB"

    def __post_init__(self):
        expected = 3 * self.width * self.height
        if len(self.pixels) != expected:
            raise ValueError(
                f"expected {expected} bytes for {self.width}x{self.height} RGB, "
                f"got {len(self.pixels)}"
            )

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)


class PresentationSurface(ABC):
    """Something that can show a DisplayImage or an error placeholder."""

    @abstractmethod
    def present(self, image: DisplayImage, scale: int) -> None:
        """Show an image magnified by an integer scale factor."""

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Replace whatever is shown with an error placeholder."""


class ImageSurface(PresentationSurface):
    """
    Pillow-backed surface holding the latest presented image.

    Attributes:
        image: The current PIL image (None until something is shown)
        error: The current error message, or None when showing a frame
    """

    def __init__(self):
        self.image: Optional[Image.Image] = None
        self.error: Optional[str] = None
        self._size: Optional[Tuple[int, int]] = None

    def present(self, image: DisplayImage, scale: int) -> None:
        if scale < 1:
            raise ValueError(f"scale must be >= 1, got {scale}")
        img = Image.frombytes(image.mode, image.size, image.pixels)
        if scale != 1:
            img = img.resize(
                (image.width * scale, image.height * scale),
                Image.Resampling.NEAREST,
            )
        self.image = img
        self.error = None
        self._size = img.size

    def show_error(self, message: str) -> None:
        # Placeholder keeps the last presented size
        size = self._size or (LCD_WIDTH, LCD_HEIGHT)
        img = Image.new("RGB", size, color=ERROR_BACKGROUND)
        draw = ImageDraw.Draw(img)
        draw.text((4, 4), "DISPLAY ERROR", fill=ERROR_TEXT)
        draw.text((4, 20), message, fill=ERROR_TEXT)
        self.image = img
        self.error = message

    def to_png(self) -> bytes:
        """
        Export the current image as PNG.

        Raises:
            RuntimeError: If nothing has been presented yet
        """
        if self.image is None:
            raise RuntimeError("nothing has been presented")
        buffer = io.BytesIO()
        self.image.save(buffer, format="PNG")
        return buffer.getvalue()

    def save(self, path: Union[str, Path]) -> Path:
        """Write the current image as a PNG file, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.to_png())
        logger.debug(f"Saved display image to {path}")
        return path
