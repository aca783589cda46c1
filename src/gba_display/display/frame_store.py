"""
Shared Frame Store
==================

The frame store holds the one pixel buffer shared between the emulation
thread (the only writer) and the presentation thread (a reader that also
triggers rendering).

The buffer is never exposed without holding the store's lock:

    >>> store = FrameStore()
    >>> with store.locked() as frame:
    ...     frame.fill(Color.from_rgb(31, 0, 0))
    >>> pixels = store.snapshot()

Lock poisoning
--------------
If a holder fails inside the critical section, the frame may be
half-written. The store then marks itself poisoned and refuses every later
acquisition with LockPoisonedError. Two kinds of failure leave the frame
untouched and do not poison: RenderError raised before the frame was
written, and FrameAccessError (raised while acquiring, before the frame is
handed out). A RenderError raised after the holder wrote to the frame still
poisons the store.

The lock is re-entrant so that a core's render() can lock the store while
the display adapter already holds it for the same acquisition.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
import threading
from array import array
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple, Union

from gba_display.display.color import Color, PACKED_MAX
from gba_display.errors import (
    FrameAccessError,
    LockPoisonedError,
    LockTimeoutError,
    RenderError,
)

logger = logging.getLogger(__name__)

# GBA LCD resolution
LCD_WIDTH = 240
LCD_HEIGHT = 160

ColorLike = Union[Color, int]


def _packed(color: ColorLike) -> int:
    value = color.value if isinstance(color, Color) else int(color)
    if not 0 <= value <= PACKED_MAX:
        raise ValueError(f"packed color must be 0-0x{PACKED_MAX:04X}, got {value}")
    return value


class Frame:
    """
    A fixed-size grid of packed colors, stored row-major.

    The storage is allocated once, zero-filled, and only ever mutated in
    place.
    """

    def __init__(self, width: int = LCD_WIDTH, height: int = LCD_HEIGHT):
        if width <= 0 or height <= 0:
            raise ValueError(f"frame dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = array("H", bytes(2 * width * height))
        self._writes = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def writes(self) -> int:
        """Number of mutating calls made on this frame."""
        return self._writes

    def __len__(self) -> int:
        return len(self._pixels)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height} frame")
        return y * self._width + x

    def get(self, x: int, y: int) -> Color:
        """Get the color at column x, row y."""
        return Color(self._pixels[self._index(x, y)])

    def set(self, x: int, y: int, color: ColorLike) -> None:
        """Set the color at column x, row y."""
        self._pixels[self._index(x, y)] = _packed(color)
        self._writes += 1

    def fill_row(self, y: int, color: ColorLike) -> None:
        """Set every pixel of row y to one color."""
        start = self._index(0, y)
        self._pixels[start:start + self._width] = array("H", [_packed(color)]) * self._width
        self._writes += 1

    def fill(self, color: ColorLike) -> None:
        """Set every pixel to one color."""
        self._pixels[:] = array("H", [_packed(color)]) * len(self._pixels)
        self._writes += 1

    def row(self, y: int) -> Tuple[int, ...]:
        """Packed values of row y."""
        start = self._index(0, y)
        return tuple(self._pixels[start:start + self._width])

    def pixels(self) -> Tuple[int, ...]:
        """Row-major copy of every packed value."""
        return tuple(self._pixels)


class FrameStore:
    """
    Lock-protected owner of one Frame.

    Attributes:
        width: Frame width in pixels
        height: Frame height in pixels
    """

    def __init__(self, width: int = LCD_WIDTH, height: int = LCD_HEIGHT):
        self._frame = Frame(width, height)
        self._lock = threading.RLock()
        self._poisoned_by: Optional[str] = None

    @property
    def width(self) -> int:
        return self._frame.width

    @property
    def height(self) -> int:
        return self._frame.height

    @property
    def poisoned(self) -> bool:
        """True once a holder has failed inside the critical section."""
        return self._poisoned_by is not None

    @contextmanager
    def locked(self, timeout: Optional[float] = None) -> Iterator[Frame]:
        """
        Hold the frame lock and yield the frame.

        Args:
            timeout: Seconds to wait for the lock (None waits forever)

        Raises:
            LockTimeoutError: If the lock was not acquired in time
            LockPoisonedError: If the store is poisoned
        """
        if timeout is None:
            acquired = self._lock.acquire()
        else:
            acquired = self._lock.acquire(timeout=timeout)
        if not acquired:
            raise LockTimeoutError(timeout)

        try:
            if self._poisoned_by is not None:
                raise LockPoisonedError(cause=self._poisoned_by)
            writes = self._frame.writes
            yield self._frame
        except FrameAccessError:
            raise
        except RenderError as e:
            if self._frame.writes != writes:
                self._poison(e, "after a partial draw")
            raise
        except BaseException as e:
            self._poison(e)
            raise
        finally:
            self._lock.release()

    def _poison(self, error: BaseException, context: str = "") -> None:
        if self._poisoned_by is not None:
            return
        self._poisoned_by = f"{type(error).__name__}: {error}"
        if context:
            self._poisoned_by += f" ({context})"
        logger.error(f"Frame store poisoned by {self._poisoned_by}")

    def snapshot(self, timeout: Optional[float] = None) -> Tuple[int, ...]:
        """Row-major copy of the frame, taken under the lock."""
        with self.locked(timeout) as frame:
            return frame.pixels()
