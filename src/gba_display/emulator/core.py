"""
Emulation Core Contract
=======================

The display adapter does not know how pixels are computed. It only needs a
core that, when asked, renders one complete frame into the shared frame
store. `EmulationCore` captures that contract:

- the adapter allocates a FrameStore and attaches it with
  `attach_frame_store()`
- `render()` locks the store and calls `draw()` with the frame
- subclasses implement `draw()`; raising RenderError there before any
  write is a clean refusal that leaves the frame untouched, while raising
  it after a write poisons the store

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from gba_display.display.frame_store import Frame, FrameStore
from gba_display.errors import RenderError

logger = logging.getLogger(__name__)


class EmulationCore(ABC):
    """
    Base class for anything that renders frames into a FrameStore.

    Attributes:
        render_count: Number of completed renders
    """

    def __init__(self):
        self._frame_store: Optional[FrameStore] = None
        self.render_count = 0

    @property
    def frame_store(self) -> Optional[FrameStore]:
        """The attached frame store, or None before attachment."""
        return self._frame_store

    def attach_frame_store(self, store: FrameStore) -> None:
        """
        Attach the frame store this core renders into.

        Args:
            store: Store allocated by the display adapter
        """
        if self._frame_store is not None and self._frame_store is not store:
            logger.warning(f"{type(self).__name__}: replacing attached frame store")
        self._frame_store = store

    def render(self, timeout: Optional[float] = None) -> None:
        """
        Render one full frame into the attached store.

        Runs entirely under the store lock. When the caller already holds
        the lock, this re-enters it.

        Args:
            timeout: Seconds to wait for the frame lock (None waits forever)

        Raises:
            RenderError: If no store is attached or the core cannot render
            LockPoisonedError: If the store is poisoned
            LockTimeoutError: If the lock was not acquired in time
        """
        store = self._frame_store
        if store is None:
            raise RenderError(f"{type(self).__name__} has no frame store attached")
        with store.locked(timeout) as frame:
            self.draw(frame)
            self.render_count += 1

    @abstractmethod
    def draw(self, frame: Frame) -> None:
        """
        Draw a complete frame.

        Called with the store lock held. Raise RenderError before
        modifying the frame if the machine cannot produce one; a
        RenderError after the first write poisons the store.
        """
