"""Background thread that keeps an emulation core rendering."""

import logging
import threading
from typing import Optional

from gba_display.emulator.core import EmulationCore

logger = logging.getLogger(__name__)

# ~60 Hz, the GBA's refresh rate
DEFAULT_FRAME_INTERVAL = 1 / 60


class EmulationThread:
    """
    Call `core.render()` repeatedly on a daemon thread.

    The thread stops on `stop()` or on the first render failure. A failure
    is logged and kept in `error`; it is not retried.

    Example:
        >>> runner = EmulationThread(core, interval=0.01)
        >>> runner.start()
        >>> ...
        >>> runner.stop()
    """

    def __init__(self, core: EmulationCore, interval: float = DEFAULT_FRAME_INTERVAL):
        if interval < 0:
            raise ValueError(f"interval must be >= 0, got {interval}")
        self.core = core
        self.interval = interval
        self.error: Optional[BaseException] = None
        self._shutdown = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start rendering. Does nothing if already running."""
        if self.is_running:
            return
        self.error = None
        self._shutdown.clear()
        self._thread = threading.Thread(
            target=self._run_loop, name="EmulationThread", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: float = 1.0) -> None:
        """Signal the thread to stop and wait for it."""
        self._shutdown.set()
        if self._thread is not None and self._thread.is_alive():
            self._thread.join(timeout=timeout)

    def _run_loop(self) -> None:
        while not self._shutdown.is_set():
            try:
                self.core.render()
            except Exception as e:
                self.error = e
                logger.exception(f"Emulation thread stopped: {e}")
                return
            if self.interval:
                self._shutdown.wait(self.interval)
