"""
GBA Display Error Hierarchy
===========================

This module defines the exception hierarchy for the display adapter.
All exceptions inherit from DisplayError, allowing callers (typically the
presentation layer) to catch every display-related failure with a single
except clause and switch to an error placeholder.

Exception Hierarchy
-------------------
DisplayError (base)
├── FrameAccessError (shared frame store access)
│   ├── LockPoisonedError - a previous holder failed inside the critical section
│   └── LockTimeoutError - the frame lock could not be acquired in time
├── RenderError - the emulation core could not render a frame
└── InvalidScaleFactorError - unsupported presentation scale (also a ValueError)

Recovery
--------
None of these errors are retried automatically. A poisoned frame store
stays poisoned: every later acquisition raises LockPoisonedError, and the
display subsystem must be recreated.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class DisplayError(Exception):
    """
    Base exception for all display adapter errors.

        try:
            rgb = display.acquire_and_convert()
        except DisplayError as e:
            surface.show_error(str(e))
    """
    pass


# =============================================================================
# Frame Store Exceptions
# =============================================================================

class FrameAccessError(DisplayError):
    """Base exception for failures acquiring the shared frame."""
    pass


class LockPoisonedError(FrameAccessError):
    """
    Raised when the frame store was poisoned by a failed holder.

    The frame contents may be half-written, so they are never handed out
    again. This is fatal for the store.

    Attributes:
        cause: Description of the failure that poisoned the store (optional)
    """

    def __init__(self, message: str = "frame store is poisoned", cause: Optional[str] = None):
        self.cause = cause
        if cause:
            message = f"{message} (poisoned by: {cause})"
        super().__init__(message)


class LockTimeoutError(FrameAccessError):
    """
    Raised when the frame lock is not acquired within the timeout.

    Attributes:
        timeout: Seconds waited before giving up
    """

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"timed out after {timeout:g}s waiting for frame lock")


# =============================================================================
# Emulation Core Exceptions
# =============================================================================

class RenderError(DisplayError):
    """
    Raised when the emulation core fails to render a frame.

    Cores raise this before touching the frame, so it does not poison
    the frame store.
    """
    pass


# =============================================================================
# Presentation Exceptions
# =============================================================================

class InvalidScaleFactorError(DisplayError, ValueError):
    """
    Raised when selecting a scale factor outside the supported set.

    Inherits from ValueError because passing one is a programming error.

    Attributes:
        value: The rejected scale value
        supported: The supported scale values
    """

    def __init__(self, value: object, supported: tuple):
        self.value = value
        self.supported = supported
        choices = ", ".join(f"{s}x" for s in supported)
        super().__init__(f"unsupported scale factor {value!r} (supported: {choices})")
