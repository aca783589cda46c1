"""
Emulation core side of the display pipeline.

- `core.py`: EmulationCore contract (render into a FrameStore)
- `patterns.py`: test-pattern cores used by the CLI and tests
- `runner.py`: EmulationThread, a background render loop

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from .core import EmulationCore
from .patterns import (
    COLOR_BARS,
    PATTERNS,
    CyclingCore,
    SolidColorCore,
    TestPatternCore,
)
from .runner import DEFAULT_FRAME_INTERVAL, EmulationThread

__all__ = [
    "EmulationCore",
    "COLOR_BARS",
    "PATTERNS",
    "CyclingCore",
    "SolidColorCore",
    "TestPatternCore",
    "DEFAULT_FRAME_INTERVAL",
    "EmulationThread",
]
