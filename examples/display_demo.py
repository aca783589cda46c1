#!/usr/bin/env python3
"""
GBA Display Pipeline Demo
=========================

This script demonstrates how to use the display adapter to:
1. Attach a display to an emulation core
2. Run the core on a background emulation thread
3. Acquire frames from the presentation side at different scales
4. Show the error placeholder after a core failure

Usage:
    source .venv/bin/activate
    python examples/display_demo.py

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import time
from pathlib import Path

from gba_display import DisplayConfig, GbaDisplay, ImageSurface
from gba_display.display import Color
from gba_display.emulator import CyclingCore, EmulationThread, TestPatternCore


def main():
    output_dir = Path("trash")
    output_dir.mkdir(exist_ok=True)
    config = DisplayConfig(lock_timeout=1.0)

    # ==========================================================================
    # 1. Attach a display to a core
    # ==========================================================================
    # The adapter allocates the 240x160 frame store and hands it to the core.

    print("Creating color bar display...")
    display = GbaDisplay(TestPatternCore("bars"), config)
    surface = ImageSurface()

    # ==========================================================================
    # 2. Present at each scale
    # ==========================================================================

    for factor in (1, 2, 4):
        display.select_scale(factor)
        display.show(surface)
        path = surface.save(output_dir / f"bars_x{factor}.png")
        width, height = display.presentation_size()
        print(f"  x{factor}: {width}x{height} -> {path}")

    # ==========================================================================
    # 3. Acquire while an emulation thread renders
    # ==========================================================================
    # Every acquired frame is exactly one of the two colors, never a mix.

    red = Color.from_rgb(31, 0, 0)
    blue = Color.from_rgb(0, 0, 31)
    core = CyclingCore([red, blue])
    live = GbaDisplay(core, config)

    runner = EmulationThread(core, interval=config.frame_interval)
    runner.start()
    seen = {"red": 0, "blue": 0}
    try:
        for _ in range(30):
            rgb = live.acquire_and_convert()
            seen["red" if rgb[0] == 255 else "blue"] += 1
            time.sleep(0.01)
    finally:
        runner.stop()
    print(f"\nAcquired 30 frames during background rendering: {seen}")
    print(f"  Core rendered {core.render_count} frames")

    # ==========================================================================
    # 4. Error placeholder
    # ==========================================================================
    # A core crashing mid-frame poisons the store; the display then shows an
    # explicit error instead of the last good frame.

    core.colors[:] = [None, None]
    try:
        live.acquire_and_convert()
    except TypeError as e:
        print(f"\nCore crashed: {e}")
    live.show(surface)
    surface.save(output_dir / "error.png")
    print(f"  Display error: {surface.error}")


if __name__ == "__main__":
    main()
