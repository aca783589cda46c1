"""
GBA Display - Configuration
===========================

Runtime settings for the display adapter. Configuration can come from:
- Default values (defined here)
- Environment variables

Environment variables (all optional):
    GBA_DISPLAY_SCALE:          Initial scale factor (1, 2 or 4)
    GBA_DISPLAY_LOCK_TIMEOUT:   Seconds to wait for the frame lock
                                ("none" waits forever)
    GBA_DISPLAY_FRAME_INTERVAL: Seconds between background renders
    GBA_DISPLAY_SCREENSHOT_DIR: Where screenshots are written

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging
import math
import os

from gba_display.display.scale import SUPPORTED_SCALES
from gba_display.emulator.runner import DEFAULT_FRAME_INTERVAL

logger = logging.getLogger(__name__)


def _valid_seconds(value) -> bool:
    """True for a finite, non-negative number of seconds."""
    return isinstance(value, (int, float)) and math.isfinite(value) and value >= 0


def _parse_seconds(name: str, text: str) -> Optional[float]:
    """Parse a seconds value from the environment, or None if invalid."""
    try:
        value = float(text)
    except ValueError:
        value = None
    if value is None or not _valid_seconds(value):
        logger.warning(f"Ignoring invalid {name}={text!r}")
        return None
    return value


@dataclass
class DisplayConfig:
    """
    Configuration for the display adapter.

    Attributes:
        default_scale: Scale selected when the adapter is created (default: 1)
        lock_timeout: Seconds to wait for the frame lock before raising
            LockTimeoutError; None waits forever (default: 1.0)
        frame_interval: Seconds between renders of the background
            emulation thread (default: 1/60)
        screenshot_dir: Where screenshots are written
    """

    default_scale: int = 1
    lock_timeout: Optional[float] = 1.0
    frame_interval: float = DEFAULT_FRAME_INTERVAL
    screenshot_dir: Path = field(
        default_factory=lambda: Path("/tmp/gba_display_screenshots")
    )

    def __post_init__(self):
        if self.lock_timeout is not None and not _valid_seconds(self.lock_timeout):
            raise ValueError(
                f"lock_timeout must be a finite number >= 0 or None, got {self.lock_timeout!r}"
            )
        if not _valid_seconds(self.frame_interval):
            raise ValueError(
                f"frame_interval must be a finite number >= 0, got {self.frame_interval!r}"
            )

    @classmethod
    def from_env(cls) -> "DisplayConfig":
        """
        Create DisplayConfig from environment variables.

        Invalid values are logged and the default is kept.

        Returns:
            DisplayConfig with values from environment variables
        """
        config = cls()

        if scale := os.environ.get("GBA_DISPLAY_SCALE"):
            try:
                value = int(scale)
            except ValueError:
                value = None
            if value in SUPPORTED_SCALES:
                config.default_scale = value
            else:
                logger.warning(f"Ignoring invalid GBA_DISPLAY_SCALE={scale!r}")

        if timeout := os.environ.get("GBA_DISPLAY_LOCK_TIMEOUT"):
            if timeout.strip().lower() == "none":
                config.lock_timeout = None
            else:
                value = _parse_seconds("GBA_DISPLAY_LOCK_TIMEOUT", timeout)
                if value is not None:
                    config.lock_timeout = value

        if interval := os.environ.get("GBA_DISPLAY_FRAME_INTERVAL"):
            value = _parse_seconds("GBA_DISPLAY_FRAME_INTERVAL", interval)
            if value is not None:
                config.frame_interval = value

        if screenshot_dir := os.environ.get("GBA_DISPLAY_SCREENSHOT_DIR"):
            config.screenshot_dir = Path(screenshot_dir)

        return config

    def ensure_screenshot_dir(self) -> Path:
        """
        Ensure screenshot output directory exists.

        Returns:
            Path to screenshot directory
        """
        self.screenshot_dir.mkdir(parents=True, exist_ok=True)
        return self.screenshot_dir


# ═══════════════════════════════════════════════════════════════════════════════
# DEFAULT CONFIGURATION INSTANCE
# ═══════════════════════════════════════════════════════════════════════════════

_default_config: Optional[DisplayConfig] = None


def get_default_config() -> DisplayConfig:
    """
    Get the default configuration.

    Created from environment variables on first access.
    Can be overridden by calling set_default_config().
    """
    global _default_config
    if _default_config is None:
        _default_config = DisplayConfig.from_env()
    return _default_config


def set_default_config(config: Optional[DisplayConfig]) -> None:
    """
    Set the default configuration.

    Passing None makes the next get_default_config() re-read the environment.
    """
    global _default_config
    _default_config = config
