"""
UI tool interface used by the debugger shell to host tool windows.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from gba_display.display.surface import PresentationSurface


@dataclass(frozen=True)
class WindowOptions:
    """Geometry hints for the window hosting a tool."""
    title: str
    min_width: int
    min_height: int
    default_width: int
    default_height: int
    resizable: bool = True


class UiTool(ABC):
    """A tool the shell can list by name and draw into a surface."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable tool name, also used as the window title."""

    @abstractmethod
    def window_options(self) -> WindowOptions:
        """Window geometry for this tool."""

    @abstractmethod
    def show(self, surface: PresentationSurface) -> bool:
        """Draw the tool into a surface. Returns False if it drew an error state."""
