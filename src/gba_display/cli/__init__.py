"""
GBA Display Command-Line Interface
==================================

- **gbasnap**: render a test pattern through the display pipeline and
  save the result as PNG or raw RGB

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["gbasnap"]
