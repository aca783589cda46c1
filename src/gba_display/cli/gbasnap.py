"""
gbasnap - Display Pipeline Screenshot Tool
==========================================

Renders a test pattern through the full display pipeline (frame store,
synchronized acquisition, BGR555 to RGB888 conversion, scaling) and writes
the result to disk.

Usage Examples
--------------
Color bars at 2x:
    $ gbasnap --pattern bars --scale 2 -o bars.png

Solid mid-gray (5-bit channels):
    $ gbasnap --pattern solid --color 16,16,16 -o gray.png

Solid color from a packed BGR555 value:
    $ gbasnap --pattern solid --color 0x7C00 -o blue.png

Raw RGB bytes (unscaled, 3 bytes per pixel):
    $ gbasnap --raw -o frame.rgb

Capture while a background thread keeps rendering:
    $ gbasnap --background --frames 30 -o live.png

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click

from gba_display import __version__
from gba_display.cli.errors import handle_cli_exception
from gba_display.config import DisplayConfig
from gba_display.display import Color, GbaDisplay, ImageSurface, SUPPORTED_SCALES
from gba_display.emulator import PATTERNS, EmulationThread, TestPatternCore

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def parse_color(text: str) -> Color:
    """
    Parse a color option.

    Accepts a packed BGR555 value ("0x4210", "$4210" or decimal) or three
    comma-separated 5-bit channels ("16,16,16").

    Raises:
        click.BadParameter: If the text is not a valid color
    """
    text = text.strip()
    try:
        if "," in text:
            parts = [int(p) for p in text.split(",")]
            if len(parts) != 3:
                raise click.BadParameter(
                    f"expected R,G,B channels, got {text!r}", param_hint="--color"
                )
            return Color.from_rgb(*parts)
        if text.lower().startswith("0x"):
            return Color(int(text, 16))
        if text.startswith("$"):
            return Color(int(text[1:], 16))
        return Color(int(text))
    except ValueError as e:
        raise click.BadParameter(f"invalid color {text!r}: {e}", param_hint="--color")


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.option(
    "-p", "--pattern",
    type=click.Choice(PATTERNS),
    default="bars",
    help="Test pattern to render (default: bars)",
)
@click.option(
    "-c", "--color",
    type=str,
    default="31,31,31",
    help="Color for the solid pattern: R,G,B (0-31 each) or packed BGR555 (default: white)",
)
@click.option(
    "-s", "--scale",
    type=click.Choice([str(s) for s in SUPPORTED_SCALES]),
    default=None,
    help="Presentation scale (default: GBA_DISPLAY_SCALE or 1)",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file (default: <screenshot dir>/gbasnap_<pattern>.png)",
)
@click.option(
    "--raw",
    is_flag=True,
    help="Write the unscaled RGB byte buffer instead of a PNG",
)
@click.option(
    "-n", "--frames",
    type=click.IntRange(min=1),
    default=1,
    help="Number of frames to acquire; the last one is written (default: 1)",
)
@click.option(
    "--background",
    is_flag=True,
    help="Keep rendering on a background emulation thread while acquiring",
)
@click.option(
    "--lock-timeout",
    type=float,
    default=None,
    help="Seconds to wait for the frame lock (default: GBA_DISPLAY_LOCK_TIMEOUT or 1.0)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="gbasnap")
def main(
    pattern: str,
    color: str,
    scale: Optional[str],
    output: Optional[Path],
    raw: bool,
    frames: int,
    background: bool,
    lock_timeout: Optional[float],
    verbose: bool,
) -> None:
    """
    Render a GBA test pattern through the display pipeline.

    The frame is rendered at 240x160, converted from BGR555 to 24-bit RGB,
    scaled and saved.

    Examples:

        # Color bars at 2x
        gbasnap --pattern bars --scale 2 -o bars.png

        # Mid-gray raw buffer (every byte is 132)
        gbasnap --pattern solid --color 16,16,16 --raw -o gray.rgb
    """
    setup_logging(verbose)

    try:
        config = DisplayConfig.from_env()
        if lock_timeout is not None:
            try:
                config = replace(config, lock_timeout=lock_timeout)
            except ValueError as e:
                raise click.BadParameter(str(e), param_hint="--lock-timeout")

        core = TestPatternCore(pattern, parse_color(color))
        display = GbaDisplay(core, config)
        if scale is not None:
            display.select_scale(int(scale))

        runner = EmulationThread(core, config.frame_interval) if background else None
        if runner is not None:
            runner.start()
        try:
            for _ in range(frames):
                image = display.capture()
        finally:
            if runner is not None:
                runner.stop()
        if runner is not None and runner.error is not None:
            raise runner.error

        if output is None:
            suffix = "rgb" if raw else "png"
            output = config.ensure_screenshot_dir() / f"gbasnap_{pattern}.{suffix}"

        if raw:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_bytes(image.pixels)
        else:
            surface = ImageSurface()
            surface.present(image, int(display.scale.factor))
            surface.save(output)

        width, height = display.presentation_size() if not raw else image.size
        logger.debug(f"Rendered {core.render_count} frame(s)")
        click.echo(f"Wrote {width}x{height} {'raw RGB' if raw else 'PNG'} to {output}")

    except Exception as e:
        handle_cli_exception(e, verbose)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
