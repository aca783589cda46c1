"""
Tests for gbasnap - Display Pipeline Screenshot Tool
====================================================

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import click
import pytest
from click.testing import CliRunner
from PIL import Image

from gba_display.cli.errors import ExitCode
from gba_display.cli.gbasnap import main, parse_color
from gba_display.display import Color


@pytest.fixture(autouse=True)
def screenshot_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("GBA_DISPLAY_SCREENSHOT_DIR", str(tmp_path / "shots"))
    monkeypatch.delenv("GBA_DISPLAY_SCALE", raising=False)
    monkeypatch.delenv("GBA_DISPLAY_LOCK_TIMEOUT", raising=False)
    return tmp_path / "shots"


# =============================================================================
# Color Parsing
# =============================================================================

class TestParseColor:
    def test_channels(self):
        assert parse_color("16,16,16") == Color(0x4210)

    def test_channels_with_spaces(self):
        assert parse_color(" 31, 0, 0 ") == Color(0x001F)

    def test_hex(self):
        assert parse_color("0x7C00") == Color(0x7C00)

    def test_dollar_hex(self):
        assert parse_color("$03E0") == Color(0x03E0)

    def test_decimal(self):
        assert parse_color("31") == Color(31)

    @pytest.mark.parametrize("text", ["1,2", "32,0,0", "0x10000", "gray", "1,2,3,4"])
    def test_invalid(self, text):
        with pytest.raises(click.BadParameter):
            parse_color(text)


# =============================================================================
# CLI
# =============================================================================

class TestGbasnapCLI:
    def test_help(self):
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Render a GBA test pattern" in result.output

    def test_version(self):
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_raw_mid_gray(self, tmp_path):
        output = tmp_path / "gray.rgb"
        result = CliRunner().invoke(
            main, ["--pattern", "solid", "--color", "16,16,16", "--raw", "-o", str(output)]
        )
        assert result.exit_code == 0, result.output
        data = output.read_bytes()
        assert len(data) == 115200
        assert data == bytes([132]) * 115200
        assert "240x160 raw RGB" in result.output

    def test_png_scaled(self, tmp_path):
        output = tmp_path / "bars.png"
        result = CliRunner().invoke(main, ["--pattern", "bars", "--scale", "2", "-o", str(output)])
        assert result.exit_code == 0, result.output
        with Image.open(output) as img:
            assert img.size == (480, 320)
            assert img.getpixel((0, 0)) == (255, 255, 255)
        assert "480x320 PNG" in result.output

    def test_default_output(self, screenshot_dir):
        result = CliRunner().invoke(main, ["--pattern", "gradient"])
        assert result.exit_code == 0, result.output
        assert (screenshot_dir / "gbasnap_gradient.png").exists()

    def test_background_thread(self, tmp_path):
        output = tmp_path / "live.rgb"
        result = CliRunner().invoke(
            main,
            ["--pattern", "solid", "--color", "0x7FFF", "--raw",
             "--background", "--frames", "10", "-o", str(output)],
        )
        assert result.exit_code == 0, result.output
        assert output.read_bytes() == b"\xff" * 115200

    def test_invalid_color(self, tmp_path):
        result = CliRunner().invoke(
            main, ["--pattern", "solid", "--color", "40,0,0", "-o", str(tmp_path / "x.png")]
        )
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "invalid color" in result.output

    def test_invalid_scale(self, tmp_path):
        result = CliRunner().invoke(main, ["--scale", "3", "-o", str(tmp_path / "x.png")])
        assert result.exit_code == 2

    @pytest.mark.parametrize("value", ["-5", "inf", "nan"])
    def test_invalid_lock_timeout(self, tmp_path, value):
        result = CliRunner().invoke(
            main, [f"--lock-timeout={value}", "-o", str(tmp_path / "x.png")]
        )
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "lock_timeout" in result.output

    def test_invalid_scale_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GBA_DISPLAY_SCALE", "3")
        result = CliRunner().invoke(main, ["-o", str(tmp_path / "x.png")])
        # invalid env value is ignored, default 1x used
        assert result.exit_code == 0, result.output
        assert "240x160 PNG" in result.output
