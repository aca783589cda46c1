"""
Scale Selector Unit Tests
=========================

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import pytest

from gba_display.display import ScaleFactor, ScaleSelector, SUPPORTED_SCALES, parse_scale
from gba_display.errors import DisplayError, InvalidScaleFactorError


class TestScaleFactor:
    """Test the supported factor set."""

    def test_supported(self):
        assert SUPPORTED_SCALES == (1, 2, 4)

    def test_labels(self):
        assert [f.label for f in ScaleFactor] == ["x1", "x2", "x4"]

    def test_parse_int(self):
        assert parse_scale(2) is ScaleFactor.X2

    def test_parse_enum(self):
        assert parse_scale(ScaleFactor.X4) is ScaleFactor.X4


class TestScaleSelector:
    """Test selection and presentation size."""

    def test_default_is_1x(self):
        assert ScaleSelector().factor is ScaleFactor.X1

    @pytest.mark.parametrize("factor", [1, 2, 4])
    def test_size_for(self, factor):
        selector = ScaleSelector()
        selector.select(factor)
        assert selector.size_for(240, 160) == (240 * factor, 160 * factor)

    def test_reselect_is_idempotent(self):
        selector = ScaleSelector()
        for _ in range(10):
            selector.select(ScaleFactor.X2)
            assert selector.factor is ScaleFactor.X2
            assert selector.size_for(240, 160) == (480, 320)

    def test_switching_does_not_drift(self):
        selector = ScaleSelector()
        for factor in [4, 1, 2, 4, 4, 1, 2, 2] * 5:
            selector.select(factor)
        assert selector.size_for(240, 160) == (480, 320)

    def test_size_is_int(self):
        selector = ScaleSelector(4)
        width, height = selector.size_for(240, 160)
        assert type(width) is int and type(height) is int


class TestInvalidScale:
    """Test that out-of-set factors are programming errors."""

    @pytest.mark.parametrize("value", [0, 3, 8, -1, 1.5, "2", None, True])
    def test_rejected(self, value):
        selector = ScaleSelector()
        with pytest.raises(InvalidScaleFactorError):
            selector.select(value)
        assert selector.factor is ScaleFactor.X1

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            ScaleSelector(3)

    def test_is_display_error(self):
        assert issubclass(InvalidScaleFactorError, DisplayError)

    def test_message(self):
        with pytest.raises(InvalidScaleFactorError, match="1x, 2x, 4x"):
            parse_scale(3)

    def test_logged(self, caplog):
        with pytest.raises(InvalidScaleFactorError):
            parse_scale(5)
        assert "Rejected scale factor 5" in caplog.text
