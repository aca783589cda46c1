"""
Presentation scale selection.

The scale only changes the size at which a frame is presented, never the
frame's resolution or contents.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
from enum import IntEnum
from typing import Tuple, Union

from gba_display.errors import InvalidScaleFactorError

logger = logging.getLogger(__name__)


class ScaleFactor(IntEnum):
    """Supported integer magnifications."""
    X1 = 1
    X2 = 2
    X4 = 4

    @property
    def label(self) -> str:
        """Button-style label, e.g. 'x2'."""
        return f"x{self.value}"


SUPPORTED_SCALES = tuple(int(f) for f in ScaleFactor)


def parse_scale(value: Union[ScaleFactor, int]) -> ScaleFactor:
    """
    Validate a scale value.

    Args:
        value: A ScaleFactor or its integer value

    Returns:
        The matching ScaleFactor

    Raises:
        InvalidScaleFactorError: If value is not a supported factor
    """
    if isinstance(value, ScaleFactor):
        return value
    # bool is an int subclass; True must not mean 1x
    if isinstance(value, int) and not isinstance(value, bool) and value in SUPPORTED_SCALES:
        return ScaleFactor(value)
    logger.error(f"Rejected scale factor {value!r}")
    raise InvalidScaleFactorError(value, SUPPORTED_SCALES)


class ScaleSelector:
    """
    Holds the user's selected magnification (1x by default).

    Example:
        >>> selector = ScaleSelector()
        >>> selector.select(2)
        >>> selector.size_for(240, 160)
        (480, 320)
    """

    def __init__(self, factor: Union[ScaleFactor, int] = ScaleFactor.X1):
        self._factor = parse_scale(factor)

    @property
    def factor(self) -> ScaleFactor:
        return self._factor

    def select(self, factor: Union[ScaleFactor, int]) -> None:
        """Select a supported factor. Re-selecting the current one is a no-op."""
        factor = parse_scale(factor)
        if factor is not self._factor:
            logger.debug(f"Scale changed {self._factor.label} -> {factor.label}")
        self._factor = factor

    def size_for(self, width: int, height: int) -> Tuple[int, int]:
        """Presentation size for a base size at the selected factor."""
        return (width * self._factor, height * self._factor)
