"""
Unit System
===========

Pixel / root-relative conversion and CSS value formatting.
"""

import math
from enum import Enum

from constants import Units


class Unit(str, Enum):
    PX = "px"
    REM = "rem"

    @classmethod
    def parse(cls, value) -> "Unit":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Python's round() is banker's rounding; the scale tables need 2.5 -> 3.
    """
    magnitude = math.floor(abs(value) + 0.5)
    return int(magnitude) if value >= 0 else -int(magnitude)


class UnitConverter:
    """
    Stateless px <-> rem conversion.

    Usage:
        >>> UnitConverter.format_value(8, Unit.REM)
        '0.500rem'
    """

    PIXELS_PER_REM = Units.PIXELS_PER_REM

    @classmethod
    def px_to_rem(cls, px: float) -> float:
        return px / cls.PIXELS_PER_REM

    @classmethod
    def rem_to_px(cls, rem: float) -> float:
        return rem * cls.PIXELS_PER_REM

    @classmethod
    def to_unit(cls, px: float, unit) -> float:
        """Convert a pixel value into the requested output unit."""
        if Unit.parse(unit) is Unit.REM:
            return cls.px_to_rem(px)
        return px

    @classmethod
    def format_value(cls, px: float, unit) -> str:
        """
        Format a pixel value with its unit suffix.

        Args:
            px: Value in pixels
            unit: Output unit (px or rem)

        Returns:
            Integer pixels ("12px") or rem to 3 decimals ("0.750rem")
        """
        if Unit.parse(unit) is Unit.REM:
            return f"{cls.px_to_rem(px):.{Units.REM_DECIMALS}f}rem"
        return f"{round_half_away(px)}px"


# Export for convenience
def format_value(px: float, unit="px") -> str:
    """Shorthand function"""
    return UnitConverter.format_value(px, unit)
