"""
Clamp Expression Builder
========================

Turns a (min, max) pixel pair and a viewport range into a CSS clamp()
expression that interpolates linearly between the two viewport edges:

    coefficient = (max_px - min_px) / (max_vp - min_vp) * 100
    constant    = min_px - coefficient * min_vp / 100
    clamp(<min>, <constant> + <coefficient>vw, <max>)

The line is always computed in pixel space; the unit only affects how the
numbers are written out.
"""

from constants import Units
from exceptions import InvalidParameterRange

from .units import Unit, UnitConverter


class ClampBuilder:
    """
    Stateless clamp() builder.

    Usage:
        >>> ClampBuilder.build(8, 12, 375, 1620)
        'clamp(8px, 6.7952px + 0.3213vw, 12px)'
    """

    @staticmethod
    def coefficients(min_px: float, max_px: float, min_viewport: float, max_viewport: float):
        """
        Return (coefficient, constant) of the interpolation line.

        The coefficient is in vw (percent of viewport width), the constant in px.
        """
        if max_viewport == min_viewport:
            raise InvalidParameterRange(
                "max_viewport",
                max_viewport,
                reason="Max Viewport must differ from Min Viewport",
            )
        coefficient = (max_px - min_px) / (max_viewport - min_viewport) * 100
        constant = min_px - coefficient * min_viewport / 100
        return coefficient, constant

    @staticmethod
    def build(
        min_px: float,
        max_px: float,
        min_viewport: float,
        max_viewport: float,
        unit=Unit.PX,
    ) -> str:
        unit = Unit.parse(unit)
        coefficient, constant = ClampBuilder.coefficients(
            min_px, max_px, min_viewport, max_viewport
        )

        min_text = UnitConverter.format_value(min_px, unit)
        max_text = UnitConverter.format_value(max_px, unit)
        preferred = ClampBuilder._format_preferred(constant, coefficient, unit)

        return f"clamp({min_text}, {preferred}, {max_text})"

    @staticmethod
    def _format_preferred(constant: float, coefficient: float, unit: Unit) -> str:
        coefficient_text = f"{coefficient:.{Units.COEFFICIENT_DECIMALS}f}vw"

        constant_value = round(
            UnitConverter.to_unit(constant, unit), Units.CONSTANT_DECIMALS
        )
        if constant_value == 0:
            return coefficient_text

        constant_text = f"{constant_value:.{Units.CONSTANT_DECIMALS}f}{unit.value}"
        return f"{constant_text} + {coefficient_text}"


# Export for convenience
def build_clamp(min_px, max_px, min_viewport, max_viewport, unit="px") -> str:
    """Shorthand function"""
    return ClampBuilder.build(min_px, max_px, min_viewport, max_viewport, unit)
