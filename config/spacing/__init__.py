"""
Fluid Spacing Module
====================

Fluid spacing scales rendered as CSS clamp() expressions.

Quick Start:
    >>> from config.spacing import SpacingCSSBuilder
    >>> css = SpacingCSSBuilder(table, params).build()

Or the building blocks:
    >>> from config.spacing import build_clamp
    >>> build_clamp(8, 12, 375, 1620)
    'clamp(8px, 6.7952px + 0.3213vw, 12px)'
"""

from .units import Unit, UnitConverter, format_value, round_half_away
from .clamp import ClampBuilder, build_clamp
from .scale import Bounds, EntryBounds, FALLBACK_BOUNDS, ScaleEngine
from .presets import ScaleRatio
from .builder import SpacingCSSBuilder, generate_css

__all__ = [
    "Unit",
    "UnitConverter",
    "format_value",
    "round_half_away",
    "ClampBuilder",
    "build_clamp",
    "Bounds",
    "EntryBounds",
    "FALLBACK_BOUNDS",
    "ScaleEngine",
    "ScaleRatio",
    "SpacingCSSBuilder",
    "generate_css",
]
