"""
Fluid Space Forge Constants - Single Source of Truth
====================================================

This file contains all constants used across the application.
Using constants instead of magic strings prevents typos and makes refactoring easier.
"""


class Units:
    """CSS unit conversion constants."""

    PIXELS_PER_REM = 16
    REM_DECIMALS = 3
    COEFFICIENT_DECIMALS = 4
    CONSTANT_DECIMALS = 4


class ParameterDefaults:
    """
    Default generation parameters.

    Usage:
        from constants import ParameterDefaults as PD
        min_base = PD.MIN_BASE_VALUE
    """

    MIN_BASE_VALUE = 8
    MAX_BASE_VALUE = 12
    MIN_VIEWPORT = 375
    MAX_VIEWPORT = 1620
    MIN_SCALE_RATIO = 1.125
    MAX_SCALE_RATIO = 1.25
    UNIT = "px"


class ParameterRanges:
    """Inclusive (low, high) bounds applied on every parameter edit."""

    MIN_BASE_VALUE = (1, 16)
    MAX_BASE_VALUE_CEILING = 80
    MIN_VIEWPORT = (200, 992)           # tablet max
    MAX_VIEWPORT_CEILING = 1920         # big screen max
    SCALE_RATIO = (1.0, 3.0)


class EntryDefaults:
    """Seed data and naming rules for entry tables."""

    SUFFIXES = ("xs", "sm", "md", "lg", "xl", "xxl")
    ANCHOR_ID = 3                       # md
    ANCHOR_POSITION = 2                 # 3rd entry when id 3 is absent
    CUSTOM_NAME_PREFIX = "custom-"

    # Input hints shown by the UI; never accepted as real names
    PLACEHOLDER_NAMES = frozenset({"e.g., space-lg", "e.g., --sp-lg", "e.g., lg"})

    # Markers the generators add themselves
    FORBIDDEN_PREFIX_MARKERS = (".", "--")


class FallbackBounds:
    """Bounds substituted when the scale engine cannot resolve a reference."""

    MIN_PX = 8
    MAX_PX = 12


class Timing:
    UNDO_WINDOW_SECONDS = 10.0
    AUTOSAVE_INTERVAL_SECONDS = 30


class OptionKeys:
    """Persistence keys of the settings blob and the three entry lists."""

    SETTINGS = "space_clamp_settings"
    CLASS_SIZES = "space_clamp_class_sizes"
    VARIABLE_SIZES = "space_clamp_variable_sizes"
    UTILITY_SIZES = "space_clamp_utility_sizes"


class SettingsFields:
    """Field names inside the persisted settings blob."""

    MIN_BASE = "minBasespace"
    MAX_BASE = "maxBasespace"
    MIN_VIEWPORT = "minViewport"
    MAX_VIEWPORT = "maxViewport"
    MIN_SCALE = "minScale"
    MAX_SCALE = "maxScale"
    UNIT_TYPE = "unitType"
    ACTIVE_TAB = "activeTab"
    AUTOSAVE_ENABLED = "autosaveEnabled"


EMPTY_TABLE_CSS = "/* No space sizes defined */"
