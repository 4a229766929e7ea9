"""
Scale Ratio Presets
===================

Named musical-interval ratios offered by the scale pickers.
"""


class ScaleRatio:
    """
    Common modular-scale ratios.

    Usage:
        >>> ScaleRatio.get("major third")
        1.25
    """

    MINOR_SECOND = 1.067
    MAJOR_SECOND = 1.125
    MINOR_THIRD = 1.2
    MAJOR_THIRD = 1.25
    PERFECT_FOURTH = 1.333

    LABELS = {
        MINOR_SECOND: "Minor Second",
        MAJOR_SECOND: "Major Second",
        MINOR_THIRD: "Minor Third",
        MAJOR_THIRD: "Major Third",
        PERFECT_FOURTH: "Perfect Fourth",
    }

    @classmethod
    def get(cls, name: str) -> float:
        """
        Ratio by name ("minor third", "MINOR_THIRD" or "Minor-Third").

        Raises:
            KeyError: unknown preset name
        """
        key = str(name).strip().upper().replace(" ", "_").replace("-", "_")
        value = getattr(cls, key, None)
        if not isinstance(value, float):
            raise KeyError(name)
        return value

    @classmethod
    def label(cls, ratio: float) -> str:
        """Display label, e.g. '1.200 Minor Third'; custom ratios get no name."""
        name = cls.LABELS.get(round(float(ratio), 3))
        return f"{float(ratio):.3f} {name}" if name else f"{float(ratio):.3f}"

    @classmethod
    def choices(cls):
        """(ratio, label) pairs in ascending order."""
        return [(ratio, cls.label(ratio)) for ratio in sorted(cls.LABELS)]
