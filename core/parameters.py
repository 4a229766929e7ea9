"""
Generation Parameters
=====================

The shared inputs of every scale: two base sizes, two viewport widths, two
scale ratios and the output unit. Values are always stored in corrected
form; each correction is reported back as an InvalidParameterRange notice.
"""

import logging
import math
from dataclasses import asdict, dataclass, fields
from typing import Dict, List, Tuple

from constants import ParameterDefaults as PD
from constants import ParameterRanges as PR
from constants import SettingsFields as SF
from exceptions import InvalidParameterRange, ValidationError
from config.spacing.units import Unit, round_half_away

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationParameters:
    min_base_value: float = PD.MIN_BASE_VALUE
    max_base_value: float = PD.MAX_BASE_VALUE
    min_viewport: int = PD.MIN_VIEWPORT
    max_viewport: int = PD.MAX_VIEWPORT
    min_scale_ratio: float = PD.MIN_SCALE_RATIO
    max_scale_ratio: float = PD.MAX_SCALE_RATIO
    unit: Unit = Unit.PX

    @classmethod
    def defaults(cls) -> "GenerationParameters":
        return cls()

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def as_dict(self) -> dict:
        return asdict(self)

    def with_changes(self, **changes) -> Tuple["GenerationParameters", List[InvalidParameterRange]]:
        """
        Apply edits and re-validate every field.

        Returns:
            (corrected parameters, list of corrections)

        Raises:
            ValidationError: unknown field name
        """
        unknown = set(changes) - set(self.field_names())
        if unknown:
            name = sorted(unknown)[0]
            raise ValidationError(f"Unknown parameter '{name}'", field=name, code="PARAM_UNKNOWN")

        values = self.as_dict()
        values.update(changes)
        return validate_parameters(values)

    # ─────────────────────────────────────────────────────────────────────────
    # Settings blob
    # ─────────────────────────────────────────────────────────────────────────

    def to_settings(self) -> Dict[str, object]:
        return {
            SF.MIN_BASE: self.min_base_value,
            SF.MAX_BASE: self.max_base_value,
            SF.MIN_VIEWPORT: self.min_viewport,
            SF.MAX_VIEWPORT: self.max_viewport,
            SF.MIN_SCALE: self.min_scale_ratio,
            SF.MAX_SCALE: self.max_scale_ratio,
            SF.UNIT_TYPE: self.unit.value,
        }

    @classmethod
    def from_settings(cls, blob) -> Tuple["GenerationParameters", List[InvalidParameterRange]]:
        """Missing keys take their defaults; bad values are corrected."""
        blob = blob or {}
        default = cls.defaults()
        values = {
            "min_base_value": blob.get(SF.MIN_BASE, default.min_base_value),
            "max_base_value": blob.get(SF.MAX_BASE, default.max_base_value),
            "min_viewport": blob.get(SF.MIN_VIEWPORT, default.min_viewport),
            "max_viewport": blob.get(SF.MAX_VIEWPORT, default.max_viewport),
            "min_scale_ratio": blob.get(SF.MIN_SCALE, default.min_scale_ratio),
            "max_scale_ratio": blob.get(SF.MAX_SCALE, default.max_scale_ratio),
            "unit": blob.get(SF.UNIT_TYPE, default.unit),
        }
        return validate_parameters(values)


def _to_number(value):
    """float(value), or None when it is not a finite number."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _tidy(number: float):
    """Store integral floats as ints (12.0 -> 12)."""
    return int(number) if float(number).is_integer() else number


class _Corrector:
    """Collects corrections while validating one parameter set."""

    def __init__(self):
        self.notices: List[InvalidParameterRange] = []

    def correct(self, field, value, corrected, reason):
        notice = InvalidParameterRange(field, value, corrected, reason)
        self.notices.append(notice)
        logger.warning(f"Parameter {field}={value!r} corrected to {corrected!r}: {reason}")
        return corrected

    def bounded(self, field, value, low, high, label, fallback=None, whole=False):
        number = _to_number(value)
        if number is not None and whole:
            number = round_half_away(number)
        if number is None:
            corrected = low if fallback is None else fallback
            return self.correct(field, value, corrected, f"{label} must be a number")
        if number < low:
            return self.correct(field, value, low, f"{label} must be at least {low}")
        if number > high:
            return self.correct(field, value, high, f"{label} must be at most {high}")
        return _tidy(number)

    def above(self, field, value, floor, ceiling, label, whole=False):
        """
        Strictly greater than floor (else floor + 1), at most ceiling.

        With whole=True the value is rounded before it is compared, so a
        fractional value cannot collapse onto floor afterwards.
        """
        number = _to_number(value)
        if number is not None and whole:
            number = round_half_away(number)
        if number is None:
            return self.correct(field, value, floor + 1, f"{label} must be a number")
        if number <= floor:
            return self.correct(field, value, floor + 1, f"{label} must be greater than {floor}")
        if number > ceiling:
            return self.correct(field, value, ceiling, f"{label} must be at most {ceiling}")
        return _tidy(number)

    def ratio(self, field, value, default, label):
        low, high = PR.SCALE_RATIO
        number = _to_number(value)
        if number is None:
            return self.correct(field, value, default, f"{label} must be a number")
        if number < low:
            return self.correct(field, value, low, f"{label} must be at least {low}")
        if number > high:
            return self.correct(field, value, high, f"{label} must be at most {high}")
        return number

    def unit(self, value):
        try:
            return Unit.parse(value)
        except ValueError:
            return self.correct("unit", value, Unit.PX, "Unit must be px or rem")


def validate_parameters(values: dict) -> Tuple[GenerationParameters, List[InvalidParameterRange]]:
    """
    Validate a full parameter mapping, in field order.

    Later fields are checked against the corrected earlier ones, so a new
    min_base_value can push max_base_value up to min + 1.
    """
    c = _Corrector()

    min_base = c.bounded("min_base_value", values.get("min_base_value"),
                         *PR.MIN_BASE_VALUE, label="Min Space Size")
    max_base = c.above("max_base_value", values.get("max_base_value"),
                       min_base, PR.MAX_BASE_VALUE_CEILING, label="Max Space Size")

    min_vp = int(c.bounded("min_viewport", values.get("min_viewport"),
                           *PR.MIN_VIEWPORT, label="Min Viewport Width", whole=True))
    max_vp = int(c.above("max_viewport", values.get("max_viewport"),
                         min_vp, PR.MAX_VIEWPORT_CEILING, label="Max Viewport Width", whole=True))

    min_ratio = c.ratio("min_scale_ratio", values.get("min_scale_ratio"),
                        PD.MIN_SCALE_RATIO, label="Min Scale")
    max_ratio = c.ratio("max_scale_ratio", values.get("max_scale_ratio"),
                        PD.MAX_SCALE_RATIO, label="Max Scale")

    unit = c.unit(values.get("unit", PD.UNIT))

    params = GenerationParameters(
        min_base_value=min_base,
        max_base_value=max_base,
        min_viewport=min_vp,
        max_viewport=max_vp,
        min_scale_ratio=float(min_ratio),
        max_scale_ratio=float(max_ratio),
        unit=unit,
    )
    return params, c.notices
