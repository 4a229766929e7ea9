"""
Size Kinds
==========

The three output kinds (Classes, Variables, Utilities). Each kind owns an
independent entry table and one CSS formatter; everything that differs per
kind lives in KIND_CONFIG so callers never branch on the kind themselves.
"""

from dataclasses import dataclass
from enum import Enum

from constants import OptionKeys


class SizeKind(str, Enum):
    CLASS = "class"
    VARIABLE = "vars"
    UTILITY = "utils"

    @classmethod
    def parse(cls, value) -> "SizeKind":
        """Accept a SizeKind or its tab identifier ('class', 'vars', 'utils')."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


@dataclass(frozen=True)
class KindConfig:
    property_name: str       # entry field name in the persisted records
    display_name: str
    display_name_singular: str
    default_prefix: str
    anchor_setting: str      # settings-blob key holding the anchor id
    prefix_setting: str      # settings-blob key holding the prefix ("" = none)
    option_key: str
    uses_prefix: bool = True


KIND_CONFIG = {
    SizeKind.CLASS: KindConfig(
        property_name="className",
        display_name="Classes",
        display_name_singular="Class",
        default_prefix="space",
        anchor_setting="selectedClassSizeId",
        prefix_setting="classPrefix",
        option_key=OptionKeys.CLASS_SIZES,
    ),
    SizeKind.VARIABLE: KindConfig(
        property_name="variableName",
        display_name="Variables",
        display_name_singular="Variable",
        default_prefix="sp",
        anchor_setting="selectedVariableSizeId",
        prefix_setting="variablePrefix",
        option_key=OptionKeys.VARIABLE_SIZES,
    ),
    SizeKind.UTILITY: KindConfig(
        property_name="utilityName",
        display_name="Utilities",
        display_name_singular="Utility",
        default_prefix="",
        anchor_setting="selectedUtilitySizeId",
        prefix_setting="",
        option_key=OptionKeys.UTILITY_SIZES,
        uses_prefix=False,
    ),
}


def get_kind_config(kind) -> KindConfig:
    return KIND_CONFIG[SizeKind.parse(kind)]
