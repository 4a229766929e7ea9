"""
Spacing CSS Builder
===================

Fans a table out to the formatter of its kind, the same way the theme
builder fans a theme out to its component modules.
"""

import logging
from typing import List

from constants import EMPTY_TABLE_CSS
from core.kinds import SizeKind

from .clamp import ClampBuilder
from .formats import classes, utilities, variables
from .scale import EntryBounds, ScaleEngine

logger = logging.getLogger(__name__)


FORMATTERS = {
    SizeKind.CLASS: classes,
    SizeKind.VARIABLE: variables,
    SizeKind.UTILITY: utilities,
}


class SpacingCSSBuilder:
    """
    Build the CSS for one entry table.

    Usage:
        >>> builder = SpacingCSSBuilder(table, params)
        >>> css = builder.build()
        >>> md_only = builder.build_entry(3)
    """

    def __init__(self, table, params):
        """
        Args:
            table: EntryTable of any kind
            params: GenerationParameters shared by all kinds
        """
        self.table = table
        self.params = params
        self.kind = table.kind
        self.formatter = FORMATTERS[self.kind]
        self.rows: List[EntryBounds] = ScaleEngine.compute_table_bounds(table, params)

    @property
    def prefix(self) -> str:
        return self.table.prefix

    @property
    def fallback_rows(self) -> List[EntryBounds]:
        return [row for row in self.rows if row.is_fallback]

    def clamp_for(self, row: EntryBounds) -> str:
        p = self.params
        return ClampBuilder.build(row.min_px, row.max_px, p.min_viewport, p.max_viewport, p.unit)

    def row_for(self, entry_id) -> EntryBounds:
        self.table.index_of(entry_id)
        return next(row for row in self.rows if row.entry.id == entry_id)

    def build(self) -> str:
        """Full CSS for the table"""
        if not self.rows:
            return EMPTY_TABLE_CSS
        css = self.formatter.get_styles(self)
        logger.debug(f"Generated {self.kind.value} CSS for {len(self.rows)} entries")
        return css

    def build_entry(self, entry_id) -> str:
        """
        CSS for one entry, identical to its fragment of build().

        Raises:
            NotFoundError: entry_id is not in the table
        """
        return self.formatter.get_entry_styles(self, self.row_for(entry_id))


# Export for convenience
def generate_css(table, params) -> str:
    """Shorthand function"""
    return SpacingCSSBuilder(table, params).build()
