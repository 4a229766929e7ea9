"""
Scale Engine
============

Derives each entry's (min, max) pixel bounds from its distance to the
anchor entry:

    steps  = index(entry) - index(anchor)
    min_px = round(min_base_value * min_scale_ratio ** steps)
    max_px = round(max_base_value * max_scale_ratio ** steps)

Bounds are never stored; they are recomputed from the parameters and the
current table order every time.
"""

import logging
from dataclasses import dataclass
from typing import List

from constants import FallbackBounds
from exceptions import ReferenceNotFound

from .units import round_half_away

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bounds:
    min_px: int
    max_px: int


FALLBACK_BOUNDS = Bounds(FallbackBounds.MIN_PX, FallbackBounds.MAX_PX)


@dataclass(frozen=True)
class EntryBounds:
    """One rendered row: the entry plus its computed bounds."""

    entry: object
    min_px: int
    max_px: int
    steps: int = 0
    is_anchor: bool = False
    is_fallback: bool = False

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def bounds(self) -> Bounds:
        return Bounds(self.min_px, self.max_px)


# Viewport width thresholds for the preview label (exclusive upper bounds)
DEVICE_TYPES = (
    (576, "Mobile (portrait)"),
    (768, "Mobile (landscape)"),
    (992, "Tablet (portrait)"),
    (1200, "Tablet (landscape)"),
    (1920, "Desktop"),
)
BIG_SCREEN = "Big Screen"


class ScaleEngine:
    """
    Stateless bounds calculator.

    Usage:
        >>> table = EntryTable.with_defaults(SizeKind.CLASS)
        >>> ScaleEngine.compute_entry_bounds(table.get(4), table, params)
        Bounds(min_px=9, max_px=15)
    """

    @staticmethod
    def steps(table, entry_id) -> int:
        """
        Signed distance of an entry from the anchor.

        Raises:
            ReferenceNotFound: anchor or entry is not in the table
        """
        anchor_id = table.effective_anchor_id()
        anchor_index = table.find_index(anchor_id) if anchor_id is not None else -1
        if anchor_index == -1:
            raise ReferenceNotFound(anchor_id=anchor_id, entry_id=entry_id)

        entry_index = table.find_index(entry_id)
        if entry_index == -1:
            raise ReferenceNotFound(entry_id=entry_id)

        return entry_index - anchor_index

    @staticmethod
    def bounds_for_steps(steps: int, params) -> Bounds:
        return Bounds(
            round_half_away(params.min_base_value * params.min_scale_ratio ** steps),
            round_half_away(params.max_base_value * params.max_scale_ratio ** steps),
        )

    @staticmethod
    def compute_entry_bounds(entry, table, params) -> Bounds:
        entry_id = getattr(entry, "id", entry)
        return ScaleEngine.bounds_for_steps(ScaleEngine.steps(table, entry_id), params)

    @staticmethod
    def compute_table_bounds(table, params) -> List[EntryBounds]:
        """
        Bounds for every entry, in table order.

        Rows whose anchor cannot be resolved get FALLBACK_BOUNDS and
        is_fallback=True instead of failing the whole table.
        """
        anchor_id = table.effective_anchor_id()
        rows = []
        fallback_count = 0

        for entry in table:
            try:
                steps = ScaleEngine.steps(table, entry.id)
            except ReferenceNotFound:
                fallback_count += 1
                rows.append(EntryBounds(
                    entry, FALLBACK_BOUNDS.min_px, FALLBACK_BOUNDS.max_px, is_fallback=True
                ))
                continue

            bounds = ScaleEngine.bounds_for_steps(steps, params)
            rows.append(EntryBounds(
                entry, bounds.min_px, bounds.max_px,
                steps=steps, is_anchor=entry.id == anchor_id,
            ))

        if fallback_count:
            logger.warning(
                f"Anchor id={anchor_id!r} not found; {fallback_count} "
                f"{table.kind.value} entries use fallback bounds "
                f"{FALLBACK_BOUNDS.min_px}/{FALLBACK_BOUNDS.max_px}px"
            )
        return rows

    @staticmethod
    def interpolate_at_viewport(min_px, max_px, min_viewport, max_viewport, viewport) -> int:
        """
        Value the clamp() expression resolves to at a given viewport width.

        Below min_viewport the result is min_px, above max_viewport it is max_px.
        """
        if viewport <= min_viewport:
            return round_half_away(min_px)
        if viewport >= max_viewport:
            return round_half_away(max_px)
        progress = (viewport - min_viewport) / (max_viewport - min_viewport)
        return round_half_away(min_px + (max_px - min_px) * progress)

    @staticmethod
    def device_type(viewport) -> str:
        for limit, label in DEVICE_TYPES:
            if viewport < limit:
                return label
        return BIG_SCREEN


# Export for convenience
def compute_entry_bounds(entry, table, params) -> Bounds:
    """Shorthand function"""
    return ScaleEngine.compute_entry_bounds(entry, table, params)


def compute_table_bounds(table, params) -> List[EntryBounds]:
    """Shorthand function"""
    return ScaleEngine.compute_table_bounds(table, params)
