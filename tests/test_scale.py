"""
tests/test_scale.py
===================
Bounds derived from the anchor distance.
"""
import logging

import pytest

from config.spacing.scale import FALLBACK_BOUNDS, Bounds, ScaleEngine, compute_table_bounds
from core.entry_table import EntryTable, SizeEntry
from core.kinds import SizeKind
from core.parameters import GenerationParameters
from core.reorder import reorder
from exceptions import ReferenceNotFound


@pytest.fixture
def minor_third_params():
    params, _ = GenerationParameters.defaults().with_changes(
        min_scale_ratio=1.125, max_scale_ratio=1.2
    )
    return params


def bounds_by_name(table, params):
    return {row.name: (row.min_px, row.max_px) for row in compute_table_bounds(table, params)}


class TestComputeEntryBounds:

    def test_reference_scenario(self, class_table, minor_third_params):
        bounds = bounds_by_name(class_table, minor_third_params)
        assert bounds["md"] == (8, 12)
        assert bounds["lg"] == (9, 14)
        assert bounds["xs"] == (6, 8)

    def test_default_ratios(self, class_table, params):
        assert bounds_by_name(class_table, params) == {
            "xs": (6, 8),
            "sm": (7, 10),
            "md": (8, 12),
            "lg": (9, 15),
            "xl": (10, 19),
            "xxl": (11, 23),
        }

    def test_anchor_gets_base_values(self, class_table, params):
        anchor = class_table.get(class_table.effective_anchor_id())
        assert ScaleEngine.compute_entry_bounds(anchor, class_table, params) == Bounds(8, 12)

    def test_halves_round_away_from_zero(self, class_table):
        params, _ = GenerationParameters.defaults().with_changes(
            min_base_value=10, max_base_value=14, min_scale_ratio=1.25
        )
        lg = class_table.get(4)
        assert ScaleEngine.compute_entry_bounds(lg, class_table, params).min_px == 13

    def test_monotonic_in_table_order(self, class_table, params):
        rows = compute_table_bounds(class_table, params)
        mins = [row.min_px for row in rows]
        maxs = [row.max_px for row in rows]
        assert mins == sorted(mins)
        assert maxs == sorted(maxs)

    def test_rename_does_not_change_bounds(self, class_table, params):
        before = ScaleEngine.compute_entry_bounds(class_table.get(5), class_table, params)
        class_table.edit(5, "huge")
        assert ScaleEngine.compute_entry_bounds(class_table.get(5), class_table, params) == before

    def test_reorder_moves_bounds_with_position(self, class_table, params):
        reorder(class_table, 3, 1, insert_before=True)   # md first, anchor stays md
        bounds = bounds_by_name(class_table, params)
        assert bounds["md"] == (8, 12)
        assert bounds["xs"] == (9, 15)

    def test_steps(self, class_table):
        assert ScaleEngine.steps(class_table, 1) == -2
        assert ScaleEngine.steps(class_table, 3) == 0
        assert ScaleEngine.steps(class_table, 6) == 3

    def test_missing_entry_raises(self, class_table, params):
        with pytest.raises(ReferenceNotFound) as exc:
            ScaleEngine.compute_entry_bounds(SizeEntry(42, "ghost"), class_table, params)
        assert exc.value.entry_id == 42

    def test_missing_anchor_raises(self, params):
        table = EntryTable(SizeKind.CLASS, [SizeEntry(1, "a"), SizeEntry(2, "b")], anchor_id=99)
        with pytest.raises(ReferenceNotFound) as exc:
            ScaleEngine.compute_entry_bounds(table.get(1), table, params)
        assert exc.value.anchor_id == 99


class TestComputeTableBounds:

    def test_rows_in_table_order(self, class_table, params):
        rows = compute_table_bounds(class_table, params)
        assert [row.entry.id for row in rows] == [1, 2, 3, 4, 5, 6]
        assert [row.is_anchor for row in rows] == [False, False, True, False, False, False]
        assert [row.steps for row in rows] == [-2, -1, 0, 1, 2, 3]

    def test_stale_anchor_uses_fallback(self, params, caplog):
        table = EntryTable(SizeKind.VARIABLE, [SizeEntry(1, "a"), SizeEntry(2, "b")], anchor_id=99)
        with caplog.at_level(logging.WARNING):
            rows = compute_table_bounds(table, params)
        assert all(row.is_fallback for row in rows)
        assert all(row.bounds == FALLBACK_BOUNDS for row in rows)
        assert "fallback" in caplog.text

    def test_empty_table(self, params):
        assert compute_table_bounds(EntryTable(SizeKind.UTILITY), params) == []

    def test_short_table_anchors_on_last_entry(self, params):
        table = EntryTable(SizeKind.CLASS, [SizeEntry(10, "a"), SizeEntry(11, "b")])
        rows = compute_table_bounds(table, params)
        assert [row.is_anchor for row in rows] == [False, True]
        assert rows[1].bounds == Bounds(8, 12)


class TestViewportPreview:

    @pytest.mark.parametrize("viewport,expected", [
        (200, 8),
        (375, 8),
        (768, 9),
        (997.5, 10),
        (1620, 12),
        (2400, 12),
    ])
    def test_interpolate(self, viewport, expected):
        assert ScaleEngine.interpolate_at_viewport(8, 12, 375, 1620, viewport) == expected

    @pytest.mark.parametrize("viewport,label", [
        (375, "Mobile (portrait)"),
        (576, "Mobile (landscape)"),
        (800, "Tablet (portrait)"),
        (992, "Tablet (landscape)"),
        (1200, "Desktop"),
        (1919, "Desktop"),
        (1920, "Big Screen"),
    ])
    def test_device_type(self, viewport, label):
        assert ScaleEngine.device_type(viewport) == label
