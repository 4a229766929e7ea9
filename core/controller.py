"""
Generation Controller
=====================

Single entry point for UI events. Every event:

  1. validates and applies the change to the parameters or a table
  2. recomputes the active table's bounds and CSS synchronously
  3. emits the result through Qt signals
  4. returns an OperationResult (never raises SpaceForgeError)

Usage:
    >>> controller = GenerationController(render_target=print)
    >>> controller.change_parameters(min_base_value=10)
    >>> controller.add_entry("xxxl")
"""

import logging
import time
from typing import Callable, Dict, List, Optional

from PySide6.QtCore import QObject, Signal

from exceptions import SpaceForgeError, ValidationError
from config.spacing import ClampBuilder, EntryBounds, ScaleEngine, SpacingCSSBuilder
from core.entry_table import EntryTable
from core.kinds import SizeKind, get_kind_config
from core.parameters import GenerationParameters
from core.reorder import reorder
from core.results import OperationResult
from core.undo import ClearUndoBuffer

logger = logging.getLogger(__name__)


class GenerationController(QObject):

    css_generated = Signal(str)
    selected_css_generated = Signal(str)
    validation_failed = Signal(str)
    notice_issued = Signal(str)
    state_changed = Signal()

    def __init__(
        self,
        params: Optional[GenerationParameters] = None,
        tables: Optional[Dict[SizeKind, EntryTable]] = None,
        active_kind=SizeKind.CLASS,
        render_target: Optional[Callable[[str], None]] = None,
        undo_window: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
        parent=None,
    ):
        super().__init__(parent)
        if undo_window is None:
            from core.config import get_undo_window
            undo_window = get_undo_window()

        tables = tables or {}
        self.params = params or GenerationParameters.defaults()
        self.tables: Dict[SizeKind, EntryTable] = {
            kind: tables[kind] if tables.get(kind) is not None else EntryTable.with_defaults(kind)
            for kind in SizeKind
        }
        self.active_kind = SizeKind.parse(active_kind)
        self._undo = {kind: ClearUndoBuffer(undo_window, clock) for kind in SizeKind}
        self._selected: Dict[SizeKind, Optional[int]] = {kind: None for kind in SizeKind}
        self.last_css = ""

        if render_target is not None:
            self.css_generated.connect(render_target)

    # ─────────────────────────────────────────────────────────────────────────
    # State access
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def active_table(self) -> EntryTable:
        return self.tables[self.active_kind]

    @property
    def undo_buffer(self) -> ClearUndoBuffer:
        return self._undo[self.active_kind]

    @property
    def selected_id(self) -> Optional[int]:
        return self._selected[self.active_kind]

    def compute_bounds(self, kind=None) -> List[EntryBounds]:
        table = self.tables[SizeKind.parse(kind)] if kind is not None else self.active_table
        return ScaleEngine.compute_table_bounds(table, self.params)

    def css_for(self, kind=None) -> str:
        table = self.tables[SizeKind.parse(kind)] if kind is not None else self.active_table
        return SpacingCSSBuilder(table, self.params).build()

    # ─────────────────────────────────────────────────────────────────────────
    # Core
    # ─────────────────────────────────────────────────────────────────────────

    def _apply(self, action: str, operation, *, changed: bool = True) -> OperationResult:
        """
        Run one event.

        operation() returns (value, notices) or raises SpaceForgeError; on
        success the active table is regenerated.
        """
        try:
            value, notices = operation()
        except SpaceForgeError as e:
            logger.warning(f"{action} rejected: {e}")
            self.validation_failed.emit(e.message)
            return OperationResult.failure(e)

        for notice in notices:
            self.notice_issued.emit(notice.message)

        self.regenerate()
        if changed:
            self.state_changed.emit()
        return OperationResult.success(value, notices)

    def regenerate(self) -> str:
        """Recompute the active table and emit its CSS (and the selected entry's)."""
        builder = SpacingCSSBuilder(self.active_table, self.params)
        self.last_css = builder.build()
        self.css_generated.emit(self.last_css)

        selected = self.selected_id
        if selected is not None:
            if selected in self.active_table:
                self.selected_css_generated.emit(builder.build_entry(selected))
            else:
                self._selected[self.active_kind] = None
                self.selected_css_generated.emit("")
        return self.last_css

    # ─────────────────────────────────────────────────────────────────────────
    # Parameters
    # ─────────────────────────────────────────────────────────────────────────

    def change_parameters(self, **values) -> OperationResult:
        def operation():
            params, notices = self.params.with_changes(**values)
            # raises before anything is stored when the viewports cannot interpolate
            ClampBuilder.coefficients(params.min_base_value, params.max_base_value,
                                      params.min_viewport, params.max_viewport)
            self.params = params
            return self.params, notices
        return self._apply("Parameter change", operation)

    def reset_parameters(self) -> OperationResult:
        def operation():
            self.params = GenerationParameters.defaults()
            logger.info("Parameters reset to defaults")
            return self.params, []
        return self._apply("Parameter reset", operation)

    # ─────────────────────────────────────────────────────────────────────────
    # Entries
    # ─────────────────────────────────────────────────────────────────────────

    def add_entry(self, name) -> OperationResult:
        return self._apply("Add", lambda: (self.active_table.add(name), []))

    def edit_entry(self, entry_id, name) -> OperationResult:
        return self._apply("Edit", lambda: (self.active_table.edit(entry_id, name), []))

    def delete_entry(self, entry_id) -> OperationResult:
        def operation():
            removed = self.active_table.delete(entry_id)
            self.undo_buffer.discard()
            return removed, []
        return self._apply("Delete", operation)

    def reorder_entries(self, dragged_id, target_id, insert_before: bool = True) -> OperationResult:
        return self._apply(
            "Reorder",
            lambda: (reorder(self.active_table, dragged_id, target_id, insert_before), []),
        )

    def clear_table(self) -> OperationResult:
        def operation():
            snapshot = self.active_table.clear_all()
            self.undo_buffer.hold(snapshot)
            return snapshot, []
        return self._apply("Clear all", operation)

    def undo_clear(self) -> OperationResult:
        def operation():
            snapshot = self.undo_buffer.take()
            self.active_table.restore_snapshot(snapshot)
            logger.info(f"[{self.active_kind.value}] restored {len(snapshot)} cleared entries")
            return snapshot, []
        return self._apply("Undo", operation)

    def dismiss_undo(self) -> OperationResult:
        self.undo_buffer.discard()
        return OperationResult.success()

    def restore_defaults(self) -> OperationResult:
        def operation():
            self.undo_buffer.discard()
            self.active_table.restore_defaults()
            return self.active_table, []
        return self._apply("Restore defaults", operation)

    def set_anchor(self, entry_id) -> OperationResult:
        def operation():
            self.active_table.set_anchor(entry_id)
            return entry_id, []
        return self._apply("Set anchor", operation)

    def set_prefix(self, prefix) -> OperationResult:
        def operation():
            config = get_kind_config(self.active_kind)
            if not config.uses_prefix:
                raise ValidationError(
                    f"{config.display_name} do not use a prefix",
                    field="prefix", code="PREFIX_UNUSED",
                )
            return self.active_table.set_prefix(prefix), []
        return self._apply("Set prefix", operation)

    # ─────────────────────────────────────────────────────────────────────────
    # View
    # ─────────────────────────────────────────────────────────────────────────

    def set_active_kind(self, kind) -> OperationResult:
        def operation():
            try:
                self.active_kind = SizeKind.parse(kind)
            except ValueError as e:
                raise ValidationError(f"Unknown output kind {kind!r}", field="kind") from e
            return self.active_kind, []
        return self._apply("Switch kind", operation)

    def select_entry(self, entry_id) -> OperationResult:
        """
        Select an entry (None clears) and emit its single-entry CSS.

        Selection is view state and does not mark the session dirty.
        """
        def operation():
            if entry_id is not None:
                self.active_table.index_of(entry_id)
            self._selected[self.active_kind] = entry_id
            if entry_id is None:
                self.selected_css_generated.emit("")
                return "", []
            css = SpacingCSSBuilder(self.active_table, self.params).build_entry(entry_id)
            return css, []
        return self._apply("Select", operation, changed=False)
