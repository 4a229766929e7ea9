"""
Autosave Manager
================

Saves the controller's state through the settings store on a timer, but
only when something changed since the last save.
"""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from core.results import OperationResult

logger = logging.getLogger(__name__)


class AutosaveManager(QObject):

    saved = Signal()
    save_failed = Signal(str)

    def __init__(self, controller, store, interval_seconds: Optional[int] = None,
                 enabled: Optional[bool] = None, parent=None):
        super().__init__(parent)
        if interval_seconds is None or enabled is None:
            from core.config import get_autosave_interval, is_autosave_enabled
            interval_seconds = get_autosave_interval() if interval_seconds is None else interval_seconds
            enabled = is_autosave_enabled() if enabled is None else enabled

        self.controller = controller
        self.store = store
        self.dirty = False

        self._timer = QTimer(self)
        self._timer.setInterval(int(interval_seconds * 1000))
        self._timer.timeout.connect(self._on_timeout)

        controller.state_changed.connect(self.mark_dirty)
        self.set_enabled(enabled)

    @property
    def enabled(self) -> bool:
        return self._timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def set_enabled(self, enabled: bool) -> None:
        if enabled:
            self._timer.start()
        else:
            self._timer.stop()
        logger.info(f"Autosave {'enabled' if enabled else 'disabled'}")

    def mark_dirty(self) -> None:
        self.dirty = True

    def _on_timeout(self) -> None:
        if self.dirty:
            self.save_now()

    def save_now(self) -> OperationResult:
        c = self.controller
        result = self.store.save(c.params, c.tables, c.active_kind, autosave_enabled=self.enabled)
        if result:
            self.dirty = False
            self.saved.emit()
        else:
            logger.warning(f"Autosave failed: {result.error}")
            self.save_failed.emit(result.message)
        return result
