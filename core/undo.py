"""
Clear-All Undo Buffer
=====================

One pending snapshot per table. A new hold replaces the previous one; the
snapshot is dropped once the window elapses, on dismissal, or when it is
taken.
"""

import logging
import time
from typing import Callable, Optional

from constants import Timing
from exceptions import UndoUnavailableError

logger = logging.getLogger(__name__)


class ClearUndoBuffer:
    """
    Usage:
        >>> buffer = ClearUndoBuffer(window_seconds=10)
        >>> buffer.hold(table.clear_all())
        >>> table.restore_snapshot(buffer.take())
    """

    def __init__(self, window_seconds: float = Timing.UNDO_WINDOW_SECONDS,
                 clock: Callable[[], float] = time.monotonic):
        self.window_seconds = float(window_seconds)
        self._clock = clock
        self._snapshot = None
        self._held_at: Optional[float] = None

    def hold(self, snapshot) -> None:
        if self._snapshot is not None:
            logger.debug("Replacing pending undo snapshot")
        self._snapshot = snapshot
        self._held_at = self._clock()

    def remaining(self) -> float:
        """Seconds left in the undo window (0 when nothing is pending)."""
        if self._snapshot is None:
            return 0.0
        left = self.window_seconds - (self._clock() - self._held_at)
        if left <= 0:
            self.discard()
            return 0.0
        return left

    def is_pending(self) -> bool:
        return self.remaining() > 0

    def take(self):
        """
        Return the pending snapshot and empty the buffer.

        Raises:
            UndoUnavailableError: nothing held, expired, or dismissed
        """
        if not self.is_pending():
            raise UndoUnavailableError()
        snapshot = self._snapshot
        self.discard()
        return snapshot

    def discard(self) -> None:
        self._snapshot = None
        self._held_at = None
