"""
tests/test_autosave.py
======================
AutosaveManager dirty tracking and timer control.
"""
import pytest

from core.autosave import AutosaveManager
from core.results import OperationResult
from exceptions import PersistenceError


class RecordingStore:

    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    def save(self, params, tables, active_kind, *, autosave_enabled=True):
        self.calls.append((params, active_kind, autosave_enabled))
        if self.fail:
            return OperationResult.failure(PersistenceError("disk full"))
        return OperationResult.success()


@pytest.fixture
def recording_store():
    return RecordingStore()


class TestAutosave:

    def test_timer_configuration(self, controller, recording_store):
        manager = AutosaveManager(controller, recording_store, interval_seconds=30, enabled=True)
        assert manager.enabled
        assert manager.interval_ms == 30000
        manager.set_enabled(False)
        assert not manager.enabled

    def test_state_change_marks_dirty(self, controller, recording_store):
        manager = AutosaveManager(controller, recording_store, interval_seconds=30, enabled=False)
        assert not manager.dirty
        controller.add_entry("xxxl")
        assert manager.dirty

    def test_failed_event_does_not_mark_dirty(self, controller, recording_store):
        manager = AutosaveManager(controller, recording_store, interval_seconds=30, enabled=False)
        controller.add_entry("")
        assert not manager.dirty

    def test_timeout_saves_only_when_dirty(self, controller, recording_store):
        manager = AutosaveManager(controller, recording_store, interval_seconds=30, enabled=True)
        manager._on_timeout()
        assert recording_store.calls == []

        controller.change_parameters(min_base_value=10)
        manager._on_timeout()
        assert len(recording_store.calls) == 1
        assert recording_store.calls[0][0].min_base_value == 10
        assert not manager.dirty

    def test_saved_signal(self, controller, recording_store):
        manager = AutosaveManager(controller, recording_store, interval_seconds=30, enabled=False)
        fired = []
        manager.saved.connect(lambda: fired.append(True))
        assert manager.save_now().ok
        assert fired == [True]

    def test_failure_keeps_dirty(self, controller):
        manager = AutosaveManager(controller, RecordingStore(fail=True), interval_seconds=30, enabled=False)
        errors = []
        manager.save_failed.connect(errors.append)
        controller.add_entry("xxxl")

        result = manager.save_now()

        assert not result
        assert manager.dirty
        assert errors == ["disk full"]

    def test_saves_into_real_store(self, controller, store):
        manager = AutosaveManager(controller, store, interval_seconds=30, enabled=True)
        controller.add_entry("xxxl")
        manager._on_timeout()
        assert store.load()[1][controller.active_kind].names[-1] == "xxxl"
