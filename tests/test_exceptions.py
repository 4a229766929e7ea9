# -*- coding: utf-8 -*-
"""
tests/test_exceptions.py
==========================
Tests for the hierarchical exception system.
All pure Python: no DB or Qt needed.
"""
import pytest
from exceptions import (
    SpaceForgeError,
    ValidationError, BlankNameError, PlaceholderNameError,
    DuplicateNameError, InvalidPrefixError, InvalidParameterRange,
    NotFoundError, ReferenceNotFound,
    UndoUnavailableError, PersistenceError, ConfigurationError,
)


# ── inheritance hierarchy ─────────────────────────────────────────────────────

class TestInheritance:

    def test_all_inherit_from_root(self):
        errs = [
            ValidationError, BlankNameError, PlaceholderNameError,
            DuplicateNameError, InvalidPrefixError, InvalidParameterRange,
            NotFoundError, ReferenceNotFound,
            UndoUnavailableError, PersistenceError, ConfigurationError,
        ]
        for err_cls in errs:
            assert issubclass(err_cls, SpaceForgeError), f"{err_cls} must inherit SpaceForgeError"

    def test_validation_errors_chain(self):
        for err_cls in (BlankNameError, DuplicateNameError, InvalidPrefixError, InvalidParameterRange):
            assert issubclass(err_cls, ValidationError)
        assert issubclass(PlaceholderNameError, BlankNameError)

    def test_lookup_errors_chain(self):
        assert issubclass(ReferenceNotFound, NotFoundError)


# ── SpaceForgeError attributes ────────────────────────────────────────────────

class TestSpaceForgeError:

    def test_message_only(self):
        e = SpaceForgeError("Something went wrong")
        assert str(e) == "Something went wrong"
        assert e.code == ""

    def test_detail_appended(self):
        e = SpaceForgeError("Save failed", code="SAVE", detail="disk I/O error")
        assert str(e) == "Save failed | disk I/O error"
        assert e.code == "SAVE"

    def test_catchable_at_root(self):
        with pytest.raises(SpaceForgeError):
            raise DuplicateNameError("md")


# ── specific errors ───────────────────────────────────────────────────────────

class TestSpecificErrors:

    def test_blank_name(self):
        e = BlankNameError()
        assert e.message == "Suffix cannot be empty."
        assert e.field == "name"
        assert e.code == "NAME_BLANK"

    def test_placeholder(self):
        e = PlaceholderNameError("e.g., lg")
        assert e.code == "NAME_PLACEHOLDER"
        assert e.name == "e.g., lg"

    def test_duplicate_mentions_name(self):
        e = DuplicateNameError("md")
        assert "'md'" in e.message
        assert e.code == "NAME_DUPLICATE"

    def test_invalid_prefix(self):
        e = InvalidPrefixError(".x")
        assert e.field == "prefix"
        assert e.prefix == ".x"

    def test_parameter_range(self):
        e = InvalidParameterRange("min_viewport", 100, 200, "too small")
        assert e.field == "min_viewport"
        assert e.value == 100
        assert e.corrected == 200
        assert e.message == "too small"

    def test_parameter_range_default_message(self):
        assert "min_viewport" in InvalidParameterRange("min_viewport", "x").message

    def test_not_found(self):
        e = NotFoundError("Class", 7)
        assert e.message == "Class with id=7 not found"
        assert e.id_value == 7

    def test_reference_not_found(self):
        e = ReferenceNotFound(anchor_id=9)
        assert e.anchor_id == 9
        assert e.code == "REFERENCE_NOT_FOUND"
        assert "anchor" in e.message

    def test_undo_unavailable(self):
        assert UndoUnavailableError().message == "Nothing to undo"
