# services/persistence_service.py
"""
Settings Store
==============

Loads and saves the whole configurator state as four JSON blobs:

    space_clamp_settings        parameters, anchors, prefixes, active tab
    space_clamp_class_sizes     [{"id": 1, "className": "xs"}, ...]
    space_clamp_variable_sizes  [{"id": 1, "variableName": "xs"}, ...]
    space_clamp_utility_sizes   [{"id": 1, "utilityName": "xs"}, ...]

Anything missing or unreadable falls back to its default with a warning,
so a damaged store never prevents the configurator from starting.
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple

from sqlalchemy.exc import SQLAlchemyError

from constants import EntryDefaults, OptionKeys, SettingsFields
from exceptions import InvalidPrefixError, PersistenceError
from core.entry_table import EntryTable
from core.kinds import SizeKind, get_kind_config
from core.parameters import GenerationParameters
from core.results import OperationResult
from database.crud.options_crud import OptionsCRUD
from database.models import get_session_local, init_db
from version import VERSION

logger = logging.getLogger(__name__)


class SpacePersistenceStore:
    """
    Usage:
        >>> store = SpacePersistenceStore()
        >>> params, tables, active_kind = store.load()
        >>> store.save(params, tables, active_kind)
    """

    def __init__(self, session_factory=None, *, create_schema: bool = True):
        self.options = OptionsCRUD(session_factory or get_session_local)
        if create_schema:
            self.ensure_schema()

    def ensure_schema(self) -> None:
        try:
            with self.options.get_session() as session:
                init_db(session.get_bind())
        except SQLAlchemyError as e:
            raise PersistenceError("Could not create settings table", detail=str(e)) from e

    # ─────────────────────────────────────────────────────────────────────────
    # Load
    # ─────────────────────────────────────────────────────────────────────────

    def _read(self, key: str, expected_type, default):
        try:
            value = self.options.get_json(key, default)
        except ValueError as e:
            logger.warning(f"Stored '{key}' is not valid JSON ({e}); using defaults")
            return default
        if value is not default and not isinstance(value, expected_type):
            logger.warning(
                f"Stored '{key}' has type {type(value).__name__}, "
                f"expected {expected_type.__name__}; using defaults"
            )
            return default
        return value

    def load_settings(self) -> dict:
        try:
            return self._read(OptionKeys.SETTINGS, dict, {})
        except SQLAlchemyError as e:
            logger.error(f"Failed to read settings: {e}")
            raise PersistenceError("Could not load settings", detail=str(e)) from e

    def load(self) -> Tuple[GenerationParameters, Dict[SizeKind, EntryTable], SizeKind]:
        """
        Returns:
            (parameters, {kind: table}, active kind)

        Raises:
            PersistenceError: the database itself cannot be read
        """
        settings = self.load_settings()

        params, corrections = GenerationParameters.from_settings(settings)
        for correction in corrections:
            logger.warning(f"Stored parameter corrected on load: {correction.message}")

        try:
            tables = {kind: self._load_table(kind, settings) for kind in SizeKind}
        except SQLAlchemyError as e:
            logger.error(f"Failed to read entry tables: {e}")
            raise PersistenceError("Could not load entry tables", detail=str(e)) from e

        active_kind = self._active_kind(settings)
        logger.info(
            f"Loaded settings: active={active_kind.value}, "
            + ", ".join(f"{kind.value}={len(table)}" for kind, table in tables.items())
        )
        return params, tables, active_kind

    def load_autosave_enabled(self, default: bool = True) -> bool:
        value = self.load_settings().get(SettingsFields.AUTOSAVE_ENABLED, default)
        return value if isinstance(value, bool) else default

    def _load_table(self, kind: SizeKind, settings: dict) -> EntryTable:
        config = get_kind_config(kind)
        records = self._read(config.option_key, list, None)

        anchor_id = self._anchor_id(settings.get(config.anchor_setting))
        prefix = self._prefix(kind, settings)

        if records is None:
            table = EntryTable.with_defaults(kind)
            if prefix is not None:
                table.set_prefix(prefix)
            return table

        table = EntryTable.from_records(kind, records, anchor_id=anchor_id)
        if prefix is not None:
            table.set_prefix(prefix)
        return table

    @staticmethod
    def _anchor_id(value):
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring stored anchor id {value!r}")
            return None

    @staticmethod
    def _prefix(kind: SizeKind, settings: dict):
        config = get_kind_config(kind)
        if not config.uses_prefix:
            return None
        prefix = settings.get(config.prefix_setting)
        if prefix is None:
            return None
        if any(marker in str(prefix) for marker in EntryDefaults.FORBIDDEN_PREFIX_MARKERS):
            logger.warning(
                f"Stored {config.display_name_singular.lower()} prefix {prefix!r} is invalid "
                f"({InvalidPrefixError().message}); using '{config.default_prefix}'"
            )
            return None
        return str(prefix)

    @staticmethod
    def _active_kind(settings: dict) -> SizeKind:
        value = settings.get(SettingsFields.ACTIVE_TAB, SizeKind.CLASS.value)
        try:
            return SizeKind.parse(value)
        except ValueError:
            logger.warning(f"Unknown active tab {value!r}; using '{SizeKind.CLASS.value}'")
            return SizeKind.CLASS

    # ─────────────────────────────────────────────────────────────────────────
    # Save
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def build_settings(params, tables, active_kind, *, autosave_enabled: bool = True) -> dict:
        settings = params.to_settings()
        for kind, table in tables.items():
            config = get_kind_config(kind)
            settings[config.anchor_setting] = table.effective_anchor_id()
            if config.uses_prefix:
                settings[config.prefix_setting] = table.prefix
        settings[SettingsFields.ACTIVE_TAB] = SizeKind.parse(active_kind).value
        settings[SettingsFields.AUTOSAVE_ENABLED] = bool(autosave_enabled)
        settings["appVersion"] = VERSION
        return settings

    def save(self, params, tables, active_kind, *, autosave_enabled: bool = True) -> OperationResult:
        values = {
            OptionKeys.SETTINGS: self.build_settings(
                params, tables, active_kind, autosave_enabled=autosave_enabled
            )
        }
        for kind, table in tables.items():
            values[get_kind_config(kind).option_key] = table.to_records()

        try:
            self.options.set_many(values)
        except SQLAlchemyError as e:
            logger.error(f"Failed to save settings: {e}")
            return OperationResult.failure(PersistenceError("Could not save settings", detail=str(e)))

        logger.info("Settings saved")
        return OperationResult.success(values)
