"""
tests/test_config.py
====================
Config priority (env → JSON → default) and typed getters.
"""
import json

import pytest

from core import config as config_module
from core.config import Config, CONFIG_SCHEMA
from core.singleton import SingletonMeta
from exceptions import ConfigurationError


@pytest.fixture
def fresh_config(tmp_path):
    """A Config built from a temp JSON file; the shared instance is restored afterwards."""
    original = SingletonMeta._instances.pop(Config, None)
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"UNDO_WINDOW_SECONDS": 4, "LOG_LEVEL": "debug"}), encoding="utf-8")

    cfg = Config(config_file=settings, env_file=tmp_path / ".env")
    yield cfg

    Config.clear_instance()
    if original is not None:
        SingletonMeta._instances[Config] = original


class TestConfig:

    def test_singleton(self, fresh_config):
        assert Config() is fresh_config
        assert Config.get_instance() is fresh_config

    def test_json_value(self, fresh_config, monkeypatch):
        monkeypatch.delenv("UNDO_WINDOW_SECONDS", raising=False)
        assert fresh_config.get_float("UNDO_WINDOW_SECONDS", 10.0) == 4.0

    def test_env_beats_json(self, fresh_config, monkeypatch):
        monkeypatch.setenv("UNDO_WINDOW_SECONDS", "2.5")
        assert fresh_config.get_float("UNDO_WINDOW_SECONDS", 10.0) == 2.5

    def test_default(self, fresh_config, monkeypatch):
        monkeypatch.delenv("AUTOSAVE_INTERVAL_SECONDS", raising=False)
        assert fresh_config.get_int("AUTOSAVE_INTERVAL_SECONDS", 30) == 30

    def test_required_missing(self, fresh_config, monkeypatch):
        monkeypatch.delenv("NOT_A_KEY", raising=False)
        with pytest.raises(ConfigurationError):
            fresh_config.get("NOT_A_KEY", required=True)

    @pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("off", False), ("no", False)])
    def test_get_bool(self, fresh_config, monkeypatch, raw, expected):
        monkeypatch.setenv("AUTOSAVE_ENABLED", raw)
        assert fresh_config.get_bool("AUTOSAVE_ENABLED", True) is expected

    def test_invalid_int_uses_default(self, fresh_config, monkeypatch):
        monkeypatch.setenv("AUTOSAVE_INTERVAL_SECONDS", "soon")
        assert fresh_config.get_int("AUTOSAVE_INTERVAL_SECONDS", 30) == 30

    def test_env_file_loaded(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "info")
        monkeypatch.delenv("LOG_LEVEL")
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=warning\n", encoding="utf-8")
        original = SingletonMeta._instances.pop(Config, None)
        try:
            cfg = Config(config_file=tmp_path / "missing.json", env_file=env_file)
            assert cfg.get("LOG_LEVEL") == "warning"
        finally:
            Config.clear_instance()
            if original is not None:
                SingletonMeta._instances[Config] = original


class TestValidation:

    def test_valid(self, fresh_config, monkeypatch):
        for key in CONFIG_SCHEMA:
            monkeypatch.delenv(key, raising=False)
        fresh_config.validate(CONFIG_SCHEMA)

    def test_negative_window_rejected(self, fresh_config, monkeypatch):
        monkeypatch.setenv("UNDO_WINDOW_SECONDS", "-1")
        with pytest.raises(ConfigurationError):
            fresh_config.validate(CONFIG_SCHEMA)

    def test_non_numeric_interval_rejected(self, fresh_config, monkeypatch):
        monkeypatch.setenv("AUTOSAVE_INTERVAL_SECONDS", "often")
        with pytest.raises(ConfigurationError):
            fresh_config.validate(CONFIG_SCHEMA)


class TestHelpers:

    def test_database_url_from_env(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite:///custom.db")
        assert config_module.get_database_url() == "sqlite:///custom.db"

    def test_database_url_default(self, monkeypatch, tmp_path):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("FLUID_SPACE_DATA_DIR", str(tmp_path))
        assert config_module.get_database_url() == f"sqlite:///{tmp_path / 'fluid_space.db'}"

    def test_undo_window_env(self, monkeypatch):
        monkeypatch.setenv("UNDO_WINDOW_SECONDS", "3")
        assert config_module.get_undo_window() == 3.0

    def test_autosave_defaults(self, monkeypatch):
        monkeypatch.delenv("AUTOSAVE_ENABLED", raising=False)
        monkeypatch.delenv("AUTOSAVE_INTERVAL_SECONDS", raising=False)
        assert config_module.is_autosave_enabled() is True
        assert config_module.get_autosave_interval() == 30
