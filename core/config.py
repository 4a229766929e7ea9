"""
Configuration Manager with Environment Variables Support

Usage:
    from core.config import config

    db_url = get_database_url()
    window = config.get_float("UNDO_WINDOW_SECONDS", 10.0)
"""
import os
import json
import logging
from core.singleton import SingletonMeta
from typing import Any, Dict, Optional
from pathlib import Path
from dotenv import load_dotenv

from constants import Timing
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Config(metaclass=SingletonMeta):
    """
    Unified configuration manager:
    - Environment variables (.env)
    - JSON configuration file
    - Default values
    """

    def __init__(self, config_file: Optional[Path] = None, env_file: Optional[Path] = None):
        self._env_loaded = False
        self._config_cache: Dict[str, Any] = {}
        self._config_file_path = Path(config_file) if config_file else Path("config/settings.json")
        self._env_file_path = Path(env_file) if env_file else Path(".env")

        self._load_env()
        self._load_json_config()

    def _load_env(self):
        """Load environment variables from .env file"""
        if self._env_file_path.exists():
            load_dotenv(self._env_file_path)
            self._env_loaded = True
            logger.info(f"Environment variables loaded from {self._env_file_path}")
        else:
            logger.debug(".env file not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from JSON file"""
        if not self._config_file_path.exists():
            self._config_cache = {}
            return
        try:
            with open(self._config_file_path, "r", encoding="utf-8") as f:
                self._config_cache = json.load(f)
            logger.info(f"Configuration loaded from {self._config_file_path}")
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load config file: {e}")
            self._config_cache = {}

    def get(self, key: str, default: Any = None, required: bool = False) -> Any:
        """
        Get configuration value.

        Priority order:
        1. Environment variable
        2. JSON config file
        3. Default value

        Raises:
            ConfigurationError: If required=True and key not found
        """
        env_value = os.getenv(key)
        if env_value is not None:
            return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        if default is not None:
            return default

        if required:
            raise ConfigurationError(
                f"Required configuration '{key}' not found. "
                f"Set it in .env or {self._config_file_path}"
            )
        return None

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() in ("true", "1", "yes", "on")
        return bool(value)

    def get_int(self, key: str, default: int = 0) -> int:
        value = self.get(key, default)
        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid int value for '{key}': {value}, using default")
            return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        value = self.get(key, default)
        try:
            return float(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid float value for '{key}': {value}, using default")
            return default

    def validate(self, schema: Dict[str, Dict[str, Any]]):
        """
        Validate configuration against schema.

        Example schema:
        {
            "UNDO_WINDOW_SECONDS": {"type": float, "min": 0},
        }
        """
        errors = []

        for key, rules in schema.items():
            if rules.get("required", False) and self.get(key) is None:
                errors.append(f"Required config '{key}' is missing")
                continue

            raw = self.get(key)
            if raw is None or "type" not in rules:
                continue

            cast = rules["type"]
            if cast is bool:
                continue
            try:
                value = cast(raw)
            except (TypeError, ValueError):
                errors.append(f"Config '{key}' must be {cast.__name__}, got {raw!r}")
                continue

            if "min" in rules and value < rules["min"]:
                errors.append(f"Config '{key}' must be >= {rules['min']}, got {value}")

        if errors:
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(f"- {e}" for e in errors)
            )


# Singleton instance
config = Config.get_instance()


def get_database_url() -> str:
    """DATABASE_URL, or a SQLite file in the user data dir."""
    db_url = config.get("DATABASE_URL")
    if db_url:
        return db_url
    from core.paths import database_path
    return f"sqlite:///{database_path()}"


def get_log_level() -> str:
    return str(config.get("LOG_LEVEL", default="INFO")).upper()


def get_undo_window() -> float:
    return config.get_float("UNDO_WINDOW_SECONDS", Timing.UNDO_WINDOW_SECONDS)


def is_autosave_enabled() -> bool:
    return config.get_bool("AUTOSAVE_ENABLED", default=True)


def get_autosave_interval() -> int:
    return config.get_int("AUTOSAVE_INTERVAL_SECONDS", Timing.AUTOSAVE_INTERVAL_SECONDS)


CONFIG_SCHEMA = {
    "DATABASE_URL": {"type": str, "required": False},
    "LOG_LEVEL": {"type": str, "required": False},
    "UNDO_WINDOW_SECONDS": {"type": float, "min": 0},
    "AUTOSAVE_ENABLED": {"type": bool},
    "AUTOSAVE_INTERVAL_SECONDS": {"type": int, "min": 1},
}


def validate_config():
    """Validate configuration on startup"""
    try:
        config.validate(CONFIG_SCHEMA)
        logger.info("Configuration validated successfully")
    except ConfigurationError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise
