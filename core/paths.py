"""
core/paths.py - Fluid Space Forge
==================================
Single source of truth for filesystem locations.

  - get_user_data_dir() → writable per-user data
    - Windows: %APPDATA%/FluidSpaceForge/
    - Linux/Mac: ~/.local/share/FluidSpaceForge/

Usage:
    from core.paths import get_user_data_dir, database_path

    db_file = database_path()
    log_dir = logs_path()
"""

import os
import sys
from pathlib import Path

from version import APP_NAME


def get_user_data_dir() -> Path:
    """
    Writable per-user data directory, created on first use.

    FLUID_SPACE_DATA_DIR overrides the platform location.
    """
    override = os.getenv("FLUID_SPACE_DATA_DIR")
    if override:
        user_dir = Path(override)
    else:
        if sys.platform == "win32":
            appdata = os.getenv("APPDATA") or str(Path.home() / "AppData" / "Roaming")
            base = Path(appdata)
        else:
            base = Path.home() / ".local" / "share"
        user_dir = base / APP_NAME

    user_dir.mkdir(parents=True, exist_ok=True)
    return user_dir


def logs_path(filename: str = "") -> Path:
    """Log directory inside the user data dir."""
    p = get_user_data_dir() / "logs"
    p.mkdir(parents=True, exist_ok=True)
    return p / filename if filename else p


def database_path(filename: str = "fluid_space.db") -> Path:
    """Default SQLite file for the settings store."""
    return get_user_data_dir() / filename