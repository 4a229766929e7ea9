# core/__init__.py
"""
Fluid Space Forge Core Module
=============================

Domain state and the event boundary of the configurator.

Public API:
    - Kinds: SizeKind, KIND_CONFIG
    - Tables: EntryTable, SizeEntry
    - Results: OperationResult
    - Utilities: SingletonMeta, LoggingConfig

GenerationParameters, GenerationController and AutosaveManager import the
spacing package and Qt; import them from their modules.
"""

from .kinds import SizeKind, KIND_CONFIG, get_kind_config
from .entry_table import EntryTable, SizeEntry, TableSnapshot
from .results import OperationResult
from .singleton import SingletonMeta
from .logging_config import LoggingConfig

__all__ = [
    "SizeKind",
    "KIND_CONFIG",
    "get_kind_config",
    "EntryTable",
    "SizeEntry",
    "TableSnapshot",
    "OperationResult",
    "SingletonMeta",
    "LoggingConfig",
]

__version__ = "1.0.3"
__author__ = "Fluid Space Forge Team"
