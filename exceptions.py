"""
exceptions.py
=============
Fluid Space Forge - Hierarchical Exception System

All application exceptions inherit from SpaceForgeError so callers
can catch the full hierarchy with a single except clause when needed.

Structure
---------
SpaceForgeError
├── ValidationError
│   ├── BlankNameError
│   │   └── PlaceholderNameError
│   ├── DuplicateNameError
│   ├── InvalidPrefixError
│   └── InvalidParameterRange
├── NotFoundError
│   └── ReferenceNotFound
├── UndoUnavailableError
├── PersistenceError
└── ConfigurationError
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class SpaceForgeError(Exception):
    """Base exception for all Fluid Space Forge errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "NAME_DUPLICATE"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Validation ──────────────────────────────────────────────────────────────

class ValidationError(SpaceForgeError):
    """Raised when user-provided data fails validation."""

    def __init__(self, message: str = "", *, field: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class BlankNameError(ValidationError):
    """Raised when an entry name is empty or whitespace-only."""

    def __init__(self, message: str = "Suffix cannot be empty.", **kwargs):
        kwargs.setdefault("code", "NAME_BLANK")
        super().__init__(message, field="name", **kwargs)


class PlaceholderNameError(BlankNameError):
    """Raised when an entry name is one of the UI input hints."""

    def __init__(self, name: str = "", **kwargs):
        kwargs.setdefault("code", "NAME_PLACEHOLDER")
        super().__init__(
            "Please enter a real name, not the placeholder text.", **kwargs
        )
        self.name = name


class DuplicateNameError(ValidationError):
    """Raised when an entry name already exists in the same table."""

    def __init__(self, name: str = "", **kwargs):
        kwargs.setdefault("code", "NAME_DUPLICATE")
        message = (
            f"A suffix with the value {name!r} already exists."
            if name
            else "A suffix with that value already exists."
        )
        super().__init__(message, field="name", **kwargs)
        self.name = name


class InvalidPrefixError(ValidationError):
    """Raised when a naming prefix carries its own CSS marker."""

    def __init__(self, prefix: str = "", **kwargs):
        kwargs.setdefault("code", "PREFIX_INVALID")
        super().__init__(
            "Markers (. or --) are added automatically", field="prefix", **kwargs
        )
        self.prefix = prefix


class InvalidParameterRange(ValidationError):
    """
    Raised (or reported as a notice) when a generation parameter falls
    outside its valid range. ``corrected`` holds the boundary value that
    replaced the rejected input, when one was applied.
    """

    def __init__(self, field: str, value=None, corrected=None, reason: str = "", **kwargs):
        kwargs.setdefault("code", "PARAM_RANGE")
        msg = reason or f"Invalid value for '{field}': {value!r}"
        super().__init__(msg, field=field, **kwargs)
        self.value = value
        self.corrected = corrected
        self.reason = reason


# ─── Lookup ──────────────────────────────────────────────────────────────────

class NotFoundError(SpaceForgeError):
    """Raised when an operation references an entry that is not in its table."""

    def __init__(self, entity: str = "", id_value=None, **kwargs):
        if entity and id_value is not None:
            message = f"{entity} with id={id_value} not found"
        elif entity:
            message = f"{entity} not found"
        else:
            message = kwargs.pop("message", "Entry not found")
        kwargs.setdefault("code", "NOT_FOUND")
        super().__init__(message, **kwargs)
        self.entity = entity
        self.id_value = id_value


class ReferenceNotFound(NotFoundError):
    """Raised by the scale engine when the anchor or target entry is missing."""

    def __init__(self, anchor_id=None, entry_id=None, **kwargs):
        missing = "anchor" if anchor_id is not None else "entry"
        kwargs.setdefault("code", "REFERENCE_NOT_FOUND")
        super().__init__(
            message=f"Scale {missing} not found in table "
                    f"(anchor={anchor_id!r}, entry={entry_id!r})",
            **kwargs,
        )
        self.anchor_id = anchor_id
        self.entry_id = entry_id


# ─── Undo ────────────────────────────────────────────────────────────────────

class UndoUnavailableError(SpaceForgeError):
    """Raised when no Clear-All undo buffer is pending (never held, expired, or dismissed)."""

    def __init__(self, message: str = "Nothing to undo", **kwargs):
        kwargs.setdefault("code", "UNDO_UNAVAILABLE")
        super().__init__(message, **kwargs)


# ─── Persistence ─────────────────────────────────────────────────────────────

class PersistenceError(SpaceForgeError):
    """Raised when the settings store cannot load or save."""


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(SpaceForgeError):
    """Raised when the application configuration is invalid or incomplete."""
