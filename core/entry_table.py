"""
Entry Table - Fluid Space Forge
===============================

Ordered, mutable collection of named size entries for one output kind.

Rules:
  1. ids are unique and never handed out twice (high-water mark)
  2. names are trimmed, non-blank, not a UI placeholder, unique per table
  3. order is meaningful: it decides each entry's distance from the anchor
  4. a failed operation leaves the table untouched
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from constants import EntryDefaults
from exceptions import (
    BlankNameError,
    DuplicateNameError,
    InvalidPrefixError,
    NotFoundError,
    PlaceholderNameError,
)
from core.kinds import SizeKind, get_kind_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SizeEntry:
    id: int
    name: str

    def renamed(self, name: str) -> "SizeEntry":
        return SizeEntry(self.id, name)


@dataclass(frozen=True)
class TableSnapshot:
    """Exact copy of a table's entries, order and anchor (Clear-All undo)."""

    entries: Tuple[SizeEntry, ...]
    anchor_id: Optional[int]
    last_id: int

    def __len__(self) -> int:
        return len(self.entries)


def default_entries() -> List[SizeEntry]:
    return [SizeEntry(i + 1, suffix) for i, suffix in enumerate(EntryDefaults.SUFFIXES)]


def nearest_anchor_after_removal(entries: List[SizeEntry], removed_index: int) -> Optional[int]:
    """
    Anchor reassignment rule used when the anchored entry is deleted.

    The entry that slid into the removed position takes over; when the
    anchor was the last entry the new last entry takes over; an empty
    table has no anchor.
    """
    if not entries:
        return None
    return entries[min(removed_index, len(entries) - 1)].id


class EntryTable:
    """
    One kind's size entries.

    Usage:
        >>> table = EntryTable.with_defaults(SizeKind.CLASS)
        >>> new_id = table.add("xxxl")
        >>> table.edit(new_id, "huge")
    """

    def __init__(
        self,
        kind,
        entries: Optional[Iterable[SizeEntry]] = None,
        *,
        anchor_id: Optional[int] = None,
        prefix: Optional[str] = None,
        last_id: Optional[int] = None,
    ):
        self.kind = SizeKind.parse(kind)
        self._config = get_kind_config(self.kind)
        self._entries: List[SizeEntry] = list(entries or [])
        self._anchor_id = anchor_id
        self._prefix = self._config.default_prefix if prefix is None else prefix
        self._last_id = max([last_id or 0, *self.ids])

        if anchor_id is not None and anchor_id not in self:
            logger.warning(
                f"[{self.kind.value}] anchor id={anchor_id} is not in the table; "
                f"bounds will use fallback values"
            )

    @classmethod
    def with_defaults(cls, kind) -> "EntryTable":
        return cls(kind, default_entries(), anchor_id=EntryDefaults.ANCHOR_ID)

    # ─────────────────────────────────────────────────────────────────────────
    # Read access
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def entries(self) -> Tuple[SizeEntry, ...]:
        return tuple(self._entries)

    @property
    def ids(self) -> List[int]:
        return [entry.id for entry in self._entries]

    @property
    def names(self) -> List[str]:
        return [entry.name for entry in self._entries]

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def last_id(self) -> int:
        return self._last_id

    @property
    def anchor_id(self) -> Optional[int]:
        """The explicitly selected anchor (may be None or stale)."""
        return self._anchor_id

    def effective_anchor_id(self) -> Optional[int]:
        """
        Anchor used by the scale engine.

        An explicit anchor is returned as-is, even if stale, so the engine can
        report it. When unset: id 3 if present, else the 3rd entry (or the
        last one in shorter tables).
        """
        if self._anchor_id is not None:
            return self._anchor_id
        if not self._entries:
            return None
        if EntryDefaults.ANCHOR_ID in self:
            return EntryDefaults.ANCHOR_ID
        position = min(EntryDefaults.ANCHOR_POSITION, len(self._entries) - 1)
        return self._entries[position].id

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SizeEntry]:
        return iter(tuple(self._entries))

    def __contains__(self, entry_id) -> bool:
        return any(entry.id == entry_id for entry in self._entries)

    def __repr__(self):
        return f"<EntryTable(kind={self.kind.value!r}, names={self.names!r}, anchor={self._anchor_id!r})>"

    def find_index(self, entry_id) -> int:
        """Position of an entry, or -1."""
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return index
        return -1

    def index_of(self, entry_id) -> int:
        index = self.find_index(entry_id)
        if index == -1:
            raise NotFoundError(self._config.display_name_singular, entry_id)
        return index

    def get(self, entry_id) -> SizeEntry:
        return self._entries[self.index_of(entry_id)]

    # ─────────────────────────────────────────────────────────────────────────
    # Validation
    # ─────────────────────────────────────────────────────────────────────────

    def validate_name(self, name, exclude_id: Optional[int] = None) -> str:
        """
        Return the trimmed name or raise.

        Raises:
            BlankNameError: empty / whitespace-only
            PlaceholderNameError: one of the UI input hints
            DuplicateNameError: another entry already uses the name
        """
        cleaned = "" if name is None else str(name).strip()
        if not cleaned:
            raise BlankNameError()
        if cleaned in EntryDefaults.PLACEHOLDER_NAMES:
            raise PlaceholderNameError(cleaned)

        for entry in self._entries:
            if entry.id != exclude_id and entry.name == cleaned:
                raise DuplicateNameError(cleaned)
        return cleaned

    # ─────────────────────────────────────────────────────────────────────────
    # Mutations
    # ─────────────────────────────────────────────────────────────────────────

    def add(self, name) -> int:
        cleaned = self.validate_name(name)
        new_id = self._last_id + 1
        self._entries.append(SizeEntry(new_id, cleaned))
        self._last_id = new_id
        logger.info(f"[{self.kind.value}] added entry id={new_id} name={cleaned!r}")
        return new_id

    def edit(self, entry_id, name) -> SizeEntry:
        index = self.index_of(entry_id)
        cleaned = self.validate_name(name, exclude_id=entry_id)
        current = self._entries[index]
        if current.name != cleaned:
            self._entries[index] = current.renamed(cleaned)
            logger.info(
                f"[{self.kind.value}] renamed entry id={entry_id} "
                f"{current.name!r} -> {cleaned!r}"
            )
        return self._entries[index]

    def delete(self, entry_id) -> SizeEntry:
        index = self.index_of(entry_id)
        removed = self._entries.pop(index)

        if self._anchor_id == entry_id:
            self._anchor_id = nearest_anchor_after_removal(self._entries, index)
            logger.warning(
                f"[{self.kind.value}] anchor entry id={entry_id} deleted; "
                f"anchor reassigned to id={self._anchor_id}"
            )

        logger.info(f"[{self.kind.value}] deleted entry id={entry_id} name={removed.name!r}")
        return removed

    def apply_order(self, ordered_ids: Iterable[int]) -> None:
        """Replace the order with a permutation of the current ids."""
        ordered_ids = list(ordered_ids)
        if sorted(ordered_ids) != sorted(self.ids):
            raise ValueError(f"Order {ordered_ids!r} is not a permutation of {self.ids!r}")
        by_id = {entry.id: entry for entry in self._entries}
        self._entries = [by_id[entry_id] for entry_id in ordered_ids]

    def set_anchor(self, entry_id) -> None:
        self.index_of(entry_id)
        self._anchor_id = entry_id

    def set_prefix(self, prefix) -> str:
        """
        Set the naming prefix; blank resets to the kind default.

        Raises:
            InvalidPrefixError: the prefix contains "." or "--"
        """
        cleaned = "" if prefix is None else str(prefix).strip()
        if any(marker in cleaned for marker in EntryDefaults.FORBIDDEN_PREFIX_MARKERS):
            raise InvalidPrefixError(cleaned)
        self._prefix = cleaned or self._config.default_prefix
        return self._prefix

    def snapshot(self) -> TableSnapshot:
        return TableSnapshot(tuple(self._entries), self._anchor_id, self._last_id)

    def clear_all(self) -> TableSnapshot:
        """Empty the table, returning everything needed to undo it."""
        removed = self.snapshot()
        self._entries = []
        self._anchor_id = None
        logger.info(f"[{self.kind.value}] cleared {len(removed)} entries")
        return removed

    def restore_snapshot(self, snapshot: TableSnapshot) -> None:
        self._entries = list(snapshot.entries)
        self._anchor_id = snapshot.anchor_id
        self._last_id = max(self._last_id, snapshot.last_id)

    def restore_defaults(self) -> None:
        """Replace everything with the canonical seed (ids 1-6, anchor md)."""
        self._entries = default_entries()
        self._anchor_id = EntryDefaults.ANCHOR_ID
        self._prefix = self._config.default_prefix
        self._last_id = len(self._entries)
        logger.info(f"[{self.kind.value}] restored default entries")

    def suggest_name(self) -> str:
        """Next free 'custom-N' name for the add dialog."""
        count = sum(1 for name in self.names if EntryDefaults.CUSTOM_NAME_PREFIX in name)
        candidate = f"{EntryDefaults.CUSTOM_NAME_PREFIX}{count + 1}"
        while candidate in self.names:
            count += 1
            candidate = f"{EntryDefaults.CUSTOM_NAME_PREFIX}{count + 1}"
        return candidate

    def copy(self) -> "EntryTable":
        return EntryTable(
            self.kind,
            self._entries,
            anchor_id=self._anchor_id,
            prefix=self._prefix,
            last_id=self._last_id,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Records (persistence format)
    # ─────────────────────────────────────────────────────────────────────────

    def to_records(self) -> List[dict]:
        prop = self._config.property_name
        return [{"id": entry.id, prop: entry.name} for entry in self._entries]

    @classmethod
    def from_records(cls, kind, records, **kwargs) -> "EntryTable":
        """
        Build a table from persisted records, skipping malformed rows.

        Duplicate ids or names keep the first occurrence.
        """
        config = get_kind_config(kind)
        entries: List[SizeEntry] = []
        seen_ids, seen_names = set(), set()

        for record in records or []:
            try:
                entry_id = int(record["id"])
                name = str(record[config.property_name]).strip()
            except (KeyError, TypeError, ValueError):
                logger.warning(f"Skipping malformed {config.display_name_singular} record: {record!r}")
                continue
            if not name or entry_id in seen_ids or name in seen_names:
                logger.warning(f"Skipping duplicate or blank record: {record!r}")
                continue
            seen_ids.add(entry_id)
            seen_names.add(name)
            entries.append(SizeEntry(entry_id, name))

        return cls(kind, entries, **kwargs)
