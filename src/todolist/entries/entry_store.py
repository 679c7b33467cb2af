# src/todolist/entries/entry_store.py

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, overload

from ..errors import InvalidArgumentError
from .entry_models import Entry, EntryUpdater, NewEntry

logger = logging.getLogger(__name__)

PartialEntry = NewEntry | Mapping[str, Any]


def _as_new_entry(partial: PartialEntry) -> NewEntry:
    if isinstance(partial, NewEntry):
        return partial
    if isinstance(partial, Entry):
        raise InvalidArgumentError("add_entry expects an entry without id; use update_entry instead")
    if isinstance(partial, Mapping):
        return NewEntry.from_mapping(partial)
    raise InvalidArgumentError(f"expected NewEntry or mapping, got {type(partial).__name__}")


def _as_entry(full: Entry | Mapping[str, Any]) -> Entry:
    if isinstance(full, Entry):
        return full
    if isinstance(full, Mapping):
        return Entry.from_mapping(full)
    raise InvalidArgumentError(f"expected Entry or mapping, got {type(full).__name__}")


@dataclass(frozen=True, slots=True)
class EntryStore:
    """
    In-memory collection of dated entries with value semantics.

    Every write (add/update/delete) returns a new EntryStore built from a copy
    of the entries; the receiver is never mutated, so two references can never
    observe divergent states.

    Invariants (checked when constructed directly):
    - entries[k].id == k
    - next_id > every existing id
    - iteration over entries is in ascending id order

    Stores are unhashable: the entries mapping is not hashable.
    """

    next_id: int = 1
    entries: Mapping[int, Entry] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        items = sorted(self.entries.items())
        for key, entry in items:
            if not isinstance(entry, Entry) or entry.id != key:
                raise InvalidArgumentError(f"entry stored under id={key} does not match: {entry!r}")
            if key >= self.next_id:
                raise InvalidArgumentError(f"next_id={self.next_id} must exceed existing id={key}")
        object.__setattr__(self, "entries", MappingProxyType(dict(items)))

    @classmethod
    def _from_checked(cls, next_id: int, entries: dict[int, Entry]) -> EntryStore:
        # Caller guarantees the invariants and id order; skips the O(n log n) check.
        store = object.__new__(cls)
        object.__setattr__(store, "next_id", next_id)
        object.__setattr__(store, "entries", MappingProxyType(entries))
        return store

    # ---- construction ----

    @classmethod
    def new(cls, initial: Iterable[PartialEntry] = ()) -> EntryStore:
        """Empty store, or one built by adding `initial` in order (ids 1..N)."""
        entries: dict[int, Entry] = {}
        for entry_id, partial in enumerate(initial, start=1):
            entries[entry_id] = _as_new_entry(partial).with_id(entry_id)
        return cls._from_checked(len(entries) + 1, entries)

    # ---- writes ----

    def add_entry(self, partial: PartialEntry) -> EntryStore:
        new_entry = _as_new_entry(partial)
        entry = new_entry.with_id(self.next_id)

        entries = dict(self.entries)
        entries[entry.id] = entry
        logger.debug("Entry added id=%s date=%s", entry.id, entry.date)
        return self._from_checked(self.next_id + 1, entries)

    @overload
    def update_entry(self, entry: Entry | Mapping[str, Any], /) -> EntryStore: ...

    @overload
    def update_entry(self, entry_id: int, updater: EntryUpdater, /) -> EntryStore: ...

    def update_entry(
        self,
        target: int | Entry | Mapping[str, Any],
        updater: EntryUpdater | None = None,
        /,
    ) -> EntryStore:
        """
        Replace a stored entry.

        update_entry(entry)              -> store `entry` under entry.id
        update_entry(entry_id, updater)  -> store updater(old) under entry_id

        A missing id is a no-op (the same store value is returned).
        The new entry must keep the id it is stored under.
        """
        if updater is None:
            full = _as_entry(target)
            return self.update_entry(full.id, lambda _old: full)

        if isinstance(target, Entry | Mapping):
            raise InvalidArgumentError("update_entry with an updater expects an entry id")

        old = self.entries.get(target)
        if old is None:
            logger.debug("Entry update skipped: id=%s not found", target)
            return self

        updated = updater(old)
        if not isinstance(updated, Entry):
            raise InvalidArgumentError(f"updater must return an Entry, got {type(updated).__name__}")
        if updated.id != target:
            raise InvalidArgumentError(f"updater changed entry id from {target} to {updated.id}")

        entries = dict(self.entries)
        entries[target] = updated
        logger.debug("Entry updated id=%s", target)
        return self._from_checked(self.next_id, entries)

    def delete_entry(self, entry_id: int) -> EntryStore:
        if entry_id not in self.entries:
            logger.debug("Entry delete skipped: id=%s not found", entry_id)
            return self

        entries = dict(self.entries)
        del entries[entry_id]
        logger.debug("Entry deleted id=%s", entry_id)
        return self._from_checked(self.next_id, entries)

    # ---- reads ----

    def entries_on(self, date: dt.date) -> list[Entry]:
        """All entries dated `date`, in ascending id order."""
        return [e for e in self.entries.values() if e.date == date]

    def get_entry(self, entry_id: int) -> Entry | None:
        return self.entries.get(entry_id)

    def all_entries(self) -> list[Entry]:
        return list(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self.entries

    def __str__(self) -> str:
        body = ", ".join(f"{e.id}: {e.date.isoformat()} {e.title!r}" for e in self.entries.values())
        return f"EntryStore(next_id={self.next_id}, entries={{{body}}})"
