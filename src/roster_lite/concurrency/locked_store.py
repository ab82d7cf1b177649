"""Coarse-grained lock wrapper around RecordStore.

One threading.Lock around every command and every read. A command
updates `all`, `filtered` and the selection together before releasing,
so no reader can see a filtered view computed against an older
collection than the one it reads next to it.

Reads already return tuple snapshots, but two separate reads can still
straddle a write. Use snapshot() when a caller needs several views that
agree with each other (e.g. render rows and the edit form in one pass).
"""
from __future__ import annotations

import threading
from dataclasses import dataclass

from roster_lite.domain.student import StudentFields, StudentRecord
from roster_lite.domain.types import RecordId
from roster_lite.store.base import RecordStoreBase, SelectionPolicy
from roster_lite.store.record_store import RecordStore


@dataclass(frozen=True, slots=True)
class StoreSnapshot:
    """All readable store state, captured under one lock acquisition."""
    all_records: tuple[StudentRecord, ...]
    filtered: tuple[StudentRecord, ...]
    selected: StudentRecord | None
    search_term: str


class LockedRecordStore(RecordStoreBase):
    """RecordStore wrapped in a single lock.

    Every method acquires the same lock, so commands are applied one at
    a time in the order threads acquire it.
    """

    def __init__(self, store: RecordStore | None = None) -> None:
        self._store = store or RecordStore()
        self._lock = threading.Lock()

    # --- commands ---

    def search(self, term: str) -> None:
        with self._lock:
            self._store.search(term)

    def select(self, record_id: RecordId) -> None:
        with self._lock:
            self._store.select(record_id)

    def clear_selection(self) -> None:
        with self._lock:
            self._store.clear_selection()

    def add(self, fields: StudentFields) -> StudentRecord:
        with self._lock:
            return self._store.add(fields)

    def edit(self, record_id: RecordId, fields: StudentFields) -> None:
        with self._lock:
            self._store.edit(record_id, fields)

    def remove(self, record_id: RecordId) -> None:
        with self._lock:
            self._store.remove(record_id)

    # --- reads ---

    @property
    def all_records(self) -> tuple[StudentRecord, ...]:
        with self._lock:
            return self._store.all_records

    @property
    def filtered(self) -> tuple[StudentRecord, ...]:
        with self._lock:
            return self._store.filtered

    @property
    def selected(self) -> StudentRecord | None:
        with self._lock:
            return self._store.selected

    @property
    def selected_id(self) -> RecordId | None:
        with self._lock:
            return self._store.selected_id

    @property
    def search_term(self) -> str:
        with self._lock:
            return self._store.search_term

    @property
    def selection_policy(self) -> SelectionPolicy:
        return self._store.selection_policy

    def get(self, record_id: RecordId) -> StudentRecord | None:
        with self._lock:
            return self._store.get(record_id)

    def count(self) -> int:
        with self._lock:
            return self._store.count()

    def filtered_count(self) -> int:
        with self._lock:
            return self._store.filtered_count()

    def snapshot(self) -> StoreSnapshot:
        with self._lock:
            return StoreSnapshot(
                all_records=self._store.all_records,
                filtered=self._store.filtered,
                selected=self._store.selected,
                search_term=self._store.search_term,
            )

    @property
    def store(self) -> RecordStore:
        """The wrapped store. Not thread-safe to use directly."""
        return self._store
