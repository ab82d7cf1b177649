"""RecordStore: the roster's canonical collection plus its derived views.

State:
    _records    list[StudentRecord], creation order, ids unique
    _index      dict[id, position in _records]
    _filtered   list[StudentRecord], recomputed from _records + _query
    _query      SearchQuery for the current search term
    _selected_id  id the selection points at, or None
    _issued_ids   every id seeded or handed out, so removed ids stay taken

`filtered` is never patched in place. Every command that touches
_records or the term rebuilds it with a full O(n) scan, which keeps it
an order-preserving subsequence of `all_records` holding the very same
objects.

The selection is stored as an id and resolved on read, so reading
`selected` after an edit returns the new version of the record. If the
selected record is removed, `selected` reads as None while the id is
kept (ids are never reused, so it cannot come back to life).

Single-threaded: wrap in LockedRecordStore to share across threads.
"""
from __future__ import annotations

import logging
from typing import Iterable

from roster_lite.domain.student import StudentFields, StudentRecord
from roster_lite.domain.types import IdFactory, RecordId
from roster_lite.store.base import DuplicateRecordId, RecordStoreBase, SelectionPolicy
from roster_lite.store.ids import uuid4_ids
from roster_lite.store.queries import SearchQuery

log = logging.getLogger(__name__)

# Attempts to draw a fresh id before giving up on a misbehaving factory.
MAX_ID_ATTEMPTS = 8


class RecordStore(RecordStoreBase):
    """In-memory roster with search, selection and CRUD.

    Args:
        seed: initial records; their ids must be unique.
        id_factory: zero-arg callable producing new ids (default UUID4).
        selection_policy: see SelectionPolicy (default RETAIN).
    """

    __slots__ = (
        "_records", "_index", "_filtered", "_query",
        "_selected_id", "_id_factory", "_selection_policy", "_issued_ids",
    )

    def __init__(
        self,
        seed: Iterable[StudentRecord] = (),
        *,
        id_factory: IdFactory | None = None,
        selection_policy: SelectionPolicy = SelectionPolicy.RETAIN,
    ) -> None:
        self._records: list[StudentRecord] = []
        self._index: dict[RecordId, int] = {}
        # every id ever seeded or issued, live or removed
        self._issued_ids: set[RecordId] = set()
        for record in seed:
            if record.record_id in self._index:
                raise DuplicateRecordId(
                    f"Seed contains id {record.record_id!r} more than once"
                )
            self._index[record.record_id] = len(self._records)
            self._issued_ids.add(record.record_id)
            self._records.append(record)
        self._query = SearchQuery()
        self._filtered: list[StudentRecord] = list(self._records)
        self._selected_id: RecordId | None = None
        self._id_factory = id_factory or uuid4_ids()
        self._selection_policy = selection_policy
        log.debug("RecordStore seeded with %d records", len(self._records))

    # --- reads ---

    @property
    def all_records(self) -> tuple[StudentRecord, ...]:
        return tuple(self._records)

    @property
    def filtered(self) -> tuple[StudentRecord, ...]:
        return tuple(self._filtered)

    @property
    def selected(self) -> StudentRecord | None:
        if self._selected_id is None:
            return None
        return self.get(self._selected_id)

    @property
    def selected_id(self) -> RecordId | None:
        return self._selected_id

    @property
    def search_term(self) -> str:
        return self._query.term

    @property
    def selection_policy(self) -> SelectionPolicy:
        return self._selection_policy

    def get(self, record_id: RecordId) -> StudentRecord | None:
        pos = self._index.get(record_id)
        return None if pos is None else self._records[pos]

    def count(self) -> int:
        return len(self._records)

    def filtered_count(self) -> int:
        return len(self._filtered)

    # --- commands ---

    def search(self, term: str) -> None:
        self._query = SearchQuery(term or "")
        self._refilter()
        log.debug("search %r matched %d of %d", term, len(self._filtered), len(self._records))

    def select(self, record_id: RecordId) -> None:
        self._selected_id = record_id if record_id in self._index else None

    def clear_selection(self) -> None:
        self._selected_id = None

    def add(self, fields: StudentFields) -> StudentRecord:
        record = StudentRecord.from_fields(self._next_id(), fields)
        self._index[record.record_id] = len(self._records)
        self._records.append(record)
        self._collection_changed()
        log.debug("added record %s", record.record_id)
        return record

    def edit(self, record_id: RecordId, fields: StudentFields) -> None:
        pos = self._index.get(record_id)
        if pos is None:
            log.debug("edit: no record %s", record_id)
            return
        # Replace, not merge: fields left unset on `fields` are dropped.
        self._records[pos] = StudentRecord.from_fields(record_id, fields)
        self._collection_changed()
        log.debug("edited record %s", record_id)

    def remove(self, record_id: RecordId) -> None:
        pos = self._index.pop(record_id, None)
        if pos is None:
            log.debug("remove: no record %s", record_id)
            return
        del self._records[pos]
        for i in range(pos, len(self._records)):
            self._index[self._records[i].record_id] = i
        self._collection_changed()
        log.debug("removed record %s", record_id)

    # --- internals ---

    def _next_id(self) -> RecordId:
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._id_factory()
            if candidate and candidate not in self._issued_ids:
                self._issued_ids.add(candidate)
                return candidate
            log.warning("id factory produced unusable id %r, retrying", candidate)
        raise DuplicateRecordId(
            f"Id factory failed to produce a fresh id in {MAX_ID_ATTEMPTS} attempts"
        )

    def _refilter(self) -> None:
        self._filtered = self._query.apply(self._records)

    def _collection_changed(self) -> None:
        self._refilter()
        if self._selection_policy is SelectionPolicy.CLEAR_ON_CHANGE:
            self._selected_id = None
