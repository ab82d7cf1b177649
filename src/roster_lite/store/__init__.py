"""Record store: the canonical roster, its filtered view, and the selection."""
from roster_lite.store.base import DuplicateRecordId, RecordStoreBase, SelectionPolicy
from roster_lite.store.ids import sequence_ids, uuid4_ids
from roster_lite.store.queries import SearchQuery
from roster_lite.store.record_store import RecordStore

__all__ = [
    "DuplicateRecordId",
    "RecordStore",
    "RecordStoreBase",
    "SearchQuery",
    "SelectionPolicy",
    "sequence_ids",
    "uuid4_ids",
]
