"""roster-lite: an in-memory student roster with search and CRUD.

    from roster_lite import RecordStore, StudentFields

    store = RecordStore(default_records())
    store.search("lee")
    created = store.add(StudentFields(first_name="Bo"))
"""
from roster_lite.concurrency.locked_store import LockedRecordStore, StoreSnapshot
from roster_lite.domain.student import StudentFields, StudentRecord
from roster_lite.seed import SeedDataError, default_records, load_seed_file
from roster_lite.store.base import DuplicateRecordId, SelectionPolicy
from roster_lite.store.record_store import RecordStore

__all__ = [
    "DuplicateRecordId",
    "LockedRecordStore",
    "RecordStore",
    "SeedDataError",
    "SelectionPolicy",
    "StoreSnapshot",
    "StudentFields",
    "StudentRecord",
    "default_records",
    "load_seed_file",
]
