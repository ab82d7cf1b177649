"""Thread-safe access to a shared RecordStore."""
from roster_lite.concurrency.locked_store import LockedRecordStore, StoreSnapshot

__all__ = [
    "LockedRecordStore",
    "StoreSnapshot",
]
