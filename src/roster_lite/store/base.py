"""Abstract base for record stores.

RecordStore and LockedRecordStore both implement this interface, so the
presentation layer can be handed either one without caring whether
calls are serialized.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto

from roster_lite.domain.student import StudentFields, StudentRecord
from roster_lite.domain.types import RecordId


class DuplicateRecordId(Exception):
    """Raised when two records would share an id."""


class SelectionPolicy(Enum):
    """What happens to the selection when the canonical collection changes.

    RETAIN: the store never clears the selection on add/edit/remove;
        the caller clears it once the command is acknowledged.
    CLEAR_ON_CHANGE: any add, and any edit/remove that hits an existing
        record, clears the selection.

    Under both policies search() and select() leave the selection alone
    apart from what select() itself sets.
    """
    RETAIN = auto()
    CLEAR_ON_CHANGE = auto()


class RecordStoreBase(ABC):
    """Commands and read surface shared by every store implementation."""

    # --- commands ---

    @abstractmethod
    def search(self, term: str) -> None:
        """Set the search term and recompute the filtered view."""
        ...

    @abstractmethod
    def select(self, record_id: RecordId) -> None:
        """Point the selection at a record, or at nothing if the id is unknown."""
        ...

    @abstractmethod
    def clear_selection(self) -> None:
        ...

    @abstractmethod
    def add(self, fields: StudentFields) -> StudentRecord:
        """Create a record with a fresh id and return it."""
        ...

    @abstractmethod
    def edit(self, record_id: RecordId, fields: StudentFields) -> None:
        """Replace a record's field set wholesale. No-op if the id is unknown."""
        ...

    @abstractmethod
    def remove(self, record_id: RecordId) -> None:
        """Drop a record. No-op if the id is unknown."""
        ...

    # --- reads ---

    @property
    @abstractmethod
    def all_records(self) -> tuple[StudentRecord, ...]:
        ...

    @property
    @abstractmethod
    def filtered(self) -> tuple[StudentRecord, ...]:
        ...

    @property
    @abstractmethod
    def selected(self) -> StudentRecord | None:
        ...

    @property
    @abstractmethod
    def selected_id(self) -> RecordId | None:
        """Id the selection points at, even if that record is gone."""
        ...

    @property
    @abstractmethod
    def search_term(self) -> str:
        ...

    @property
    @abstractmethod
    def selection_policy(self) -> SelectionPolicy:
        ...

    @abstractmethod
    def get(self, record_id: RecordId) -> StudentRecord | None:
        """Look up one record by id, or None."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Number of records in the canonical collection."""
        ...

    @abstractmethod
    def filtered_count(self) -> int:
        """Number of records in the filtered view."""
        ...
