"""Domain model for roster-lite.

Re-exports the public types for convenient access:
    from roster_lite.domain import StudentRecord, StudentFields
"""
from roster_lite.domain.student import (
    FIELD_NAMES,
    SEARCHABLE_FIELDS,
    StudentFields,
    StudentRecord,
    display_name,
)
from roster_lite.domain.types import ContactNumber, IdFactory, RecordId

__all__ = [
    "FIELD_NAMES",
    "SEARCHABLE_FIELDS",
    "StudentFields",
    "StudentRecord",
    "display_name",
    "ContactNumber",
    "IdFactory",
    "RecordId",
]
