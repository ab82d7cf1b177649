"""Student entity and the partial-record input used to create/replace it.

StudentRecord is an immutable value: the store "edits" a student by
swapping in a new StudentRecord under the same id, so every view that
holds the record sees either the old version or the new one, never a
half-updated object.

Every descriptive field is optional. None means *absent*: an absent
field is omitted from to_dict() output and never defaulted.

Wire shape (seed files, CLI scripts) is the camelCase mapping used by
the roster front end:

    {"_id": "1", "firstName": "Ann", "lastName": "Lee", "collegeName": "X"}
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from roster_lite.domain.types import ContactNumber, RecordId

FIELD_NAMES: tuple[str, ...] = (
    "first_name",
    "middle_name",
    "last_name",
    "email",
    "contact_number",
    "gender",
    "college_name",
    "department",
    "hobbies",
    "dob",
)

SEARCHABLE_FIELDS: tuple[str, ...] = ("first_name", "last_name", "college_name")

_WIRE_NAMES: dict[str, str] = {
    "first_name": "firstName",
    "middle_name": "middleName",
    "last_name": "lastName",
    "email": "email",
    "contact_number": "contactNumber",
    "gender": "gender",
    "college_name": "collegeName",
    "department": "department",
    "hobbies": "hobbies",
    "dob": "dob",
}
_FROM_WIRE: dict[str, str] = {wire: attr for attr, wire in _WIRE_NAMES.items()}
_ID_KEYS = ("_id", "id")


def _wire_type_ok(attr: str, value: Any) -> bool:
    if isinstance(value, str):
        return True
    # bool is an int subclass but never a phone number
    return attr == "contact_number" and isinstance(value, int) and not isinstance(value, bool)


def _expected_type(attr: str) -> str:
    return "a string or integer" if attr == "contact_number" else "a string"


def _fields_from_wire(data: Mapping[str, Any]) -> dict[str, Any]:
    """Translate camelCase keys to attribute names, dropping null values.

    Raises ValueError on an unknown key so typos in seed files or scripts
    surface instead of silently vanishing, and on a value of the wrong
    type: every field is a string, contactNumber may also be an integer.
    """
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key in _ID_KEYS:
            continue
        attr = _FROM_WIRE.get(key)
        if attr is None:
            raise ValueError(f"Unknown student field: {key!r}")
        if value is None:
            continue
        if not _wire_type_ok(attr, value):
            raise ValueError(
                f"Student field {key!r} must be {_expected_type(attr)}, "
                f"got {type(value).__name__}"
            )
        kwargs[attr] = value
    return kwargs


@dataclass(frozen=True, slots=True)
class StudentFields:
    """Partial student payload for add/edit. Carries no id."""
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    contact_number: ContactNumber | None = None
    gender: str | None = None
    college_name: str | None = None
    department: str | None = None
    hobbies: str | None = None
    dob: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StudentFields:
        """Build from a camelCase mapping. Ids are rejected: the store assigns them."""
        for key in _ID_KEYS:
            if key in data:
                raise ValueError(
                    f"Student ids are assigned by the store, got {key!r} in payload"
                )
        return cls(**_fields_from_wire(data))

    def present(self) -> dict[str, Any]:
        """Only the fields that are set, keyed by attribute name."""
        return {
            name: getattr(self, name)
            for name in FIELD_NAMES
            if getattr(self, name) is not None
        }


@dataclass(frozen=True, slots=True)
class StudentRecord:
    """One student on the roster, identified by a store-assigned id."""
    record_id: RecordId
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    contact_number: ContactNumber | None = None
    gender: str | None = None
    college_name: str | None = None
    department: str | None = None
    hobbies: str | None = None
    dob: str | None = None

    @classmethod
    def from_fields(cls, record_id: RecordId, fields: StudentFields) -> StudentRecord:
        """Factory: id plus exactly the fields set on `fields`."""
        return cls(record_id=record_id, **fields.present())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StudentRecord:
        """Inverse of to_dict(). Accepts "_id" or "id" for the identity."""
        record_id = data.get("_id")
        if record_id is None:
            record_id = data.get("id")
        if record_id is None or record_id == "":
            raise ValueError("Student record is missing an id")
        return cls(record_id=str(record_id), **_fields_from_wire(data))

    def fields(self) -> StudentFields:
        """This record's field set, without the id."""
        return StudentFields(**{name: getattr(self, name) for name in FIELD_NAMES})

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"_id": self.record_id}
        for name in FIELD_NAMES:
            value = getattr(self, name)
            if value is not None:
                out[_WIRE_NAMES[name]] = value
        return out


def _capitalize(text: str | None) -> str:
    return text[0].upper() + text[1:] if text else ""


def display_name(record: StudentRecord) -> str:
    """Table-row name: "Lastname Firstname", each part capitalized.

    Missing parts are skipped, so a record with only a first name
    renders as that name alone.
    """
    parts = (_capitalize(record.last_name), _capitalize(record.first_name))
    return " ".join(p for p in parts if p)
