"""Seed data provider: the initial roster handed to RecordStore.

Seed files are JSON arrays of camelCase student objects, each carrying
its own "_id" (or "id"):

    [
      {"_id": "1", "firstName": "Ann", "lastName": "Lee", "collegeName": "X"},
      ...
    ]

Anything else (bad JSON, a non-array document, entries without ids,
unknown keys) raises SeedDataError pointing at the offending entry.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from roster_lite.domain.student import StudentRecord

log = logging.getLogger(__name__)


class SeedDataError(Exception):
    """Raised when a seed file does not describe a valid roster."""


DEFAULT_SEED: tuple[dict[str, Any], ...] = (
    {
        "_id": "1",
        "firstName": "Aarav",
        "middleName": "Kumar",
        "lastName": "Sharma",
        "email": "aarav.sharma@example.edu",
        "contactNumber": "9876543210",
        "gender": "male",
        "collegeName": "Riverside Institute of Technology",
        "department": "Computer Engineering",
        "hobbies": "Chess",
        "dob": "2003-04-12",
    },
    {
        "_id": "2",
        "firstName": "Meera",
        "middleName": "Anil",
        "lastName": "Iyer",
        "email": "meera.iyer@example.edu",
        "contactNumber": "9123456780",
        "gender": "female",
        "collegeName": "Hillcrest College of Arts",
        "department": "Fine Arts",
        "hobbies": "Painting",
        "dob": "2002-11-03",
    },
    {
        "_id": "3",
        "firstName": "Daniel",
        "middleName": "James",
        "lastName": "Okafor",
        "email": "daniel.okafor@example.edu",
        "contactNumber": "9012345678",
        "gender": "male",
        "collegeName": "Riverside Institute of Technology",
        "department": "Mechanical Engineering",
        "hobbies": "Football",
        "dob": "2001-07-22",
    },
    {
        "_id": "4",
        "firstName": "Sofia",
        "middleName": "Lucia",
        "lastName": "Marin",
        "email": "sofia.marin@example.edu",
        "contactNumber": "9988776655",
        "gender": "female",
        "collegeName": "Lakeside Business School",
        "department": "Finance",
        "hobbies": "Reading",
        "dob": "2004-01-30",
    },
    {
        "_id": "5",
        "firstName": "Kenji",
        "middleName": "Hiro",
        "lastName": "Tanaka",
        "email": "kenji.tanaka@example.edu",
        "contactNumber": "9090909090",
        "gender": "male",
        "collegeName": "Hillcrest College of Arts",
        "department": "Music",
        "hobbies": "Guitar",
        "dob": "2003-09-15",
    },
)


def default_records() -> list[StudentRecord]:
    """The built-in roster as StudentRecord objects."""
    return [StudentRecord.from_dict(entry) for entry in DEFAULT_SEED]


def parse_seed(document: Any, source: str = "<seed>") -> list[StudentRecord]:
    """Validate a decoded JSON document and build its records."""
    if not isinstance(document, list):
        raise SeedDataError(
            f"{source}: expected a JSON array of students, got {type(document).__name__}"
        )
    records: list[StudentRecord] = []
    for i, entry in enumerate(document):
        if not isinstance(entry, dict):
            raise SeedDataError(f"{source}[{i}]: expected an object, got {type(entry).__name__}")
        try:
            records.append(StudentRecord.from_dict(entry))
        except ValueError as exc:
            raise SeedDataError(f"{source}[{i}]: {exc}") from exc
    return records


def load_seed_file(path: str | Path) -> list[StudentRecord]:
    """Read a seed roster from a JSON file."""
    path = Path(path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise SeedDataError(f"{path}: not valid UTF-8 (byte {exc.start})") from exc
    except json.JSONDecodeError as exc:
        raise SeedDataError(f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    records = parse_seed(document, source=str(path))
    log.info("Loaded %d seed records from %s", len(records), path)
    return records
