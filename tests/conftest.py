"""Shared fixtures: a small roster and deterministic id factories."""
from __future__ import annotations

import pytest

from roster_lite.domain.student import StudentRecord
from roster_lite.store.ids import sequence_ids
from roster_lite.store.record_store import RecordStore


def make_record(record_id: str, **fields) -> StudentRecord:
    """StudentRecord with only the given fields set."""
    return StudentRecord(record_id=record_id, **fields)


ROSTER = [
    make_record("1", first_name="Ann", last_name="Lee", college_name="X"),
    make_record("2", first_name="Bob", last_name="Stone", college_name="Riverside Tech"),
    make_record("3", first_name="Cara", last_name="Banner", college_name="Hillcrest"),
    make_record("4", first_name="Dev", last_name="Patel", college_name="riverside tech"),
]


@pytest.fixture
def roster() -> list[StudentRecord]:
    return list(ROSTER)


@pytest.fixture
def store(roster) -> RecordStore:
    """Four-student store issuing ids s1, s2, ..."""
    return RecordStore(roster, id_factory=sequence_ids("s"))


@pytest.fixture
def ann_store() -> RecordStore:
    """The one-record store from the roster scenarios."""
    return RecordStore(
        [make_record("1", first_name="Ann", last_name="Lee", college_name="X")],
        id_factory=sequence_ids("s"),
    )
