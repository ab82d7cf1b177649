"""Id factories for new records.

The store takes any zero-argument callable returning a string. Ids must
never repeat for the lifetime of a store: records come and go in any
order, so a counter that restarts or reuses freed slots is not allowed.
"""
from __future__ import annotations

import itertools
import uuid

from roster_lite.domain.types import IdFactory


def uuid4_ids() -> IdFactory:
    """Random UUID4 tokens. The default for RecordStore."""
    return lambda: str(uuid.uuid4())


def sequence_ids(prefix: str = "s", start: int = 1) -> IdFactory:
    """Deterministic "s1", "s2", ... tokens for tests and scripted runs.

    Strictly increasing, so removing a record never frees its id for reuse.
    """
    counter = itertools.count(start)
    return lambda: f"{prefix}{next(counter)}"
