"""Search predicate for the roster.

SearchQuery wraps the free-text term typed into the search box. A record
matches when the term is empty, or when it appears (case-insensitively)
inside the first name, last name, or college name.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from roster_lite.domain.student import SEARCHABLE_FIELDS, StudentRecord


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """Case-insensitive substring match over the searchable fields.

    Missing fields count as "", so they never match a non-empty term
    and never raise.
    """
    term: str = ""
    _needle: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_needle", self.term.lower())

    @property
    def is_empty(self) -> bool:
        return not self.term

    def matches(self, record: StudentRecord) -> bool:
        if not self._needle:
            return True
        return any(
            self._needle in (getattr(record, name) or "").lower()
            for name in SEARCHABLE_FIELDS
        )

    def apply(self, records: Iterable[StudentRecord]) -> list[StudentRecord]:
        """Matching records, in their original order."""
        return [r for r in records if self.matches(r)]
