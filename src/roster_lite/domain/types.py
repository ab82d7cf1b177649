"""Shared type aliases used across the domain."""
from __future__ import annotations

from typing import Callable, TypeAlias

RecordId: TypeAlias = str
IdFactory: TypeAlias = Callable[[], RecordId]
ContactNumber: TypeAlias = str | int  # kept exactly as supplied
