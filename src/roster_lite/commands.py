"""Command scripts: drive a store from JSON-lines input.

One JSON object per line, dispatched on its "op" key:

    {"op": "search", "term": "lee"}
    {"op": "select", "id": "1"}
    {"op": "clear_selection"}
    {"op": "add", "student": {"firstName": "Bo"}}
    {"op": "edit", "id": "1", "student": {"firstName": "Annie"}}
    {"op": "remove", "id": "1"}

Blank lines and lines starting with "#" are skipped. This is the same
command vocabulary the roster UI issues, so a script replays a UI
session against a seeded store.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from roster_lite.domain.student import StudentFields, StudentRecord
from roster_lite.store.base import RecordStoreBase

log = logging.getLogger(__name__)


class ScriptError(ValueError):
    """Raised when a script line is not a well-formed command."""


def _require_str(command: dict[str, Any], key: str) -> str:
    value = command.get(key)
    if not isinstance(value, str):
        raise ScriptError(f"{command.get('op')!r} needs a string {key!r}")
    return value


def _student(command: dict[str, Any]) -> StudentFields:
    payload = command.get("student", {})
    if not isinstance(payload, dict):
        raise ScriptError(f"{command.get('op')!r} needs a 'student' object")
    return StudentFields.from_dict(payload)


def apply_command(store: RecordStoreBase, command: dict[str, Any]) -> StudentRecord | None:
    """Run one command against the store. Returns the record for "add"."""
    op = command.get("op")
    if op == "search":
        store.search(command.get("term") or "")
    elif op == "select":
        store.select(_require_str(command, "id"))
    elif op == "clear_selection":
        store.clear_selection()
    elif op == "add":
        return store.add(_student(command))
    elif op == "edit":
        store.edit(_require_str(command, "id"), _student(command))
    elif op == "remove":
        store.remove(_require_str(command, "id"))
    else:
        raise ScriptError(f"Unknown op: {op!r}")
    return None


def run_script(store: RecordStoreBase, lines: Iterable[str]) -> list[StudentRecord]:
    """Apply every command in `lines`. Returns the records created by "add".

    Errors are re-raised as ScriptError prefixed with the 1-based line number.
    """
    created: list[StudentRecord] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        try:
            command = json.loads(line)
            if not isinstance(command, dict):
                raise ScriptError("expected a JSON object")
            record = apply_command(store, command)
        except (json.JSONDecodeError, ValueError) as exc:
            raise ScriptError(f"line {lineno}: {exc}") from exc
        if record is not None:
            created.append(record)
    log.debug("script applied, %d records created", len(created))
    return created
