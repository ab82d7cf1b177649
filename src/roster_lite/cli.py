"""roster-lite CLI entry point.

Usage: uv run roster-lite [--seed FILE] [command]

Each invocation builds a fresh store from the seed roster; nothing is
written back. "apply" replays a JSON-lines command script against it.
"""
import argparse
import json
import logging
import sys

from roster_lite.commands import run_script
from roster_lite.domain.student import StudentRecord, display_name
from roster_lite.seed import SeedDataError, default_records, load_seed_file
from roster_lite.store.base import DuplicateRecordId, SelectionPolicy
from roster_lite.store.ids import sequence_ids
from roster_lite.store.record_store import RecordStore


def _add_list_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("list", help="Print the (optionally filtered) roster.")
    p.add_argument(
        "--search", default="",
        help="Filter by first name, last name, or college (case-insensitive).",
    )


def _add_show_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("show", help="Print one student as JSON.")
    p.add_argument("record_id", help="Student id")


def _add_apply_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "apply",
        help="Run a JSON-lines command script and print the resulting views.",
    )
    p.add_argument("script", type=argparse.FileType("r", encoding="utf-8"), help="Script file, or - for stdin")


def _build_store(args: argparse.Namespace) -> RecordStore:
    seed = load_seed_file(args.seed) if args.seed else default_records()
    policy = (
        SelectionPolicy.CLEAR_ON_CHANGE
        if args.clear_selection_on_change
        else SelectionPolicy.RETAIN
    )
    id_factory = sequence_ids(args.id_prefix) if args.id_prefix else None
    return RecordStore(seed, id_factory=id_factory, selection_policy=policy)


def format_table(records: list[StudentRecord] | tuple[StudentRecord, ...]) -> str:
    """Fixed-width id / name / college table."""
    rows = [("ID", "NAME", "COLLEGE")]
    rows += [(r.record_id, display_name(r), r.college_name or "") for r in records]
    widths = [max(len(row[i]) for row in rows) for i in range(2)]
    lines = [
        f"{rid:<{widths[0]}}  {name:<{widths[1]}}  {college}".rstrip()
        for rid, name, college in rows
    ]
    lines.append(f"({len(records)} students)")
    return "\n".join(lines)


def _run_list(store: RecordStore, args: argparse.Namespace) -> int:
    store.search(args.search)
    print(format_table(store.filtered))
    return 0


def _run_show(store: RecordStore, args: argparse.Namespace) -> int:
    record = store.get(args.record_id)
    if record is None:
        print(f"No student with id {args.record_id!r}", file=sys.stderr)
        return 1
    print(json.dumps(record.to_dict(), indent=2))
    return 0


def _run_apply(store: RecordStore, args: argparse.Namespace) -> int:
    with args.script as fh:
        created = run_script(store, fh)
    selected = store.selected
    print(json.dumps(
        {
            "searchTerm": store.search_term,
            "created": [r.record_id for r in created],
            "filtered": [r.to_dict() for r in store.filtered],
            "selected": selected.to_dict() if selected else None,
            "total": store.count(),
        },
        indent=2,
    ))
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="roster-lite",
        description="In-memory student roster -- search, select, add, edit, remove.",
    )
    parser.add_argument(
        "--seed", metavar="FILE",
        help="JSON seed roster (default: built-in sample roster)",
    )
    parser.add_argument(
        "--clear-selection-on-change", action="store_true",
        help="Clear the selection whenever a student is added, edited, or removed.",
    )
    parser.add_argument(
        "--id-prefix", metavar="PREFIX",
        help="Assign sequential ids PREFIX1, PREFIX2, ... instead of UUIDs.",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_list_parser(subparsers)
    _add_show_parser(subparsers)
    _add_apply_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    handlers = {"list": _run_list, "show": _run_show, "apply": _run_apply}
    try:
        store = _build_store(args)
        code = handlers[args.command](store, args)
    # ScriptError and UnicodeDecodeError are ValueErrors
    except (SeedDataError, ValueError, DuplicateRecordId, OSError) as exc:
        print(f"roster-lite: error: {exc}", file=sys.stderr)
        sys.exit(2)
    sys.exit(code)
