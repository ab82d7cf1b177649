"""Tests for RecordStore: search, selection, CRUD, and the view invariants."""
import random

import pytest

from roster_lite.domain.student import SEARCHABLE_FIELDS, StudentFields, StudentRecord
from roster_lite.store.base import DuplicateRecordId, SelectionPolicy
from roster_lite.store.ids import sequence_ids
from roster_lite.store.record_store import RecordStore

from tests.conftest import make_record


def assert_views_consistent(store: RecordStore) -> None:
    """filtered is exactly the ordered subsequence of all matching the term."""
    term = store.search_term.lower()
    expected = [
        r for r in store.all_records
        if not term or any(term in (getattr(r, f) or "").lower() for f in SEARCHABLE_FIELDS)
    ]
    assert list(store.filtered) == expected
    by_id = {r.record_id: r for r in store.all_records}
    for r in store.filtered:
        assert by_id[r.record_id] is r
    ids = [r.record_id for r in store.all_records]
    assert len(ids) == len(set(ids))


# ── construction ──

def test_seed_populates_both_views(store, roster):
    assert list(store.all_records) == roster
    assert list(store.filtered) == roster
    assert store.search_term == ""
    assert store.selected is None
    assert store.count() == 4


def test_empty_store():
    store = RecordStore()
    assert store.all_records == ()
    assert store.filtered == ()
    assert store.count() == 0


def test_duplicate_seed_ids_rejected():
    with pytest.raises(DuplicateRecordId):
        RecordStore([make_record("1"), make_record("1", first_name="Dup")])


def test_views_are_snapshots(store):
    before = store.all_records
    store.add(StudentFields(first_name="Eve"))
    assert len(before) == 4
    assert isinstance(store.filtered, tuple)


# ── search ──

def test_search_scenario(ann_store):
    ann_store.search("an")
    assert [r.record_id for r in ann_store.filtered] == ["1"]
    assert ann_store.filtered_count() == 1
    ann_store.search("zz")
    assert ann_store.filtered == ()
    assert ann_store.count() == 1


def test_search_is_case_insensitive_across_fields(store):
    store.search("RIVERSIDE")
    assert [r.record_id for r in store.filtered] == ["2", "4"]
    store.search("ban")
    assert [r.record_id for r in store.filtered] == ["3"]


def test_empty_search_restores_full_view(store):
    store.search("lee")
    store.search("")
    assert store.filtered == store.all_records


def test_search_tolerates_missing_fields():
    store = RecordStore([make_record("1"), make_record("2", last_name="Nadal")])
    store.search("nad")
    assert [r.record_id for r in store.filtered] == ["2"]


def test_search_leaves_selection_alone(store):
    store.select("1")
    store.search("zz")
    assert store.selected.record_id == "1"


# ── select / clear_selection ──

def test_select_known_id(store):
    store.select("3")
    assert store.selected is store.get("3")
    assert store.selected_id == "3"


def test_select_unknown_id_clears(store):
    store.select("3")
    store.select("nope")
    assert store.selected is None


def test_clear_selection_is_idempotent(store):
    store.select("2")
    store.clear_selection()
    store.clear_selection()
    assert store.selected is None


# ── add ──

def test_add_scenario(ann_store):
    created = ann_store.add(StudentFields(first_name="Bo"))
    assert created.record_id
    assert created.record_id != "1"
    assert ann_store.count() == 2
    assert ann_store.all_records[-1] is created


def test_add_keeps_only_supplied_fields(store):
    created = store.add(StudentFields(first_name="Bo", email="bo@example.com"))
    assert created == StudentRecord("s1", first_name="Bo", email="bo@example.com")


def test_add_respects_active_search(store):
    store.search("riverside")
    hidden = store.add(StudentFields(first_name="Zed", college_name="Hillcrest"))
    shown = store.add(StudentFields(first_name="Yan", college_name="Riverside Tech"))
    ids = [r.record_id for r in store.filtered]
    assert hidden.record_id not in ids
    assert ids[-1] == shown.record_id
    assert_views_consistent(store)


def test_add_uses_default_uuid_ids():
    store = RecordStore()
    a = store.add(StudentFields(first_name="A"))
    b = store.add(StudentFields(first_name="B"))
    assert a.record_id != b.record_id
    assert len(a.record_id) == 36


def test_add_retries_colliding_ids():
    ids = iter(["1", "1", "fresh"])
    store = RecordStore([make_record("1")], id_factory=lambda: next(ids))
    created = store.add(StudentFields(first_name="Bo"))
    assert created.record_id == "fresh"


def test_add_gives_up_on_a_stuck_id_factory():
    store = RecordStore([make_record("1")], id_factory=lambda: "1")
    with pytest.raises(DuplicateRecordId):
        store.add(StudentFields(first_name="Bo"))
    assert store.count() == 1


def test_ids_unique_across_many_adds():
    store = RecordStore()
    for i in range(500):
        store.add(StudentFields(first_name=f"n{i}"))
    ids = [r.record_id for r in store.all_records]
    assert len(set(ids)) == 500


def test_ids_not_reused_after_remove(store):
    first = store.add(StudentFields(first_name="A"))
    store.remove(first.record_id)
    second = store.add(StudentFields(first_name="B"))
    assert second.record_id != first.record_id


# ── edit ──

def test_edit_scenario(ann_store):
    ann_store.edit("1", StudentFields(first_name="Annie"))
    ann_store.select("1")
    assert ann_store.selected.first_name == "Annie"
    assert ann_store.selected.last_name is None


def test_edit_replaces_rather_than_merges(store):
    store.edit("2", StudentFields(first_name="Robert"))
    assert store.get("2") == StudentRecord("2", first_name="Robert")


def test_edit_keeps_position(store):
    store.edit("2", StudentFields(first_name="Robert"))
    assert [r.record_id for r in store.all_records] == ["1", "2", "3", "4"]


def test_edit_unknown_id_is_noop(store, roster):
    store.edit("missing", StudentFields(first_name="Ghost"))
    assert list(store.all_records) == roster
    assert store.get("missing") is None


def test_edit_updates_filtered_view(store):
    store.search("riverside")
    store.edit("2", StudentFields(first_name="Bob", college_name="Riverside Polytechnic"))
    assert store.filtered[0] is store.get("2")
    assert store.filtered[0].college_name == "Riverside Polytechnic"


def test_edit_can_move_record_out_of_filter(store):
    store.search("riverside")
    store.edit("2", StudentFields(first_name="Bob", college_name="Hillcrest"))
    assert [r.record_id for r in store.filtered] == ["4"]


def test_edit_can_move_record_into_filter(store):
    store.search("riverside")
    store.edit("1", StudentFields(first_name="Ann", college_name="Riverside Tech"))
    assert [r.record_id for r in store.filtered] == ["1", "2", "4"]


def test_selection_reads_edited_version(store):
    store.select("3")
    store.edit("3", StudentFields(first_name="Carla"))
    assert store.selected.first_name == "Carla"


# ── remove ──

def test_remove_drops_from_both_views(store):
    store.search("riverside")
    store.remove("2")
    assert store.get("2") is None
    assert [r.record_id for r in store.all_records] == ["1", "3", "4"]
    assert [r.record_id for r in store.filtered] == ["4"]


def test_remove_is_idempotent(store):
    store.remove("3")
    after_once = store.all_records
    store.remove("3")
    assert store.all_records == after_once


def test_remove_reindexes_later_records(store):
    store.remove("1")
    assert store.get("4").first_name == "Dev"
    store.edit("4", StudentFields(first_name="Devi"))
    assert store.all_records[-1].first_name == "Devi"


def test_remove_selected_record_with_retain_policy(store):
    store.select("3")
    store.remove("3")
    assert store.selected_id == "3"
    assert store.selected is None


# ── selection policy ──

def test_retain_policy_keeps_selection_across_crud(store):
    assert store.selection_policy is SelectionPolicy.RETAIN
    store.select("1")
    store.add(StudentFields(first_name="Eve"))
    store.edit("2", StudentFields(first_name="Robert"))
    store.remove("4")
    assert store.selected.record_id == "1"


@pytest.mark.parametrize("command", [
    lambda s: s.add(StudentFields(first_name="Eve")),
    lambda s: s.edit("2", StudentFields(first_name="Robert")),
    lambda s: s.remove("4"),
])
def test_clear_on_change_policy_clears_after_crud(roster, command):
    store = RecordStore(roster, selection_policy=SelectionPolicy.CLEAR_ON_CHANGE)
    store.select("1")
    command(store)
    assert store.selected is None


def test_clear_on_change_ignores_noops_and_search(roster):
    store = RecordStore(roster, selection_policy=SelectionPolicy.CLEAR_ON_CHANGE)
    store.select("1")
    store.edit("missing", StudentFields(first_name="Ghost"))
    store.remove("missing")
    store.search("zz")
    assert store.selected.record_id == "1"


# ── invariants under random command sequences ──

def test_views_stay_consistent_under_random_commands(store):
    rng = random.Random(42)
    terms = ["", "a", "riverside", "LEE", "zz", "b"]
    for _ in range(400):
        op = rng.choice(["search", "add", "edit", "remove", "select"])
        ids = [r.record_id for r in store.all_records]
        if op == "search":
            store.search(rng.choice(terms))
        elif op == "add":
            store.add(StudentFields(
                first_name=rng.choice(["Ann", "Bob", None]),
                college_name=rng.choice(["Riverside", "Hillcrest", None]),
            ))
        elif op == "edit" and ids:
            store.edit(rng.choice(ids), StudentFields(last_name=rng.choice(["Lee", "Bann"])))
        elif op == "remove" and ids:
            store.remove(rng.choice(ids))
        elif op == "select" and ids:
            store.select(rng.choice(ids))
        assert_views_consistent(store)


def test_factory_returning_a_removed_id_is_refused(store):
    ids = iter(["s1", "s1", "s2"])
    store = RecordStore(store.all_records, id_factory=lambda: next(ids))
    first = store.add(StudentFields(first_name="A"))
    store.remove(first.record_id)
    second = store.add(StudentFields(first_name="B"))
    assert second.record_id == "s2"


def test_factory_returning_a_removed_seed_id_is_refused(store):
    ids = iter(["1", "fresh"])
    store = RecordStore(store.all_records, id_factory=lambda: next(ids))
    store.remove("1")
    assert store.add(StudentFields(first_name="A")).record_id == "fresh"
