# tests/test_project_store.py
from __future__ import annotations

import pytest

from erabu.models.errors import EmptyTitle, NothingToPick
from erabu.services.project_store import ProjectStore


def titles(projects):
    return [p.title for p in projects]


# --- filter ------------------------------------------------------------------

def test_empty_filter_returns_everything_in_order(store):
    store.add("Zebra", "")
    assert titles(store.filter("")) == ["Build shed", "Read book", "Zebra"]


def test_filter_matches_title_or_tag_substring(store):
    assert titles(store.filter("diy")) == ["Build shed"]
    assert titles(store.filter("book")) == ["Read book"]
    assert titles(store.filter("out")) == ["Build shed"]   # partial tag
    assert titles(store.filter("e")) == ["Build shed", "Read book"]


def test_filter_is_case_sensitive(store):
    assert store.filter("build") == []
    assert titles(store.filter("Build")) == ["Build shed"]


def test_filter_does_not_mutate_and_is_repeatable(store):
    first = store.filter("diy")
    first.clear()
    assert titles(store.filter("diy")) == ["Build shed"]
    assert len(store) == 2


def test_filter_is_live(store):
    assert titles(store.filter("diy")) == ["Build shed"]
    store.add("Fix bike", "diy")
    assert titles(store.filter("diy")) == ["Build shed", "Fix bike"]


# --- add ---------------------------------------------------------------------

def test_add_trims_title_and_splits_tags(store):
    p = store.add("  Learn Rust  ", "code  diy")
    assert p.title == "Learn Rust"
    assert p.tags == ["code", "diy"]
    assert store.filter("")[-1] is p


def test_add_drops_empty_tag_fragments(store):
    p = store.add("Tabs", "\t a \n\n b   ")
    assert p.tags == ["a", "b"]
    assert store.add("No tags", "   ").tags == []


@pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
def test_add_rejects_blank_title(store, blank):
    before = store.to_records()
    with pytest.raises(EmptyTitle):
        store.add(blank, "diy")
    assert store.to_records() == before


def test_add_allows_duplicates_with_distinct_ids(store):
    a = store.add("Read book", "")
    assert a.id != store.filter("Read book")[0].id
    assert titles(store.filter("Read book")) == ["Read book", "Read book"]


def test_ids_increase(store):
    ids = [p.id for p in store]
    assert ids == sorted(ids)
    assert store.add("Next", "").id > ids[-1]


# --- delete ------------------------------------------------------------------

def test_delete_removes_every_exact_match():
    s = ProjectStore()
    s.add("dup", "")
    s.add("dup extra", "")
    s.add("dup", "x")
    assert s.delete("dup") == 2
    assert titles(s) == ["dup extra"]


def test_delete_missing_title_is_noop(store):
    assert store.delete("Nope") == 0
    assert store.delete("Read") == 0    # substring is not enough
    assert len(store) == 2


def test_delete_by_id_removes_one(store):
    dup = store.add("Read book", "again")
    assert store.delete_by_id(dup.id) is True
    assert titles(store) == ["Build shed", "Read book"]
    assert store.delete_by_id(dup.id) is False
    assert store.get(dup.id) is None
    assert store.get(1).title == "Build shed"


# --- pick --------------------------------------------------------------------

def test_pick_index_uses_modulo_over_filtered(store):
    assert store.pick_index("", 0).title == "Build shed"
    assert store.pick_index("", 3).title == "Read book"
    assert store.pick_index("leisure", 41).title == "Read book"


def test_pick_random_on_empty_view_reports_nothing(store, fixed_draws):
    draws = fixed_draws(7)
    with pytest.raises(NothingToPick):
        store.pick_random("no such thing", draws)
    assert draws.calls == 0
    with pytest.raises(NothingToPick):
        ProjectStore().pick_random("", draws)


def test_pick_random_stays_inside_filter(store, rng):
    store.add("Learn Rust", "code diy")
    for _ in range(50):
        assert "diy" in store.pick_random("diy", rng).tags


def test_pick_index_rejects_negative(store):
    with pytest.raises(ValueError):
        store.pick_index("", -1)


# --- records -----------------------------------------------------------------

def test_records_round_trip_keeps_order_and_tags():
    s = ProjectStore()
    s.append("spaced", ["an tag", "an other tag"])
    s.add("plain", "a b")
    copy = ProjectStore.from_records(s.to_records())
    assert copy.to_records() == [
        {"title": "spaced", "tags": ["an tag", "an other tag"]},
        {"title": "plain", "tags": ["a", "b"]},
    ]


def test_from_records_skips_blank_titles():
    s = ProjectStore.from_records([{"title": " ", "tags": []}, {"title": "ok"}])
    assert titles(s) == ["ok"]


# --- scenario ----------------------------------------------------------------

def test_walkthrough(store):
    assert titles(store.filter("diy")) == ["Build shed"]

    added = store.add("  Learn Rust  ", "code  diy")
    assert (added.title, added.tags) == ("Learn Rust", ["code", "diy"])
    assert titles(store.filter("diy")) == ["Build shed", "Learn Rust"]

    store.delete("Read book")
    assert titles(store) == ["Build shed", "Learn Rust"]


def test_from_records_splits_string_tags():
    s = ProjectStore.from_records([{"title": "str tags", "tags": "a  b"}])
    assert s.to_records() == [{"title": "str tags", "tags": ["a", "b"]}]


def test_store_starts_empty_and_ids_start_at_one():
    s = ProjectStore()
    assert len(s) == 0
    assert s.add("first", "").id == 1
