"""
Ranked set and reorder tests.
"""

from __future__ import annotations

import pytest

from builders import make_catalog, make_film
from festplanner.runtime.ranked_set import (
    array_move,
    normalize,
    rank_label,
    ranked_films,
    reorder,
    toggle_favorite,
)


def test_toggle_appends_when_absent():
    assert toggle_favorite(("a", "b"), "c") == ("a", "b", "c")


def test_toggle_removes_when_present():
    assert toggle_favorite(("a", "b", "c"), "b") == ("a", "c")


@pytest.mark.parametrize("ranked", [(), ("a",), ("a", "b", "c")])
@pytest.mark.parametrize("film_id", ["a", "z"])
def test_toggle_is_self_inverse_as_a_set(ranked, film_id):
    twice = toggle_favorite(toggle_favorite(ranked, film_id), film_id)
    assert set(twice) == set(ranked)
    assert len(twice) == len(ranked)


def test_toggle_twice_on_existing_id_sends_it_to_the_bottom():
    assert toggle_favorite(toggle_favorite(("a", "b", "c"), "a"), "a") == ("b", "c", "a")


def test_toggle_twice_restores_set_for_new_id():
    ranked = ("x", "y")
    assert toggle_favorite(toggle_favorite(ranked, "z"), "z") == ranked


def test_reorder_same_id_is_noop():
    assert reorder(("x", "y", "z"), "y", "y") == ("x", "y", "z")


def test_reorder_moves_down():
    assert reorder(("x", "y", "z"), "x", "z") == ("y", "z", "x")


def test_reorder_moves_up():
    assert reorder(("x", "y", "z"), "z", "x") == ("z", "x", "y")


def test_reorder_to_neighbour_swaps():
    assert reorder(("a", "b", "c", "d"), "b", "c") == ("a", "c", "b", "d")
    assert reorder(("a", "b", "c", "d"), "c", "b") == ("a", "c", "b", "d")


def test_reorder_keeps_relative_order_of_others():
    ranked = ("a", "b", "c", "d", "e")
    moved = reorder(ranked, "b", "d")
    assert moved == ("a", "c", "d", "b", "e")
    assert [i for i in moved if i != "b"] == [i for i in ranked if i != "b"]


@pytest.mark.parametrize("source,dest", [("missing", "x"), ("x", "missing"), ("m1", "m2")])
def test_reorder_with_missing_id_is_noop(source, dest):
    assert reorder(("x", "y", "z"), source, dest) == ("x", "y", "z")


def test_array_move_matches_remove_then_insert():
    assert array_move(["a", "b", "c", "d"], 0, 2) == ("b", "c", "a", "d")
    assert array_move(["a", "b", "c", "d"], 3, 1) == ("a", "d", "b", "c")


def test_normalize_drops_duplicates_keeping_first():
    assert normalize(["b", "a", "b", "c", "a"]) == ("b", "a", "c")


def test_ranked_films_skips_stale_ids_without_touching_the_set():
    catalog = make_catalog(make_film("f1"), make_film("f2"), make_film("f3"))
    ranked = ("f3", "gone", "f1")
    assert [f.id for f in ranked_films(ranked, catalog)] == ["f3", "f1"]
    assert ranked == ("f3", "gone", "f1")


def test_rank_labels():
    assert rank_label(0) == "Top Pick"
    assert rank_label(1) == "Choice 2"
    assert rank_label(9) == "Choice 10"
