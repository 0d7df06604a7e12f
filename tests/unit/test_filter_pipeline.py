"""
Filter pipeline tests: visible screenings and the film explorer filter.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from builders import make_catalog, make_film, make_screening
from festplanner.runtime.filter_pipeline import (
    FilterParams,
    filter_films,
    programmes,
    select_visible,
)

BASE = datetime(2025, 9, 10, 9, 0)


def _screening(screening_id: str, hours: int = 0, **flags):
    start = BASE + timedelta(hours=hours)
    return make_screening(screening_id, start, start + timedelta(minutes=100), **flags)


def _catalog():
    return make_catalog(
        make_film("f1", "Alpha", [
            _screening("s1", 0),
            _screening("s2", 2, industry=True),
            _screening("s3", 4, cancelled=True),
        ], description="A city symphony", programmes=("Galas",)),
        make_film("f2", "Beta", [
            _screening("s4", 1, press_and_industry=True),
            _screening("s5", 3),
        ], description="Quiet drama", programmes=("Wavelengths",)),
        make_film("f3", "Gamma", [], programmes=("Galas", "Docs")),
        make_film("f4", "Delta", [_screening("s6", 5, cancelled=True, industry=True)]),
    )


def _ids(entries):
    return [e.screening.id for e in entries]


def test_default_params_drop_only_cancelled():
    assert _ids(select_visible(_catalog(), FilterParams())) == ["s1", "s2", "s4", "s5"]


def test_result_follows_catalog_then_screening_order():
    visible = select_visible(_catalog(), FilterParams())
    assert [e.film.id for e in visible] == ["f1", "f1", "f2", "f2"]


def test_cancelled_never_visible_under_any_flags():
    catalog = _catalog()
    everything = frozenset({"s1", "s2", "s3", "s4", "s5", "s6"})
    for favorites_only in (False, True):
        for hide_industry in (False, True):
            for selected_only in (False, True):
                params = FilterParams(
                    favorites_only=favorites_only,
                    hide_industry=hide_industry,
                    selected_only=selected_only,
                    ranked_set=("f1", "f2", "f4"),
                    selection_set=everything,
                )
                visible = select_visible(catalog, params)
                assert not any(e.screening.cancelled for e in visible)


def test_hide_industry_drops_industry_and_press_and_industry():
    visible = select_visible(_catalog(), FilterParams(hide_industry=True))
    assert _ids(visible) == ["s1", "s5"]
    assert not any(e.screening.industry or e.screening.press_and_industry for e in visible)


def test_favorites_only_skips_films_outside_ranked_set():
    params = FilterParams(favorites_only=True, ranked_set=("f2",))
    assert _ids(select_visible(_catalog(), params)) == ["s4", "s5"]


def test_ranked_set_ignored_when_favorites_only_off():
    params = FilterParams(ranked_set=("f2",))
    assert _ids(select_visible(_catalog(), params)) == ["s1", "s2", "s4", "s5"]


def test_selected_only_keeps_selected_screenings():
    params = FilterParams(selected_only=True, selection_set=frozenset({"s2", "s5", "s3"}))
    assert _ids(select_visible(_catalog(), params)) == ["s2", "s5"]


def test_flags_compose_as_conjunction():
    params = FilterParams(
        favorites_only=True,
        hide_industry=True,
        selected_only=True,
        ranked_set=("f1",),
        selection_set=frozenset({"s1", "s2", "s5"}),
    )
    assert _ids(select_visible(_catalog(), params)) == ["s1"]


def test_film_without_qualifying_screenings_contributes_nothing():
    params = FilterParams(favorites_only=True, ranked_set=("f3", "f4"))
    assert select_visible(_catalog(), params) == []


def test_select_visible_is_idempotent():
    catalog = _catalog()
    params = FilterParams(hide_industry=True, selection_set=frozenset({"s1"}))
    assert select_visible(catalog, params) == select_visible(catalog, params)


def test_stale_ids_in_parameters_are_harmless():
    params = FilterParams(
        favorites_only=True,
        selected_only=True,
        ranked_set=("gone", "f1"),
        selection_set=frozenset({"gone-screening", "s1"}),
    )
    assert _ids(select_visible(_catalog(), params)) == ["s1"]


def test_filter_films_text_search_is_case_insensitive_on_title_and_description():
    catalog = _catalog()
    assert [f.id for f in filter_films(catalog, search="ALPHA")] == ["f1"]
    assert [f.id for f in filter_films(catalog, search="drama")] == ["f2"]
    assert [f.id for f in filter_films(catalog)] == ["f1", "f2", "f3", "f4"]


def test_filter_films_programme_and_favorites():
    catalog = _catalog()
    assert [f.id for f in filter_films(catalog, programme="Galas")] == ["f1", "f3"]
    assert [f.id for f in filter_films(catalog, programme="All")] == ["f1", "f2", "f3", "f4"]
    favorites = filter_films(catalog, favorites_only=True, ranked_set=("f3", "f1"))
    assert [f.id for f in favorites] == ["f1", "f3"]


def test_programmes_lists_all_then_first_seen_order():
    assert programmes(_catalog()) == ["All", "Galas", "Wavelengths", "Docs"]
