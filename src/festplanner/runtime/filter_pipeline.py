"""
Filter pipeline: which screenings (and films) are visible for the current
facet flags.

Pure functions of the catalog and the parameters. Nothing here reads
storage or keeps state between calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from festplanner.runtime.catalog_types import Catalog, Film, Screening, VisibleEntry
from festplanner.shared.types import ALL_PROGRAMMES, FilmId, ScreeningId


@dataclass(frozen=True)
class FilterParams:
    """Facet flags plus the two user collections they consult."""

    favorites_only: bool = False
    hide_industry: bool = False
    selected_only: bool = False
    ranked_set: tuple[FilmId, ...] = ()
    selection_set: frozenset[ScreeningId] = frozenset()


def screening_passes(screening: Screening, params: FilterParams) -> bool:
    """True iff the screening survives every screening-level predicate."""
    if screening.cancelled:
        return False
    if params.selected_only and screening.id not in params.selection_set:
        return False
    if params.hide_industry and (screening.industry or screening.press_and_industry):
        return False
    return True


def select_visible(catalog: Catalog | Iterable[Film], params: FilterParams) -> list[VisibleEntry]:
    """
    Visible (film, screening) pairs in catalog order.

    A film outside the ranked set is skipped entirely when
    ``favorites_only`` is on; a film with no qualifying screening simply
    contributes nothing.
    """
    favorites = set(params.ranked_set)
    visible: list[VisibleEntry] = []
    for film in catalog:
        if params.favorites_only and film.id not in favorites:
            continue
        for screening in film.screenings:
            if screening_passes(screening, params):
                visible.append(VisibleEntry(film=film, screening=screening))
    return visible


def matches_text(film: Film, search: str) -> bool:
    """Case-insensitive substring match on title or description."""
    needle = search.lower()
    return needle in film.title.lower() or needle in film.description.lower()


def filter_films(
    catalog: Catalog | Iterable[Film],
    *,
    search: str = "",
    programme: str = ALL_PROGRAMMES,
    favorites_only: bool = False,
    ranked_set: Iterable[FilmId] = (),
) -> list[Film]:
    """Film explorer filter: text search, programme facet and favorites-only."""
    favorites = set(ranked_set)
    return [
        film
        for film in catalog
        if matches_text(film, search)
        and (programme == ALL_PROGRAMMES or programme in film.programmes)
        and (not favorites_only or film.id in favorites)
    ]


def programmes(catalog: Catalog | Iterable[Film]) -> list[str]:
    """Programme facet values: ``"All"`` then each tag in first-seen order."""
    seen: dict[str, None] = {}
    for film in catalog:
        for tag in film.programmes:
            seen.setdefault(tag, None)
    return [ALL_PROGRAMMES, *seen]


__all__ = [
    "FilterParams",
    "filter_films",
    "matches_text",
    "programmes",
    "screening_passes",
    "select_visible",
]
