"""Selection set: the screenings the user has picked. Unordered."""

from __future__ import annotations

from collections.abc import Iterable

from festplanner.runtime.catalog_types import Catalog, VisibleEntry
from festplanner.shared.types import ScreeningId


def toggle_selection(selection: Iterable[ScreeningId], screening_id: ScreeningId) -> frozenset[ScreeningId]:
    """Symmetric difference with ``{screening_id}``."""
    return frozenset(selection) ^ {screening_id}


def selected_screenings(selection: Iterable[ScreeningId], catalog: Catalog) -> list[VisibleEntry]:
    """Selected screenings that still exist, in catalog order."""
    chosen = frozenset(selection)
    return [
        VisibleEntry(film=film, screening=screening)
        for film in catalog
        for screening in film.screenings
        if screening.id in chosen
    ]


__all__ = ["selected_screenings", "toggle_selection"]
