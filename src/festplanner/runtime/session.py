"""
PlannerSession: the state container for one running planner.

Owns the ranked favorites, the selected screenings and the facet flags.
Both collections are read once from the injected key/value store when the
session starts and written through in full on every change. The in-memory
value stays authoritative for the rest of the session even when a write
fails.

All commands are synchronous and run to completion; a session is owned by
a single caller and is not shared across threads.
"""

from __future__ import annotations

from datetime import date

from festplanner.infra.logging import get_logger
from festplanner.runtime import ranked_set, selection_set
from festplanner.runtime.catalog_types import Catalog, Film, PlacedScreening, VisibleEntry
from festplanner.runtime.filter_pipeline import FilterParams, filter_films, select_visible
from festplanner.runtime.storage import KeyValueStore, load_id_list, save_id_list
from festplanner.runtime.timeline import TimelineMemo, build_timeline
from festplanner.shared.types import ALL_PROGRAMMES, FilmId, ScreeningId, StorageKey


class PlannerSession:
    """
    Explicit owner of the user's favorites, selection and facet flags.

    Args:
        catalog: Load-time catalog snapshot (never mutated).
        store: Durable key/value port holding the two collections.
        favorites_only / hide_industry / selected_only: initial facet flags.
        memo: Optional TimelineMemo; without one every timeline() call
            recomputes from scratch.
    """

    def __init__(
        self,
        catalog: Catalog,
        store: KeyValueStore,
        *,
        favorites_only: bool = False,
        hide_industry: bool = True,
        selected_only: bool = False,
        memo: TimelineMemo | None = None,
    ) -> None:
        self._catalog = catalog
        self._store = store
        self._memo = memo
        self._log = get_logger(__name__)

        # Stale ids are kept: they drop out of derived views only.
        self._ranked = ranked_set.normalize(load_id_list(store, StorageKey.FAVORITES.value))
        self._selection = frozenset(load_id_list(store, StorageKey.SELECTED_SCREENINGS.value))

        self.favorites_only = favorites_only
        self.hide_industry = hide_industry
        self.selected_only = selected_only

        self._log.debug(
            "session_loaded",
            films=len(catalog),
            favorites=len(self._ranked),
            selected=len(self._selection),
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def ranked_set(self) -> tuple[FilmId, ...]:
        return self._ranked

    @property
    def selection_set(self) -> frozenset[ScreeningId]:
        return self._selection

    @property
    def params(self) -> FilterParams:
        return FilterParams(
            favorites_only=self.favorites_only,
            hide_industry=self.hide_industry,
            selected_only=self.selected_only,
            ranked_set=self._ranked,
            selection_set=self._selection,
        )

    def set_filters(
        self,
        *,
        favorites_only: bool | None = None,
        hide_industry: bool | None = None,
        selected_only: bool | None = None,
    ) -> FilterParams:
        """Change any subset of the facet flags; returns the new parameters."""
        if favorites_only is not None:
            self.favorites_only = favorites_only
        if hide_industry is not None:
            self.hide_industry = hide_industry
        if selected_only is not None:
            self.selected_only = selected_only
        return self.params

    def is_favorite(self, film_id: FilmId) -> bool:
        return film_id in self._ranked

    def is_selected(self, screening_id: ScreeningId) -> bool:
        return screening_id in self._selection

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def toggle_favorite(self, film_id: FilmId) -> tuple[FilmId, ...]:
        self._ranked = ranked_set.toggle_favorite(self._ranked, film_id)
        self._log.debug("favorite_toggled", film_id=film_id, favorite=film_id in self._ranked)
        self._save_favorites()
        return self._ranked

    def reorder_favorites(self, source_id: FilmId, dest_id: FilmId) -> tuple[FilmId, ...]:
        reordered = ranked_set.reorder(self._ranked, source_id, dest_id)
        if reordered == self._ranked:
            return self._ranked
        self._ranked = reordered
        self._log.debug("favorites_reordered", source_id=source_id, dest_id=dest_id)
        self._save_favorites()
        return self._ranked

    def toggle_selection(self, screening_id: ScreeningId) -> frozenset[ScreeningId]:
        self._selection = selection_set.toggle_selection(self._selection, screening_id)
        self._log.debug(
            "selection_toggled",
            screening_id=screening_id,
            selected=screening_id in self._selection,
        )
        save_id_list(self._store, StorageKey.SELECTED_SCREENINGS.value, sorted(self._selection))
        return self._selection

    def _save_favorites(self) -> None:
        save_id_list(self._store, StorageKey.FAVORITES.value, self._ranked)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def favorite_films(self) -> list[Film]:
        return ranked_set.ranked_films(self._ranked, self._catalog)

    def selected_entries(self) -> list[VisibleEntry]:
        return selection_set.selected_screenings(self._selection, self._catalog)

    def visible(self) -> list[VisibleEntry]:
        return select_visible(self._catalog, self.params)

    def timeline(self) -> dict[date, list[PlacedScreening]]:
        if self._memo is not None:
            return self._memo.get(self._catalog, self.params)
        return build_timeline(self._catalog, self.params)

    def films(self, search: str = "", programme: str = ALL_PROGRAMMES) -> list[Film]:
        """Film explorer view under the current favorites-only flag."""
        return filter_films(
            self._catalog,
            search=search,
            programme=programme,
            favorites_only=self.favorites_only,
            ranked_set=self._ranked,
        )
