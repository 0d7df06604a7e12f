"""
Ranked set: the user's ordered favorite films.

Position 0 is the top pick. All operations are pure: they take the current
tuple of film ids and return the next one. Persistence is the session's job.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from festplanner.runtime.catalog_types import Catalog, Film
from festplanner.shared.types import FilmId

T = TypeVar("T")


def normalize(ids: Iterable[FilmId]) -> tuple[FilmId, ...]:
    """Drop repeated ids, keeping the first occurrence."""
    return tuple(dict.fromkeys(ids))


def toggle_favorite(ranked: Sequence[FilmId], film_id: FilmId) -> tuple[FilmId, ...]:
    """Remove ``film_id`` if present, otherwise append it at the bottom."""
    if film_id in ranked:
        return tuple(i for i in ranked if i != film_id)
    return (*ranked, film_id)


def array_move(items: Sequence[T], old_index: int, new_index: int) -> tuple[T, ...]:
    """Remove the item at ``old_index`` and reinsert it at ``new_index``."""
    moved = list(items)
    moved.insert(new_index, moved.pop(old_index))
    return tuple(moved)


def reorder(ranked: Sequence[FilmId], source_id: FilmId, dest_id: FilmId) -> tuple[FilmId, ...]:
    """
    Move ``source_id`` into ``dest_id``'s current slot.

    Elements between the two positions shift by one; everything else keeps
    its relative order. Equal ids or an id missing from the set is a no-op.
    """
    if source_id == dest_id or source_id not in ranked or dest_id not in ranked:
        return tuple(ranked)
    return array_move(ranked, ranked.index(source_id), ranked.index(dest_id))


def ranked_films(ranked: Iterable[FilmId], catalog: Catalog) -> list[Film]:
    """Films in ranked order; ids the catalog no longer has are skipped."""
    films = (catalog.get_film(film_id) for film_id in ranked)
    return [film for film in films if film is not None]


def rank_label(index: int) -> str:
    return "Top Pick" if index == 0 else f"Choice {index + 1}"


__all__ = [
    "array_move",
    "normalize",
    "rank_label",
    "ranked_films",
    "reorder",
    "toggle_favorite",
]
