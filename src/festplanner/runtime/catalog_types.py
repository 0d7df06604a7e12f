"""
Catalog and planning types.

Canonical immutable data structures shared by the filter pipeline, the
timeline layout engine and the ranked/selection sets. Everything here is
frozen and hashable so derived views can be memoized on exact inputs.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date, datetime

from festplanner.shared.types import FilmId, ScreeningId, ScreeningKind


@dataclass(frozen=True)
class Venue:
    name: str
    short_name: str | None = None
    room: str | None = None

    @property
    def label(self) -> str:
        """Display label: short name (or name), then the room if any."""
        base = self.short_name or self.name
        if self.room:
            return f"{base} • {self.room}"
        return base


@dataclass(frozen=True)
class Screening:
    """
    One scheduled showing of a film.

    ``start`` and ``end`` are absolute timestamps; their own wall-clock
    fields are what the timeline uses, with no timezone conversion.
    """

    id: ScreeningId
    start: datetime
    end: datetime
    venue: Venue
    cancelled: bool = False
    industry: bool = False
    press_and_industry: bool = False
    market_screening: bool = False
    cost: tuple[str, ...] = ()
    accessibility: tuple[str, ...] = ()
    url: str = ""

    @property
    def kind(self) -> ScreeningKind:
        if self.industry:
            return ScreeningKind.INDUSTRY
        if self.press_and_industry:
            return ScreeningKind.PRESS_AND_INDUSTRY
        return ScreeningKind.PUBLIC


@dataclass(frozen=True)
class Film:
    id: FilmId
    title: str
    directors: tuple[str, ...] = ()
    screenings: tuple[Screening, ...] = ()
    description: str = ""
    slug: str = ""
    url: str = ""
    poster_url: str = ""
    creators: tuple[str, ...] = ()
    languages: str = ""
    countries: str = ""
    genres: tuple[str, ...] = ()
    interests: tuple[str, ...] = ()
    region_of_interests: tuple[str, ...] = ()
    programmes: tuple[str, ...] = ()
    trailer_url: str | None = None


@dataclass(frozen=True)
class Catalog:
    """
    Immutable load-time snapshot of the festival programme.

    Film order is the catalog order; each film keeps its own screening
    order. Id lookups are indexed once at construction.
    """

    items: tuple[Film, ...] = ()
    _films_by_id: dict[FilmId, Film] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )
    _screenings_by_id: dict[ScreeningId, tuple[Film, Screening]] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        for film in self.items:
            self._films_by_id.setdefault(film.id, film)
            for screening in film.screenings:
                self._screenings_by_id.setdefault(screening.id, (film, screening))

    def __iter__(self) -> Iterator[Film]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def get_film(self, film_id: FilmId) -> Film | None:
        return self._films_by_id.get(film_id)

    def get_screening(self, screening_id: ScreeningId) -> tuple[Film, Screening] | None:
        return self._screenings_by_id.get(screening_id)

    def has_film(self, film_id: FilmId) -> bool:
        return film_id in self._films_by_id

    def has_screening(self, screening_id: ScreeningId) -> bool:
        return screening_id in self._screenings_by_id


@dataclass(frozen=True)
class VisibleEntry:
    """A (film, screening) pair that survived the filter pipeline."""

    film: Film
    screening: Screening


@dataclass(frozen=True)
class PlacedScreening:
    """
    A visible screening positioned on the daily axis.

    ``left_fraction`` and ``width_fraction`` are fractions of the axis;
    ``width_fraction`` may be zero or negative for screenings that fall
    outside the displayed window.
    """

    film: Film
    screening: Screening
    left_fraction: float
    width_fraction: float
    day: date
