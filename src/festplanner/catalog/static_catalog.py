"""
StaticCatalog: loads the festival's JSON catalog export into an immutable
:class:`~festplanner.runtime.catalog_types.Catalog`.

Usage:
    from festplanner.catalog.static_catalog import load_catalog
    catalog = load_catalog("films.json", trailers_path="trailers.json")
    film = catalog.get_film("12345")
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from festplanner.infra.exceptions import CatalogError
from festplanner.runtime.catalog_types import Catalog, Film, Screening, Venue
from festplanner.shared.schemas import (
    CatalogSchema,
    FilmSchema,
    ScheduleItemSchema,
    TrailersSchema,
)

_logger = logging.getLogger(__name__)


def _read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Failed to parse {path}: {e}") from e
    except OSError as e:
        raise CatalogError(f"Failed to read {path}: {e}") from e


def _screening_from_schema(item: ScheduleItemSchema) -> Screening:
    return Screening(
        id=item.id,
        start=item.start_time,
        end=item.end_time,
        venue=Venue(
            name=item.venue.name,
            short_name=item.venue.short_name or None,
            room=item.venue.room or None,
        ),
        cancelled=item.cancelled,
        industry=item.industry,
        press_and_industry=item.press_and_industry,
        market_screening=item.market_screening,
        cost=tuple(item.cost),
        accessibility=tuple(item.accessibility),
        url=item.url,
    )


def _film_from_schema(entry: FilmSchema, trailer_url: str | None) -> Film:
    return Film(
        id=entry.id,
        title=entry.title,
        directors=tuple(entry.directors),
        screenings=tuple(_screening_from_schema(s) for s in entry.schedule_items),
        description=entry.description,
        slug=entry.slug,
        url=entry.url,
        poster_url=entry.poster_url or entry.img,
        creators=tuple(entry.creators),
        languages=entry.languages,
        countries=entry.countries,
        genres=tuple(entry.genre),
        interests=tuple(entry.interests),
        region_of_interests=tuple(entry.region_of_interests),
        programmes=tuple(entry.web_programmes),
        trailer_url=trailer_url,
    )


def parse_trailers(data: Any) -> dict[str, str]:
    """Map film id to trailer link; the first link listed for a film wins."""
    try:
        doc = TrailersSchema.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid trailers document: {e}") from e
    links: dict[str, str] = {}
    for trailer in doc.trailers:
        links.setdefault(trailer.id, trailer.link)
    return links


def parse_catalog(data: Any, trailers: dict[str, str] | None = None) -> Catalog:
    """
    Build a Catalog from an already-decoded catalog document.

    Raises:
        CatalogError: If the document does not match the schema, or a film
            or screening id appears more than once.
    """
    try:
        doc = CatalogSchema.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog document: {e}") from e

    trailers = trailers or {}
    seen_films: set[str] = set()
    seen_screenings: set[str] = set()
    films: list[Film] = []
    for entry in doc.items:
        if entry.id in seen_films:
            raise CatalogError(f"Duplicate film id in catalog: {entry.id}")
        seen_films.add(entry.id)
        for item in entry.schedule_items:
            if item.id in seen_screenings:
                raise CatalogError(f"Duplicate screening id in catalog: {item.id}")
            seen_screenings.add(item.id)
        films.append(_film_from_schema(entry, trailers.get(entry.id)))

    return Catalog(items=tuple(films))


def load_catalog(catalog_path: str | Path, trailers_path: str | Path | None = None) -> Catalog:
    """Read the catalog (and optional trailers) document from disk."""
    catalog_path = Path(catalog_path)
    if not catalog_path.exists():
        raise CatalogError(f"Catalog file not found: {catalog_path}")

    trailers: dict[str, str] = {}
    if trailers_path:
        trailers_file = Path(trailers_path)
        if trailers_file.exists():
            trailers = parse_trailers(_read_json(trailers_file))
        else:
            _logger.warning("Trailers file not found: %s", trailers_file)

    catalog = parse_catalog(_read_json(catalog_path), trailers)
    _logger.info(
        "Loaded %d films (%d screenings) from %s",
        len(catalog),
        sum(len(f.screenings) for f in catalog),
        catalog_path,
    )
    return catalog


__all__ = [
    "load_catalog",
    "parse_catalog",
    "parse_trailers",
]
