"""
Test data builders shared by the unit and contract suites.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from festplanner.runtime.catalog_types import Catalog, Film, Screening, Venue

def make_screening(
    screening_id: str,
    start: datetime,
    end: datetime,
    *,
    venue: str = "Scotiabank",
    room: str | None = "Theatre 1",
    cancelled: bool = False,
    industry: bool = False,
    press_and_industry: bool = False,
    cost: tuple[str, ...] = (),
) -> Screening:
    return Screening(
        id=screening_id,
        start=start,
        end=end,
        venue=Venue(name=venue, room=room),
        cancelled=cancelled,
        industry=industry,
        press_and_industry=press_and_industry,
        cost=cost,
    )


def make_film(
    film_id: str,
    title: str | None = None,
    screenings: list[Screening] | tuple[Screening, ...] = (),
    *,
    directors: tuple[str, ...] = (),
    description: str = "",
    programmes: tuple[str, ...] = (),
) -> Film:
    return Film(
        id=film_id,
        title=title or f"Film {film_id}",
        directors=directors,
        screenings=tuple(screenings),
        description=description,
        programmes=programmes,
    )


def make_catalog(*films: Film) -> Catalog:
    return Catalog(items=tuple(films))


def schedule_item(
    screening_id: str,
    start: str,
    end: str,
    **flags: Any,
) -> dict[str, Any]:
    """A ``scheduleItems`` entry as it appears in the festival export."""
    item: dict[str, Any] = {
        "id": screening_id,
        "startTime": start,
        "endTime": end,
        "title": "",
        "digital": False,
        "pressAndIndustry": False,
        "industry": False,
        "marketScreening": False,
        "cancelled": False,
        "cost": [],
        "accessibility": [],
        "venue": {"name": "TIFF Lightbox", "shortName": "Lightbox", "room": "Cinema 1", "venueType": "in-person"},
    }
    item.update(flags)
    return item


def sample_catalog_document() -> dict[str, Any]:
    """A small catalog export covering public, industry and cancelled screenings."""
    return {
        "filters": {"webProgrammes": ["Gala Presentations", "Midnight Madness"]},
        "items": [
            {
                "id": "f-100",
                "title": "The Long Night",
                "slug": "the-long-night",
                "description": "A sleepless city drama.",
                "directors": ["Ana Ruiz"],
                "webProgrammes": ["Gala Presentations"],
                "countries": "Canada",
                "languages": "English",
                "scheduleItems": [
                    schedule_item("s-101", "2025-09-10T18:00:00-04:00", "2025-09-10T19:45:00-04:00", cost=["$35"]),
                    schedule_item("s-102", "2025-09-10T09:00:00-04:00", "2025-09-10T10:45:00-04:00", industry=True),
                ],
            },
            {
                "id": "f-200",
                "title": "Midnight Static",
                "description": "Horror at the edge of the dial.",
                "directors": ["Kim Ode", "Lee Park"],
                "webProgrammes": ["Midnight Madness"],
                "scheduleItems": [
                    schedule_item("s-201", "2025-09-10T23:30:00-04:00", "2025-09-11T00:45:00-04:00"),
                    schedule_item("s-202", "2025-09-11T14:00:00-04:00", "2025-09-11T15:30:00-04:00", cancelled=True),
                ],
            },
            {
                "id": "f-300",
                "title": "Quiet Harbour",
                "description": "Documentary about a fishing village.",
                "webProgrammes": ["Gala Presentations"],
                "scheduleItems": [],
            },
        ],
    }

