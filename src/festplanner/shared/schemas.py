"""
Pydantic schemas for the festival catalog documents.

The catalog export uses camelCase keys; these schemas accept them through
aliases and ignore the many presentation-only fields the planner never reads.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _ExportModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class VenueSchema(_ExportModel):
    """Where a screening takes place."""

    name: str = ""
    short_name: str | None = Field(None, alias="shortName")
    room: str | None = None
    venue_type: str | None = Field(None, alias="venueType")


class ScheduleItemSchema(_ExportModel):
    """One screening entry inside a film's ``scheduleItems``."""

    id: str = Field(..., min_length=1)
    start_time: datetime = Field(..., alias="startTime")
    end_time: datetime = Field(..., alias="endTime")
    title: str = ""
    cancelled: bool = False
    industry: bool = False
    press_and_industry: bool = Field(False, alias="pressAndIndustry")
    market_screening: bool = Field(False, alias="marketScreening")
    cost: list[str] = Field(default_factory=list)
    accessibility: list[str] = Field(default_factory=list)
    venue: VenueSchema = Field(default_factory=VenueSchema)
    url: str = ""

    @field_validator("start_time", "end_time")
    @classmethod
    def _require_offset(cls, value: datetime) -> datetime:
        # Naive and offset-aware values cannot be ordered against each other
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError("timestamp must carry a UTC offset")
        return value


class FilmSchema(_ExportModel):
    """One film entry of the catalog ``items`` array."""

    id: str = Field(..., min_length=1)
    title: str
    slug: str = ""
    url: str = ""
    img: str = ""
    poster_url: str = Field("", alias="posterUrl")
    description: str = ""
    directors: list[str] = Field(default_factory=list)
    creators: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    region_of_interests: list[str] = Field(default_factory=list, alias="regionOfInterests")
    genre: list[str] = Field(default_factory=list)
    web_programmes: list[str] = Field(default_factory=list, alias="webProgrammes")
    countries: str = ""
    languages: str = ""
    schedule_items: list[ScheduleItemSchema] = Field(default_factory=list, alias="scheduleItems")

    @field_validator("countries", "languages", mode="before")
    @classmethod
    def _join_lists(cls, value: Any) -> Any:
        # Some exports carry these as arrays instead of display strings
        if isinstance(value, list):
            return ", ".join(str(v) for v in value)
        return value


class CatalogSchema(_ExportModel):
    """Top-level catalog document: ``{"filters": {...}, "items": [...]}``."""

    filters: dict[str, Any] = Field(default_factory=dict)
    items: list[FilmSchema] = Field(default_factory=list)


class TrailerSchema(_ExportModel):
    id: str
    link: str


class TrailersSchema(_ExportModel):
    """Trailer document: ``{"trailers": [{"id": ..., "link": ...}]}``."""

    trailers: list[TrailerSchema] = Field(default_factory=list)
