"""
Shared types and enums for festplanner.

This module contains common types and enums that are used across
the catalog, runtime and CLI layers.
"""

from __future__ import annotations

from enum import Enum


class ScreeningKind(str, Enum):
    """Audience type of a screening, derived from its flags."""

    PUBLIC = "public"
    INDUSTRY = "industry"
    PRESS_AND_INDUSTRY = "press_and_industry"


class StorageKey(str, Enum):
    """Durable key/value slots owned by a planner session."""

    FAVORITES = "favorites"
    SELECTED_SCREENINGS = "selectedScreenings"


# Programme facet value that matches every film
ALL_PROGRAMMES = "All"

# Type aliases for identifiers
FilmId = str
ScreeningId = str
