"""
Timeline layout: screening placement on the festival's daily axis.

The axis runs from 08:00 to 03:00 the next morning (hours 8 through 27) so
late shows stay on the evening they belong to instead of opening a second
visual day. Positions are fractions of the 1,140-minute axis.

Pure functions of the screening timestamps. Venue never affects placement.
"""

from __future__ import annotations

import math
from collections import OrderedDict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from festplanner.runtime.catalog_types import Catalog, PlacedScreening, VisibleEntry
from festplanner.runtime.filter_pipeline import FilterParams, select_visible

AXIS_START_HOUR = 8
AXIS_END_HOUR = 27  # 03:00 next day
AXIS_START_MINUTES = AXIS_START_HOUR * 60
AXIS_MINUTES = (AXIS_END_HOUR - AXIS_START_HOUR) * 60  # 1_140
MINUTES_PER_DAY = 24 * 60

# Callers floor bar widths at this fraction so short or clamped
# screenings stay visible.
MIN_DISPLAY_WIDTH_FRACTION = 0.15


def minutes_of_day(ts: datetime) -> int:
    """Wall-clock minutes since midnight, in the timestamp's own offset."""
    return ts.hour * 60 + ts.minute


def screening_minutes(start: datetime, end: datetime) -> tuple[int, int]:
    """
    Start and end as minutes since the start's midnight.

    An end that wraps past midnight (end clock at or before the start clock,
    on the following calendar day) is pushed onto hours >= 24.
    """
    start_minutes = minutes_of_day(start)
    end_minutes = minutes_of_day(end)
    if end_minutes <= start_minutes and end.date() == start.date() + timedelta(days=1):
        end_minutes += MINUTES_PER_DAY
    return start_minutes, end_minutes


def axis_position(start: datetime, end: datetime) -> tuple[float, float]:
    """(left_fraction, width_fraction) of a screening on the axis.

    Both ends are clamped to the axis. A screening entirely outside the
    window comes back with zero or negative width rather than an error.
    """
    start_minutes, end_minutes = screening_minutes(start, end)
    rel_start = max(0, start_minutes - AXIS_START_MINUTES)
    rel_end = min(AXIS_MINUTES, end_minutes - AXIS_START_MINUTES)
    return rel_start / AXIS_MINUTES, (rel_end - rel_start) / AXIS_MINUTES


def day_key(ts: datetime) -> date:
    """Calendar date of the timestamp (not the 8am-3am festival day)."""
    return ts.date()


def layout(entries: Iterable[VisibleEntry]) -> dict[date, list[PlacedScreening]]:
    """
    Place every entry on the axis and group by the calendar date it starts on.

    Groups come back in ascending date order. Within a group entries are
    sorted by absolute start time; ties keep their input order. Nothing is
    merged or deduplicated.
    """
    # sorted() is stable, so equal starts keep catalog order
    ordered = sorted(entries, key=lambda e: e.screening.start)
    groups: dict[date, list[PlacedScreening]] = {}
    for entry in ordered:
        left, width = axis_position(entry.screening.start, entry.screening.end)
        key = day_key(entry.screening.start)
        groups.setdefault(key, []).append(
            PlacedScreening(
                film=entry.film,
                screening=entry.screening,
                left_fraction=left,
                width_fraction=width,
                day=key,
            )
        )
    return dict(sorted(groups.items()))


def build_timeline(catalog: Catalog, params: FilterParams) -> dict[date, list[PlacedScreening]]:
    """Filter then lay out in one pass."""
    return layout(select_visible(catalog, params))


class TimelineMemo:
    """
    Optional memoization of :func:`build_timeline`.

    Keyed by the exact ``(catalog, params)`` tuple; both are frozen, so a
    changed input is a different key and nothing ever needs invalidating.
    """

    def __init__(self, max_entries: int = 16) -> None:
        self._max_entries = max_entries
        self._cache: OrderedDict[tuple[Catalog, FilterParams], dict[date, list[PlacedScreening]]] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get(self, catalog: Catalog, params: FilterParams) -> dict[date, list[PlacedScreening]]:
        """Cached layout for the inputs. Each call returns fresh dict and lists."""
        key = (catalog, params)
        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            self.hits += 1
        else:
            self.misses += 1
            cached = build_timeline(catalog, params)
            self._cache[key] = cached
            if len(self._cache) > self._max_entries:
                self._cache.popitem(last=False)
        return {day: list(rows) for day, rows in cached.items()}

    def clear(self) -> None:
        self._cache.clear()


def display_width(width_fraction: float, minimum: float = MIN_DISPLAY_WIDTH_FRACTION) -> float:
    """Width to draw: the layout width floored at ``minimum``."""
    return max(width_fraction, minimum)


@dataclass(frozen=True)
class AxisTick:
    hour: int
    label: str
    fraction: float


def hour_label(hour: int) -> str:
    """12-hour label for an axis hour; hours past 24 wrap to the morning."""
    display_hour = hour - 24 if hour > 24 else hour
    if display_hour == 12:
        return "12 PM"
    if 12 < display_hour < 24:
        return f"{display_hour - 12} PM"
    if display_hour in (0, 24):
        return "12 AM"
    return f"{display_hour} AM"


def axis_ticks(step_hours: int = 2) -> list[AxisTick]:
    """Header ticks every ``step_hours`` from the start of the axis."""
    span = AXIS_END_HOUR - AXIS_START_HOUR
    count = math.ceil(span / step_hours)
    ticks = []
    for i in range(count):
        hour = AXIS_START_HOUR + i * step_hours
        ticks.append(
            AxisTick(
                hour=hour,
                label=hour_label(hour),
                fraction=(hour - AXIS_START_HOUR) * 60 / AXIS_MINUTES,
            )
        )
    return ticks


def format_clock(ts: datetime) -> str:
    """Wall-clock time as ``"9:05 PM"``."""
    suffix = "AM" if ts.hour < 12 else "PM"
    return f"{ts.hour % 12 or 12}:{ts.minute:02d} {suffix}"


def format_day(day: date) -> str:
    """Day group heading, e.g. ``"Wednesday, September 10"``."""
    return f"{day.strftime('%A')}, {day.strftime('%B')} {day.day}"


__all__ = [
    "AXIS_END_HOUR",
    "AXIS_MINUTES",
    "AXIS_START_HOUR",
    "MIN_DISPLAY_WIDTH_FRACTION",
    "AxisTick",
    "TimelineMemo",
    "axis_position",
    "axis_ticks",
    "build_timeline",
    "day_key",
    "display_width",
    "format_clock",
    "format_day",
    "hour_label",
    "layout",
    "minutes_of_day",
    "screening_minutes",
]
