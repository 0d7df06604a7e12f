"""
Timeline CLI commands.

Renders the day-grouped screening grid as text bars on the 8 AM - 3 AM
axis, or as JSON positions for other renderers.
"""

from __future__ import annotations

from typing import Optional

import typer

from festplanner.runtime.catalog_types import PlacedScreening
from festplanner.runtime.timeline import (
    axis_ticks,
    display_width,
    format_clock,
    format_day,
)
from festplanner.shared.types import ScreeningKind

from ..context import emit_json, open_session, wants_json

app = typer.Typer(name="timeline", help="Day-by-day screening grid")

_BAR_CHARS = {
    ScreeningKind.PUBLIC: "#",
    ScreeningKind.INDUSTRY: "%",
    ScreeningKind.PRESS_AND_INDUSTRY: "#",
}


def render_axis(columns: int) -> str:
    """Tick labels placed at their axis columns; overlapping labels are dropped."""
    line = [" "] * columns
    cursor = 0
    for tick in axis_ticks():
        col = round(tick.fraction * columns)
        if col < cursor or col + len(tick.label) > columns:
            continue
        line[col:col + len(tick.label)] = tick.label
        cursor = col + len(tick.label) + 1
    return "".join(line).rstrip()


def render_bar(placed: PlacedScreening, columns: int, selected: bool) -> str:
    """One row of the grid; short or clamped bars get the minimum display width."""
    start = min(columns - 1, round(placed.left_fraction * columns))
    length = max(1, round(display_width(placed.width_fraction) * columns))
    length = min(length, columns - start)
    char = "=" if selected else _BAR_CHARS[placed.screening.kind]
    return "." * start + char * length + "." * (columns - start - length)


@app.command("show")
def show(
    ctx: typer.Context,
    favorites_only: bool = typer.Option(False, "--favorites-only", help="Only favorite films"),
    hide_industry: Optional[bool] = typer.Option(
        None,
        "--hide-industry/--show-industry",
        help="Hide industry and press & industry screenings (default from FESTPLANNER_HIDE_INDUSTRY)",
    ),
    selected_only: bool = typer.Option(False, "--selected-only", help="Only selected screenings"),
    columns: int = typer.Option(57, "--columns", min=19, help="Width of the text grid"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
) -> None:
    """Show visible screenings grouped by the calendar day they start on."""
    planner = open_session()
    planner.set_filters(
        favorites_only=favorites_only,
        hide_industry=hide_industry,
        selected_only=selected_only,
    )
    days = planner.timeline()
    total = sum(len(rows) for rows in days.values())

    if wants_json(ctx, json_output):
        emit_json({
            "status": "ok",
            "total": total,
            "days": [
                {
                    "date": day.isoformat(),
                    "screenings": [
                        {
                            "screening_id": p.screening.id,
                            "film_id": p.film.id,
                            "title": p.film.title,
                            "start": p.screening.start.isoformat(),
                            "end": p.screening.end.isoformat(),
                            "venue": p.screening.venue.label,
                            "kind": p.screening.kind.value,
                            "cost": list(p.screening.cost),
                            "left_fraction": p.left_fraction,
                            "width_fraction": p.width_fraction,
                            "favorite": planner.is_favorite(p.film.id),
                            "selected": planner.is_selected(p.screening.id),
                        }
                        for p in rows
                    ],
                }
                for day, rows in days.items()
            ],
        })
        return

    if not days:
        typer.echo("No screenings found.")
        return

    typer.echo(render_axis(columns))
    for day, rows in days.items():
        typer.echo("")
        typer.echo(format_day(day))
        for p in rows:
            s = p.screening
            selected = planner.is_selected(s.id)
            marker = "*" if selected else " "
            typer.echo(
                f"{render_bar(p, columns, selected)} {marker} "
                f"{format_clock(s.start)} → {format_clock(s.end)}  {p.film.title} @ {s.venue.label}"
            )
    typer.echo("")
    typer.echo(f"Total: {total}")
