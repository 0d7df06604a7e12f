"""
Screening selection CLI commands.
"""

from __future__ import annotations

import typer

from festplanner.runtime.timeline import format_clock

from ..context import emit_json, open_session, wants_json

app = typer.Typer(name="selection", help="Chosen screenings")


@app.command("list")
def list_selection(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
) -> None:
    """Show selected screenings that still exist in the catalog."""
    planner = open_session()
    entries = planner.selected_entries()

    if wants_json(ctx, json_output):
        emit_json({
            "status": "ok",
            "total": len(entries),
            "screenings": [
                {
                    "screening_id": e.screening.id,
                    "film_id": e.film.id,
                    "title": e.film.title,
                    "start": e.screening.start.isoformat(),
                    "end": e.screening.end.isoformat(),
                    "venue": e.screening.venue.label,
                }
                for e in entries
            ],
        })
        return

    typer.echo(f"Selected screenings ({len(entries)}):")
    for e in entries:
        s = e.screening
        typer.echo(
            f"  {s.start.date().isoformat()} {format_clock(s.start)} → {format_clock(s.end)}"
            f"  {e.film.title} @ {s.venue.label}  [{s.id}]"
        )


@app.command("toggle")
def toggle(
    ctx: typer.Context,
    screening_id: str = typer.Argument(..., help="Screening id to select or deselect"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
) -> None:
    """Select a screening, or deselect it if already selected."""
    planner = open_session()
    if not planner.catalog.has_screening(screening_id):
        typer.echo(f"Warning: screening '{screening_id}' is not in the current catalog", err=True)

    selection = planner.toggle_selection(screening_id)
    selected = screening_id in selection

    if wants_json(ctx, json_output):
        emit_json({
            "status": "ok",
            "screening_id": screening_id,
            "selected": selected,
            "total": len(selection),
        })
        return

    typer.echo(f"{'Selected' if selected else 'Deselected'} {screening_id}")
