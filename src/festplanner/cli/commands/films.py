"""
Film explorer CLI commands.

Provides list and programmes subcommands over the loaded catalog.
"""

from __future__ import annotations

import typer

from festplanner.runtime.filter_pipeline import programmes
from festplanner.shared.types import ALL_PROGRAMMES

from ..context import emit_json, open_session, wants_json

app = typer.Typer(name="films", help="Browse and search the festival catalog")


@app.command("list")
def list_films(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-s", help="Case-insensitive text in title or description"),
    programme: str = typer.Option(ALL_PROGRAMMES, "--programme", "-p", help="Programme tag filter"),
    favorites_only: bool = typer.Option(False, "--favorites-only", help="Only favorite films"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
) -> None:
    """List films matching the explorer filters."""
    planner = open_session()
    planner.set_filters(favorites_only=favorites_only)
    matches = planner.films(search=search, programme=programme)

    if wants_json(ctx, json_output):
        emit_json({
            "status": "ok",
            "total": len(matches),
            "films": [
                {
                    "id": film.id,
                    "title": film.title,
                    "directors": list(film.directors),
                    "programmes": list(film.programmes),
                    "favorite": planner.is_favorite(film.id),
                    "screenings": len(film.screenings),
                    "trailer_url": film.trailer_url,
                }
                for film in matches
            ],
        })
        return

    typer.echo("Films:")
    for film in matches:
        heart = "♥" if planner.is_favorite(film.id) else " "
        directors = f" ({', '.join(film.directors)})" if film.directors else ""
        typer.echo(f"  {heart} {film.title}{directors}  [{film.id}]")
    typer.echo(f"Total: {len(matches)}")


@app.command("programmes")
def list_programmes(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
) -> None:
    """List the programme facet values."""
    planner = open_session()
    values = programmes(planner.catalog)

    if wants_json(ctx, json_output):
        emit_json({"status": "ok", "total": len(values), "programmes": values})
        return

    for value in values:
        typer.echo(value)
