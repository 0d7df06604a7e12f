"""
Favorites CLI commands.

The ranked favorites list: list, toggle and move (the drag-to-reorder
gesture reduced to a source and a destination id).
"""

from __future__ import annotations

import typer

from festplanner.runtime.ranked_set import rank_label

from ..context import emit_json, open_session, wants_json

app = typer.Typer(name="favorites", help="Ranked favorite films")


@app.command("list")
def list_favorites(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
) -> None:
    """Show favorites in ranked order. Ids missing from the catalog are hidden."""
    planner = open_session()
    films = planner.favorite_films()

    if wants_json(ctx, json_output):
        emit_json({
            "status": "ok",
            "total": len(films),
            "favorites": [
                {
                    "rank": index + 1,
                    "label": rank_label(index),
                    "id": film.id,
                    "title": film.title,
                    "directors": list(film.directors),
                }
                for index, film in enumerate(films)
            ],
        })
        return

    if not films:
        typer.echo("No favorites yet.")
        return

    typer.echo(f"Favorites ({len(films)}):")
    for index, film in enumerate(films):
        directors = f" ({', '.join(film.directors)})" if film.directors else ""
        typer.echo(f"  {index + 1}. [{rank_label(index)}] {film.title}{directors}  [{film.id}]")


@app.command("toggle")
def toggle(
    ctx: typer.Context,
    film_id: str = typer.Argument(..., help="Film id to add or remove"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
) -> None:
    """Add a film to the bottom of the favorites, or remove it."""
    planner = open_session()
    if not planner.catalog.has_film(film_id):
        typer.echo(f"Warning: film '{film_id}' is not in the current catalog", err=True)

    ranked = planner.toggle_favorite(film_id)
    favorite = film_id in ranked

    if wants_json(ctx, json_output):
        emit_json({
            "status": "ok",
            "film_id": film_id,
            "favorite": favorite,
            "favorites": list(ranked),
        })
        return

    typer.echo(f"{'Added' if favorite else 'Removed'} {film_id}")


@app.command("move")
def move(
    ctx: typer.Context,
    source_id: str = typer.Argument(..., help="Film id being dragged"),
    dest_id: str = typer.Argument(..., help="Film id it is dropped on"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
) -> None:
    """Move a favorite into another favorite's position."""
    planner = open_session()
    before = planner.ranked_set
    ranked = planner.reorder_favorites(source_id, dest_id)
    moved = ranked != before

    if wants_json(ctx, json_output):
        emit_json({"status": "ok", "moved": moved, "favorites": list(ranked)})
        return

    if moved:
        typer.echo(f"Moved {source_id} to position {ranked.index(source_id) + 1}")
    else:
        typer.echo("No change")
