"""
Main CLI application using Typer with router-based command dispatch.

All command groups are registered through the centralized CliRouter.
"""

from __future__ import annotations

from typing import Optional

import typer

from festplanner.infra.logging import configure_logging

from .commands import favorites, films, selection, timeline
from .router import get_router

app = typer.Typer(help="Festival planner CLI")

router = get_router(app)

router.register(
    "films",
    films.app,
    help_text="Browse and search the festival catalog",
)

router.register(
    "favorites",
    favorites.app,
    help_text="Ranked favorite films",
)

router.register(
    "selection",
    selection.app,
    help_text="Chosen screenings",
)

router.register(
    "timeline",
    timeline.app,
    help_text="Day-by-day screening grid",
)


@app.callback()
def main(
    ctx: typer.Context,
    json: bool = typer.Option(False, "--json", help="Output in JSON format"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
):
    """festplanner - plan a film festival from its published catalog."""
    configure_logging(level=log_level)
    # Store JSON flag in context for subcommands to use
    ctx.ensure_object(dict)
    ctx.obj["json"] = json


def cli():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
