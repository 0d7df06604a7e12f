"""
Session bootstrap and output helpers shared by the CLI command groups.
"""

from __future__ import annotations

import json
from typing import Any

import typer

from festplanner.catalog.static_catalog import load_catalog
from festplanner.infra.exceptions import CatalogError
from festplanner.infra.settings import settings
from festplanner.runtime.session import PlannerSession
from festplanner.runtime.storage import SqlKeyValueStore


def open_session() -> PlannerSession:
    """Load the catalog and durable state named by the current settings.

    Exits with code 1 when the catalog cannot be loaded.
    """
    try:
        catalog = load_catalog(settings.catalog_path, settings.trailers_path)
    except CatalogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    return PlannerSession(
        catalog,
        SqlKeyValueStore(settings.database_url),
        hide_industry=settings.hide_industry,
    )


def wants_json(ctx: typer.Context, json_output: bool) -> bool:
    """True when either the command or the root callback asked for JSON."""
    root_obj = ctx.find_root().obj or {}
    return json_output or bool(root_obj.get("json"))


def emit_json(payload: dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, indent=2, default=str))
