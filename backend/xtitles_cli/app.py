"""Command line interface for the titles service."""
from __future__ import annotations

import json
import logging
from typing import Any

import typer

from backend.xtitles_api.server import serve as serve_api
from backend.xtitles_api.db import StorageError
from backend.xtitles_api.services.ingestion import IngestionError
from backend.xtitles_api.settings import TitlesSettings
from backend.xtitles_api.state import AppState

from .client import create_client


DEFAULT_API_BASE = "http://localhost:8081"

app = typer.Typer(help="Ingest and browse the Xbox 360 title catalog.")
titles_app = typer.Typer(help="List and inspect catalog titles.")
app.add_typer(titles_app, name="titles")


def _api_base_option() -> typer.Option:
    return typer.Option(
        DEFAULT_API_BASE,
        "--api-base",
        help="Base URL for the titles API service.",
        show_default=True,
        envvar="XTITLES_API_BASE",
    )


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _get(api_base: str, path: str, params: dict[str, object] | None = None) -> None:
    with create_client(api_base) as client:
        response = client.get(path, params=params)
        response.raise_for_status()
        _echo_json(response.json())


def _configure_logging(settings: TitlesSettings) -> None:
    logging.basicConfig(level=settings.log_level.upper())


@app.command()
def ingest() -> None:
    """Populate the local database from the remote catalog if it is empty."""

    settings = TitlesSettings()
    _configure_logging(settings)
    try:
        report = AppState(settings).ingest()
    except (StorageError, IngestionError) as exc:
        typer.echo(f"Ingestion failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    _echo_json(report.model_dump())


@app.command()
def serve() -> None:
    """Ingest the catalog if needed and start the HTTP API."""

    settings = TitlesSettings()
    _configure_logging(settings)
    code = serve_api(settings)
    if code:
        raise typer.Exit(code=code)


@app.command()
def health(api_base: str = _api_base_option()) -> None:
    """Call the /health endpoint and pretty-print the response."""

    _get(api_base, "/health")


@app.command()
def stats(api_base: str = _api_base_option()) -> None:
    """Display aggregate catalog counts."""

    _get(api_base, "/api/v1/stats")


@titles_app.command("list")
def list_titles(
    page: int = typer.Option(1, min=1, help="Page number starting at 1."),
    limit: int = typer.Option(20, min=1, max=100, help="Number of titles per page."),
    only_with_pictures: bool = typer.Option(
        False,
        "--only-with-pictures/--all",
        help="Only return titles that have at least one picture.",
        show_default=True,
    ),
    reverse: bool = typer.Option(
        False, "--reverse/--no-reverse", help="Order by title id descending."
    ),
    api_base: str = _api_base_option(),
) -> None:
    """List titles ordered by title id."""

    params: dict[str, object] = {
        "page": page,
        "limit": limit,
        "only_with_pictures": str(only_with_pictures).lower(),
        "reverse": str(reverse).lower(),
    }
    _get(api_base, "/api/v1/titles", params)


@titles_app.command("show")
def show_title(
    title_id: str = typer.Argument(..., help="Eight character title identifier."),
    api_base: str = _api_base_option(),
) -> None:
    """Display a single title with its pictures."""

    _get(api_base, f"/api/v1/titles/{title_id}")


@app.command()
def search(
    query: str = typer.Argument(..., help="Text matched against title names."),
    page: int = typer.Option(1, min=1, help="Page number starting at 1."),
    limit: int = typer.Option(20, min=1, max=100, help="Number of titles per page."),
    only_with_pictures: bool = typer.Option(
        False,
        "--only-with-pictures/--all",
        help="Only return titles that have at least one picture.",
        show_default=True,
    ),
    api_base: str = _api_base_option(),
) -> None:
    """Fuzzy search titles by name."""

    params: dict[str, object] = {
        "q": query,
        "page": page,
        "limit": limit,
        "only_with_pictures": str(only_with_pictures).lower(),
    }
    _get(api_base, "/api/v1/search", params)
