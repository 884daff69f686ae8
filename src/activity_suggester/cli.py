"""Command-line interface for the activity suggester."""

from __future__ import annotations

import json
import logging
import random
from pathlib import Path
from typing import Optional

import typer

from .config import AppSettings
from .models import DEFAULT_FILTERS
from .paths import get_filters_path
from .preferences import FilterStore

app = typer.Typer(help="Suggest a random activity that fits the time you have.")

CatalogOption = typer.Option(
    None,
    "--catalog",
    help="Path or http(s) URL of the activities JSON document.",
)
FiltersFileOption = typer.Option(
    None,
    "--filters-file",
    path_type=Path,
    help="Location of the saved filter selection.",
)


@app.callback(no_args_is_help=True)
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@app.command()
def suggest(
    duration: Optional[str] = typer.Option(
        None, "--duration", "-d", help="any, short, standard, long or extended."
    ),
    activity_type: Optional[str] = typer.Option(
        None, "--type", "-t", help="any, fun or chores."
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed the random pick for a reproducible suggestion."
    ),
    catalog: Optional[str] = CatalogOption,
    filters_file: Optional[Path] = FiltersFileOption,
) -> None:
    """Print one random activity matching the saved filters and any overrides."""
    from .reporting import ActivityPrinter

    session = _open_session(catalog, filters_file)
    try:
        session.update_filters(duration=duration, category=activity_type)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    random_source = random.Random(seed).random if seed is not None else None
    activity = session.suggest(random_source)
    ActivityPrinter().print_suggestion(
        activity, session.filters, len(session.filtered_activities)
    )


@app.command()
def stats(
    filtered: bool = typer.Option(
        False, "--filtered", help="Only count activities matching the saved filters."
    ),
    catalog: Optional[str] = CatalogOption,
    filters_file: Optional[Path] = FiltersFileOption,
) -> None:
    """Show counts per activity type and duration bucket."""
    from .reporting import ActivityPrinter

    session = _open_session(catalog, filters_file)
    ActivityPrinter().print_stats(session.stats(filtered=filtered), session.option_counts())


@app.command()
def filters(
    duration: Optional[str] = typer.Option(
        None, "--duration", "-d", help="Save a duration bucket filter."
    ),
    activity_type: Optional[str] = typer.Option(
        None, "--type", "-t", help="Save an activity type filter."
    ),
    reset: bool = typer.Option(False, "--reset", help="Restore the default filters."),
    filters_file: Optional[Path] = FiltersFileOption,
) -> None:
    """Show or change the saved filter selection."""
    from .reporting import describe_filters

    store = FilterStore(filters_file or get_filters_path())
    selection = store.load()
    if reset:
        selection = DEFAULT_FILTERS
    try:
        selection = selection.replace(duration=duration, category=activity_type)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if reset or duration is not None or activity_type is not None:
        store.save(selection)
    typer.echo(f"{describe_filters(selection)} {json.dumps(selection.to_dict())}")


@app.command()
def validate(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Activities JSON file."),
) -> None:
    """Check an activities document and report how many records are usable."""
    from .validation import extract_activity_records, validate_activities

    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (ValueError, RecursionError) as exc:
        typer.echo(f"Malformed JSON: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    records = extract_activity_records(document)
    if records is None:
        typer.echo("Expected a list of activities or an object with an 'activities' list.", err=True)
        raise typer.Exit(code=1)

    valid = validate_activities(records)
    typer.echo(f"{len(valid)} valid, {len(records) - len(valid)} invalid")
    if not valid:
        raise typer.Exit(code=1)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind the web UI."),
    port: int = typer.Option(
        8766, "--port", min=1, max=65535, help="TCP port for the web UI."
    ),
    catalog: Optional[str] = CatalogOption,
    filters_file: Optional[Path] = FiltersFileOption,
    fetch_timeout: float = typer.Option(
        10.0, "--fetch-timeout", min=0.1, help="Seconds to wait for a remote catalog."
    ),
    persist_filters: bool = typer.Option(
        True,
        "--persist-filters/--no-persist-filters",
        help="Remember the filter selection between sessions.",
    ),
    open_browser: bool = typer.Option(
        True,
        "--open-browser/--no-open-browser",
        help="Automatically launch the UI in your default browser.",
    ),
    log_level: str = typer.Option("info", "--log-level", help="Uvicorn log level."),
) -> None:
    """Start the local web UI."""
    from .server_runner import run_server

    settings = AppSettings.from_options(
        catalog_source=catalog,
        filters_path=filters_file,
        fetch_timeout_seconds=fetch_timeout,
        persist_filters=persist_filters,
    )
    run_server(
        host=host,
        port=port,
        settings=settings,
        open_browser=open_browser,
        log_level=log_level,
    )


def _open_session(catalog: Optional[str], filters_file: Optional[Path]):
    from .catalog import load_catalog
    from .session import SuggestionSession

    settings = AppSettings.from_options(catalog_source=catalog, filters_path=filters_file)
    result = load_catalog(settings.catalog_source, timeout=settings.timeout_seconds)
    if result.used_fallback:
        typer.echo(f"Using built-in activities ({result.error})", err=True)
    store = FilterStore(settings.filters_path) if settings.filters_path else None
    return SuggestionSession(result.activities, filters=store.load() if store else None)
