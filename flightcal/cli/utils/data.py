"""Shared data access utilities for CLI commands."""

import typer
from rich.console import Console

from flightcal.cache import FlightCache
from flightcal.cli.utils.auth import get_credential_store
from flightcal.config import Config, load_config
from flightcal.core.timeutils import parse_user_date
from flightcal.models.result import NormalizedResult
from flightcal.services.fetcher import FlightFetcher
from flightcal.services.normalizer import normalize_response

console = Console(stderr=True)


def open_flight_cache(config: Config | None = None) -> FlightCache:
    config = config or load_config()
    return FlightCache(config.cache_dir, ttl_hours=config.cache_ttl_hours)


def resolve_date(date_text: str | None) -> str:
    """Parse the ``--date`` option, exiting on input that is not a date."""
    flight_date = parse_user_date(date_text)
    if flight_date is None:
        console.print(f"[red]Invalid date: {date_text}[/red]")
        raise typer.Exit(1)
    return flight_date


def load_flights(flight_code: str, flight_date: str, refresh: bool = False) -> NormalizedResult:
    """Look up a flight and normalize the response.

    Args:
        flight_code: Flight number
        flight_date: ISO date
        refresh: If True, skip the cache and query the API

    Returns:
        NormalizedResult with flights, quota and any error
    """
    config = load_config()
    store = get_credential_store(config)
    fetcher = FlightFetcher.from_config(config, open_flight_cache(config), store.get_credential)

    with console.status(f"[bold blue]Looking up {flight_code} on {flight_date}...[/bold blue]", spinner="dots"):
        result = fetcher.fetch(flight_code, flight_date, bypass_cache=refresh)

    if result.from_cache:
        console.print("[dim]Using cached results (use --refresh to query the API)[/dim]")

    return normalize_response(result)
