"""Add-to-calendar command implementation."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from flightcal.cli.utils.data import load_flights, resolve_date
from flightcal.cli.utils.options import DATE_OPTION, FLIGHT_CODE_ARGUMENT, INDEX_OPTION, REFRESH_OPTION
from flightcal.cli.utils.output import print_event_preview, print_quota_info
from flightcal.exceptions import InvalidFlightDataError
from flightcal.services.calendar import (
    add_to_calendar,
    build_calendar_event,
    build_google_calendar_url,
    build_ics,
    launch_in_browser,
)

console = Console()
logger = logging.getLogger(__name__)


def add_flight_to_calendar(
    flight_code: FLIGHT_CODE_ARGUMENT,
    date: DATE_OPTION = None,
    refresh: REFRESH_OPTION = False,
    index: INDEX_OPTION = 1,
    print_url: Annotated[
        bool,
        typer.Option(
            "--print-url",
            help="Print the Google Calendar link instead of opening it",
        ),
    ] = False,
    ics_path: Annotated[
        Path | None,
        typer.Option(
            "--ics",
            help="Also write the event to an .ics file",
        ),
    ] = None,
) -> None:
    """Create a Google Calendar event for a flight.

    The event uses predicted times when the flight is delayed, and opens
    pre-filled in your default browser.
    """
    flight_date = resolve_date(date)
    result = load_flights(flight_code, flight_date, refresh=refresh)

    if result.error:
        console.print(f"[red]{result.error}[/red]")
        raise typer.Exit(1)

    if not result.flights:
        console.print(f"[yellow]No flights found for {flight_code} on {flight_date}[/yellow]")
        raise typer.Exit(1)

    if index > len(result.flights):
        console.print(f"[red]Result {index} requested but only {len(result.flights)} flight(s) found[/red]")
        raise typer.Exit(1)

    print_quota_info(result.quota_info)
    flight = result.flights[index - 1]

    try:
        event = build_calendar_event(flight)
    except InvalidFlightDataError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1) from None

    print_event_preview(event)

    if ics_path:
        ics_path.parent.mkdir(parents=True, exist_ok=True)
        ics_path.write_text(build_ics(event), encoding="utf-8", newline="")
        console.print(f"[bold green]✓ Saved to:[/bold green] {ics_path}")

    if print_url:
        print(build_google_calendar_url(event))
        return

    outcome = add_to_calendar(flight, opener=launch_in_browser)
    if not outcome.success:
        console.print(f"[red]{outcome.error}[/red]")
        if outcome.url:
            console.print(f"[dim]Open this link manually:[/dim]\n{outcome.url}")
        raise typer.Exit(1)

    console.print("[green]✓ Google Calendar opened in your browser[/green]")
