"""Shared output handlers for CLI commands."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from flightcal.core.constants import TIME_NOT_AVAILABLE, FormattingConstants, TableColumnWidths
from flightcal.core.timeutils import format_local_time
from flightcal.models.calendar import CalendarEvent
from flightcal.models.flight import FlightEndpoint, FlightRecord
from flightcal.models.quota import QuotaInfo
from flightcal.services.calendar import resolve_scheduled_time

console = Console()


def handle_json_output(
    data: Any,
    output_path: Path | None,
    transformer: Callable[[Any], Any] | None = None,
) -> None:
    """Handle JSON format output.

    Args:
        data: Data to output (can be any type)
        output_path: Optional file path to save output
        transformer: Optional function to transform data before serialization
    """
    output_data = transformer(data) if transformer else data
    json_content = json.dumps(output_data, indent=FormattingConstants.JSON_INDENT, default=str, ensure_ascii=False)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json_content, encoding="utf-8")
        console.print(f"[bold green]✓ Saved to:[/bold green] {output_path}")
    else:
        print(json_content)


def print_quota_info(quota: QuotaInfo | None) -> None:
    """Show the remaining API quota after a live lookup."""
    if quota is None or not quota.is_known:
        return

    line = f"[bold]API Quota:[/bold] {quota.remaining} / {quota.limit} requests remaining"
    reset_at = quota.reset_at
    if reset_at:
        line += f" • Resets: {reset_at.astimezone():%Y-%m-%d %H:%M}"
    console.print(line)


def _endpoint_cell(endpoint: FlightEndpoint | None) -> str:
    if endpoint is None:
        return "Unknown"
    code = endpoint.airport_code or endpoint.airport_name
    return f"{code}\n[dim]{endpoint.airport_name}[/dim]" if endpoint.airport_code else code


def _time_cell(endpoint: FlightEndpoint | None) -> str:
    if endpoint is None:
        return TIME_NOT_AVAILABLE
    scheduled = format_local_time(endpoint.scheduled_local or resolve_scheduled_time(endpoint))
    predicted = format_local_time(endpoint.predicted_local)
    if predicted in (TIME_NOT_AVAILABLE, scheduled):
        return scheduled
    return f"{scheduled}\n[yellow]→ {predicted}[/yellow]"


def to_flight_record(flight: Any) -> FlightRecord | None:
    """Validate a raw flight dict, returning None if it is not a flight."""
    if not isinstance(flight, dict):
        return None
    try:
        return FlightRecord.model_validate(flight)
    except ValidationError:
        return None


def handle_table_output(flights: list[Any], title: str) -> None:
    """Handle table format output."""
    table = Table(title=title, show_lines=True)

    table.add_column("#", style="dim", width=TableColumnWidths.INDEX, justify="right")
    table.add_column("Flight", style="cyan", min_width=TableColumnWidths.FLIGHT, no_wrap=True)
    table.add_column("Airline", style="magenta", max_width=TableColumnWidths.AIRLINE, overflow="fold")
    table.add_column("From", max_width=TableColumnWidths.AIRPORT, overflow="fold")
    table.add_column("Departs", max_width=TableColumnWidths.TIME)
    table.add_column("To", max_width=TableColumnWidths.AIRPORT, overflow="fold")
    table.add_column("Arrives", max_width=TableColumnWidths.TIME)
    table.add_column("Status", max_width=TableColumnWidths.STATUS)

    for index, raw in enumerate(flights, start=1):
        flight = to_flight_record(raw)
        if flight is None:
            table.add_row(str(index), "?", "[dim]Unrecognized record[/dim]", "", "", "", "", "")
            continue

        table.add_row(
            str(index),
            flight.display_number,
            flight.airline_name,
            _endpoint_cell(flight.departure),
            _time_cell(flight.departure),
            _endpoint_cell(flight.arrival),
            _time_cell(flight.arrival),
            flight.status or "",
        )

    console.print(table)
    console.print(f"\n[bold]Total flights:[/bold] {len(flights)}")


def print_event_preview(event: CalendarEvent) -> None:
    """Show a calendar event before it is opened or saved."""
    style = "bold yellow" if event.is_delayed else "bold green"
    console.print(f"[{style}]{event.title}[/{style}]")
    console.print(f"[dim]{event.location} • {event.start_utc:%Y-%m-%d %H:%M} - {event.end_utc:%H:%M} UTC[/dim]")
