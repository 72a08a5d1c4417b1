"""Search flights command implementation."""

import logging

import typer
from rich.console import Console

from flightcal.cli.utils.data import load_flights, resolve_date
from flightcal.cli.utils.options import (
    DATE_OPTION,
    FLIGHT_CODE_ARGUMENT,
    OUTPUT_FORMAT_OPTION,
    OUTPUT_PATH_OPTION,
    REFRESH_OPTION,
    OutputFormat,
)
from flightcal.cli.utils.output import handle_json_output, handle_table_output, print_quota_info

console = Console()
logger = logging.getLogger(__name__)


def search_flights(
    flight_code: FLIGHT_CODE_ARGUMENT,
    date: DATE_OPTION = None,
    refresh: REFRESH_OPTION = False,
    output_format: OUTPUT_FORMAT_OPTION = OutputFormat.TABLE,
    output: OUTPUT_PATH_OPTION = None,
) -> None:
    """Look up a flight by number and date.

    Results are cached for 24 hours; use --refresh to query the API again.
    """
    flight_date = resolve_date(date)
    result = load_flights(flight_code, flight_date, refresh=refresh)

    if result.error:
        console.print(f"[red]{result.error}[/red]")
        raise typer.Exit(1)

    if output_format == OutputFormat.JSON:
        handle_json_output(
            result,
            output,
            transformer=lambda r: {
                "quotaInfo": r.quota_info.model_dump() if r.quota_info else None,
                "flights": r.flights,
            },
        )
        return

    if not result.flights:
        console.print(f"[yellow]No flights found for {flight_code} on {flight_date}[/yellow]")
        return

    handle_table_output(result.flights, title=f"{flight_code} on {flight_date}")
    print_quota_info(result.quota_info)
