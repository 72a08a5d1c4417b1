"""Main CLI entry point for flightcal."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from flightcal.cli.commands.cache import cache_app
from flightcal.cli.commands.calendar import add_flight_to_calendar
from flightcal.cli.commands.key import clear_api_key, set_api_key, show_api_key
from flightcal.cli.commands.search import search_flights
from flightcal.cli.utils.options import VERBOSE_OPTION

app = typer.Typer(
    name="flightcal",
    help="flightcal - Look up flights and add them to Google Calendar",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback()
def callback(verbose: VERBOSE_OPTION = False) -> None:
    """
    flightcal CLI
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


app.command("search", help="Look up a flight by number and date")(search_flights)
app.command("add", help="Add a flight to Google Calendar")(add_flight_to_calendar)
app.command("set-key", help="Save the RapidAPI key")(set_api_key)
app.command("clear-key", help="Remove the saved RapidAPI key")(clear_api_key)
app.command("show-key", help="Show the API key in use (masked)")(show_api_key)
app.add_typer(cache_app, name="cache")


if __name__ == "__main__":
    app()
