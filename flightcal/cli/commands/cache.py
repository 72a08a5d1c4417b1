"""Cache maintenance commands."""

import logging

import typer
from rich.console import Console
from rich.table import Table

from flightcal.cli.utils.data import open_flight_cache

console = Console()
logger = logging.getLogger(__name__)

cache_app = typer.Typer(help="Inspect and maintain the flight lookup cache", no_args_is_help=True)


@cache_app.command("status")
def cache_status() -> None:
    """Show how many lookups are cached and how many have expired."""
    status = open_flight_cache().get_status()

    table = Table(title="Flight Cache", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Location", status.cache_path)
    table.add_row("Entries", str(status.total_entries))
    table.add_row("Live", f"[green]{status.live_entries}[/green]")
    table.add_row("Expired", f"[dim]{status.expired_entries}[/dim]")
    if status.oldest_entry_hours is not None:
        table.add_row("Oldest live entry", f"{status.oldest_entry_hours:.1f} hours old")

    console.print(table)


@cache_app.command("clear")
def cache_clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Delete every cached lookup."""
    cache = open_flight_cache()
    if not cache.has_cache():
        console.print("[dim]Cache is already empty[/dim]")
        return

    size = cache.get_cache_size()

    if not yes and not typer.confirm(f"Delete {size} cached lookup(s)?", default=False):
        raise typer.Abort()

    cache.clear_cache()
    console.print(f"[green]✓ Cleared {size} cached lookup(s)[/green]")


@cache_app.command("purge")
def cache_purge() -> None:
    """Delete only the expired lookups."""
    removed = open_flight_cache().purge_expired()
    console.print(f"[green]✓ Removed {removed} expired lookup(s)[/green]")
