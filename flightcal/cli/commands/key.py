"""API key management commands."""

import logging
from typing import Annotated

import typer
from rich.console import Console

from flightcal.cache.credentials import mask_api_key
from flightcal.cli.utils.auth import get_credential_store, prompt_api_key
from flightcal.exceptions import CacheError

console = Console()
logger = logging.getLogger(__name__)


def set_api_key(
    api_key: Annotated[
        str | None,
        typer.Argument(help="RapidAPI key (prompted with hidden input if omitted)"),
    ] = None,
) -> None:
    """Save the RapidAPI key used to query AeroDataBox.

    A FLIGHTCAL_RAPIDAPI_KEY environment variable takes precedence over the saved key.
    """
    key = prompt_api_key(api_key)
    store = get_credential_store()

    try:
        store.set_credential(key)
    except CacheError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1) from None

    console.print(f"[green]✓ API key saved[/green] ({mask_api_key(key)})")
    if store.config and store.config.api_key:
        console.print("[yellow]Note: FLIGHTCAL_RAPIDAPI_KEY is set and will be used instead[/yellow]")


def clear_api_key() -> None:
    """Remove the saved RapidAPI key."""
    store = get_credential_store()
    if store.clear_credential():
        console.print("[green]✓ Saved API key removed[/green]")
    else:
        console.print("[yellow]No saved API key[/yellow]")


def show_api_key() -> None:
    """Show which API key is in use, masked."""
    store = get_credential_store()
    key = store.get_credential()
    if not key:
        console.print("[yellow]API key not set. Run 'flightcal set-key' to configure it.[/yellow]")
        raise typer.Exit(1)

    source = "environment" if store.config and store.config.api_key else "saved settings"
    console.print(f"API key: {mask_api_key(key)} [dim]({source})[/dim]")
