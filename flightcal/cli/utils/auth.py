"""Credential helpers for CLI commands."""

import typer
from rich.console import Console

from ...cache.credentials import CredentialStore
from ...config import Config, load_config

console = Console()


def get_credential_store(config: Config | None = None) -> CredentialStore:
    """Open the credential store for the configured data directory."""
    return CredentialStore.from_config(config or load_config())


def prompt_api_key(api_key: str | None = None) -> str:
    """Return the given API key, or prompt for one.

    Args:
        api_key: Optional API key passed on the command line

    Returns:
        Non-empty API key
    """
    final_api_key = (api_key or "").strip()
    while not final_api_key:
        final_api_key = typer.prompt(
            "RapidAPI Key",
            hide_input=True,
            confirmation_prompt=False,
        ).strip()
        if not final_api_key:
            console.print("[yellow]API key cannot be empty[/yellow]")

    return final_api_key
